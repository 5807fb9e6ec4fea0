#!/usr/bin/env python3
"""Print, update and rewrite a ``KEY=VALUE`` environment file.

Usage
-----
::

    python scripts/show_env.py examples/test.env
    python scripts/show_env.py examples/test.env --get LANG
    python scripts/show_env.py examples/test.env --set ID=example --write

Options::

    --get KEY            Print only the value of KEY (exit 1 if missing)
    --set KEY=VALUE      Update or insert an entry (repeatable)
    --write              Write the entries back to the file, sorted by key
    --verbose, -v        Enable debug logging, including skipped lines

Environment variables ``ENVFILE_ENCODING`` and ``ENVFILE_LOG_SKIPPED`` are
honoured as in :meth:`envfile.EnvFileConfig.from_env`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from envfile import EnvFileConfig, EnvFileError, EnvStore  # noqa: E402


def _parse_assignment(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect or update a KEY=VALUE environment file.")
    parser.add_argument("path", help="Environment file to read")
    parser.add_argument("--get", metavar="KEY", help="Print only the value of KEY")
    parser.add_argument(
        "--set",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        type=_parse_assignment,
        dest="assignments",
        help="Update or insert an entry (repeatable)",
    )
    parser.add_argument("--write", action="store_true", help="Write the entries back to the file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    overrides: dict[str, bool] = {}
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        overrides["log_skipped"] = True
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        config = EnvFileConfig.from_env(**overrides)
        store = EnvStore.load(args.path, config=config)
        for key, value in args.assignments:
            store.update(key, value)
        if args.write:
            store.write()
    except EnvFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.get is not None:
        value = store.get(args.get)
        if value is None:
            print(f"{args.get} is not set", file=sys.stderr)
            return 1
        print(value)
        return 0

    for key, value in store.items():
        print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
