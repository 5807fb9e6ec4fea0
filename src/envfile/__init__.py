"""envfile - Read, update and write ``KEY=VALUE`` environment files."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("envfile")
except PackageNotFoundError:
    __version__ = "0+local"
from envfile.config import EnvFileConfig
from envfile.exceptions import EnvFileConfigError, EnvFileError, EnvFileIOError
from envfile.models import SkippedLine, SkipReason
from envfile.store import EnvStore

__all__ = [
    "__version__",
    "EnvFileConfig",
    "EnvFileConfigError",
    "EnvFileError",
    "EnvFileIOError",
    "EnvStore",
    "SkipReason",
    "SkippedLine",
]
