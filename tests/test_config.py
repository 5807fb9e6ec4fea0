from __future__ import annotations

import pytest

from envfile import EnvFileConfig, EnvFileConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENVFILE_ENCODING", raising=False)
    monkeypatch.delenv("ENVFILE_LOG_SKIPPED", raising=False)


def test_defaults() -> None:
    config = EnvFileConfig()

    assert config.encoding == "utf-8"
    assert config.log_skipped is False


def test_unknown_encoding_rejected() -> None:
    with pytest.raises(EnvFileConfigError, match="no-such-codec"):
        EnvFileConfig(encoding="no-such-codec")


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVFILE_ENCODING", "latin-1")
    monkeypatch.setenv("ENVFILE_LOG_SKIPPED", "yes")

    config = EnvFileConfig.from_env()

    assert config.encoding == "latin-1"
    assert config.log_skipped is True


def test_from_env_unrecognized_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVFILE_LOG_SKIPPED", "sometimes")

    assert EnvFileConfig.from_env().log_skipped is False


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVFILE_LOG_SKIPPED", "off")

    config = EnvFileConfig.from_env(log_skipped=True)

    assert config.log_skipped is True


@pytest.mark.parametrize("encoding", ["hex", "base64", "rot13"])
def test_bytes_to_bytes_codec_rejected(encoding: str) -> None:
    with pytest.raises(EnvFileConfigError, match="Not a text encoding"):
        EnvFileConfig(encoding=encoding)


@pytest.mark.parametrize("encoding", ["utf-16", "utf-32", "cp037"])
def test_non_ascii_compatible_encoding_rejected(encoding: str) -> None:
    with pytest.raises(EnvFileConfigError, match="ASCII compatible"):
        EnvFileConfig(encoding=encoding)


def test_from_env_rejects_bytes_codec(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVFILE_ENCODING", "hex")

    with pytest.raises(EnvFileConfigError):
        EnvFileConfig.from_env()
