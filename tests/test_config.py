from pathlib import Path

import pytest

from picugen.config import AppConfig, HashSettings
from picugen.config.settings import ENV_CONFIG_PATH


def test_config_resolves_paths(tmp_path: Path) -> None:
    config_path = tmp_path / "picugen.yaml"
    config_path.write_text("paths:\n  logs: \"logs\"\n", encoding="utf-8")

    config = AppConfig.load(config_path)
    logs_path = config.resolve_path("paths", "logs")

    assert logs_path == config_path.parent / "logs"
    assert config.get("missing", default=123) == 123
    assert config.resolve_path("paths", "missing") is None


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        AppConfig.load(tmp_path / "nope.yaml")


def test_missing_default_config_is_empty(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)

    config = AppConfig.load()

    assert config.raw == {}
    assert HashSettings.from_config(config) == HashSettings()


def test_env_variable_selects_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("hashing:\n  algorithm: MD5\n", encoding="utf-8")
    monkeypatch.setenv(ENV_CONFIG_PATH, str(config_path))

    config = AppConfig.load()

    assert HashSettings.from_config(config).algorithm == "md5"


def test_settings_prefer_command_line_values(tmp_path: Path) -> None:
    config_path = tmp_path / "picugen.yaml"
    config_path.write_text(
        "\n".join(
            [
                "hashing:",
                "  algorithm: sha1",
                "  salt: fromfile",
                "  key: filekey",
                "  chunk_bytes: 64",
            ]
        ),
        encoding="utf-8",
    )
    config = AppConfig.load(config_path)

    from_file = HashSettings.from_config(config)
    overridden = HashSettings.from_config(config, algorithm="MD5", salt="cli", key="")

    assert from_file == HashSettings(algorithm="sha1", key=b"filekey", salt=b"fromfile", chunk_size=64)
    assert overridden.algorithm == "md5"
    assert overridden.salt == b"cli"
    assert overridden.key == b""
    assert overridden.chunk_size == 64


def test_non_positive_chunk_size_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "picugen.yaml"
    config_path.write_text("hashing:\n  chunk_bytes: 0\n", encoding="utf-8")

    with pytest.raises(ValueError):
        HashSettings.from_config(AppConfig.load(config_path))
