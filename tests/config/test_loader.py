"""Tests for SettingsLoader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from mcpaws.config.errors import ConfigError
from mcpaws.config.loader import SettingsLoader, load_settings
from mcpaws.config.models import ServerSettings

_VALID_YAML = """\
name: git-mcp
version: "0.2.0"
protocol_version: "2025-06-18"
request_timeout: 12.5
tools: [git_log]
log_level: DEBUG
telemetry:
  enabled: true
"""


class TestSettingsLoader:
    def test_load_valid(self, tmp_path: Path) -> None:
        f = tmp_path / "mcpaws.yaml"
        f.write_text(_VALID_YAML)
        settings = SettingsLoader(f).load()
        assert settings.name == "git-mcp"
        assert settings.version == "0.2.0"
        assert settings.request_timeout == 12.5
        assert settings.tools == ["git_log"]
        assert settings.log_level == "DEBUG"
        assert settings.telemetry is not None and settings.telemetry.enabled

    def test_env_var_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REPO_DIR", "/srv/repo")
        f = tmp_path / "mcpaws.yaml"
        f.write_text("workdir: ${REPO_DIR}\n")
        settings = SettingsLoader(f).load()
        assert str(settings.workdir) == "/srv/repo"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert SettingsLoader(f).load() == ServerSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            SettingsLoader(tmp_path / "nope.yaml").load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.yaml"
        f.write_text("name: [unclosed\n")
        with pytest.raises(ConfigError, match="YAML parse error"):
            SettingsLoader(f).load()

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            SettingsLoader(f).load()

    def test_validation_error(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.yaml"
        f.write_text("request_timeout: -1\n")
        with pytest.raises(ConfigError, match="request_timeout"):
            SettingsLoader(f).load()


class TestLoadSettings:
    def test_none_returns_defaults(self) -> None:
        settings = load_settings(None)
        assert settings.request_timeout == 30.0
        assert settings.dispatch_notifications is False
        assert settings.tools == ["git_status", "git_log"]

    def test_path_string(self, tmp_path: Path) -> None:
        f = tmp_path / "s.yaml"
        f.write_text("name: other\n")
        assert load_settings(str(f)).name == "other"
