"""Tests for ConfigService and Settings."""

from pathlib import Path

import pytest

from issuelink.config import Settings
from issuelink.services import ConfigService


class TestConfigServiceLoading:
    """Tests for ConfigService file loading."""

    def test_default_on_missing_file(self, tmp_path: Path):
        """Missing issuelink.yml returns default config."""
        service = ConfigService(tmp_path)
        config = service.get_config()

        assert config.linkify is True
        assert config.assign is False
        assert not service.has_config_error

    def test_load_valid_config(self, tmp_path: Path):
        """Values from issuelink.yml override defaults."""
        (tmp_path / "issuelink.yml").write_text(
            """
linkify: false
assign:
  - in_progress
  - review
done_states: [shipped]
web_host: ghe.example.com
"""
        )

        service = ConfigService(tmp_path)
        config = service.get_config()

        assert config.linkify is False
        assert config.assign == ["in_progress", "review"]
        assert config.done_states == ["shipped"]
        assert config.web_host == "ghe.example.com"
        assert not service.has_config_error

    def test_assign_keyword(self, tmp_path: Path):
        """assign: always in YAML is accepted."""
        (tmp_path / "issuelink.yml").write_text("assign: always\n")
        assert ConfigService(tmp_path).get_config().assign is True

    def test_empty_file_is_error(self, tmp_path: Path):
        """An empty file falls back to defaults with an error."""
        (tmp_path / "issuelink.yml").write_text("")
        service = ConfigService(tmp_path)
        config = service.get_config()
        assert config.linkify is True
        assert service.has_config_error
        assert "empty" in (service.config_error or "")

    def test_invalid_yaml_is_error(self, tmp_path: Path):
        """Broken YAML falls back to defaults with an error."""
        (tmp_path / "issuelink.yml").write_text("linkify: [oops\n")
        service = ConfigService(tmp_path)
        service.get_config()
        assert "Invalid YAML" in (service.config_error or "")

    def test_invalid_values_are_error(self, tmp_path: Path):
        """Validation failures fall back to defaults with an error."""
        (tmp_path / "issuelink.yml").write_text("timeout: -1\n")
        service = ConfigService(tmp_path)
        config = service.get_config()
        assert config.timeout == 30.0
        assert service.has_config_error

    def test_non_mapping_is_error(self, tmp_path: Path):
        """A top level list is not a config."""
        (tmp_path / "issuelink.yml").write_text("- linkify\n")
        service = ConfigService(tmp_path)
        service.get_config()
        assert service.has_config_error

    def test_config_is_cached(self, tmp_path: Path):
        """Config is read once per service."""
        config_file = tmp_path / "issuelink.yml"
        config_file.write_text("linkify: true\n")
        service = ConfigService(tmp_path)
        assert service.get_config().linkify is True

        config_file.write_text("linkify: false\n")
        assert service.get_config().linkify is True



class TestSettings:
    """Tests for environment driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Settings default to quiet, no token, current directory."""
        for name in ("ISSUELINK_TOKEN", "ISSUELINK_VERBOSE", "ISSUELINK_PROJECT_ROOT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.token is None
        assert settings.verbose == 0
        assert settings.project_root == Path()

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        """ISSUELINK_ prefixed variables are read."""
        monkeypatch.setenv("ISSUELINK_TOKEN", "abc")
        monkeypatch.setenv("ISSUELINK_VERBOSE", "2")
        settings = Settings()
        assert settings.token == "abc"
        assert settings.verbose == 2
