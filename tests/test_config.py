"""Tests for configuration management."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from wistiadl.config import DATA_DIR, ConfigManager, load_config, resolve_paths
from wistiadl.core.models import AppConfig, DEFAULT_EMBED_URL


@pytest.fixture
def config_path(tmp_path):
    """Path of a config file inside a temporary directory."""
    return tmp_path / "config.json"


def test_config_manager_initialization(config_path):
    """Test configuration manager initialization."""
    manager = ConfigManager(config_path)

    assert manager.config_path == config_path
    assert isinstance(manager.load(), AppConfig)


def test_config_loading_default(config_path):
    """Test loading default configuration when file doesn't exist."""
    config = ConfigManager(config_path).load()

    assert config.embed_url_template == DEFAULT_EMBED_URL
    assert config.request_timeout == 30.0
    assert config.download_stagger == 0.5
    assert config.export_basename == "wistia_assets"


def test_config_saving_and_loading(config_path):
    """Test saving and loading configuration."""
    manager = ConfigManager(config_path)

    config = manager.load()
    config.download_stagger = 1.5
    config.export_basename = "acme_assets"
    manager.save()

    loaded = ConfigManager(config_path).load()
    assert loaded.download_stagger == 1.5
    assert loaded.export_basename == "acme_assets"

    saved = json.loads(config_path.read_text())
    assert isinstance(saved["download_dir"], str)


def test_config_validation_falls_back(config_path):
    """Test that invalid values fall back to defaults."""
    config_path.write_text(json.dumps({"request_timeout": "soon", "download_stagger": -1}))

    config = ConfigManager(config_path).load()
    assert config.request_timeout == 30.0
    assert config.download_stagger == 0.5


def test_config_corrupted_file(config_path):
    """Test handling of corrupted configuration file."""
    config_path.write_text("invalid json {broken")

    config = ConfigManager(config_path).load()
    assert isinstance(config, AppConfig)
    assert config.export_basename == "wistia_assets"


def test_config_directory_creation(tmp_path):
    """Test automatic creation of config directory."""
    nested_path = tmp_path / "nested" / "config" / "config.json"

    ConfigManager(nested_path).save()

    assert nested_path.exists()
    assert nested_path.parent.is_dir()


def test_config_reset(config_path):
    """Test configuration reset functionality."""
    manager = ConfigManager(config_path)
    config = manager.load()
    config.download_stagger = 2
    manager.save()

    assert manager.reset().download_stagger == 0.5


def test_config_path_resolution(config_path):
    """Test that relative directories resolve under the user data dir."""
    config_path.write_text(json.dumps({"logs_dir": "my-logs", "download_dir": "/tmp/absolute"}))

    config = load_config(config_path)

    assert config.logs_dir == DATA_DIR / "my-logs"
    assert config.download_dir == Path("/tmp/absolute")


def test_config_forbidden_extra_fields():
    """Test that extra fields are forbidden in config."""
    with pytest.raises(Exception):  # Pydantic validation error
        AppConfig(unknown_field="value")


def test_config_embed_template_needs_placeholder():
    """Test that the embed URL template must contain the video ID slot."""
    with pytest.raises(Exception):
        AppConfig(embed_url_template="https://fast.wistia.net/embed/iframe/")


def test_config_edge_case_values():
    """Test configuration with edge case values."""
    config = AppConfig(download_stagger=0)
    assert config.download_stagger == 0

    config = AppConfig(export_basename="  trimmed  ")
    assert config.export_basename == "trimmed"

    config = AppConfig(download_dir=Path("relative/path"))
    assert isinstance(config.download_dir, Path)


@patch("pathlib.Path.write_text")
def test_config_save_permission_error(mock_write, config_path):
    """Test handling of permission errors during save."""
    mock_write.side_effect = PermissionError("Access denied")

    # Should not raise exception, just log error
    ConfigManager(config_path).save()


def test_resolve_paths_keeps_absolute_dirs(tmp_path):
    """Test that only relative directories are re-anchored."""
    config = AppConfig(download_dir=tmp_path / "dl", logs_dir=tmp_path / "logs")

    assert resolve_paths(config) is config
    assert resolve_paths(AppConfig(logs_dir=Path("logs"))).logs_dir == DATA_DIR / "logs"
