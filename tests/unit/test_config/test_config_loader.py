"""Tests for config loader."""

from pathlib import Path

import pytest

from codelingo.config.loader import load_config
from codelingo.errors import ConfigurationError
from codelingo.models.exclusion import ExclusionKind


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create a sample config YAML file."""
    config_content = """
sampling:
  max_bytes: 4096

classifier:
  smoothing: 0.5

filter:
  exclude_kinds: [vendor, generated]
  extra_rules:
    - pattern: "third_party/"
      kind: vendor

analysis:
  max_workers: 2
  include_files: true

logging:
  level: DEBUG
"""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(config_content)
    return config_path


def test_load_config_defaults() -> None:
    """Test load_config returns defaults when no path given."""
    config = load_config(None)
    assert config.sampling.max_bytes == 50 * 1024
    assert config.logging.level == "WARNING"


def test_load_config_from_yaml(sample_config_yaml: Path) -> None:
    """Test load_config loads from YAML file."""
    config = load_config(sample_config_yaml)
    assert config.sampling.max_bytes == 4096
    assert config.classifier.smoothing == 0.5
    assert config.filter.exclude_kinds == {ExclusionKind.VENDOR, ExclusionKind.GENERATED}
    assert config.filter.extra_rules[0].pattern == "third_party/"
    assert config.analysis.max_workers == 2
    assert config.analysis.include_files is True
    assert config.logging.level == "DEBUG"


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Test an empty file yields defaults."""
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("")
    config = load_config(config_path)
    assert config.analysis.max_workers == 4


def test_load_config_file_not_found(tmp_path: Path) -> None:
    """Test load_config raises for missing file."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nonexistent.yaml")


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Test load_config reports malformed YAML."""
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("sampling: [unclosed")
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config(config_path)


def test_load_config_non_mapping_root(tmp_path: Path) -> None:
    """Test load_config rejects a list at the top level."""
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- a\n- b\n")
    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(config_path)


def test_load_config_validation_error(tmp_path: Path) -> None:
    """Test load_config wraps validation errors."""
    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("classifier:\n  smoothing: -1\n")
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_config(config_path)
