"""
Tests for Config Persistence (TOML).

Verifies that:
1. RuntimeConfig.load() picks up [tool.techmix] from pyproject.toml.
2. CLI arguments override TOML settings.
3. Exclusion patterns from CLI are appended to the TOML list.
4. File traversal finds toml in parent directories.
5. Invalid values are rejected.
"""

import pytest
from pydantic import ValidationError

from techmix.config import RuntimeConfig
from techmix.enums import OutputFormat


@pytest.fixture
def toml_file(tmp_path):
  """Creates a dummy pyproject.toml in the temp dir."""
  fpath = tmp_path / "pyproject.toml"
  content = """
[tool.techmix]
output_format = "JSON"
strict_mode = true
jobs = 3
exclude_types = ["*Base"]
"""
  fpath.write_text(content, encoding="utf-8")
  return fpath


def test_defaults_without_toml(tmp_path):
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.output_format == OutputFormat.TABLE
  assert config.strict_mode is False
  assert config.jobs == 1
  assert config.exclude_types == []


def test_load_defaults_from_toml(tmp_path, toml_file):
  config = RuntimeConfig.load(search_path=tmp_path)

  assert config.output_format == OutputFormat.JSON
  assert config.strict_mode is True
  assert config.jobs == 3
  assert config.exclude_types == ["*Base"]


def test_cli_overrides_toml(tmp_path, toml_file):
  config = RuntimeConfig.load(output_format="text", strict_mode=False, jobs=1, search_path=tmp_path)

  assert config.output_format == OutputFormat.TEXT
  assert config.strict_mode is False
  assert config.jobs == 1


def test_excludes_merge(tmp_path, toml_file):
  config = RuntimeConfig.load(exclude_types=["Legacy*", "*Base"], search_path=tmp_path)
  assert config.exclude_types == ["*Base", "Legacy*"]


def test_parent_directory_search(tmp_path, toml_file):
  nested = tmp_path / "src" / "project"
  nested.mkdir(parents=True)
  assert RuntimeConfig.load(search_path=nested).jobs == 3


def test_toml_without_section(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
  assert RuntimeConfig.load(search_path=tmp_path).jobs == 1


def test_invalid_toml(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.techmix\n", encoding="utf-8")
  with pytest.raises(ValueError, match="Invalid TOML"):
    RuntimeConfig.load(search_path=tmp_path)


def test_unknown_format_rejected():
  with pytest.raises(ValidationError, match="Unknown output format"):
    RuntimeConfig(output_format="xml")


def test_jobs_must_be_positive():
  with pytest.raises(ValidationError):
    RuntimeConfig(jobs=0)


def test_exclude_types_string_rejected(tmp_path):
  """
  Scenario: exclude_types written as a bare string instead of a list.
  Expect: Rejected instead of being split into single-character patterns.
  """
  (tmp_path / "pyproject.toml").write_text('[tool.techmix]\nexclude_types = "*Base"\n', encoding="utf-8")
  with pytest.raises(ValueError, match="exclude_types must be a list"):
    RuntimeConfig.load(search_path=tmp_path)
