"""
Runtime Configuration Store.

Settings are read from the ``[tool.techmix]`` table of the nearest
``pyproject.toml`` and overridden by explicit (CLI) arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from techmix.enums import OutputFormat

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Global configuration container for an analysis run.
  """

  output_format: OutputFormat = Field(OutputFormat.TABLE, description="Reporter used by the CLI.")
  strict_mode: bool = Field(False, description="If True, any finding makes the run exit non-zero.")
  jobs: int = Field(1, ge=1, description="Worker threads used to evaluate types.")
  exclude_types: List[str] = Field(default_factory=list, description="fnmatch patterns of type names to skip.")

  @field_validator("output_format", mode="before")
  @classmethod
  def normalize_format(cls, v: Any) -> Any:
    """
    Accepts format names case-insensitively.

    Args:
        v: Raw value from TOML or CLI.

    Returns:
        Any: The lower-cased name, or the value unchanged if not a string.

    Raises:
        ValueError: If the name is not a known output format.
    """
    if isinstance(v, str):
      v_clean = v.lower().strip()
      known = [f.value for f in OutputFormat]
      if v_clean not in known:
        raise ValueError(f"Unknown output format: '{v_clean}'. Supported formats: {known}")
      return v_clean
    return v

  @classmethod
  def load(
    cls,
    output_format: Optional[str] = None,
    strict_mode: Optional[bool] = None,
    jobs: Optional[int] = None,
    exclude_types: Optional[List[str]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        output_format (Optional[str]): Override for the reporter.
        strict_mode (Optional[bool]): Override for strict mode.
        jobs (Optional[int]): Override for worker count.
        exclude_types (Optional[List[str]]): Extra exclusion patterns, appended to the TOML list.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the TOML exclusion list is not a list.
        pydantic.ValidationError: If the merged values are invalid.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    final_format = output_format or toml_config.get("output_format", OutputFormat.TABLE.value)

    if strict_mode is not None:
      final_strict = strict_mode
    else:
      final_strict = toml_config.get("strict_mode", False)

    final_jobs = jobs if jobs is not None else toml_config.get("jobs", 1)

    toml_excludes = toml_config.get("exclude_types", [])
    if not isinstance(toml_excludes, list):
      raise ValueError(f"exclude_types must be a list of patterns, got {type(toml_excludes).__name__}")
    final_excludes = list(toml_excludes)
    for pattern in exclude_types or []:
      if pattern not in final_excludes:
        final_excludes.append(pattern)

    return cls(
      output_format=final_format,
      strict_mode=final_strict,
      jobs=final_jobs,
      exclude_types=final_excludes,
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  The first ``pyproject.toml`` found wins, even if it has no techmix table.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.

  Raises:
      ValueError: If the file exists but is not valid TOML.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {toml_path}: {e}")

      return data.get("tool", {}).get("techmix", {}), parent

  return {}, None
