# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml.

Settings live in an optional ``[tool.forkver]`` table:

    [tool.forkver]
    output = "json"
    full-match = true
    match-build-and-stage = false
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        output: Output format of the parse command ("text" or "json")
        full_match: Compare subversions by default
        match_build_and_stage: Include builds and stages when comparing
    """

    project_dir: Optional[Path] = None
    output: str = "text"
    full_match: bool = True
    match_build_and_stage: bool = True

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        tool_forkver = pyproject.get("tool", {}).get("forkver", {})
        if not isinstance(tool_forkver, dict):
            raise ConfigError("[tool.forkver] must be a table")

        output = tool_forkver.get("output", "text")
        if output not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output format {output!r}, expected one of: {', '.join(OUTPUT_FORMATS)}"
            )

        return cls(
            project_dir=project_dir,
            output=output,
            full_match=_get_bool(tool_forkver, "full-match", True),
            match_build_and_stage=_get_bool(tool_forkver, "match-build-and-stage", True),
        )


def _get_bool(table: dict[str, Any], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"[tool.forkver] {key} must be true or false, got {value!r}")
    return value


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing a pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance, with defaults when no pyproject.toml exists

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
        if project_dir is None:
            return CLIConfig()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
