# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from versiontheca import SchemeKind

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the ``[tool.versiontheca]`` table.

    Attributes:
        project_dir: Directory containing pyproject.toml
        scheme: Scheme used when ``--scheme`` is not given
        format: Format version used by next and previous
        position: Position used by next and previous (None means the last
            part of each version)
    """

    project_dir: Path
    scheme: SchemeKind = SchemeKind.BASIC
    format: str = ""
    position: Optional[int] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

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
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If a value has the wrong type or is unknown
        """
        tool_versiontheca = pyproject.get("tool", {}).get("versiontheca", {})
        if not isinstance(tool_versiontheca, dict):
            raise ConfigError("[tool.versiontheca] must be a table")

        scheme_name = tool_versiontheca.get("scheme", SchemeKind.BASIC.value)
        try:
            scheme = SchemeKind(str(scheme_name).lower())
        except ValueError:
            names = ", ".join(kind.value for kind in SchemeKind)
            raise ConfigError(
                f"Unknown scheme '{scheme_name}' in [tool.versiontheca]; expected one of {names}"
            ) from None

        format_version = tool_versiontheca.get("format", "")
        if not isinstance(format_version, str):
            raise ConfigError("[tool.versiontheca].format must be a string")

        position = tool_versiontheca.get("position")
        if position is not None and (
            isinstance(position, bool) or not isinstance(position, int) or position < 0
        ):
            raise ConfigError("[tool.versiontheca].position must be a positive integer")

        logger.debug(
            "Loaded [tool.versiontheca] from %s: scheme=%s format=%r position=%s",
            project_dir,
            scheme.value,
            format_version,
            position,
        )

        return cls(
            project_dir=project_dir,
            scheme=scheme,
            format=format_version,
            position=position,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Without a pyproject.toml the defaults are used.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            return CLIConfig(project_dir=Path.cwd())

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
