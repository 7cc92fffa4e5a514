# SPDX-License-Identifier: MIT
"""Default options loaded from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_NAME = "package-json-copy"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CopyConfig:
    """Defaults for the copy command from ``[tool.package-json-copy]``.

    Attributes:
        main: Default value for the output ``main`` field
        types: Default value for the output ``types`` field
        custom_sections: Extra sections to carry over
        strip: Prefix to remove from path fields
        source: pyproject.toml the values were read from, if any
    """

    main: Optional[str] = None
    types: Optional[str] = None
    custom_sections: list[str] = field(default_factory=list)
    strip: Optional[str] = None
    source: Optional[Path] = None

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "CopyConfig":
        """Load configuration from a pyproject.toml file.

        Raises:
            ConfigError: If the file is not valid TOML or has invalid values
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        config = cls.from_pyproject_dict(pyproject)
        config.source = path
        return config

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "CopyConfig":
        """Create CopyConfig from a parsed pyproject.toml dictionary."""
        tool = pyproject.get("tool", {}).get(TOOL_NAME, {})

        for key in ("main", "types", "strip"):
            value = tool.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(
                    f"tool.{TOOL_NAME}.{key} must be a string, got {type(value).__name__}"
                )

        custom_sections = tool.get("custom-sections", [])
        if not isinstance(custom_sections, list) or not all(
            isinstance(s, str) for s in custom_sections
        ):
            raise ConfigError(f"tool.{TOOL_NAME}.custom-sections must be a list of strings")

        return cls(
            main=tool.get("main"),
            types=tool.get("types"),
            custom_sections=list(custom_sections),
            strip=tool.get("strip"),
        )


def load_config(pyproject_path: Optional[str | Path] = None) -> CopyConfig:
    """Load copy defaults.

    Args:
        pyproject_path: Explicit pyproject.toml; when omitted, the one in the
            current directory is used if it exists

    Returns:
        CopyConfig instance, empty when no pyproject.toml is found

    Raises:
        ConfigError: If configuration cannot be parsed
        FileNotFoundError: If an explicit pyproject_path doesn't exist
    """
    if pyproject_path is not None:
        return CopyConfig.from_pyproject(pyproject_path)

    default_path = Path.cwd() / "pyproject.toml"
    if default_path.exists():
        return CopyConfig.from_pyproject(default_path)

    return CopyConfig()
