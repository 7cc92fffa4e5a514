# SPDX-License-Identifier: MIT
"""Reading and writing package.json files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class ManifestError(Exception):
    """Base exception for manifest-related errors."""

    pass


class ManifestFormatError(ManifestError):
    """Raised when a manifest file does not contain a JSON object."""

    pass


def read_json(path: str | Path) -> dict[str, Any]:
    """Load a JSON object from a file.

    Args:
        path: Path to the JSON file

    Returns:
        The parsed object

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        ManifestFormatError: If the top-level value is not an object
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ManifestFormatError(
            f"{path} must contain a JSON object, got {type(data).__name__}"
        )
    return data


def write_json(path: str | Path, data: dict[str, Any]) -> None:
    """Write a JSON object to a file with 2-space indentation.

    The parent directory must already exist.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    Path(path).write_text(content, encoding="utf-8")
