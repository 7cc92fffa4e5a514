# SPDX-License-Identifier: MIT
"""Copy package.json into a build output folder for publishing.

This package rewrites a source package.json into the manifest that ships
with a built package:
- Only standard npm sections (plus any custom ones) are kept
- ``main`` and ``types`` are replaced with the built entry points
- An optional build-directory prefix is stripped from path fields

Example:
    >>> from package_json_copy import copy_package_json
    >>>
    >>> copy_package_json(".", "dist/foo", "index.js", "index.d.ts", strip="dist/foo/")
    ✅ package.json written to: dist/foo
"""

__version__ = "0.1.0"

from .config import ConfigError, CopyConfig, load_config
from .jsonio import ManifestError, ManifestFormatError, read_json, write_json
from .schema import (
    MANIFEST_FILENAME,
    OVERRIDE_SECTIONS,
    STANDARD_SECTIONS,
    STRIP_NESTED_SECTIONS,
    STRIP_STRING_SECTIONS,
)
from .transformer import (
    CopyResult,
    TransformConfig,
    copy_package_json,
    map_strings,
    select_sections,
    strip_path_fields,
    strip_prefix,
    transform_manifest,
)

__all__ = [
    # Schema
    "MANIFEST_FILENAME",
    "STANDARD_SECTIONS",
    "OVERRIDE_SECTIONS",
    "STRIP_STRING_SECTIONS",
    "STRIP_NESTED_SECTIONS",
    # JSON I/O
    "read_json",
    "write_json",
    "ManifestError",
    "ManifestFormatError",
    # Transformation
    "copy_package_json",
    "transform_manifest",
    "select_sections",
    "strip_path_fields",
    "strip_prefix",
    "map_strings",
    "TransformConfig",
    "CopyResult",
    # Configuration
    "load_config",
    "CopyConfig",
    "ConfigError",
]
