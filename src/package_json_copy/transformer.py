# SPDX-License-Identifier: MIT
"""Transform a source package.json into its published form.

The published manifest keeps only the allow-listed sections of the source
manifest, takes its ``main`` and ``types`` entry points from the caller, and
can optionally have a build-directory prefix stripped from its path fields so
that they resolve relative to the output folder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

import click

from .jsonio import read_json, write_json
from .schema import (
    MANIFEST_FILENAME,
    OVERRIDE_SECTIONS,
    STANDARD_SECTIONS,
    STRIP_NESTED_SECTIONS,
    STRIP_STRING_SECTIONS,
)


@dataclass(frozen=True)
class TransformConfig:
    """Section allow-list used when transforming a manifest.

    Attributes:
        standard_sections: Sections always carried over, in output order
        custom_sections: Additional sections carried over after the standard ones
    """

    standard_sections: tuple[str, ...] = STANDARD_SECTIONS
    custom_sections: tuple[str, ...] = ()

    @property
    def allow_list(self) -> tuple[str, ...]:
        """Standard sections followed by custom sections, without repeats."""
        return tuple(dict.fromkeys(self.standard_sections + tuple(self.custom_sections)))


@dataclass
class CopyResult:
    """Result of copying a package.json.

    Attributes:
        path: Path to the written package.json
        manifest: The manifest that was written
        dropped_sections: Source sections not carried into the output
    """

    path: Path
    manifest: dict[str, Any]
    dropped_sections: list[str] = field(default_factory=list)


def map_strings(value: Any, fn: Callable[[str], str]) -> Any:
    """Apply ``fn`` to every string leaf of a JSON value.

    Lists and dicts are updated in place and returned. Numbers, booleans and
    None are returned unchanged.
    """
    if isinstance(value, str):
        return fn(value)
    if isinstance(value, list):
        for i, item in enumerate(value):
            value[i] = map_strings(item, fn)
    elif isinstance(value, dict):
        for key, item in value.items():
            value[key] = map_strings(item, fn)
    return value


def strip_prefix(value: str, prefix: str) -> str:
    """Remove the first occurrence of ``prefix`` from ``value``."""
    return value.replace(prefix, "", 1)


def strip_path_fields(manifest: dict[str, Any], prefix: str) -> dict[str, Any]:
    """Strip ``prefix`` from the path-bearing fields of a manifest, in place.

    ``main``, ``types`` and ``module`` are only touched when they are strings.
    Every string inside ``typesVersions`` and ``exports`` is rewritten,
    however deeply nested.
    """
    for key in STRIP_STRING_SECTIONS:
        if isinstance(manifest.get(key), str):
            manifest[key] = strip_prefix(manifest[key], prefix)

    for key in STRIP_NESTED_SECTIONS:
        if key in manifest:
            manifest[key] = map_strings(manifest[key], lambda s: strip_prefix(s, prefix))

    return manifest


def select_sections(manifest: dict[str, Any], allow_list: Iterable[str]) -> dict[str, Any]:
    """Pick the allow-listed sections of a manifest, in allow-list order."""
    return {key: manifest[key] for key in allow_list if key in manifest}


def transform_manifest(
    manifest: dict[str, Any],
    main: str,
    types: str,
    config: Optional[TransformConfig] = None,
    strip: Optional[str] = None,
) -> dict[str, Any]:
    """Build the published manifest from a source manifest.

    Args:
        manifest: Parsed source package.json; modified in place when stripping
        main: Value for the output ``main`` field
        types: Value for the output ``types`` field
        config: Section allow-list (defaults to the standard sections)
        strip: Prefix to remove from path fields, if any

    Returns:
        The output manifest: ``main``, ``types``, then the selected sections

    Example:
        >>> transform_manifest(
        ...     {"name": "pkg", "main": "dist/index.js", "scripts": {}},
        ...     main="index.js",
        ...     types="index.d.ts",
        ...     strip="dist/",
        ... )
        {'main': 'index.js', 'types': 'index.d.ts', 'name': 'pkg'}
    """
    config = config or TransformConfig()

    if strip is not None:
        strip_path_fields(manifest, strip)

    selected = select_sections(manifest, config.allow_list)
    output: dict[str, Any] = {"main": main, "types": types}
    for key, value in selected.items():
        # Entry points always come from the caller
        if key not in OVERRIDE_SECTIONS:
            output[key] = value
    return output


def copy_package_json(
    input_folder: str | Path,
    output_folder: str | Path,
    main: str,
    types: str,
    custom_sections: Iterable[str] = (),
    strip: Optional[str] = None,
) -> CopyResult:
    """Copy package.json from ``input_folder`` to ``output_folder``, transformed.

    Args:
        input_folder: Folder containing the source package.json
        output_folder: Existing folder to write the published package.json to
        main: Value for the output ``main`` field
        types: Value for the output ``types`` field
        custom_sections: Extra sections to carry over after the standard ones
        strip: Prefix to remove from path fields, if any

    Returns:
        CopyResult describing the written manifest

    Raises:
        FileNotFoundError: If the source package.json or the output folder is missing
        json.JSONDecodeError: If the source package.json is not valid JSON
        ManifestFormatError: If the source package.json is not a JSON object
    """
    source = read_json(Path(input_folder) / MANIFEST_FILENAME)
    source_sections = list(source)

    config = TransformConfig(custom_sections=tuple(custom_sections))
    output = transform_manifest(source, main, types, config=config, strip=strip)

    output_path = Path(output_folder) / MANIFEST_FILENAME
    write_json(output_path, output)
    click.echo(f"✅ {MANIFEST_FILENAME} written to: {output_folder}")

    dropped = [
        key for key in source_sections if key not in output and key not in OVERRIDE_SECTIONS
    ]
    return CopyResult(path=output_path, manifest=output, dropped_sections=dropped)
