# SPDX-License-Identifier: MIT
"""CLI entry point for the package-json-copy command."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import ConfigError, load_config
from .jsonio import ManifestError
from .transformer import TransformConfig, copy_package_json


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.command()
@click.version_option(version=__version__)
@click.argument("input_folder", type=click.Path(file_okay=False, path_type=Path))
@click.argument("output_folder", type=click.Path(file_okay=False, path_type=Path))
@click.option("--main", "main_entry", help="Value for the output 'main' field.")
@click.option("--types", "types_entry", help="Value for the output 'types' field.")
@click.option(
    "--custom-section",
    "-c",
    "custom_sections",
    multiple=True,
    help="Extra package.json section to keep. May be repeated.",
)
@click.option("--strip", help="Prefix to remove from main, types, module, typesVersions and exports.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="pyproject.toml with a [tool.package-json-copy] table (defaults to ./pyproject.toml).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output.")
def cli(
    input_folder: Path,
    output_folder: Path,
    main_entry: Optional[str],
    types_entry: Optional[str],
    custom_sections: tuple[str, ...],
    strip: Optional[str],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Copy package.json from INPUT_FOLDER to OUTPUT_FOLDER for publishing.

    Only the standard npm sections and any --custom-section names are kept.
    'main' and 'types' are replaced with the given values.

    \b
    Examples:
        package-json-copy . dist --main index.js --types index.d.ts
        package-json-copy . dist/foo --main index.js --types index.d.ts --strip dist/foo/
        package-json-copy . dist -c type -c sideEffects
    """
    try:
        config = load_config(config_path)
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    main_entry = main_entry if main_entry is not None else config.main
    types_entry = types_entry if types_entry is not None else config.types
    strip = strip if strip is not None else config.strip
    sections = [*config.custom_sections, *custom_sections]

    if main_entry is None:
        raise click.UsageError("Missing option '--main'.")
    if types_entry is None:
        raise click.UsageError("Missing option '--types'.")

    if verbose:
        if config.source is not None:
            echo_info(f"Config: {config.source}")
        allow_list = TransformConfig(custom_sections=tuple(sections)).allow_list
        echo_info(f"Sections: {', '.join(allow_list)}")
        if strip is not None:
            echo_info(f"Stripping prefix: {strip}")

    try:
        result = copy_package_json(
            input_folder,
            output_folder,
            main_entry,
            types_entry,
            custom_sections=sections,
            strip=strip,
        )
    except json.JSONDecodeError as e:
        echo_error(f"Invalid JSON in {input_folder / 'package.json'}: {e}")
        raise SystemExit(1)
    except (ManifestError, OSError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if verbose and result.dropped_sections:
        echo_warning(f"Dropped sections: {', '.join(result.dropped_sections)}")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
