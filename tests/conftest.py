# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for package-json-copy tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def source_manifest() -> dict:
    """A source package.json with build-only sections and dist paths."""
    return {
        "name": "pkg",
        "version": "1.2.3",
        "main": "dist/foo/index.js",
        "types": "dist/foo/index.d.ts",
        "module": "dist/foo/index.mjs",
        "exports": {
            ".": {
                "import": "./dist/foo/index.mjs",
                "require": "./dist/foo/index.js",
            },
            "./package.json": "./package.json",
        },
        "typesVersions": {"*": {"*": ["dist/foo/*"]}},
        "scripts": {"build": "tsc"},
        "devDependencies": {"typescript": "^5.0.0"},
        "dependencies": {"a": "1.0.0"},
        "sideEffects": False,
    }


@pytest.fixture
def project_dirs(tmp_path: Path, source_manifest: dict) -> tuple[Path, Path]:
    """Create an input folder holding package.json and an empty output folder."""
    input_dir = tmp_path / "project"
    output_dir = tmp_path / "dist"
    input_dir.mkdir()
    output_dir.mkdir()
    (input_dir / "package.json").write_text(json.dumps(source_manifest, indent=2))
    return input_dir, output_dir
