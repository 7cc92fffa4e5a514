# SPDX-License-Identifier: MIT
"""Tests for configuration loading."""

from pathlib import Path

import pytest

from package_json_copy.config import ConfigError, CopyConfig, load_config


class TestCopyConfigFromPyproject:
    """Tests for CopyConfig.from_pyproject_dict."""

    def test_empty_pyproject(self):
        config = CopyConfig.from_pyproject_dict({})
        assert config.main is None
        assert config.types is None
        assert config.custom_sections == []
        assert config.strip is None

    def test_full_table(self):
        pyproject = {
            "tool": {
                "package-json-copy": {
                    "main": "index.js",
                    "types": "index.d.ts",
                    "custom-sections": ["type", "sideEffects"],
                    "strip": "dist/foo/",
                }
            }
        }
        config = CopyConfig.from_pyproject_dict(pyproject)
        assert config.main == "index.js"
        assert config.types == "index.d.ts"
        assert config.custom_sections == ["type", "sideEffects"]
        assert config.strip == "dist/foo/"

    def test_other_tools_ignored(self):
        config = CopyConfig.from_pyproject_dict({"tool": {"pytest": {"main": 1}}})
        assert config.main is None

    @pytest.mark.parametrize("key", ["main", "types", "strip"])
    def test_non_string_value_rejected(self, key: str):
        pyproject = {"tool": {"package-json-copy": {key: 3}}}
        with pytest.raises(ConfigError) as exc_info:
            CopyConfig.from_pyproject_dict(pyproject)
        assert key in str(exc_info.value)

    @pytest.mark.parametrize("value", ["type", ["type", 1]])
    def test_bad_custom_sections_rejected(self, value):
        pyproject = {"tool": {"package-json-copy": {"custom-sections": value}}}
        with pytest.raises(ConfigError):
            CopyConfig.from_pyproject_dict(pyproject)


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.package-json-copy]\nmain = "index.js"\n')
        config = load_config(path)
        assert config.main == "index.js"
        assert config.source == path

    def test_explicit_path_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "pyproject.toml")

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.package-json-copy\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert "Invalid TOML" in str(exc_info.value)

    def test_default_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "pyproject.toml").write_text('[tool.package-json-copy]\nstrip = "dist/"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().strip == "dist/"

    def test_no_pyproject_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config == CopyConfig()
