"""Tests for configuration resolution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from new_component.core.config import (
    CONFIG_FILENAME,
    ConfigPaths,
    Configuration,
    load_config,
)
from new_component.core.exceptions import ConfigFileError, ConfigValidationError
from new_component.core.types import ComponentType


def _write(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def paths(tmp_path: Path) -> ConfigPaths:
    return ConfigPaths(
        user=tmp_path / "home" / CONFIG_FILENAME,
        local=tmp_path / "project" / CONFIG_FILENAME,
    )


class TestLoadConfig:
    def test_defaults_when_no_files(self, paths: ConfigPaths) -> None:
        config = load_config(paths)

        assert config.type is ComponentType.FUNCTIONAL
        assert config.dir == "src/components"
        assert config.extension == "ts"
        assert config.formatter == "auto"
        assert config.prettier_config["singleQuote"] is True

    def test_global_overrides_defaults(self, paths: ConfigPaths) -> None:
        _write(paths.user, {"type": "class", "dir": "app/components"})

        config = load_config(paths)

        assert config.type is ComponentType.CLASS
        assert config.dir == "app/components"
        assert config.extension == "ts"

    def test_local_overrides_global(self, paths: ConfigPaths) -> None:
        assert paths.local is not None
        _write(paths.user, {"type": "class", "extension": "js"})
        _write(paths.local, {"type": "pure-class"})

        config = load_config(paths)

        assert config.type is ComponentType.PURE_CLASS
        assert config.extension == "js"

    def test_prettier_config_merges_per_key(self, paths: ConfigPaths) -> None:
        assert paths.local is not None
        _write(paths.user, {"prettierConfig": {"tabWidth": 4}})
        _write(paths.local, {"prettierConfig": {"semi": False}})

        config = load_config(paths)

        assert config.prettier_config == {
            "singleQuote": True,
            "semi": False,
            "trailingComma": "es5",
            "tabWidth": 4,
        }

    def test_type_is_case_insensitive(self, paths: ConfigPaths) -> None:
        _write(paths.user, {"type": "Pure-Class"})

        assert load_config(paths).type is ComponentType.PURE_CLASS

    def test_invalid_json(self, paths: ConfigPaths) -> None:
        paths.user.parent.mkdir(parents=True)
        paths.user.write_text("{not json")

        with pytest.raises(ConfigFileError, match="Failed to read configuration"):
            load_config(paths)

    def test_non_object_json(self, paths: ConfigPaths) -> None:
        _write(paths.user, ["class"])

        with pytest.raises(ConfigFileError, match="JSON object"):
            load_config(paths)

    @pytest.mark.parametrize("key", ["dir", "extension", "formatter"])
    def test_null_string_setting(self, paths: ConfigPaths, key: str) -> None:
        _write(paths.user, {key: None})

        with pytest.raises(ConfigValidationError, match=f"{key} must be a string"):
            load_config(paths)

    def test_prettier_overrides_rejected(self, paths: ConfigPaths) -> None:
        _write(paths.user, {"prettierConfig": {"overrides": [{"files": "*.ts"}]}})

        with pytest.raises(ConfigValidationError, match="overrides"):
            load_config(paths)

    def test_prettier_plugins_accepted(self, paths: ConfigPaths) -> None:
        _write(paths.user, {"prettierConfig": {"plugins": ["prettier-plugin-tailwindcss"]}})

        config = load_config(paths)

        assert config.prettier_config["plugins"] == ["prettier-plugin-tailwindcss"]

    def test_unknown_type(self, paths: ConfigPaths) -> None:
        _write(paths.user, {"type": "hooks"})

        with pytest.raises(ConfigValidationError, match="not a valid component type"):
            load_config(paths)


class TestConfigPaths:
    def test_default(self, tmp_path: Path) -> None:
        paths = ConfigPaths.default(cwd=tmp_path / "project", home=tmp_path / "home")

        assert paths.user == tmp_path / "home" / CONFIG_FILENAME
        assert paths.local == tmp_path / "project" / CONFIG_FILENAME

    def test_default_from_home(self, tmp_path: Path) -> None:
        paths = ConfigPaths.default(cwd=tmp_path, home=tmp_path)

        assert paths.local is None


class TestConfiguration:
    def test_is_immutable(self) -> None:
        config = Configuration()

        with pytest.raises(AttributeError):
            config.dir = "elsewhere"  # type: ignore[misc]
        with pytest.raises(TypeError):
            config.prettier_config["semi"] = False  # type: ignore[index]

    def test_with_overrides(self) -> None:
        config = Configuration()

        updated = config.with_overrides(type="CLASS", dir="lib", extension=None)

        assert updated.type is ComponentType.CLASS
        assert updated.dir == "lib"
        assert updated.extension == config.extension
        assert config.type is ComponentType.FUNCTIONAL

    def test_with_no_overrides_returns_self(self) -> None:
        config = Configuration()

        assert config.with_overrides() is config

    def test_strips_leading_dot(self) -> None:
        assert Configuration(extension=".js").extension == "js"

    @pytest.mark.parametrize("extension", ["", "a/b"])
    def test_rejects_bad_extension(self, extension: str) -> None:
        with pytest.raises(ConfigValidationError):
            Configuration(extension=extension)

    def test_rejects_unknown_formatter(self) -> None:
        with pytest.raises(ConfigValidationError, match="formatter"):
            Configuration(formatter="black")
