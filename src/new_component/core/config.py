"""Configuration resolution for new-component.

Settings come from three places, highest priority first:

1. the local project override (``./.new-component-config.json``)
2. the global user override (``~/.new-component-config.json``)
3. the built-in defaults

Override files are JSON objects using the same keys as the defaults
(``type``, ``dir``, ``extension``, ``prettierConfig``, ``formatter``).
Nested objects such as ``prettierConfig`` are merged key by key.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any

from new_component.core.exceptions import ConfigFileError, ConfigValidationError
from new_component.core.formatter import prettier_flags
from new_component.core.types import ComponentType
from new_component.core.utils import deep_merge

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".new-component-config.json"

FORMATTER_MODES = ("auto", "prettier", "basic")

DEFAULTS: dict[str, Any] = {
    "type": ComponentType.FUNCTIONAL.value,
    "dir": "src/components",
    "extension": "ts",
    "prettierConfig": {
        "singleQuote": True,
        "semi": True,
        "trailingComma": "es5",
    },
    "formatter": "auto",
}


@dataclass(frozen=True)
class ConfigPaths:
    """Paths to the override files.

    Attributes:
        user: Global user override file.
        local: Project override file, or None to skip it.
    """

    user: Path
    local: Path | None = None

    @classmethod
    def default(cls, cwd: Path | None = None, home: Path | None = None) -> ConfigPaths:
        cwd = cwd if cwd is not None else Path.cwd()
        home = home if home is not None else Path.home()
        local = cwd / CONFIG_FILENAME
        user = home / CONFIG_FILENAME
        # Running from the home directory: both names point at the same file.
        return cls(user=user, local=None if local == user else local)


@dataclass(frozen=True, kw_only=True)
class Configuration:
    """
    Settings for one invocation.

    Attributes:
        type: Which component template to render.
        dir: Parent directory the component directory is created in.
        extension: File suffix; the component file gets an extra ``x``.
        prettier_config: Options handed to prettier.
        formatter: One of ``auto``, ``prettier`` or ``basic``.
    """

    type: ComponentType = ComponentType.FUNCTIONAL
    dir: str = "src/components"
    extension: str = "ts"
    prettier_config: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULTS["prettierConfig"]))
    )
    formatter: str = "auto"

    def __post_init__(self) -> None:
        if not isinstance(self.type, ComponentType):
            try:
                object.__setattr__(self, "type", ComponentType.parse(str(self.type)))
            except ValueError as e:
                raise ConfigValidationError(str(e)) from None
        if not isinstance(self.prettier_config, MappingProxyType):
            proxy = MappingProxyType(dict(self.prettier_config))
            object.__setattr__(self, "prettier_config", proxy)
        # Rejects options prettier cannot take, before anything is written.
        prettier_flags(self.prettier_config)
        if not self.dir:
            raise ConfigValidationError("dir must not be empty.")
        object.__setattr__(self, "extension", self.extension.lstrip("."))
        if not self.extension or "/" in self.extension:
            raise ConfigValidationError(
                f"extension must be a bare suffix, got {self.extension!r}."
            )
        if self.formatter not in FORMATTER_MODES:
            raise ConfigValidationError(
                f"formatter must be one of {', '.join(FORMATTER_MODES)}, got {self.formatter!r}."
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Configuration:
        """Build a configuration from merged settings using the file keys."""
        prettier_config = data.get("prettierConfig", {})
        if not isinstance(prettier_config, Mapping):
            raise ConfigValidationError("prettierConfig must be an object.")
        return cls(
            type=data.get("type", DEFAULTS["type"]),
            dir=_string(data, "dir"),
            extension=_string(data, "extension"),
            prettier_config=prettier_config,
            formatter=_string(data, "formatter"),
        )

    def with_overrides(
        self,
        *,
        type: ComponentType | str | None = None,
        dir: str | None = None,
        extension: str | None = None,
        formatter: str | None = None,
    ) -> Configuration:
        """Return a copy with command-line values applied. ``None`` keeps the current value."""
        changes: dict[str, Any] = {}
        if type is not None:
            changes["type"] = type
        if dir is not None:
            changes["dir"] = dir
        if extension is not None:
            changes["extension"] = extension
        if formatter is not None:
            changes["formatter"] = formatter
        return replace(self, **changes) if changes else self


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, DEFAULTS[key])
    if not isinstance(value, str):
        raise ConfigValidationError(f"{key} must be a string, got {value!r}.")
    return value


def _read_json(path: Path | None) -> dict[str, Any] | None:
    """Read an override file. Returns None when the file does not exist."""
    if path is None or not path.exists():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigFileError(f"Failed to read configuration from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigFileError(f"Configuration in {path} must be a JSON object.")

    logger.debug("Loaded configuration overrides from %s: %s", path, sorted(data))
    return data


def load_config(paths: ConfigPaths | None = None) -> Configuration:
    """Resolve the configuration: local > global > defaults.

    Raises:
        ConfigFileError: An override file exists but is not a readable JSON object.
        ConfigValidationError: The merged settings are not usable.
    """
    paths = paths if paths is not None else ConfigPaths.default()

    merged = dict(DEFAULTS)
    for path in (paths.user, paths.local):
        overrides = _read_json(path)
        if overrides:
            merged = deep_merge(merged, overrides)

    logger.debug("Resolved configuration: %s", merged)
    return Configuration.from_dict(merged)
