"""Core building blocks: configuration, formatting, planning and preflight checks."""

from new_component.core.config import CONFIG_FILENAME, ConfigPaths, Configuration, load_config
from new_component.core.exceptions import (
    ConfigError,
    ConfigFileError,
    ConfigValidationError,
    FormatterError,
    NewComponentError,
)
from new_component.core.formatter import (
    BasicFormatter,
    Formatter,
    PrettierFormatter,
    build_prettifier,
)
from new_component.core.plan import ScaffoldPlan, plan_scaffold
from new_component.core.preflight import (
    PreflightResult,
    Ready,
    UsageError,
    UsageErrorKind,
    check_preflight,
)
from new_component.core.types import ComponentType
from new_component.core.utils import deep_merge

__all__ = [
    "CONFIG_FILENAME",
    "BasicFormatter",
    "ComponentType",
    "ConfigError",
    "ConfigFileError",
    "ConfigPaths",
    "ConfigValidationError",
    "Configuration",
    "Formatter",
    "FormatterError",
    "NewComponentError",
    "PreflightResult",
    "PrettierFormatter",
    "Ready",
    "ScaffoldPlan",
    "UsageError",
    "UsageErrorKind",
    "build_prettifier",
    "check_preflight",
    "deep_merge",
    "load_config",
    "plan_scaffold",
]
