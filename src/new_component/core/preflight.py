"""Checks run before anything is written to disk."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from new_component.core.config import Configuration
from new_component.core.plan import ScaffoldPlan, plan_scaffold


class UsageErrorKind(str, Enum):
    MISSING_NAME = "missing-name"
    MISSING_PARENT_DIR = "missing-parent-dir"
    COMPONENT_EXISTS = "component-exists"


@dataclass(frozen=True)
class Ready:
    """All checks passed; ``plan`` is safe to hand to the runner."""

    plan: ScaffoldPlan


@dataclass(frozen=True)
class UsageError:
    """A check failed. The user can fix this and run again."""

    kind: UsageErrorKind
    message: str


PreflightResult = Ready | UsageError


def check_preflight(
    component_name: str | None,
    config: Configuration,
    *,
    cwd: Path | None = None,
) -> PreflightResult:
    """Validate the invocation, stopping at the first failing check.

    1. A component name was given.
    2. The parent directory ``config.dir`` exists.
    3. The component directory does not exist yet.

    Relative paths are resolved against ``cwd`` (default: the process
    working directory). Nothing is created or modified.
    """
    if not component_name or not component_name.strip():
        return UsageError(
            UsageErrorKind.MISSING_NAME,
            "Sorry, you need to specify a name for your component like this: "
            "new-component <name>",
        )

    base = cwd if cwd is not None else Path.cwd()

    if not (base / config.dir).resolve().exists():
        return UsageError(
            UsageErrorKind.MISSING_PARENT_DIR,
            'Sorry, you need to create a parent "components" directory.\n'
            f"(new-component is looking for a directory at {config.dir}).",
        )

    plan = plan_scaffold(component_name, config)

    if (base / plan.component_dir).resolve().exists():
        return UsageError(
            UsageErrorKind.COMPONENT_EXISTS,
            "Looks like this component already exists! "
            f"There's already a component at {plan.component_dir}.\n"
            "Please delete this directory and try again.",
        )

    return Ready(plan)
