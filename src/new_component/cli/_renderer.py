"""Orchestrates template rendering to files on disk."""

from __future__ import annotations

import asyncio
import importlib.resources as ilr
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from new_component.core.formatter import Formatter
from new_component.core.plan import ScaffoldPlan

logger = logging.getLogger(__name__)

PLACEHOLDER = "COMPONENT_NAME"

_TEMPLATES_PACKAGE = "new_component.cli"

ProgressFn = Callable[[str], None]


@dataclass(frozen=True)
class Step:
    """One stage of the pipeline and the message reported once it finishes."""

    message: str
    action: Callable[[], Awaitable[None]]


def _substitute(template: str, component_name: str) -> str:
    return template.replace(PLACEHOLDER, component_name)


def _index_template(component_name: str) -> str:
    return f"""\
export * from './{component_name}'
export {{ default }} from './{component_name}'
"""


async def _make_dir(path: Path) -> None:
    await asyncio.to_thread(path.mkdir, parents=True)


async def _read_template(template_path: PurePosixPath) -> str:
    resource = ilr.files(_TEMPLATES_PACKAGE).joinpath(*template_path.parts)
    return await asyncio.to_thread(resource.read_text, "utf-8")


async def _write_file(path: Path, content: str) -> None:
    await asyncio.to_thread(path.write_text, content, "utf-8")


def build_steps(
    plan: ScaffoldPlan,
    prettify: Formatter,
    root: Path,
    created: list[Path],
) -> list[Step]:
    """Assemble the ordered pipeline for ``plan``.

    Each action appends the paths it creates to ``created``.
    """
    name = plan.component_name

    async def create_directory() -> None:
        path = root / plan.component_dir
        await _make_dir(path)
        created.append(path)

    async def write_component() -> None:
        template = await _read_template(plan.template_path)
        path = root / plan.component_file_path
        await _write_file(path, prettify(_substitute(template, name)))
        created.append(path)

    async def write_helpers() -> None:
        path = root / plan.helpers_file_path
        await _write_file(path, prettify("export {}"))
        created.append(path)

    async def write_index() -> None:
        path = root / plan.index_file_path
        await _write_file(path, prettify(_index_template(name)))
        created.append(path)

    async def write_test() -> None:
        test_dir = root / plan.test_dir
        await _make_dir(test_dir)
        created.append(test_dir)
        template = await _read_template(plan.test_template_path)
        path = root / plan.test_file_path
        await _write_file(path, prettify(_substitute(template, name)))
        created.append(path)

    return [
        Step("Directory created.", create_directory),
        Step("Component built and saved to disk.", write_component),
        Step("Helpers file built and saved to disk.", write_helpers),
        Step("Index file built and saved to disk.", write_index),
        Step("Test file built and saved to disk.", write_test),
    ]


async def run_scaffold(
    plan: ScaffoldPlan,
    prettify: Formatter,
    *,
    root: Path | None = None,
    on_progress: ProgressFn | None = None,
) -> list[Path]:
    """Create the component described by ``plan``. Returns created paths in order.

    Steps run strictly one after another. The first failing step aborts the
    rest and its exception propagates unchanged. Files and directories created
    by earlier steps are left on disk; there is no rollback.

    The component directory must not exist yet, so running twice raises
    :class:`FileExistsError` on the first step.
    """
    root = root if root is not None else Path.cwd()
    created: list[Path] = []

    for step in build_steps(plan, prettify, root, created):
        await step.action()
        logger.debug("%s (%s)", step.message, created[-1])
        if on_progress is not None:
            on_progress(step.message)

    return created
