"""Typer CLI application for new-component."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

from rich.logging import RichHandler
from typer import Argument, Exit, Option, Typer

import new_component
from new_component.cli._renderer import run_scaffold
from new_component.cli._reporter import (
    log_conclusion,
    log_error,
    log_exception,
    log_intro,
    log_item_completion,
    log_version,
)
from new_component.core.config import FORMATTER_MODES, ConfigPaths, load_config
from new_component.core.exceptions import ConfigError, FormatterError
from new_component.core.formatter import build_prettifier
from new_component.core.preflight import UsageError, check_preflight
from new_component.core.types import ComponentType

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        log_version(new_component.__version__)
        raise Exit()


def _type_help() -> str:
    choices = "; ".join(f"'{t.value}': {t.description}" for t in ComponentType)
    return f"Type of React component to generate. {choices} Defaults to the configured type."


@app.command()
def main(
    component_name: Annotated[
        str | None,
        Argument(help="Name of the component to create", show_default=False),
    ] = None,
    component_type: Annotated[
        ComponentType | None,
        Option("--type", "-t", help=_type_help(), case_sensitive=False, show_default=False),
    ] = None,
    directory: Annotated[
        str | None,
        Option(
            "--dir",
            "-d",
            help='Path to the "components" directory (default: "src/components")',
            show_default=False,
        ),
    ] = None,
    extension: Annotated[
        str | None,
        Option(
            "--extension",
            "-x",
            help='Which file extension to use for the component (default: "ts")',
            show_default=False,
        ),
    ] = None,
    formatter: Annotated[
        str | None,
        Option(
            "--formatter",
            help=f"How to format generated files: {', '.join(FORMATTER_MODES)} (default: auto)",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug logging.")] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new React component: source, helpers, index and test stub."""
    _setup_logging(verbose)

    try:
        config = load_config(ConfigPaths.default()).with_overrides(
            type=component_type,
            dir=directory,
            extension=extension,
            formatter=formatter,
        )
        prettify = build_prettifier(
            config.prettier_config, extension=config.extension, mode=config.formatter
        )
    except (ConfigError, FormatterError) as e:
        log_error(str(e))
        raise Exit(code=1) from None

    result = check_preflight(component_name, config)
    if isinstance(result, UsageError):
        logger.debug("Preflight failed: %s", result.kind.value)
        log_error(result.message)
        # Usage errors are not tool failures.
        raise Exit(code=0)

    plan = result.plan
    log_intro(plan.component_name, str(plan.component_dir), config.type, new_component.__version__)

    try:
        asyncio.run(run_scaffold(plan, prettify, root=Path.cwd(), on_progress=log_item_completion))
    except Exception:
        log_exception()
        raise Exit(code=1) from None

    log_conclusion()
