"""Source formatting for generated files.

Generated code is piped through `prettier <https://prettier.io>`_ when it is
installed, either in the project's ``node_modules`` or on ``PATH``. Without
prettier a small whitespace normaliser keeps the output tidy.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from new_component.core.exceptions import ConfigValidationError, FormatterError

logger = logging.getLogger(__name__)

_BLANK_RUNS = re.compile(r"\n{3,}")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

_TYPESCRIPT_EXTENSIONS = {"ts", "tsx"}

# List options prettier accepts as a repeated singular flag.
_REPEATED_FLAGS = {"plugins": "plugin"}


class Formatter(Protocol):
    """A pure ``text -> text`` transform applied to every generated file."""

    def __call__(self, text: str) -> str: ...


class BasicFormatter:
    """Whitespace-only normalisation."""

    def __call__(self, text: str) -> str:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = [line.rstrip() for line in text.split("\n")]
        text = _BLANK_RUNS.sub("\n\n", "\n".join(lines)).strip("\n")
        return f"{text}\n" if text else ""


def prettier_flags(options: Mapping[str, Any]) -> list[str]:
    """Translate a prettier options object into command-line flags.

    >>> prettier_flags({"singleQuote": True, "semi": False, "plugins": ["a", "b"]})
    ['--single-quote', '--no-semi', '--plugin=a', '--plugin=b']

    Raises:
        ConfigValidationError: An option has no command-line form, such as
            ``overrides`` or any other nested object.
    """
    flags: list[str] = []
    for key, value in options.items():
        flag = _CAMEL_BOUNDARY.sub("-", key).lower()
        if key in _REPEATED_FLAGS and isinstance(value, list | tuple):
            singular = _REPEATED_FLAGS[key]
            flags.extend(f"--{singular}={item}" for item in value)
        elif isinstance(value, Mapping | list | tuple):
            raise ConfigValidationError(
                f"prettierConfig option {key!r} cannot be passed to prettier on the command line."
            )
        elif value is True:
            flags.append(f"--{flag}")
        elif value is False:
            flags.append(f"--no-{flag}")
        elif value is not None:
            flags.append(f"--{flag}={value}")
    return flags


class PrettierFormatter:
    """Pipe text through the prettier executable."""

    def __init__(self, executable: str, options: Mapping[str, Any], parser: str) -> None:
        self.executable = executable
        self.options = dict(options)
        self.parser = parser

    @property
    def command(self) -> list[str]:
        return [self.executable, "--parser", self.parser, *prettier_flags(self.options)]

    def __call__(self, text: str) -> str:
        try:
            proc = subprocess.run(
                self.command,
                input=text,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise FormatterError(f"Could not run prettier ({self.executable}): {e}") from e

        if proc.returncode != 0:
            raise FormatterError(
                f"prettier exited with status {proc.returncode}:\n{proc.stderr.strip()}"
            )
        return proc.stdout


def find_prettier(cwd: Path | None = None) -> str | None:
    """Locate prettier: the project's ``node_modules/.bin`` first, then ``PATH``."""
    cwd = cwd if cwd is not None else Path.cwd()
    local = cwd / "node_modules" / ".bin" / "prettier"
    if local.is_file():
        return str(local)
    return shutil.which("prettier")


def parser_for(extension: str) -> str:
    return "typescript" if extension.lower() in _TYPESCRIPT_EXTENSIONS else "babel"


def build_prettifier(
    prettier_config: Mapping[str, Any],
    *,
    extension: str = "ts",
    mode: str = "auto",
    cwd: Path | None = None,
) -> Formatter:
    """Build the formatter for one invocation.

    Args:
        prettier_config: Options handed to prettier.
        extension: File suffix of the generated files; picks prettier's parser.
        mode: ``basic`` never runs prettier, ``prettier`` requires it and
            ``auto`` uses it when it can be found.
        cwd: Project directory searched for a local prettier install.

    Raises:
        FormatterError: ``mode`` is ``prettier`` and no executable was found.
    """
    if mode == "basic":
        return BasicFormatter()

    executable = find_prettier(cwd)
    if executable is None:
        if mode == "prettier":
            raise FormatterError("prettier was requested but no executable could be found.")
        logger.debug("prettier not found, falling back to basic formatting")
        return BasicFormatter()

    logger.debug("Formatting with %s", executable)
    return PrettierFormatter(executable, prettier_config, parser_for(extension))
