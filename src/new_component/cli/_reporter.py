"""Clack-style console output using Rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from new_component.core.types import ComponentType

_console = Console(highlight=False)


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def log_intro(name: str, directory: str, component_type: ComponentType, version: str) -> None:
    _console.print()
    _console.print(f"[bold cyan]●[/]  new-component v{version}")
    _print_bar()
    _console.print(f"[bold green]◇[/]  Creating the [bold]{escape(name)}[/] component")
    _console.print(f"[dim]│[/]  Directory: [bold]{escape(directory)}[/]")
    _console.print(
        f"[dim]│[/]  Type:      [bold]{component_type.value}[/] [dim]({component_type.label})[/]"
    )
    _print_bar()


def log_item_completion(message: str) -> None:
    _console.print(f"[dim]│[/]  [bold green]✓[/] {escape(message)}")


def log_conclusion() -> None:
    _print_bar()
    _console.print("[bold cyan]●[/]  Component created!")
    _console.print("[dim]   Thanks for using new-component.[/]")
    _console.print()


def log_error(message: str) -> None:
    _console.print()
    _console.print(f"[bold red]Error:[/] {escape(message)}")
    _console.print()


def log_exception() -> None:
    """Print the exception being handled with its full traceback."""
    _print_bar()
    _console.print("[bold red]●[/]  Something went wrong while creating the component.")
    _console.print_exception()


def log_version(version: str) -> None:
    _console.print(f"new-component v{version}")
