import json
import sys
from typing import Any

from pydantic import validate_call
from rich import print, print_json
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


@validate_call
def handle_error(message: str, exit: bool = False):
    """Print an error message, optionally leaving the program."""
    print(f"• [bold red]:x: {message}[/bold red]")
    if exit:
        sys.exit(1)


@validate_call
def rich_print_command_usage(command: str):
    """
    Print the command usage in a styled panel.
    """
    console.print(
        Panel.fit(
            f"[bold magenta]{command}[/]",
            title="[cyan]Command Used[/]",
            border_style="bright_blue",
            title_align="center",
        )
    )


@validate_call
def rich_print_json(statement: str, json_obj: dict | list):
    """
    Pretty print JSON object.
    """
    print(f"• [bold magenta]{statement}[/]")
    print_json(json.dumps(json_obj, indent=4, default=str))


@validate_call
def rich_print_checked_statement(statement: str, mode: str, exit: bool = False):
    """
    Print a statement with a check mark or cross.
    """
    if mode not in ["loading", "success", "error", "info", "warning"]:
        handle_error(f"Invalid mode: {mode}", exit=exit)
    if mode == "loading":
        print(f"• [bold yellow]:hourglass: {statement}[/bold yellow]")
    elif mode == "success":
        print(f"• [bold green]:white_check_mark: {statement}[/bold green]")
    elif mode == "error":
        print(f"• [bold red]:x: {statement}[/bold red]")
    elif mode == "info":
        print(f"• [bold blue]:blue_book: {statement}[/bold blue]")
    elif mode == "warning":
        print(f"• [bold orange1]:warning: {statement}[/bold orange1]")


def print_records_table(
    records: list[Any],
    columns: list[str],
    title: str | None = None,
    footer: str | None = None,
) -> None:
    """
    Render records (pydantic models) as a table, one column per attribute.

    Enum values are shown by value and booleans as yes/no.
    """
    table = Table(title=title, show_lines=False, header_style="bold magenta")
    for column in columns:
        table.add_column(column, overflow="fold")

    for record in records:
        row = []
        for column in columns:
            value = getattr(record, column, None)
            if hasattr(value, "value"):
                value = value.value
            if isinstance(value, bool):
                value = "yes" if value else "no"
            row.append("" if value is None else str(value))
        table.add_row(*row)

    console.print(table)
    if footer:
        console.print(f"[dim]{footer}[/dim]")
