"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)

_OPERATION_STYLES = {
    "Add": "ok",
    "Drop": "err",
    "Modify": "warn",
}


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {msg}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {v}")

    def table_infos_table(self, infos: Iterable[Any], title: str = "Tables") -> None:
        """
        Expects objects with .table .operation .patches .transforms
        (like msiops.core.tables.TableInfo)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Table", style="ok", no_wrap=True)
        t.add_column("Operation")
        t.add_column("Patches", style="meta")
        t.add_column("Transforms", style="meta")

        for info in infos:
            op = getattr(info.operation, "value", str(info.operation))
            style = _OPERATION_STYLES.get(op)
            t.add_row(
                info.table,
                f"[{style}]{op}[/{style}]" if style else op,
                ", ".join(info.patches),
                ", ".join(info.transforms),
            )

        console.print(t)


out = Out()
