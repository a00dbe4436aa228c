"""Terminal UI utilities for installer database tooling."""

from __future__ import annotations

import questionary

from msiops.cli.common.tui_style import QUESTIONARY_STYLE_SELECT
from msiops.core.tables import TableInfo, TableOperation

_MAX_TABLE_NAME_WIDTH = 72


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _table_choice_title(info: TableInfo, *, name_width: int) -> str:
    """Format one table choice as `<table>  [<operation>]` with aligned operation column."""
    short_name = _truncate(info.table, _MAX_TABLE_NAME_WIDTH)
    if info.operation is TableOperation.NONE:
        return short_name
    return f"{short_name.ljust(name_width)}  [{info.operation.value}]"


def select_tables(infos: list[TableInfo]) -> list[TableInfo]:
    """Display a checkbox prompt to select tables from a list.

    Args:
        infos: TableInfo records to choose from.

    Returns:
        The selected records, or an empty list if none selected.
    """
    shown_names = [_truncate(info.table, _MAX_TABLE_NAME_WIDTH) for info in infos]
    name_width = max((len(name) for name in shown_names), default=0)

    choices = [
        questionary.Choice(
            title=_table_choice_title(info, name_width=name_width),
            value=info,
        )
        for info in infos
    ]

    return (
        questionary.checkbox(
            "Select tables:",
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
        ).ask()
        or []
    )
