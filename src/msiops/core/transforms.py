"""Transform view over `_TransformView` records.

A transform (or the transform embedded in a patch) is described by the
records of the `_TransformView` table: one record per change, naming the
table, the column (or a marker such as CREATE, DROP, INSERT, DELETE), the
row key and the new and current data. This module classifies those records
per table so that a TransformView can act as the transform inspector for
TableInfo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from msiops.core.tables import TableOperation

CREATE_COLUMN = "CREATE"
DROP_COLUMN = "DROP"


@dataclass(frozen=True)
class TransformViewRecord:
    """
    One record of a `_TransformView` table.

    Attributes:
        table: Name of the changed table.
        column: Changed column, or CREATE / DROP / INSERT / DELETE.
        row: Primary key of the changed row; None for table-level changes.
        data: New value, if any.
        current: Value before the change, if any.
    """

    table: str
    column: str
    row: str | None = None
    data: str | None = None
    current: str | None = None


class TransformView:
    """Per-table classification of the changes made by a single transform."""

    def __init__(self, records: Iterable[TransformViewRecord]):
        if records is None:
            raise ValueError("records is required")

        self._added: set[str] = set()
        self._dropped: set[str] = set()
        self._modified: set[str] = set()
        self._tables: dict[str, None] = {}

        for record in records:
            self._tables.setdefault(record.table, None)
            if record.column == CREATE_COLUMN:
                self._added.add(record.table)
            elif record.column == DROP_COLUMN and record.row is None:
                self._dropped.add(record.table)
            else:
                self._modified.add(record.table)

    @property
    def tables(self) -> list[str]:
        """Tables touched by the transform, in first-seen order."""
        return list(self._tables)

    def get_table_operation(self, table: str) -> TableOperation:
        """Return the operation the transform performs on the named table."""
        if table in self._dropped:
            return TableOperation.DROP
        if table in self._added:
            return TableOperation.ADD
        if table in self._modified:
            return TableOperation.MODIFY
        return TableOperation.NONE
