"""Core domain models for installer database tables.

This module defines the table operation classification and the immutable
record describing one table's role inside an ordered stack of patches and
transforms applied to an installer database. The models are free of any
database engine, console or CLI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol

_EMPTY: tuple[str, ...] = ()


class TableOperation(str, Enum):
    """
    Operation a transform or patch performs on a table.

    Values:
        NONE: The table is not changed.
        ADD: The table is created.
        DROP: The table is removed.
        MODIFY: Rows or columns of the table are changed.
    """

    NONE = "None"
    ADD = "Add"
    DROP = "Drop"
    MODIFY = "Modify"


class TransformInspector(Protocol):
    """Interface for classifying table operations within one transform view."""

    def get_table_operation(self, table: str) -> TableOperation:
        """Return the operation the transform performs on the named table."""
        ...


@dataclass(frozen=True)
class TableRef:
    """Lightweight representation of a table listed by a database adapter."""

    name: str
    rows: int = 0


@dataclass(frozen=True)
class TableInfo:
    """
    Information about a table in an installer database.

    Attributes:
        table: Name of the table. Never empty.
        path: Full path to the database containing the table.
        operation: Operation performed on the table by the current transform.
        patches: Patches applied to the database, in the order applied.
        transforms: Transforms applied to the database, in the order applied.
    """

    table: str
    path: str = ""
    operation: TableOperation = TableOperation.NONE
    patches: tuple[str, ...] = _EMPTY
    transforms: tuple[str, ...] = _EMPTY

    def __post_init__(self) -> None:
        if not self.table:
            raise ValueError("Table name is required.")

        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "path", self.path or "")
        object.__setattr__(self, "patches", _freeze(self.patches))
        object.__setattr__(self, "transforms", _freeze(self.transforms))

    @classmethod
    def create(
        cls,
        name: str,
        path: str = "",
        transform: TransformInspector | None = None,
        patches: Iterable[str] | None = None,
        transforms: Iterable[str] | None = None,
    ) -> TableInfo:
        """
        Build a TableInfo for a table inside a resolved database.

        Args:
            name: Name of the table.
            path: Full path to the database containing the table.
            transform: Optional transform view used to classify the operation
                performed on the table. Without one the operation is NONE.
            patches: Patches applied to the database, or None.
            transforms: Transforms applied to the database, or None.

        Raises:
            ValueError: If name is None or empty.
        """
        if not name:
            raise ValueError("Table name is required.")

        if transform is not None:
            operation = transform.get_table_operation(name)
        else:
            operation = TableOperation.NONE

        return cls(
            table=name,
            path=path or "",
            operation=operation,
            patches=_freeze(patches),
            transforms=_freeze(transforms),
        )


def _freeze(values: Iterable[str] | None) -> tuple[str, ...]:
    """Copy values into a tuple, mapping None to the shared empty tuple."""
    if values is None:
        return _EMPTY
    if isinstance(values, str):
        return (values,)
    if isinstance(values, tuple):
        return values
    return tuple(values) or _EMPTY
