"""Table provenance assembly.

This module contains the domain-level functions that turn a resolved
installer database and the ordered patches and transforms applied to it
into TableInfo records, plus a small summary over those records. It relies
on an adapter for everything engine-specific and is free of CLI concerns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Protocol

from msiops.core.sequences import select, sum_by, to_list
from msiops.core.tables import TableInfo, TableOperation, TableRef
from msiops.core.transforms import TransformView, TransformViewRecord


class DatabaseAdapter(Protocol):
    """Interface for a resolved installer database used by the core domain."""

    path: str

    def list_tables(self) -> list[TableRef]:
        """Return the tables of the database."""
        ...

    def has_layer(self, layer: str) -> bool:
        """Return True if the patch or transform is known to the adapter."""
        ...

    def transform_view_records(self, layer: str) -> list[TransformViewRecord]:
        """Return the `_TransformView` records of a patch or transform."""
        ...


@dataclass(frozen=True)
class ProvenanceSummary:
    """
    Aggregate view of the tables of one resolved database.

    Attributes:
        path: Full path to the database.
        tables: Number of tables described.
        rows: Total number of rows across the database tables.
        added: Tables added by the current transform.
        dropped: Tables dropped by the current transform.
        modified: Tables modified by the current transform.
        unchanged: Tables the current transform does not touch.
    """

    path: str
    tables: int
    rows: int
    added: int
    dropped: int
    modified: int
    unchanged: int


def _check_layers(adapter: DatabaseAdapter, layers: Iterable[str]) -> None:
    unknown = [layer for layer in layers if not adapter.has_layer(layer)]
    if unknown:
        raise ValueError(f"Unknown patch or transform: {', '.join(unknown)}")


def describe_tables(
    adapter: DatabaseAdapter,
    *,
    patches: list[str] | None = None,
    transforms: list[str] | None = None,
    view: str | None = None,
    name_regex: str | None = None,
) -> list[TableInfo]:
    """
    Describe every table of a resolved database.

    Patches and transforms are recorded on each TableInfo in the order
    given; no precedence is assigned between them. When view names a patch
    or transform, its `_TransformView` records classify the operation
    performed on each table.

    Args:
        adapter: Database adapter for the resolved database.
        patches: Patches applied to the database, in order.
        transforms: Transforms applied to the database, in order.
        view: Patch or transform whose changes classify table operations.
        name_regex: Optional regular expression applied to table names.

    Returns:
        One TableInfo per matching table, in adapter order.

    Raises:
        ValueError: If a layer is unknown or name_regex is invalid.
    """
    layers = [*(patches or []), *(transforms or [])]
    if view:
        layers.append(view)
    _check_layers(adapter, layers)

    rx = None
    if name_regex:
        try:
            rx = re.compile(name_regex)
        except re.error as exc:
            raise ValueError(f"Invalid regex expression: {exc}") from exc

    transform = TransformView(adapter.transform_view_records(view)) if view else None

    tables = adapter.list_tables()
    if rx:
        tables = [t for t in tables if rx.search(t.name)]

    return to_list(
        select(
            tables,
            lambda t: TableInfo.create(
                t.name,
                path=adapter.path,
                transform=transform,
                patches=patches,
                transforms=transforms,
            ),
        )
    )


def summarize(adapter: DatabaseAdapter, infos: list[TableInfo]) -> ProvenanceSummary:
    """Count rows and per-operation tables for a described database."""
    described = {i.table for i in infos}

    def count(op: TableOperation) -> int:
        return sum_by(infos, lambda i: 1 if i.operation is op else 0)

    return ProvenanceSummary(
        path=adapter.path,
        tables=len(infos),
        rows=sum_by(
            adapter.list_tables(),
            lambda t: t.rows if t.name in described else 0,
        ),
        added=count(TableOperation.ADD),
        dropped=count(TableOperation.DROP),
        modified=count(TableOperation.MODIFY),
        unchanged=count(TableOperation.NONE),
    )
