from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from msiops.core.tables import TableRef
from msiops.core.transforms import TransformViewRecord


class SnapshotError(RuntimeError):
    """Raised when a database snapshot cannot be loaded or resolved."""


class SnapshotAdapter:
    """Adapter over a JSON export of a resolved installer database (tables/layers)."""

    def __init__(
        self,
        path: str,
        tables: list[TableRef],
        layers: dict[str, list[TransformViewRecord]],
    ) -> None:
        self.path = path
        self._tables = tables
        self._layers = layers

    @classmethod
    def from_file(cls, file: str | Path) -> SnapshotAdapter:
        """Load a snapshot document from disk."""
        file = Path(file)
        try:
            doc = json.loads(file.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise SnapshotError(f"Database snapshot not found: {file}") from exc
        except OSError as exc:
            raise SnapshotError(f"Cannot read database snapshot {file}: {exc}") from exc
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SnapshotError(f"Invalid database snapshot {file}: {exc}") from exc
        return cls.from_dict(doc, default_path=str(file))

    @classmethod
    def from_dict(
        cls, doc: Any, *, default_path: str = ""
    ) -> SnapshotAdapter:
        """Build an adapter from an already-parsed snapshot document."""
        if not isinstance(doc, dict):
            raise SnapshotError("Snapshot must be a JSON object.")

        raw_tables = doc.get("tables", [])
        raw_layers = doc.get("layers") or {}
        if not isinstance(raw_tables, list):
            raise SnapshotError("Malformed database snapshot: `tables` must be a list.")
        if not isinstance(raw_layers, dict):
            raise SnapshotError("Malformed database snapshot: `layers` must be an object.")
        for layer, records in raw_layers.items():
            if not isinstance(records, list):
                raise SnapshotError(
                    f"Malformed database snapshot: records of `{layer}` must be a list."
                )

        try:
            tables = [_parse_table(t) for t in raw_tables]
            layers = {
                str(layer): [_parse_record(r) for r in records]
                for layer, records in raw_layers.items()
            }
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed database snapshot: {exc}") from exc

        return cls(path=doc.get("path") or default_path, tables=tables, layers=layers)

    def list_tables(self) -> list[TableRef]:
        """List the tables of the resolved database."""
        return list(self._tables)

    def has_layer(self, layer: str) -> bool:
        """Return True if the snapshot describes the given patch or transform."""
        return layer in self._layers

    def transform_view_records(self, layer: str) -> list[TransformViewRecord]:
        """Return the `_TransformView` records of a patch or transform."""
        try:
            return list(self._layers[layer])
        except KeyError as exc:
            raise SnapshotError(f"Unknown patch or transform: {layer}") from exc


def _parse_table(item: Any) -> TableRef:
    if isinstance(item, str):
        return TableRef(name=item)
    name = item["name"]
    if not name:
        raise ValueError("table name is empty")
    return TableRef(name=str(name), rows=int(item.get("rows", 0)))


def _parse_record(item: Any) -> TransformViewRecord:
    return TransformViewRecord(
        table=str(item["table"]),
        column=str(item["column"]),
        row=item.get("row"),
        data=item.get("data"),
        current=item.get("current"),
    )
