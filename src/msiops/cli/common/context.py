"""Application context management for the CLI."""

from dataclasses import dataclass

from msiops.cli.common.exits import exit_from_exc
from msiops.core.adapters.snapshot import SnapshotAdapter, SnapshotError


@dataclass
class TablesAppContext:
    """Application context holding the resolved database adapter."""

    database: str
    adapter: SnapshotAdapter


def build_tables_context(database: str) -> TablesAppContext:
    """Load the database snapshot and return the tables command context.

    Args:
        database: Path to the JSON snapshot of the resolved database.

    Returns:
        TablesAppContext: Context with a loaded snapshot adapter.
    """
    try:
        adapter = SnapshotAdapter.from_file(database)
    except SnapshotError as exc:
        exit_from_exc(exc, message=str(exc), code=1)
    return TablesAppContext(database=database, adapter=adapter)
