"""Commands for inspecting installer database tables."""

from __future__ import annotations

import typer

from msiops.cli.common.context import TablesAppContext, build_tables_context
from msiops.cli.common.exits import die, warn_exit
from msiops.cli.common.options import (
    DatabaseOpt,
    NameOpt,
    PatchOpt,
    PickOpt,
    TransformOpt,
    ViewOpt,
)
from msiops.cli.common.output import out
from msiops.cli.tui import select_tables
from msiops.core.provenance import describe_tables, summarize
from msiops.core.tables import TableInfo

tables_app = typer.Typer(
    help="Inspect tables and the patches/transforms applied to them.",
    no_args_is_help=True,
)


@tables_app.callback()
def _init(ctx: typer.Context, database: str = DatabaseOpt):
    """Load the resolved database once per invocation."""
    ctx.obj = build_tables_context(database)


def _describe_or_exit(
    appctx: TablesAppContext,
    *,
    patch: list[str],
    transform: list[str],
    view: str | None,
    name: str | None = None,
) -> list[TableInfo]:
    """Describe the database tables and convert input errors into CLI exits."""
    try:
        with out.status("Loading tables..."):
            return describe_tables(
                appctx.adapter,
                patches=patch,
                transforms=transform,
                view=view,
                name_regex=name,
            )
    except ValueError as exc:
        die(str(exc), code=2)


@tables_app.command("list")
def list_tables(
    ctx: typer.Context,
    patch: list[str] = PatchOpt,
    transform: list[str] = TransformOpt,
    view: str | None = ViewOpt,
    name: str | None = NameOpt,
    pick: bool = PickOpt,
):
    """
    List tables with the operation performed on each and the applied layers.
    """
    appctx: TablesAppContext = ctx.obj
    infos = _describe_or_exit(
        appctx, patch=patch, transform=transform, view=view, name=name
    )

    if not infos:
        warn_exit("No tables found", code=0)

    if pick:
        infos = select_tables(infos)
        if not infos:
            warn_exit("No tables selected", code=0)

    out.header("Tables")
    out.info(f"Database: {appctx.adapter.path} | Tables: {len(infos)}")
    out.table_infos_table(infos, title="Tables")


@tables_app.command()
def summary(
    ctx: typer.Context,
    patch: list[str] = PatchOpt,
    transform: list[str] = TransformOpt,
    view: str | None = ViewOpt,
):
    """
    Summarize rows and table operations for the resolved database.
    """
    appctx: TablesAppContext = ctx.obj
    infos = _describe_or_exit(appctx, patch=patch, transform=transform, view=view)
    result = summarize(appctx.adapter, infos)

    out.header("Summary")
    out.kv(
        {
            "Database": result.path,
            "Patches": ", ".join(patch) or "-",
            "Transforms": ", ".join(transform) or "-",
            "Tables": result.tables,
            "Rows": result.rows,
            "Added": result.added,
            "Dropped": result.dropped,
            "Modified": result.modified,
            "Unchanged": result.unchanged,
        }
    )
