"""Common CLI options for the CLI."""

import typer

DatabaseOpt = typer.Option(
    ...,
    "--database",
    "-d",
    envvar="MSIOPS_DATABASE",
    help="JSON snapshot of the resolved installer database",
)

PatchOpt = typer.Option(
    [],
    "--patch",
    help="Patch applied to the database, in order. This is reusable.",
    show_default=False,
)

TransformOpt = typer.Option(
    [],
    "--transform",
    help="Transform applied to the database, in order. This is reusable.",
    show_default=False,
)

ViewOpt = typer.Option(
    None,
    "--view",
    help="Patch or transform whose changes classify each table's operation",
)

NameOpt = typer.Option(
    None,
    "--name",
    help="Regex on table name",
)

PickOpt = typer.Option(
    False,
    "--pick",
    help="Interactively pick which tables to show",
)
