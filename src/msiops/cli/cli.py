"""CLI application for installer database tooling."""

import typer

from msiops.cli.commands.tables import tables_app

app = typer.Typer(
    help="msiops - installer database inspection tooling",
    no_args_is_help=True,
)

app.add_typer(tables_app, name="tables")


if __name__ == "__main__":
    app()
