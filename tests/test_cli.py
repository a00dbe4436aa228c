import json

import pytest
from typer.testing import CliRunner

from msiops.cli.cli import app

runner = CliRunner()


@pytest.fixture
def database(tmp_path) -> str:
    file = tmp_path / "product.json"
    file.write_text(
        json.dumps(
            {
                "path": "product.msi",
                "tables": [{"name": "Feature", "rows": 2}, {"name": "Icon", "rows": 1}],
                "layers": {
                    "t1.mst": [{"table": "Icon", "column": "CREATE"}],
                    "p1.msp": [],
                },
            }
        ),
        encoding="utf-8",
    )
    return str(file)


def test_tables_list_shows_operations(database):
    result = runner.invoke(
        app,
        ["tables", "-d", database, "list", "--transform", "t1.mst", "--view", "t1.mst"],
    )

    assert result.exit_code == 0, result.output
    assert "Feature" in result.output
    assert "Add" in result.output


def test_tables_list_warns_when_nothing_matches(database):
    result = runner.invoke(app, ["tables", "-d", database, "list", "--name", "^Nope$"])

    assert result.exit_code == 0
    assert "No tables found" in result.output


def test_tables_list_rejects_unknown_layer(database):
    result = runner.invoke(app, ["tables", "-d", database, "list", "--patch", "x.msp"])

    assert result.exit_code == 2
    assert "x.msp" in result.output


def test_tables_summary(database):
    result = runner.invoke(
        app, ["tables", "-d", database, "summary", "--patch", "p1.msp"]
    )

    assert result.exit_code == 0, result.output
    assert "Rows" in result.output
    assert "p1.msp" in result.output


def test_missing_database_exits_with_error(tmp_path):
    result = runner.invoke(
        app, ["tables", "-d", str(tmp_path / "missing.json"), "list"]
    )

    assert result.exit_code == 1
    assert "not found" in result.output


def test_directory_database_exits_with_error(tmp_path):
    result = runner.invoke(app, ["tables", "-d", str(tmp_path), "list"])

    assert result.exit_code == 1
    assert "Cannot read" in result.output
