from msiops.cli.tui import _MAX_TABLE_NAME_WIDTH, _table_choice_title, _truncate
from msiops.core.tables import TableInfo, TableOperation


def test_table_choice_title_aligns_operation_column():
    first = _table_choice_title(
        TableInfo(table="Feature", operation=TableOperation.MODIFY), name_width=12
    )
    second = _table_choice_title(
        TableInfo(table="Icon", operation=TableOperation.ADD), name_width=12
    )

    assert first.startswith("Feature")
    assert second.startswith("Icon")
    assert first.index("[") == second.index("[")


def test_table_choice_title_omits_none_operation():
    assert _table_choice_title(TableInfo(table="Property"), name_width=12) == "Property"


def test_table_choice_title_truncates_long_names():
    long_name = "x" * (_MAX_TABLE_NAME_WIDTH + 10)
    rendered = _table_choice_title(
        TableInfo(table=long_name, operation=TableOperation.DROP),
        name_width=_MAX_TABLE_NAME_WIDTH,
    )

    assert "..." in rendered
    assert "[Drop]" in rendered
    assert _truncate(long_name, _MAX_TABLE_NAME_WIDTH).endswith("...")
