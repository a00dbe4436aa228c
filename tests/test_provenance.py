import pytest

from msiops.core.provenance import describe_tables, summarize
from msiops.core.tables import TableOperation, TableRef
from msiops.core.transforms import TransformViewRecord


class _Adapter:
    path = "C:\\build\\product.msi"

    def __init__(self):
        self.layers = {
            "p1.msp": [TransformViewRecord(table="Feature", column="Title", row="F1")],
            "t1.mst": [TransformViewRecord(table="Icon", column="CREATE")],
            "t2.mst": [TransformViewRecord(table="Binary", column="DROP")],
        }
        self.view_requests: list[str] = []

    def list_tables(self) -> list[TableRef]:
        return [
            TableRef(name="Feature", rows=12),
            TableRef(name="Icon", rows=1),
            TableRef(name="Binary", rows=3),
            TableRef(name="Property", rows=40),
        ]

    def has_layer(self, layer: str) -> bool:
        return layer in self.layers

    def transform_view_records(self, layer: str) -> list[TransformViewRecord]:
        self.view_requests.append(layer)
        return self.layers[layer]


def test_describe_tables_records_layers_in_order():
    infos = describe_tables(
        _Adapter(), patches=["p1.msp"], transforms=["t2.mst", "t1.mst"]
    )

    assert [i.table for i in infos] == ["Feature", "Icon", "Binary", "Property"]
    assert all(i.patches == ("p1.msp",) for i in infos)
    assert all(i.transforms == ("t2.mst", "t1.mst") for i in infos)
    assert all(i.operation is TableOperation.NONE for i in infos)
    assert all(i.path == "C:\\build\\product.msi" for i in infos)


def test_describe_tables_without_layers_has_empty_layers():
    infos = describe_tables(_Adapter())

    assert infos[0].patches == ()
    assert infos[0].transforms == ()


def test_describe_tables_classifies_with_view():
    adapter = _Adapter()
    infos = describe_tables(adapter, transforms=["t1.mst"], view="t1.mst")

    by_table = {i.table: i.operation for i in infos}
    assert adapter.view_requests == ["t1.mst"]
    assert by_table["Icon"] is TableOperation.ADD
    assert by_table["Feature"] is TableOperation.NONE


def test_describe_tables_filters_on_regex():
    infos = describe_tables(_Adapter(), name_regex=r"^(Feature|Icon)$")

    assert [i.table for i in infos] == ["Feature", "Icon"]


def test_describe_tables_rejects_unknown_layers_before_loading_view():
    adapter = _Adapter()

    with pytest.raises(ValueError, match="missing.mst"):
        describe_tables(adapter, transforms=["missing.mst"], view="t1.mst")
    assert adapter.view_requests == []


def test_describe_tables_rejects_invalid_regex():
    with pytest.raises(ValueError, match="Invalid regex"):
        describe_tables(_Adapter(), name_regex="(")


def test_summarize_counts_rows_and_operations():
    adapter = _Adapter()
    infos = describe_tables(adapter, patches=["p1.msp"], view="p1.msp")

    result = summarize(adapter, infos)

    assert result.path == adapter.path
    assert result.tables == 4
    assert result.rows == 56
    assert result.modified == 1
    assert result.added == 0
    assert result.dropped == 0
    assert result.unchanged == 3


def test_summarize_only_counts_described_rows():
    adapter = _Adapter()
    infos = describe_tables(adapter, name_regex="^Feature$")

    assert summarize(adapter, infos).rows == 12
