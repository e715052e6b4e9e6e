"""Tests for codemedic.report.model."""

from __future__ import annotations

import dataclasses

import pytest

from codemedic.report.model import (
    ItemList,
    KeyValueItem,
    KeyValueList,
    Paragraph,
    ReportDocument,
    ReportSection,
    Table,
    TextStyle,
)


def test_table_rejects_rows_of_wrong_width() -> None:
    with pytest.raises(ValueError):
        Table(headers=("A", "B"), rows=[("1", "2"), ("3",)])


def test_table_normalises_sequences_to_tuples() -> None:
    table = Table(headers=["A", "B"], rows=[["1", "2"]])

    assert table.headers == ("A", "B")
    assert table.rows == (("1", "2"),)


def test_key_value_list_of_defaults_style() -> None:
    kv = KeyValueList.of([("Path", "src"), ("Nullable", "✓", TextStyle.SUCCESS)], title="Info")

    assert kv.title == "Info"
    assert kv.items == (
        KeyValueItem("Path", "src", TextStyle.NORMAL),
        KeyValueItem("Nullable", "✓", TextStyle.SUCCESS),
    )


def test_document_is_immutable() -> None:
    document = ReportDocument(
        title="Report",
        metadata={"b": "2", "a": "1"},
        sections=[ReportSection(title="Summary", elements=[Paragraph("hi")])],
    )

    assert list(document.metadata) == ["b", "a"]
    with pytest.raises(TypeError):
        document.metadata["c"] = "3"  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        document.title = "Other"  # type: ignore[misc]
    assert isinstance(document.sections, tuple)
    assert isinstance(document.sections[0].elements, tuple)


def test_document_equality_respects_metadata_order() -> None:
    first = ReportDocument(title="R", metadata={"a": "1", "b": "2"})
    second = ReportDocument(title="R", metadata={"b": "2", "a": "1"})

    assert first != second
    assert first == ReportDocument(title="R", metadata={"a": "1", "b": "2"})


def test_sections_nest_and_iterate_in_order() -> None:
    inner_a = ReportSection(title="A", level=2)
    inner_b = ReportSection(title="B", level=2)
    outer = ReportSection(title="Details", elements=[inner_a, ItemList(items=["x"]), inner_b])

    assert [s.title for s in outer.iter_sections()] == ["A", "B"]


def test_equal_documents_hash_equal() -> None:
    def _build() -> ReportDocument:
        return ReportDocument(
            title="R",
            metadata={"RootPath": "/repo"},
            sections=[
                ReportSection(title="Summary", elements=[Table(headers=("A",), rows=[("1",)])])
            ],
        )

    assert hash(_build()) == hash(_build())
    assert len({_build(), _build()}) == 1
