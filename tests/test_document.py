"""Tests for the canonical document model."""

from toonplay.document import DocumentModel, ParseResult
from toonplay.formats import JsonAdapter


def test_successful_parse_replaces_document():
    model = DocumentModel()
    result = model.set_from_text('{"a": 1}', JsonAdapter())

    assert result.ok
    assert result.document == {"a": 1}
    assert model.document == {"a": 1}
    assert model.error is None


def test_failed_parse_keeps_document_and_records_error():
    model = DocumentModel({"a": 1})
    result = model.set_from_text('{"a": ', JsonAdapter())

    assert not result.ok
    assert result.error
    assert model.has_error
    assert model.error == result.error
    assert model.document == {"a": 1}


def test_next_successful_parse_clears_error():
    model = DocumentModel()
    model.set_from_text("{", JsonAdapter())
    model.set_from_text("[1, 2]", JsonAdapter())

    assert not model.has_error
    assert model.document == [1, 2]


def test_replace_clears_error():
    model = DocumentModel()
    model.set_from_text("{", JsonAdapter())
    model.replace({"b": 2})

    assert model.error is None
    assert model.document == {"b": 2}


def test_snapshot_is_independent_copy():
    model = DocumentModel({"items": [1, 2]})
    snap = model.snapshot()
    snap["items"].append(3)

    assert model.document == {"items": [1, 2]}


def test_parse_result_defaults():
    assert ParseResult().ok
    assert not ParseResult(error="boom").ok
