from __future__ import annotations

from pathlib import Path

import pytest

from exaCli.core.body import load_body
from exaCli.errors import InvalidArguments, InvalidBody, IoError, ParseError


def test_no_source_yields_empty_object():
    assert load_body() == {}
    assert load_body(None, None) == {}


def test_null_body_is_empty_object():
    assert load_body("null") == {}


def test_inline_object_round_trips():
    body = load_body('{"query": "rust", "numResults": 3, "contents": {"text": true}}')
    assert body == {"query": "rust", "numResults": 3, "contents": {"text": True}}


@pytest.mark.parametrize("raw", ["[1, 2]", '"text"', "42", "true"])
def test_non_object_json_is_rejected(raw):
    with pytest.raises(InvalidBody, match="must be a JSON object"):
        load_body(raw)


def test_malformed_json_raises_parse_error():
    with pytest.raises(ParseError):
        load_body("{not json")


def test_both_sources_conflict_even_when_valid(tmp_path: Path):
    path = tmp_path / "body.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(InvalidArguments, match="use only one of"):
        load_body("{}", path)


def test_body_file_is_read(tmp_path: Path):
    path = tmp_path / "body.json"
    path.write_text('{"instructions": "résumé trends"}', encoding="utf-8")
    assert load_body(body_file=path) == {"instructions": "résumé trends"}


def test_missing_body_file_names_path(tmp_path: Path):
    path = tmp_path / "missing.json"
    with pytest.raises(IoError) as excinfo:
        load_body(body_file=path)
    assert str(path) in str(excinfo.value)


def test_body_file_contents_are_validated(tmp_path: Path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(InvalidBody):
        load_body(body_file=path)
