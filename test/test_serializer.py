"""Unit tests for JSON serialization of parser output."""

import json

import pytest

import cifmark
from cifmark import serializer


@pytest.mark.unit
class TestParseToJson:
    """Test suite for `parse_to_json`."""

    def test_single_item_document(self, single_item_content: str) -> None:
        """Test the exact document of a single bare item."""
        document = cifmark.parse_to_json(single_item_content)

        assert document == (
            '{"loops":[{"start_line":0,"category_name":"_entry",'
            '"items":[{"line":0,"start":7,"length":2,"name":"id"}],'
            '"names_defined":true,"is_in_loop_block":false,"processed_value_count":1,'
            '"data_lines":[{"line":0,"value_ranges":[{"start":10,"length":4,"column_index":0}]}]}],'
            '"tokens":[{"line":0,"start":0,"length":6,"token_type":1},'
            '{"line":0,"start":6,"length":3,"token_type":2},'
            '{"line":0,"start":10,"length":4,"token_type":2,"item_name":"_entry.id"}]}'
        )

    def test_empty_document(self) -> None:
        """Test the document of an empty input."""
        assert cifmark.parse_to_json("") == '{"loops":[],"tokens":[]}'

    def test_item_name_omitted(self, atom_site_loop_content: str) -> None:
        """Test that tokens without item name have no `item_name` field."""
        data = json.loads(cifmark.parse_to_json(atom_site_loop_content))

        for token in data["tokens"]:
            assert set(token) in (
                {"line", "start", "length", "token_type"},
                {"line", "start", "length", "token_type", "item_name"},
            )
            assert token.get("item_name", "") is not None

    def test_field_order(self, atom_site_loop_content: str) -> None:
        """Test the field names and their order in the document."""
        data = json.loads(cifmark.parse_to_json(atom_site_loop_content))

        assert list(data) == ["loops", "tokens"]
        block = data["loops"][0]
        assert list(block) == [
            "start_line", "category_name", "items", "names_defined",
            "is_in_loop_block", "processed_value_count", "data_lines",
        ]
        assert list(block["items"][0]) == ["line", "start", "length", "name"]
        assert list(block["data_lines"][0]) == ["line", "value_ranges"]
        assert list(block["data_lines"][0]["value_ranges"][0]) == ["start", "length", "column_index"]

    def test_non_ascii_not_escaped(self) -> None:
        """Test that non-ASCII text is written as is."""
        document = cifmark.parse_to_json("_a.b Å")

        assert '"item_name":"_a.b"' in document
        assert "\\u" not in document

    def test_offset_unit(self) -> None:
        """Test that the offset unit is passed to the parser."""
        data = json.loads(cifmark.parse_to_json("# Å", offset_unit="utf-8"))

        assert data["tokens"][0]["length"] == 4

    def test_encoding_failure(self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
        """Test that an encoding failure gives an empty string and a warning."""
        def failing_to_json(result: cifmark.ParseResult) -> str:
            raise TypeError("not serializable")

        monkeypatch.setattr(serializer, "to_json", failing_to_json)
        with caplog.at_level("WARNING", logger="cifmark.serializer"):
            assert serializer.parse_to_json("_a.b 1") == ""
        assert "not serializable" in caplog.text


@pytest.mark.unit
class TestRoundTrip:
    """Test suite for decoding JSON documents back into parse results."""

    def test_round_trip(self, any_content: str) -> None:
        """Test that decoding a document gives back an equal result."""
        result = cifmark.parse(any_content)

        decoded = cifmark.from_json(cifmark.to_json(result))

        assert decoded == result
        assert cifmark.to_json(decoded) == cifmark.to_json(result)

    def test_decode_bytes(self, single_item_content: str) -> None:
        """Test decoding a document given as bytes."""
        document = cifmark.parse_to_json(single_item_content).encode("utf-8")

        assert cifmark.from_json(document) == cifmark.parse(single_item_content)

    def test_decode_invalid_json(self) -> None:
        """Test that invalid JSON raises a `ValueError`."""
        with pytest.raises(ValueError):
            cifmark.from_json("{not json")

    def test_decode_missing_field(self) -> None:
        """Test that a document missing a field raises a `KeyError`."""
        with pytest.raises(KeyError):
            cifmark.from_json('{"loops":[]}')
