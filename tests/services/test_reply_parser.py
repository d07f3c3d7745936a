"""Unit tests for lookup reply parsing."""

import pytest

from vocab_lens.services import MissingFieldError, ParseError
from vocab_lens.services.enrichment import parse_reply, strip_fences


class TestStripFences:
    def test_plain_json_untouched(self):
        assert strip_fences('{"translation":"house"}') == '{"translation":"house"}'

    def test_json_fence_removed(self):
        assert strip_fences('```json\n{"translation":"house"}\n```') == '{"translation":"house"}'

    def test_bare_fence_and_whitespace_removed(self):
        assert strip_fences('  \n```\n{"a": 1}\n```\n  ') == '{"a": 1}'

    def test_single_line_fence(self):
        assert strip_fences('```json {"a": 1}```') == '{"a": 1}'


class TestParseReply:
    def test_translation_and_notes(self):
        fields = parse_reply('{"translation": "negation", "notes": "from \'nein\'"}')
        assert fields == {"translation": "negation", "notes": "from 'nein'"}

    def test_fenced_reply(self):
        fields = parse_reply('```json\n{"translation": "house", "notes": ""}\n```')
        assert fields == {"translation": "house", "notes": ""}

    def test_missing_notes_defaults_to_empty(self):
        assert parse_reply('{"translation": "house"}')["notes"] == ""

    def test_null_notes_defaults_to_empty(self):
        assert parse_reply('{"translation": "house", "notes": null}')["notes"] == ""

    def test_values_are_stripped(self):
        assert parse_reply('{"translation": "  house "}')["translation"] == "house"

    def test_invalid_json_raises_parse_error_with_raw_text(self):
        with pytest.raises(ParseError) as excinfo:
            parse_reply("Sure! The word means house.")
        assert excinfo.value.raw_text == "Sure! The word means house."
        assert "Sure! The word means house." in str(excinfo.value)
        assert not isinstance(excinfo.value, MissingFieldError)

    def test_non_object_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_reply('["house"]')

    def test_missing_translation_raises_missing_field(self):
        with pytest.raises(MissingFieldError):
            parse_reply('{"notes": "something"}')

    def test_non_string_translation_raises_missing_field(self):
        with pytest.raises(MissingFieldError):
            parse_reply('{"translation": 42}')

    def test_non_string_notes_raises_missing_field(self):
        with pytest.raises(MissingFieldError):
            parse_reply('{"translation": "house", "notes": ["a"]}')

    def test_translate_reply_without_optional_fields(self):
        assert parse_reply('{"translation": "Good morning"}', optional=()) == {"translation": "Good morning"}

    def test_empty_reply_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_reply("")
