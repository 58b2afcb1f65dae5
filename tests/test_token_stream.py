"""Tests for the pull-based tokenizer."""
import pytest

from exceptions import DecodeError
from token_stream import TokenStream


class TestTokenStream:
    """Pulling, expecting and skipping tokens."""

    def test_next_yields_events(self, stream):
        tokens = TokenStream(stream('{"a": [1, "x"]}'))

        assert tokens.next() == ('start_map', None)
        assert tokens.next() == ('map_key', 'a')
        assert tokens.next() == ('start_array', None)
        assert tokens.next() == ('number', 1)
        assert tokens.next() == ('string', 'x')
        assert tokens.next() == ('end_array', None)
        assert tokens.next() == ('end_map', None)

    def test_skip_value_consumes_nested_value(self, stream):
        tokens = TokenStream(stream('{"skip": {"a": [1, {"b": 2}]}, "keep": true}'))
        tokens.expect('start_map')
        tokens.expect('map_key')

        tokens.skip_value()

        assert tokens.next() == ('map_key', 'keep')
        assert tokens.next() == ('boolean', True)

    def test_skip_value_scalar(self, stream):
        tokens = TokenStream(stream('[1, 2]'))
        tokens.expect('start_array')

        tokens.skip_value()

        assert tokens.next() == ('number', 2)

    def test_floats_are_plain_floats(self, stream):
        tokens = TokenStream(stream('[10.5]'))
        tokens.next()

        event, value = tokens.next()
        assert event == 'number'
        assert isinstance(value, float)

    def test_multiple_top_level_values(self, stream):
        events = [event for event, _ in TokenStream(stream('{} {}'))]

        assert events == ['start_map', 'end_map', 'start_map', 'end_map']

    def test_expect_rejects_other_event(self, stream):
        tokens = TokenStream(stream('[1]'))

        with pytest.raises(DecodeError):
            tokens.expect('start_map')

    def test_next_at_end_of_document(self, stream):
        tokens = TokenStream(stream('[1]'))
        for _ in range(3):
            tokens.next()

        with pytest.raises(DecodeError, match='Unexpected end'):
            tokens.next()

    def test_malformed_input(self, stream):
        with pytest.raises(DecodeError, match='Malformed'):
            list(TokenStream(stream('{"a": nope}')))

    def test_truncated_input(self, stream):
        with pytest.raises(DecodeError):
            list(TokenStream(stream('{"a": [1, 2')))
