from typing import Any, BinaryIO, TypeAlias

import ijson

from exceptions import DecodeError

Token: TypeAlias = tuple[str, Any]

START_EVENTS = {'start_map': 'end_map', 'start_array': 'end_array'}


class TokenStream:
    """
    Pull-based view over the ijson event stream of a binary input.

    Tokens are `(event, value)` pairs as produced by `ijson.basic_parse`.
    Several concatenated top-level JSON values are accepted.
    Tokenizer failures are raised as `DecodeError`.
    """

    def __init__(self, stream: BinaryIO):
        self._events = ijson.basic_parse(stream, use_float=True, multiple_values=True)

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        try:
            return next(self._events)
        except ijson.JSONError as e:
            raise DecodeError(f'Malformed document: {e}') from e
        except ValueError as e:
            # UnicodeDecodeError and invalid number literals
            raise DecodeError(f'Malformed document: {e}') from e

    def next(self) -> Token:
        """Return the next token; the document must not end here."""
        try:
            return self.__next__()
        except StopIteration:
            raise DecodeError('Unexpected end of document') from None

    def expect(self, *events: str) -> Token:
        event, value = self.next()

        if event not in events:
            raise DecodeError(f'Expected {" or ".join(events)}, got {event}')

        return event, value

    def skip(self, event: str) -> None:
        """Consume the rest of a value whose first token `event` was already read."""
        if event not in START_EVENTS:
            return

        depth = 1

        while depth:
            event, _ = self.next()

            if event in START_EVENTS:
                depth += 1
            elif event in ('end_map', 'end_array'):
                depth -= 1

    def skip_value(self) -> None:
        event, _ = self.next()

        if event in ('end_map', 'end_array'):
            raise DecodeError(f'Expected a value, got {event}')

        self.skip(event)
