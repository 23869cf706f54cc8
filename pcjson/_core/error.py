from __future__ import annotations

from typing import Optional

from pcjson._core.environment import settings
from pcjson._core.utils import truncate


class CustomBaseException(Exception):
    """
    Base exception class.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class JsonParseError(CustomBaseException):
    """
    Raised by the driver when a text is not a complete JSON value.

    `remaining` holds the full unparsed suffix of the input, which is the
    only diagnostic the parser produces. The message shows a shortened form.
    """

    reason = 'Could not parse JSON'

    def __init__(self, remaining: str, snippet_length: Optional[int] = None):
        self.remaining = remaining
        limit = snippet_length or settings.error_snippet_length
        super().__init__(f'{self.reason} at: {truncate(remaining, limit)!r}')


class UnmatchedInputError(JsonParseError):
    """Raised when no JSON value can be matched at the failing input."""

    reason = 'No JSON value matched'


class TrailingInputError(JsonParseError):
    """Raised when a JSON value was parsed but unconsumed input remains."""

    reason = 'Unexpected trailing input'
