import functools
import logging
from typing import Any, Dict, List, Tuple, Union

from pcjson._core.environment import settings
from pcjson._core.error import JsonParseError, TrailingInputError, UnmatchedInputError
from pcjson._core.logging import get_logger
from pcjson._core.parsers.combinators import (
    Failure,
    Input,
    Parser,
    any_char,
    either,
    left,
    literal,
    map_,
    one_or_more,
    pair,
    pred,
    separate_by,
    wrap,
    wrap_whitespace,
    zero_or_more,
)
from pcjson._core.utils import Timer, truncate

logger = get_logger(__name__)

# JsonValue for type hints
JsonValue = Union[Dict[str, Any], List[Any], str, int, bool, None]

DIGITS = frozenset('0123456789')


#################
# Grammar rules
#
# Every rule is a cached factory: the parser is built on first use and shared
# afterwards. Recursive references go through `either`, which only calls its
# factories while parsing.
#################


@functools.lru_cache(maxsize=None)
def null_parser() -> Parser[None]:
    return map_(literal('null'), lambda _: None)


@functools.lru_cache(maxsize=None)
def bool_parser() -> Parser[bool]:
    return either(
        [
            lambda: map_(literal('true'), lambda _: True),
            lambda: map_(literal('false'), lambda _: False),
        ]
    )


@functools.lru_cache(maxsize=None)
def string_parser() -> Parser[str]:
    """Double-quoted text. Escapes are not interpreted; `"` always ends the string."""
    return wrap(
        '"',
        map_(zero_or_more(pred(any_char(), lambda char: char != '"')), ''.join),
        '"',
    )


@functools.lru_cache(maxsize=None)
def number_parser() -> Parser[int]:
    """Unsigned integers only: no sign, fraction or exponent."""
    return map_(
        one_or_more(pred(any_char(), lambda char: char in DIGITS)),
        lambda digits: int(''.join(digits)),
    )


@functools.lru_cache(maxsize=None)
def array_parser() -> Parser[List[JsonValue]]:
    return wrap('[', separate_by(json_parser(), ','), ']')


def _build_object(members: List[Tuple[str, JsonValue]]) -> Dict[str, JsonValue]:
    obj: Dict[str, JsonValue] = {}
    for key, value in members:
        obj[key] = value
    return obj


@functools.lru_cache(maxsize=None)
def object_parser() -> Parser[Dict[str, JsonValue]]:
    """Members are `"key": value` pairs; a repeated key keeps its last value."""
    member = pair(left(wrap_whitespace(string_parser()), literal(':')), json_parser())
    return wrap('{', map_(separate_by(member, ','), _build_object), '}')


@functools.lru_cache(maxsize=None)
def json_parser() -> Parser[JsonValue]:
    """
    Any JSON value, with surrounding whitespace skipped.

    Alternatives are tried in a fixed order: null, bool, string, number,
    array, object.
    """
    return wrap_whitespace(
        either(
            [
                null_parser,
                bool_parser,
                string_parser,
                number_parser,
                array_parser,
                object_parser,
            ]
        )
    )


#################
# Driver
#################


def parse_json(text: str) -> JsonValue:
    """
    Parse a complete JSON document.

    Args:
        text: The JSON text. Whitespace around the value is allowed, anything
            else after it is not.

    Returns:
        The parsed value as native Python objects (None, bool, str, int,
        list, dict).

    Raises:
        UnmatchedInputError: No JSON value could be matched; `remaining`
            holds the input where matching failed.
        TrailingInputError: A value was parsed but input is left over;
            `remaining` holds the leftover text.
    """
    if not isinstance(text, str):
        raise TypeError(f'parse_json expects str, got {type(text).__name__}')

    logger.debug(f'Parsing JSON input ({len(text)} chars)')
    with Timer() as timer:
        result = json_parser()(Input(text))

    if isinstance(result, Failure):
        remaining = result.remaining.rest
        logger.debug(
            f'No JSON value matched at: '
            f'{truncate(remaining, settings.error_snippet_length)!r}'
        )
        raise UnmatchedInputError(remaining)

    if len(result.remaining):
        remaining = result.remaining.rest
        logger.debug(
            f'Trailing input after JSON value: '
            f'{truncate(remaining, settings.error_snippet_length)!r}'
        )
        raise TrailingInputError(remaining)

    if settings.debug:
        logger.log_performance(
            'parse_json', timer.elapsed_time, level=logging.DEBUG, chars=len(text)
        )
    return result.value


def try_parse_json(text: str, default: Any = None) -> JsonValue:
    """Parse like `parse_json`, but return `default` when the text is not valid."""
    try:
        return parse_json(text)
    except JsonParseError as e:
        logger.debug(f'Falling back to default value: {e.message}')
        return default
