from typing import Optional

# Environment
from pcjson._core.environment import settings

# Errors
from pcjson._core.error import JsonParseError, TrailingInputError, UnmatchedInputError

# Logging
from pcjson._core.logging import configure_logging, get_logger

# Combinators
from pcjson._core.parsers.combinators import (
    Failure,
    Input,
    ParseResult,
    Parser,
    Success,
    any_char,
    either,
    left,
    literal,
    map_,
    one_or_more,
    pair,
    pred,
    right,
    separate_by,
    whitespace,
    wrap,
    wrap_whitespace,
    zero_or_more,
)

# JSON grammar
from pcjson._core.parsers.json_parser import (
    JsonValue,
    json_parser,
    parse_json,
    try_parse_json,
)

__version__ = '0.1.0'


def init(
    log_level: Optional[str] = None,
    log_rich: Optional[bool] = None,
) -> None:
    """
    Initialize pcjson logging with optional overrides.

    Call once at startup to override the settings read from the environment.
    If not called, logging configures itself on first use.

    Args:
        log_level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR').
            If None, uses the LOG_LEVEL env var or 'INFO'.
        log_rich: Enable rich formatting. If None, uses the LOG_USE_RICH env var.

    Example:
        >>> import pcjson
        >>> pcjson.init(log_level='DEBUG')
    """
    configure_logging(level=log_level, use_rich=log_rich, force=True)


__all__ = [
    # Initialization
    'init',
    'settings',
    'configure_logging',
    'get_logger',
    # JSON
    'JsonValue',
    'json_parser',
    'parse_json',
    'try_parse_json',
    # Errors
    'JsonParseError',
    'UnmatchedInputError',
    'TrailingInputError',
    # Combinators
    'Input',
    'Success',
    'Failure',
    'ParseResult',
    'Parser',
    'literal',
    'pair',
    'map_',
    'left',
    'right',
    'wrap',
    'pred',
    'any_char',
    'zero_or_more',
    'one_or_more',
    'whitespace',
    'wrap_whitespace',
    'separate_by',
    'either',
]
