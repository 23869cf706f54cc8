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
from pcjson._core.parsers.json_parser import (
    JsonValue,
    array_parser,
    bool_parser,
    json_parser,
    null_parser,
    number_parser,
    object_parser,
    parse_json,
    string_parser,
    try_parse_json,
)
