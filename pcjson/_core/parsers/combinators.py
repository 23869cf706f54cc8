"""
Parser combinators over an in-memory text.

A parser is a stateless function from an `Input` view to a `ParseResult`:
either a `Success` holding the remaining input and the parsed value, or a
`Failure` holding the input at which matching stopped. Larger parsers are
built by composing the primitives below. Failure is always returned, never
raised, so alternation and repetition can backtrack by simply retrying from
an earlier `Input`.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Sequence, Tuple, TypeVar, Union

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
U = TypeVar('U')


@dataclass(frozen=True)
class Input:
    """Immutable view of the suffix of `text` starting at `pos`."""

    text: str
    pos: int = 0

    @property
    def rest(self) -> str:
        """The unconsumed suffix as a string."""
        return self.text[self.pos :]

    def __len__(self) -> int:
        return len(self.text) - self.pos

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def peek(self) -> str:
        """Return the next character. The view must not be empty."""
        return self.text[self.pos]

    def advance(self, count: int) -> 'Input':
        return Input(self.text, self.pos + count)

    def __repr__(self) -> str:
        return f'Input({self.pos}, {self.rest!r})'


@dataclass(frozen=True)
class Success(Generic[T]):
    remaining: Input
    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    remaining: Input

    @property
    def is_success(self) -> bool:
        return False


ParseResult = Union[Success[T], Failure]


class Parser(Generic[T]):
    """
    A composable parser.

    Wraps a function `Input -> ParseResult[T]`. Instances carry no state
    besides that function, so one parser can be applied any number of times,
    recursively or from several threads.
    """

    def __init__(self, func: Callable[[Input], ParseResult[T]], name: str = 'parser'):
        self._func = func
        self.name = name

    def __call__(self, inp: Input) -> ParseResult[T]:
        return self._func(inp)

    def run(self, text: str) -> ParseResult[T]:
        """Apply the parser to the start of `text`."""
        return self(Input(text))

    def map(self, fn: Callable[[T], U]) -> 'Parser[U]':
        return map_(self, fn)

    def filter(self, predicate: Callable[[T], bool]) -> 'Parser[T]':
        return pred(self, predicate)

    def __repr__(self) -> str:
        return f'<Parser {self.name}>'


def literal(expected: str) -> Parser[None]:
    """Match `expected` exactly, producing no value."""

    def run(inp: Input) -> ParseResult[None]:
        if inp.startswith(expected):
            return Success(inp.advance(len(expected)), None)
        return Failure(inp)

    return Parser(run, f'literal({expected!r})')


def pair(parser1: Parser[T1], parser2: Parser[T2]) -> Parser[Tuple[T1, T2]]:
    """
    Run two parsers in sequence.

    Args:
        parser1: Applied to the input.
        parser2: Applied to what `parser1` left over.

    Returns:
        A parser producing `(value1, value2)` with `parser2`'s remainder.
        The first failure is passed through as-is; `parser2` is not tried
        when `parser1` fails.
    """

    def run(inp: Input) -> ParseResult[Tuple[T1, T2]]:
        first = parser1(inp)
        if isinstance(first, Failure):
            return first
        second = parser2(first.remaining)
        if isinstance(second, Failure):
            return second
        return Success(second.remaining, (first.value, second.value))

    return Parser(run, f'pair({parser1.name}, {parser2.name})')


def map_(parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform the value of a successful parse, keeping its remainder."""

    def run(inp: Input) -> ParseResult[U]:
        result = parser(inp)
        if isinstance(result, Failure):
            return result
        return Success(result.remaining, fn(result.value))

    return Parser(run, parser.name)


def left(parser1: Parser[T1], parser2: Parser[Any]) -> Parser[T1]:
    return map_(pair(parser1, parser2), lambda values: values[0])


def right(parser1: Parser[Any], parser2: Parser[T2]) -> Parser[T2]:
    return map_(pair(parser1, parser2), lambda values: values[1])


def wrap(before: str, parser: Parser[T], after: str) -> Parser[T]:
    """Match `before`, then `parser`, then `after`, keeping the middle value."""
    return right(literal(before), left(parser, literal(after)))


def pred(parser: Parser[T], predicate: Callable[[T], bool]) -> Parser[T]:
    """
    Accept a successful parse only if `predicate(value)` holds.

    A rejected value becomes a `Failure` at the original input rather than at
    the parser's remainder, so nothing is consumed and the caller can try
    something else at the same position.
    """

    def run(inp: Input) -> ParseResult[T]:
        result = parser(inp)
        if isinstance(result, Failure):
            return result
        if not predicate(result.value):
            return Failure(inp)
        return result

    return Parser(run, f'pred({parser.name})')


def any_char() -> Parser[str]:
    """Consume a single character of any kind."""

    def run(inp: Input) -> ParseResult[str]:
        if len(inp) == 0:
            return Failure(inp)
        return Success(inp.advance(1), inp.peek())

    return Parser(run, 'any_char')


def zero_or_more(parser: Parser[T]) -> Parser[List[T]]:
    """
    Apply `parser` repeatedly until it fails.

    Always succeeds, possibly with an empty list and the input untouched.
    `parser` must consume at least one character whenever it succeeds,
    otherwise this never terminates.
    """

    def run(inp: Input) -> ParseResult[List[T]]:
        values: List[T] = []
        rest = inp
        while True:
            result = parser(rest)
            if isinstance(result, Failure):
                break
            values.append(result.value)
            rest = result.remaining
        return Success(rest, values)

    return Parser(run, f'zero_or_more({parser.name})')


def one_or_more(parser: Parser[T]) -> Parser[List[T]]:
    return map_(
        pair(parser, zero_or_more(parser)),
        lambda values: [values[0], *values[1]],
    )


def whitespace() -> Parser[str]:
    """Consume one whitespace character."""
    return pred(any_char(), lambda char: char.strip() == '')


def wrap_whitespace(parser: Parser[T]) -> Parser[T]:
    """Skip any whitespace before and after `parser`."""
    return right(
        zero_or_more(whitespace()),
        left(parser, zero_or_more(whitespace())),
    )


def separate_by(parser: Parser[T], sep: str) -> Parser[List[T]]:
    """
    Parse one or more `parser` matches separated by the literal `sep`.

    There is no leading or trailing separator and the list is never empty.
    A separator that is not followed by a match is left unconsumed.
    """
    return map_(
        pair(parser, zero_or_more(right(literal(sep), parser))),
        lambda values: [values[0], *values[1]],
    )


def either(alternatives: Sequence[Callable[[], Parser[T]]]) -> Parser[T]:
    """
    Ordered choice between alternatives.

    Args:
        alternatives: Zero-argument factories returning parsers. They are
            called when the choice runs, not when it is built, so grammar
            rules may refer to each other recursively.

    Returns:
        A parser that tries each alternative on the same input, in order,
        and returns the first success. When every alternative fails the
        failure is reported at the original input.
    """
    alternatives = tuple(alternatives)

    def run(inp: Input) -> ParseResult[T]:
        for factory in alternatives:
            result = factory()(inp)
            if isinstance(result, Success):
                return result
        return Failure(inp)

    return Parser(run, 'either')


__all__ = [
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
