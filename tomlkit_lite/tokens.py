"""Token, span and error types produced by the TOML tokenizer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

__all__ = [
    "Span",
    "TokenKind",
    "Token",
    "TokenError",
    "InvalidCharInString",
    "InvalidEscape",
    "InvalidHexEscape",
    "InvalidEscapeValue",
    "NewlineInString",
    "UnexpectedChar",
    "UnterminatedString",
    "NewlineInTableKey",
    "MultilineStringKey",
    "Wanted",
    "is_keylike",
    "NEWLINE",
    "EQUALS",
    "PERIOD",
    "COMMA",
    "COLON",
    "PLUS",
    "LEFT_BRACE",
    "RIGHT_BRACE",
    "LEFT_BRACKET",
    "RIGHT_BRACKET",
]


class Span(NamedTuple):
    """A half-open range of positions in the input where a token lies."""

    start: int
    end: int


class TokenKind(enum.Enum):
    WHITESPACE = "whitespace"
    NEWLINE = "newline"
    COMMENT = "comment"
    EQUALS = "equals"
    PERIOD = "period"
    COMMA = "comma"
    COLON = "colon"
    PLUS = "plus"
    LEFT_BRACE = "left_brace"
    RIGHT_BRACE = "right_brace"
    LEFT_BRACKET = "left_bracket"
    RIGHT_BRACKET = "right_bracket"
    KEYLIKE = "keylike"
    STRING = "string"


_DESCRIPTIONS = {
    TokenKind.KEYLIKE: "an identifier",
    TokenKind.EQUALS: "an equals",
    TokenKind.PERIOD: "a period",
    TokenKind.COMMENT: "a comment",
    TokenKind.NEWLINE: "a newline",
    TokenKind.WHITESPACE: "whitespace",
    TokenKind.COMMA: "a comma",
    TokenKind.RIGHT_BRACE: "a right brace",
    TokenKind.LEFT_BRACE: "a left brace",
    TokenKind.RIGHT_BRACKET: "a right bracket",
    TokenKind.LEFT_BRACKET: "a left bracket",
    TokenKind.COLON: "a colon",
    TokenKind.PLUS: "a plus",
}


@dataclass(frozen=True)
class Token:
    """A lexical token.

    ``text`` holds the source slice for whitespace, comments, bare keys and
    strings; ``value`` is the decoded content of a string token.
    """

    kind: TokenKind
    text: str = ""
    value: str = ""
    multiline: bool = False

    def describe(self) -> str:
        """Return a short human-readable description of the token."""
        if self.kind is TokenKind.STRING:
            return "a multiline string" if self.multiline else "a string"
        return _DESCRIPTIONS[self.kind]


NEWLINE = Token(TokenKind.NEWLINE)
EQUALS = Token(TokenKind.EQUALS)
PERIOD = Token(TokenKind.PERIOD)
COMMA = Token(TokenKind.COMMA)
COLON = Token(TokenKind.COLON)
PLUS = Token(TokenKind.PLUS)
LEFT_BRACE = Token(TokenKind.LEFT_BRACE)
RIGHT_BRACE = Token(TokenKind.RIGHT_BRACE)
LEFT_BRACKET = Token(TokenKind.LEFT_BRACKET)
RIGHT_BRACKET = Token(TokenKind.RIGHT_BRACKET)


def is_keylike(ch: str) -> bool:
    """Tell whether ``ch`` may appear in a bare key."""
    return (
        "A" <= ch <= "Z"
        or "a" <= ch <= "z"
        or "0" <= ch <= "9"
        or ch == "-"
        or ch == "_"
    )


_SIMPLE_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
}


def _escape_char(ch: str) -> str:
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch]
    if " " <= ch <= "~":
        return ch
    return f"\\u{{{ord(ch):x}}}"


class TokenError(Exception):
    """Base class of tokenizer errors; ``at`` is the offending position."""

    def __init__(self, at: int, *details: object) -> None:
        super().__init__(at, *details)
        self.at = at

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    __hash__ = Exception.__hash__


class InvalidCharInString(TokenError):
    def __init__(self, at: int, char: str) -> None:
        super().__init__(at, char)
        self.char = char

    def __str__(self) -> str:
        return f"invalid character in string: `{_escape_char(self.char)}`"


class InvalidEscape(TokenError):
    def __init__(self, at: int, char: str) -> None:
        super().__init__(at, char)
        self.char = char

    def __str__(self) -> str:
        return f"invalid escape character in string: `{_escape_char(self.char)}`"


class InvalidHexEscape(TokenError):
    def __init__(self, at: int, char: str) -> None:
        super().__init__(at, char)
        self.char = char

    def __str__(self) -> str:
        return (
            f"invalid hex escape character in string: `{_escape_char(self.char)}`"
        )


class InvalidEscapeValue(TokenError):
    def __init__(self, at: int, value: int) -> None:
        super().__init__(at, value)
        self.value = value

    def __str__(self) -> str:
        return f"invalid escape value: `{self.value}`"


class NewlineInString(TokenError):
    def __str__(self) -> str:
        return "newline in string found"


class UnexpectedChar(TokenError):
    def __init__(self, at: int, char: str) -> None:
        super().__init__(at, char)
        self.char = char

    def __str__(self) -> str:
        return f"unexpected character found: `{_escape_char(self.char)}`"


class UnterminatedString(TokenError):
    def __str__(self) -> str:
        return "unterminated string"


class NewlineInTableKey(TokenError):
    def __str__(self) -> str:
        return "found newline in table key"


class MultilineStringKey(TokenError):
    def __str__(self) -> str:
        return "multiline strings are not allowed for key"


class Wanted(TokenError):
    def __init__(self, at: int, expected: str, found: str) -> None:
        super().__init__(at, expected, found)
        self.expected = expected
        self.found = found

    def __str__(self) -> str:
        return f"expected {self.expected}, found {self.found}"