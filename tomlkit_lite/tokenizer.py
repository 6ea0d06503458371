"""A streaming tokenizer for TOML documents."""

from __future__ import annotations

from typing import Callable, Iterator

from .tokens import (
    COLON,
    COMMA,
    EQUALS,
    LEFT_BRACE,
    LEFT_BRACKET,
    NEWLINE,
    PERIOD,
    PLUS,
    RIGHT_BRACE,
    RIGHT_BRACKET,
    InvalidCharInString,
    InvalidEscape,
    InvalidEscapeValue,
    InvalidHexEscape,
    MultilineStringKey,
    NewlineInString,
    NewlineInTableKey,
    Span,
    Token,
    TokenKind,
    UnexpectedChar,
    UnterminatedString,
    Wanted,
    is_keylike,
)

__all__ = ["Tokenizer"]

_PUNCTUATION = {
    "\n": NEWLINE,
    "=": EQUALS,
    ".": PERIOD,
    ",": COMMA,
    ":": COLON,
    "+": PLUS,
    "{": LEFT_BRACE,
    "}": RIGHT_BRACE,
    "[": LEFT_BRACKET,
    "]": RIGHT_BRACKET,
}

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# A string-content handler receives the pieces collected so far, whether the
# string is multiline, the position of the character and the character.
_CharHandler = Callable[[list, bool, int, str], None]


def _is_string_char(ch: str) -> bool:
    return ch == "\t" or (ch >= " " and ch != "\x7f")


class Tokenizer:
    """Splits TOML text into tokens; ``\\r\\n`` is read as a single newline.

    Positions are indices into the text. Errors are raised as
    :class:`~tomlkit_lite.tokens.TokenError` subclasses.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._pos = 0
        self._eatc("\ufeff")

    # -- character level -------------------------------------------------

    def _fold(self, pos: int) -> tuple[int, str, int] | None:
        if pos >= len(self.text):
            return None
        ch = self.text[pos]
        if ch == "\r" and self.text.startswith("\n", pos + 1):
            return pos, "\n", pos + 2
        return pos, ch, pos + 1

    def _peek_one(self) -> tuple[int, str] | None:
        folded = self._fold(self._pos)
        if folded is None:
            return None
        return folded[0], folded[1]

    def one(self) -> tuple[int, str] | None:
        """Consume one character and return its position and value."""
        folded = self._fold(self._pos)
        if folded is None:
            return None
        self._pos = folded[2]
        return folded[0], folded[1]

    def _eatc(self, ch: str) -> bool:
        peeked = self._peek_one()
        if peeked is not None and peeked[1] == ch:
            self.one()
            return True
        return False

    def current(self) -> int:
        """Position of the next character, or the text length at the end."""
        return self._pos

    # -- token level -----------------------------------------------------

    def __iter__(self) -> Iterator[tuple[Span, Token]]:
        return self

    def __next__(self) -> tuple[Span, Token]:
        item = self.next_token()
        if item is None:
            raise StopIteration
        return item

    def next_token(self) -> tuple[Span, Token] | None:
        """Consume and return the next ``(span, token)``, or None at the end."""
        item = self.one()
        if item is None:
            return None
        start, ch = item
        if ch in _PUNCTUATION:
            token = _PUNCTUATION[ch]
        elif ch in " \t":
            token = self._whitespace_token(start)
        elif ch == "#":
            token = self._comment_token(start)
        elif ch == "'":
            token = self._literal_string(start)
        elif ch == '"':
            token = self._basic_string(start)
        elif is_keylike(ch):
            token = self._keylike(start)
        else:
            raise UnexpectedChar(start, ch)
        return Span(start, self.current()), token

    def peek(self) -> tuple[Span, Token] | None:
        """Return the next token without consuming it."""
        saved = self._pos
        try:
            return self.next_token()
        finally:
            self._pos = saved

    def eat(self, expected: Token) -> bool:
        """Consume the next token if it equals ``expected``."""
        return self.eat_spanned(expected) is not None

    def eat_spanned(self, expected: Token) -> Span | None:
        """Consume the next token if it equals ``expected``; return its span."""
        peeked = self.peek()
        if peeked is None or peeked[1] != expected:
            return None
        self.next_token()
        return peeked[0]

    def expect(self, expected: Token) -> None:
        """Consume ``expected`` or raise :class:`Wanted`."""
        self.expect_spanned(expected)

    def expect_spanned(self, expected: Token) -> Span:
        """Consume ``expected`` and return its span, or raise :class:`Wanted`."""
        current = self.current()
        item = self.next_token()
        if item is None:
            raise Wanted(len(self.text), expected.describe(), "eof")
        span, found = item
        if found != expected:
            raise Wanted(current, expected.describe(), found.describe())
        return span

    def table_key(self) -> tuple[Span, str]:
        """Consume a bare or quoted key and return its span and text."""
        current = self.current()
        item = self.next_token()
        if item is None:
            raise Wanted(len(self.text), "a table key", "eof")
        span, token = item
        if token.kind is TokenKind.KEYLIKE:
            return span, token.text
        if token.kind is TokenKind.STRING:
            offset = span.start
            if token.multiline:
                raise MultilineStringKey(offset)
            newline = token.text.find("\n")
            if newline >= 0:
                raise NewlineInTableKey(offset + newline)
            return span, token.value
        raise Wanted(current, "a table key", token.describe())

    def eat_whitespace(self) -> None:
        """Skip spaces and tabs."""
        while self._eatc(" ") or self._eatc("\t"):
            pass

    def eat_comment(self) -> bool:
        """Skip a comment and the line end after it; tell whether one was there."""
        if not self._eatc("#"):
            return False
        self._comment_token(0)
        self.eat_newline_or_eof()
        return True

    def eat_newline_or_eof(self) -> None:
        """Consume a newline, or accept the end of input, or raise :class:`Wanted`."""
        current = self.current()
        item = self.next_token()
        if item is None or item[1].kind is TokenKind.NEWLINE:
            return
        raise Wanted(current, "newline", item[1].describe())

    def skip_to_newline(self) -> None:
        """Skip everything up to and including the next newline."""
        while True:
            item = self.one()
            if item is None or item[1] == "\n":
                return

    # -- token readers ---------------------------------------------------

    def _whitespace_token(self, start: int) -> Token:
        self.eat_whitespace()
        return Token(TokenKind.WHITESPACE, self.text[start : self.current()])

    def _comment_token(self, start: int) -> Token:
        while True:
            peeked = self._peek_one()
            if peeked is None:
                break
            ch = peeked[1]
            if ch != "\t" and ch < " ":
                break
            self.one()
        return Token(TokenKind.COMMENT, self.text[start : self.current()])

    def _keylike(self, start: int) -> Token:
        while True:
            peeked = self._peek_one()
            if peeked is None or not is_keylike(peeked[1]):
                break
            self.one()
        return Token(TokenKind.KEYLIKE, self.text[start : self.current()])

    def _read_string(self, delim: str, start: int, on_char: _CharHandler) -> Token:
        multiline = False
        if self._eatc(delim):
            if self._eatc(delim):
                multiline = True
            else:
                return Token(TokenKind.STRING, self.text[start : start + 2], "", False)
        pieces: list[str] = []
        first = True
        while True:
            item = self.one()
            if item is None:
                raise UnterminatedString(start)
            at, ch = item
            is_first, first = first, False
            if ch == "\n":
                if not multiline:
                    raise NewlineInString(at)
                if not is_first:
                    pieces.append("\n")
                continue
            if ch == delim:
                if multiline:
                    if not self._eatc(delim):
                        pieces.append(delim)
                        continue
                    if not self._eatc(delim):
                        pieces.append(delim * 2)
                        continue
                    if self._eatc(delim):
                        pieces.append(delim)
                    if self._eatc(delim):
                        pieces.append(delim)
                return Token(
                    TokenKind.STRING,
                    self.text[start : self.current()],
                    "".join(pieces),
                    multiline,
                )
            on_char(pieces, multiline, at, ch)

    def _literal_string(self, start: int) -> Token:
        def on_char(pieces: list, multiline: bool, at: int, ch: str) -> None:
            if not _is_string_char(ch):
                raise InvalidCharInString(at, ch)
            pieces.append(ch)

        return self._read_string("'", start, on_char)

    def _basic_string(self, start: int) -> Token:
        def on_char(pieces: list, multiline: bool, at: int, ch: str) -> None:
            if ch == "\\":
                self._escape(pieces, multiline, start)
            elif _is_string_char(ch):
                pieces.append(ch)
            else:
                raise InvalidCharInString(at, ch)

        return self._read_string('"', start, on_char)

    def _escape(self, pieces: list, multiline: bool, start: int) -> None:
        item = self.one()
        if item is None:
            raise UnterminatedString(start)
        at, ch = item
        if ch in _SIMPLE_ESCAPES:
            pieces.append(_SIMPLE_ESCAPES[ch])
        elif ch in "uU":
            pieces.append(self._hex(start, at, 4 if ch == "u" else 8))
        elif multiline and ch in " \t\n":
            if ch != "\n":
                self._skip_to_line_end(at, ch)
            while True:
                peeked = self._peek_one()
                if peeked is None or peeked[1] not in " \t\n":
                    break
                self.one()
        else:
            raise InvalidEscape(at, ch)

    def _skip_to_line_end(self, at: int, ch: str) -> None:
        while True:
            peeked = self._peek_one()
            if peeked is None:
                return
            self.one() if peeked[1] in " \t\n" else None
            if peeked[1] == "\n":
                return
            if peeked[1] not in " \t":
                raise InvalidEscape(at, ch)

    def _hex(self, start: int, at: int, length: int) -> str:
        digits = []
        for _ in range(length):
            item = self.one()
            if item is None:
                raise UnterminatedString(start)
            pos, ch = item
            if ch not in _HEX_DIGITS:
                raise InvalidHexEscape(pos, ch)
            digits.append(ch)
        value = int("".join(digits), 16)
        if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
            raise InvalidEscapeValue(at, value)
        return chr(value)