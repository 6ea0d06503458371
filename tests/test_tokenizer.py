import pytest

from tomlkit_lite.tokenizer import Tokenizer
from tomlkit_lite.tokens import (
    COMMA,
    EQUALS,
    LEFT_BRACE,
    LEFT_BRACKET,
    NEWLINE,
    PERIOD,
    RIGHT_BRACE,
    RIGHT_BRACKET,
    InvalidCharInString,
    InvalidEscape,
    InvalidEscapeValue,
    InvalidHexEscape,
    MultilineStringKey,
    NewlineInString,
    Span,
    Token,
    TokenKind,
    UnexpectedChar,
    UnterminatedString,
    Wanted,
)


def check_error(text, expected):
    t = Tokenizer(text)
    with pytest.raises(type(expected)) as info:
        t.next_token()
    assert info.value == expected
    assert t.next_token() is None


def check_string(text, value, multiline):
    t = Tokenizer(text)
    _, token = t.next_token()
    assert token == Token(TokenKind.STRING, text, value, multiline)
    assert t.next_token() is None


def ws(s):
    return Token(TokenKind.WHITESPACE, s)


def key(s):
    return Token(TokenKind.KEYLIKE, s)


def comment(s):
    return Token(TokenKind.COMMENT, s)


@pytest.mark.parametrize(
    "text,value,multiline",
    [
        ("''", "", False),
        ("''''''", "", True),
        ("'''\n'''", "", True),
        ("'a'", "a", False),
        ("'\"a'", '"a', False),
        ("''''a'''", "'a", True),
        ("'''\n'a\n'''", "'a\n", True),
        ("'''a\n'a\r\n'''", "a\n'a\n", True),
    ],
)
def test_literal_strings(text, value, multiline):
    check_string(text, value, multiline)


@pytest.mark.parametrize(
    "text,value,multiline",
    [
        ('""', "", False),
        ('""""""', "", True),
        ('"a"', "a", False),
        ('"""a"""', "a", True),
        ('"\\t"', "\t", False),
        ('"\\u0000"', "\0", False),
        ('"\\U00000000"', "\0", False),
        ('"\\U000A0000"', "\U000A0000", False),
        ('"\\\\t"', "\\t", False),
        ('"\t"', "\t", False),
        ('"""\n\t"""', "\t", True),
        ('"""\\\n"""', "", True),
        ('"""\\\n     \t   \t  \\\r\n  \t \n  \t \r\n"""', "", True),
        ('"\\r"', "\r", False),
        ('"\\n"', "\n", False),
        ('"\\b"', "\b", False),
        ('"a\\fa"', "a\fa", False),
        ('"\\"a"', '"a', False),
        ('"""\na"""', "a", True),
        ('"""\n"""', "", True),
        ('"""a\\"""b"""', 'a"""b', True),
    ],
)
def test_basic_strings(text, value, multiline):
    check_string(text, value, multiline)


@pytest.mark.parametrize(
    "text,expected",
    [
        ('"\\a', InvalidEscape(2, "a")),
        ('"\\\n', InvalidEscape(2, "\n")),
        ('"\\\r\n', InvalidEscape(2, "\n")),
        ('"\\', UnterminatedString(0)),
        ('"\0', InvalidCharInString(1, "\0")),
        ('"\\U00"', InvalidHexEscape(5, '"')),
        ('"\\U00', UnterminatedString(0)),
        ('"\\uD800', InvalidEscapeValue(2, 0xD800)),
        ('"\\UFFFFFFFF', InvalidEscapeValue(2, 0xFFFFFFFF)),
    ],
)
def test_basic_string_errors(text, expected):
    check_error(text, expected)


@pytest.mark.parametrize("text", ["foo", "0bar", "bar0", "1234", "a-b", "a_B", "-_-", "___"])
def test_keylike(text):
    t = Tokenizer(text)
    _, token = t.next_token()
    assert token == key(text)
    assert t.next_token() is None


def collect(text):
    return [
        ((span.start, span.end), token, text[span.start : span.end])
        for span, token in Tokenizer(text)
    ]


def test_all_simple():
    assert collect(" a ") == [
        ((0, 1), ws(" "), " "),
        ((1, 2), key("a"), "a"),
        ((2, 3), ws(" "), " "),
    ]


def test_all_mixed():
    text = " a\t [[]] \t [] {} , . =\n# foo \r\n#foo \n "
    assert collect(text) == [
        ((0, 1), ws(" "), " "),
        ((1, 2), key("a"), "a"),
        ((2, 4), ws("\t "), "\t "),
        ((4, 5), LEFT_BRACKET, "["),
        ((5, 6), LEFT_BRACKET, "["),
        ((6, 7), RIGHT_BRACKET, "]"),
        ((7, 8), RIGHT_BRACKET, "]"),
        ((8, 11), ws(" \t "), " \t "),
        ((11, 12), LEFT_BRACKET, "["),
        ((12, 13), RIGHT_BRACKET, "]"),
        ((13, 14), ws(" "), " "),
        ((14, 15), LEFT_BRACE, "{"),
        ((15, 16), RIGHT_BRACE, "}"),
        ((16, 17), ws(" "), " "),
        ((17, 18), COMMA, ","),
        ((18, 19), ws(" "), " "),
        ((19, 20), PERIOD, "."),
        ((20, 21), ws(" "), " "),
        ((21, 22), EQUALS, "="),
        ((22, 23), NEWLINE, "\n"),
        ((23, 29), comment("# foo "), "# foo "),
        ((29, 31), NEWLINE, "\r\n"),
        ((31, 36), comment("#foo "), "#foo "),
        ((36, 37), NEWLINE, "\n"),
        ((37, 38), ws(" "), " "),
    ]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("\r", UnexpectedChar(0, "\r")),
        ("'\n", NewlineInString(1)),
        ("'\0", InvalidCharInString(1, "\0")),
        ("'", UnterminatedString(0)),
        ("\0", UnexpectedChar(0, "\0")),
    ],
)
def test_bare_cr_bad(text, expected):
    check_error(text, expected)


def test_bad_comment():
    t = Tokenizer("#\0")
    _, token = t.next_token()
    assert token == comment("#")
    with pytest.raises(UnexpectedChar) as info:
        t.next_token()
    assert info.value == UnexpectedChar(1, "\0")
    assert t.next_token() is None


def test_bom_is_skipped():
    t = Tokenizer("\ufeffa")
    assert t.next_token() == (Span(1, 2), key("a"))


def test_peek_does_not_consume():
    t = Tokenizer("a=")
    assert t.peek() == (Span(0, 1), key("a"))
    assert t.current() == 0
    assert t.next_token() == (Span(0, 1), key("a"))


def test_eat_and_eat_spanned():
    t = Tokenizer("==x")
    assert t.eat(EQUALS) is True
    assert t.eat_spanned(EQUALS) == Span(1, 2)
    assert t.eat(EQUALS) is False
    assert t.current() == 2


def test_eat_at_end_is_false():
    assert Tokenizer("").eat(EQUALS) is False


def test_expect_mismatch():
    t = Tokenizer("a")
    with pytest.raises(Wanted) as info:
        t.expect(EQUALS)
    assert info.value == Wanted(0, "an equals", "an identifier")
    assert str(info.value) == "expected an equals, found an identifier"


def test_expect_at_eof():
    t = Tokenizer("ab")
    t.next_token()
    with pytest.raises(Wanted) as info:
        t.expect_spanned(EQUALS)
    assert info.value == Wanted(2, "an equals", "eof")


def test_expect_spanned_success():
    assert Tokenizer("=").expect_spanned(EQUALS) == Span(0, 1)


def test_table_key_variants():
    assert Tokenizer("foo").table_key() == (Span(0, 3), "foo")
    assert Tokenizer('"a b"').table_key() == (Span(0, 5), "a b")
    assert Tokenizer("'x'").table_key() == (Span(0, 3), "x")


def test_table_key_multiline():
    with pytest.raises(MultilineStringKey) as info:
        Tokenizer("'''x'''").table_key()
    assert info.value == MultilineStringKey(0)


def test_table_key_wrong_token():
    with pytest.raises(Wanted) as info:
        Tokenizer("=").table_key()
    assert info.value == Wanted(0, "a table key", "an equals")


def test_table_key_eof():
    with pytest.raises(Wanted) as info:
        Tokenizer("").table_key()
    assert info.value == Wanted(0, "a table key", "eof")


def test_eat_comment():
    t = Tokenizer("# hi\nx")
    assert t.eat_comment() is True
    assert t.next_token() == (Span(5, 6), key("x"))


def test_eat_comment_absent():
    t = Tokenizer("x")
    assert t.eat_comment() is False
    assert t.current() == 0


def test_eat_comment_bad_char():
    t = Tokenizer("#a\0")
    with pytest.raises(UnexpectedChar) as info:
        t.eat_comment()
    assert info.value == UnexpectedChar(2, "\0")


def test_eat_newline_or_eof():
    t = Tokenizer("\n")
    t.eat_newline_or_eof()
    assert t.current() == 1
    t.eat_newline_or_eof()
    assert t.current() == 1
    with pytest.raises(Wanted) as info:
        Tokenizer("a").eat_newline_or_eof()
    assert info.value == Wanted(0, "newline", "an identifier")


def test_skip_to_newline():
    t = Tokenizer("abc\ndef")
    t.skip_to_newline()
    assert t.current() == 4


def test_eat_whitespace():
    t = Tokenizer(" \t x")
    t.eat_whitespace()
    assert t.current() == 3


def test_one_folds_crlf():
    t = Tokenizer("\r\nx")
    assert t.one() == (0, "\n")
    assert t.current() == 2
    assert t.one() == (2, "x")
    assert t.one() is None


def test_iteration_stops():
    assert [token for _, token in Tokenizer("a=b")] == [key("a"), EQUALS, key("b")]