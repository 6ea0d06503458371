# tomlkit_lite

Building blocks for reading and writing TOML:

- `tomlkit_lite.tokenizer`: a tokenizer that splits TOML text into
  tokens with spans and reports malformed input through specific
  exceptions;
- `tomlkit_lite.tokens`: the token, span and error types it produces;
- `tomlkit_lite.value`: helpers for TOML values held as plain Python
  objects (`str`, `int`, `float`, `bool`, `list`, `dict` and
  `datetime` / `date` / `time`): naming a value's TOML type, comparing
  types, and indexing into nested data;
- `tomlkit_lite.convert`: conversion of Python data into TOML values,
  and the order in which a table's entries are to be written out.

## Installation

```
pip install tomlkit_lite
```

## Tokenizing

```python
from tomlkit_lite.tokenizer import Tokenizer

for span, token in Tokenizer('name = "value"\n'):
    print(span.start, span.end, token.kind, token.describe())
```

A `Span` is a `(start, end)` pair of positions in the text, `end`
exclusive. A `Token` has a `kind` (a `TokenKind`), the source `text` for
whitespace, comments, bare keys and strings, the decoded `value` of a
string, and a `multiline` flag.

The tokenizer also works one token at a time: `next_token()` (returns
`None` at the end), `peek()`, `eat(expected)`, `eat_spanned(expected)`,
`expect(expected)`, `expect_spanned(expected)`, `table_key()`,
`eat_whitespace()`, `eat_comment()`, `eat_newline_or_eof()`,
`skip_to_newline()`, `current()` and `one()`. The fixed tokens to pass
as `expected` are available as constants in `tomlkit_lite.tokens`
(`EQUALS`, `PERIOD`, `COMMA`, `NEWLINE`, `LEFT_BRACKET`, and so on).

```python
from tomlkit_lite.tokenizer import Tokenizer
from tomlkit_lite.tokens import EQUALS

t = Tokenizer("key = 1")
print(t.table_key())   # (Span(start=0, end=3), 'key')
t.eat_whitespace()
t.expect(EQUALS)
```

A byte order mark at the start of the text is skipped, and `\r\n`
counts as a single newline.

Malformed input raises a subclass of `tomlkit_lite.tokens.TokenError`:
`InvalidCharInString`, `InvalidEscape`, `InvalidHexEscape`,
`InvalidEscapeValue`, `NewlineInString`, `UnexpectedChar`,
`UnterminatedString`, `NewlineInTableKey`, `MultilineStringKey` or
`Wanted`. Each one carries in `at` the position where the problem is.

```python
from tomlkit_lite.tokenizer import Tokenizer
from tomlkit_lite.tokens import InvalidEscape

try:
    Tokenizer(r'"\a"').next_token()
except InvalidEscape as err:
    print(err.at, err.char)   # 2 a
```

## Values

```python
from tomlkit_lite.value import get, type_str, same_type

doc = {"fruit": [{"name": "apple"}]}
print(get(get(get(doc, "fruit"), 0), "name"))  # apple
print(type_str(3.5))                           # float
print(same_type(1, 2))                         # True
```

`get` returns `None` when the key or index is missing, or when the
container is of the wrong kind. `value_type` returns a `ValueType`
member and raises `TypeError` for objects that are not TOML values.

## Converting Python data

```python
from tomlkit_lite.convert import to_value, ordered_items

value = to_value({"a": 1, "sub": {"b": (1, 2)}, "skip": None})
# {'a': 1, 'sub': {'b': [1, 2]}}

for key, item in ordered_items(value):
    print(key, item)   # plain values first, then arrays of tables, then tables
```

`to_value` accepts strings, booleans, integers, floats, date/time
objects, enum members (converted to their names), bytes (converted to
arrays of integers), lists, tuples, sets, mappings and dataclass
instances. Tables come out with sorted keys, and entries whose value is
`None` are dropped. It raises `KeyNotString` for mapping keys that are
not strings, `UnsupportedNone` for a bare `None`, `UnsupportedType` for
data TOML cannot hold, and `IntegerOutOfRange` for integers outside the
signed 64-bit range. All of them derive from `ConversionError`.

## What it does not do

The package stops at tokens and values. It does not parse a whole TOML
document into a table, and it does not write values out as TOML text;
`ordered_items` only gives the order in which a writer would emit a
table's entries.

## Running the tests

```
pip install "tomlkit_lite[test]"
pytest
```