#!/usr/bin/env python3
#
# This program source code file is part of kicad-sexp, a parser for KiCad S-expression files.
#
# Copyright (C) 2025-2026 Trace Developers Team
# Copyright The Trace Developers, see TRACE_AUTHORS.txt for contributors.
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, or (at your
# option) any later version.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along
# with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
S-Expression Literal Recognizers

Each recognizer takes the source text and a start offset and returns
``((start, end), new_pos)``: the payload span of the token and the offset
just past its trailing whitespace. A recognizer raises LiteralMismatch when
the text at the offset is not its kind of literal.

Every literal must be followed by whitespace or ')' (checked, not consumed),
so the recognizers can be tried in a fixed order without one swallowing a
prefix of a longer token: '123' is an integer but '123abc' is a symbol.
"""

import re
from typing import Tuple

from .sexp_nodes import (
    FloatLiteral, HexIntLiteral, IntLiteral, Span, StringLiteral, Symbol,
)


# Characters allowed right after a literal. End of input is not one of them.
SEPARATORS = ' \t\n)'

# Backslash escapes accepted inside quoted strings and what they stand for
STRING_ESCAPES = {
    '\\': '\\',
    '"': '"',
    'n': '\n',
    't': '\t',
}

_INT_RE = re.compile(r'-?[0-9]+')
_HEX_RE = re.compile(r'(?:0x)?[0-9a-fA-F]{8}(?:_[0-9a-fA-F]{8}){3}')
_FLOAT_RE = re.compile(r'-?[0-9]+\.[0-9]+')
_SYMBOL_RE = re.compile(r'[^ \t\n"()]+')


class LiteralMismatch(Exception):
    """Raised when a recognizer does not match at the given offset."""

    def __init__(self, pos: int, expected: str):
        self.pos = pos
        self.expected = expected
        super().__init__(f"expected {expected} at offset {pos}")


def skip_whitespace(text: str, pos: int) -> int:
    """Return the first offset at or after pos that is not whitespace."""
    length = len(text)
    while pos < length and text[pos].isspace():
        pos += 1
    return pos


def _finish(text: str, span: Span, end: int) -> Tuple[Span, int]:
    if end >= len(text) or text[end] not in SEPARATORS:
        raise LiteralMismatch(end, "whitespace or ')'")
    return span, skip_whitespace(text, end)


def _recognize_pattern(pattern, expected: str, text: str, pos: int) -> Tuple[Span, int]:
    start = skip_whitespace(text, pos)
    match = pattern.match(text, start)
    if match is None:
        raise LiteralMismatch(start, expected)
    return _finish(text, (start, match.end()), match.end())


def recognize_string(text: str, pos: int = 0) -> Tuple[Span, int]:
    """
    Recognize a double-quoted string.

    The returned span covers the raw characters between the quotes; escape
    sequences are validated but left as written.
    """
    start = skip_whitespace(text, pos)
    length = len(text)

    if start >= length or text[start] != '"':
        raise LiteralMismatch(start, "string")

    pos = start + 1
    while pos < length:
        char = text[pos]

        if char == '"':
            return _finish(text, (start + 1, pos), pos + 1)

        if char == '\\':
            if pos + 1 < length and text[pos + 1] in STRING_ESCAPES:
                pos += 2
                continue
            raise LiteralMismatch(pos + 1, "escape sequence")

        pos += 1

    raise LiteralMismatch(pos, "closing '\"'")


def recognize_int(text: str, pos: int = 0) -> Tuple[Span, int]:
    """Recognize an optionally negative base-10 integer."""
    return _recognize_pattern(_INT_RE, "integer", text, pos)


def recognize_hex_int(text: str, pos: int = 0) -> Tuple[Span, int]:
    """Recognize a 128-bit hex blob such as 0xdeadbeef_beefdead_44552255_12345678."""
    return _recognize_pattern(_HEX_RE, "hex blob", text, pos)


def recognize_float(text: str, pos: int = 0) -> Tuple[Span, int]:
    """Recognize an optionally negative decimal float with digits on both sides of '.'."""
    return _recognize_pattern(_FLOAT_RE, "float", text, pos)


def recognize_symbol(text: str, pos: int = 0) -> Tuple[Span, int]:
    """Recognize a bare token; anything up to whitespace, a quote or a paren."""
    return _recognize_pattern(_SYMBOL_RE, "symbol", text, pos)


# Tried in this order. Symbol accepts almost anything so it must stay last.
LITERAL_RECOGNIZERS = (
    (StringLiteral, recognize_string),
    (IntLiteral, recognize_int),
    (HexIntLiteral, recognize_hex_int),
    (FloatLiteral, recognize_float),
    (Symbol, recognize_symbol),
)
