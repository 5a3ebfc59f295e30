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
S-Expression Helper Functions

Common helper functions for walking parsed S-expressions and turning their
raw literal text into Python values.
"""

from typing import Any, Iterable, Iterator, List, Optional

from .sexp_literals import STRING_ESCAPES
from .sexp_nodes import (
    FloatLiteral, HexIntLiteral, IntLiteral, Invalid, Sexp, SexpList,
    StringLiteral, Symbol,
)


def decode_escapes(raw: str) -> str:
    """Decode the backslash escapes of a raw string literal payload."""
    result = []
    pos = 0
    length = len(raw)

    while pos < length:
        char = raw[pos]
        if char == '\\' and pos + 1 < length and raw[pos + 1] in STRING_ESCAPES:
            result.append(STRING_ESCAPES[raw[pos + 1]])
            pos += 2
            continue
        result.append(char)
        pos += 1

    return ''.join(result)


def to_python(sexp: Sexp) -> Any:
    """Recursively convert a node into plain Python values."""
    if isinstance(sexp, SexpList):
        return [to_python(item) for item in sexp.items]
    if isinstance(sexp, IntLiteral):
        return int(sexp.text)
    if isinstance(sexp, HexIntLiteral):
        return int(sexp.text.replace('_', ''), 16)
    if isinstance(sexp, FloatLiteral):
        return float(sexp.text)
    if isinstance(sexp, StringLiteral):
        return decode_escapes(sexp.text)
    if isinstance(sexp, Symbol):
        return sexp.text
    # Invalid
    return None


def find_element(sexps: Iterable[Sexp], name: str) -> Optional[SexpList]:
    """Find first list whose leading symbol is name."""
    for item in sexps:
        if isinstance(item, SexpList) and item.head == name:
            return item
    return None


def find_elements(sexps: Iterable[Sexp], name: str) -> List[SexpList]:
    """Find all lists whose leading symbol is name."""
    return [item for item in sexps if isinstance(item, SexpList) and item.head == name]


def get_atom_value(sexp_list: Optional[SexpList], index: int = 1, default: Any = None) -> Any:
    """Get the Python value of the atom at given index of a list."""
    if not isinstance(sexp_list, SexpList) or len(sexp_list) <= index:
        return default
    value = sexp_list[index]
    if isinstance(value, (SexpList, Invalid)):
        return default
    return to_python(value)


def iter_invalid(sexps: Iterable[Sexp]) -> Iterator[Invalid]:
    """Yield every Invalid node, depth first in source order."""
    for item in sexps:
        if isinstance(item, Invalid):
            yield item
        elif isinstance(item, SexpList):
            yield from iter_invalid(item.items)
