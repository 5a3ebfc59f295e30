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
S-Expression Nodes

Immutable tree nodes produced by the S-expression parser. Literal nodes keep
the raw source text of their token plus its (start, end) offsets; nothing is
decoded at parse time.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple


Span = Tuple[int, int]


class Sexp:
    """Base class of every parsed element."""


@dataclass(frozen=True)
class Invalid(Sexp):
    """A bracketed region that failed to parse and was skipped."""
    span: Span = field(default=(0, 0), compare=False)

    def __repr__(self):
        return "Invalid()"


@dataclass(frozen=True)
class Literal(Sexp):
    """Common shape of the atomic variants."""
    text: str
    span: Span = field(default=(0, 0), compare=False)

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"{type(self).__name__}({self.text!r})"


class Symbol(Literal):
    """Bare, unquoted token."""


class StringLiteral(Literal):
    """Double-quoted string; `text` is the raw slice between the quotes."""


class IntLiteral(Literal):
    """Signed base-10 integer."""


class HexIntLiteral(Literal):
    """128-bit value written as four 8-digit hex groups joined by '_'."""


class FloatLiteral(Literal):
    """Signed decimal float without exponent."""


@dataclass(frozen=True)
class SexpList(Sexp):
    """Parenthesized group of nodes in source order."""
    items: Tuple[Sexp, ...] = ()
    span: Span = field(default=(0, 0), compare=False)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Sexp]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self):
        return f"SexpList({list(self.items)!r})"

    @property
    def head(self) -> Optional[str]:
        """Text of the leading symbol, e.g. 'kicad_pcb' for (kicad_pcb ...)."""
        if self.items and isinstance(self.items[0], Symbol):
            return self.items[0].text
        return None


NUMERIC_TYPES = (IntLiteral, HexIntLiteral, FloatLiteral)
