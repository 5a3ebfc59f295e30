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
S-Expression Trace Printer

Renders parsed nodes as a flat, tagged trace for debugging. The output is
not valid S-expression text and cannot be parsed back.
"""

import sys
from typing import Iterable, List, Optional, TextIO

from .sexp_nodes import NUMERIC_TYPES, Invalid, Sexp, SexpList, StringLiteral, Symbol


INVALID_MARK = "Inv"
SYMBOL_MARK = "ʆ"
NUMBER_MARK = "ŋ"


def _render(sexps: Iterable[Sexp], out: List[str]):
    for sexp in sexps:
        if isinstance(sexp, Invalid):
            out.append(f"{INVALID_MARK} ")
        elif isinstance(sexp, Symbol):
            out.append(f"{SYMBOL_MARK}{sexp.text} ")
        elif isinstance(sexp, StringLiteral):
            out.append(f'"{sexp.text}" ')
        elif isinstance(sexp, NUMERIC_TYPES):
            out.append(f"{NUMBER_MARK}{sexp.text} ")
        elif isinstance(sexp, SexpList):
            out.append("(")
            _render(sexp.items, out)
            out.append(") ")
        else:
            raise TypeError(f"Not a parsed node: {sexp!r}")


def format_sexps(sexps: Iterable[Sexp]) -> str:
    """Return the trace of a node sequence, one trailing space after each node."""
    out: List[str] = []
    _render(sexps, out)
    return "".join(out)


def pretty_print(sexps: Iterable[Sexp], file: Optional[TextIO] = None):
    """Write the trace of a node sequence to file (stdout by default)."""
    print(format_sexps(sexps), end="", file=file if file is not None else sys.stdout)
