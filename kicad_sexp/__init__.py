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
KiCad S-expression parsing.

Parses the S-expression text of .kicad_sch and .kicad_pcb files into
immutable node trees, skipping over malformed bracketed regions instead of
giving up on the whole file.
"""

from .sexp_nodes import (
    FloatLiteral, HexIntLiteral, IntLiteral, Invalid, Sexp, SexpList,
    StringLiteral, Symbol,
)
from .sexp_literals import (
    LITERAL_RECOGNIZERS, LiteralMismatch, recognize_float, recognize_hex_int,
    recognize_int, recognize_string, recognize_symbol,
)
from .sexp_parser import ParseDiagnostic, SexpParseError, SexpParser, parse_sexp
from .sexp_printer import format_sexps, pretty_print
from .sexp_helpers import (
    decode_escapes, find_element, find_elements, get_atom_value, iter_invalid,
    to_python,
)

__all__ = [
    'Sexp', 'Invalid', 'Symbol', 'StringLiteral', 'IntLiteral', 'HexIntLiteral',
    'FloatLiteral', 'SexpList',
    'LITERAL_RECOGNIZERS', 'LiteralMismatch', 'recognize_string', 'recognize_int',
    'recognize_hex_int', 'recognize_float', 'recognize_symbol',
    'ParseDiagnostic', 'SexpParseError', 'SexpParser', 'parse_sexp',
    'format_sexps', 'pretty_print',
    'decode_escapes', 'find_element', 'find_elements', 'get_atom_value',
    'iter_invalid', 'to_python',
]
