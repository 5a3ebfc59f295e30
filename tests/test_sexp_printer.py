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

"""Tests for the S-expression trace printer."""

import io

import pytest

from kicad_sexp.sexp_nodes import Invalid, SexpList, Symbol
from kicad_sexp.sexp_parser import parse_sexp
from kicad_sexp.sexp_printer import format_sexps, pretty_print


class TestFormat:

    def test_literal_markers(self):
        sexps = parse_sexp('(a "b" 1 2.5 0xdeadbeef_beefdead_44552255_12345678)')
        assert format_sexps(sexps) == \
            '(ʆa "b" ŋ1 ŋ2.5 ŋ0xdeadbeef_beefdead_44552255_12345678 ) '

    def test_invalid_marker(self):
        assert format_sexps(parse_sexp('(a (b "c) d)')) == "(ʆa Inv ʆd ) "

    def test_nested_and_empty_lists(self):
        assert format_sexps(parse_sexp("(a (b ()))")) == "(ʆa (ʆb () ) ) "

    def test_siblings(self):
        assert format_sexps([Symbol("x"), SexpList(), Invalid()]) == "ʆx () Inv "

    def test_escapes_not_decoded(self):
        assert format_sexps(parse_sexp('(t "a\\nb")')) == '(ʆt "a\\nb" ) '

    def test_empty(self):
        assert format_sexps([]) == ""

    def test_pure(self):
        sexps = parse_sexp('(kicad_sch (version 20231120) (bad "x) (paper "A4"))')
        assert format_sexps(sexps) == format_sexps(sexps)

    def test_rejects_foreign_objects(self):
        with pytest.raises(TypeError):
            format_sexps(["not a node"])


class TestPrettyPrint:

    def test_writes_to_file(self):
        sexps = parse_sexp("(a 1)")
        out = io.StringIO()
        pretty_print(sexps, file=out)
        assert out.getvalue() == "(ʆa ŋ1 ) "

    def test_defaults_to_stdout(self, capsys):
        pretty_print(parse_sexp("(a)"))
        assert capsys.readouterr().out == "(ʆa ) "
