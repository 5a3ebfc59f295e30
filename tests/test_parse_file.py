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

"""Tests for the parse_file command line driver."""

from pathlib import Path

from kicad_sexp.parse_file import main


REFERENCE_DIR = Path(__file__).parent / "reference-files" / "empty"


def test_parse_success(capsys):
    assert main([str(REFERENCE_DIR / "empty.kicad_sch")]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Parse success. We got:\n")
    assert "(ʆkicad_sch (ʆversion ŋ20231120 ) " in out


def test_parse_board(capsys):
    assert main([str(REFERENCE_DIR / "empty.kicad_pcb")]) == 0
    assert "ŋ0x00000000_00000000_55555555_5755f5ff" in capsys.readouterr().out


def test_parse_failure(tmp_path, capsys):
    path = tmp_path / "broken.kicad_sch"
    path.write_text("(kicad_sch (version 1)\n", encoding="utf-8")
    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Parse failed. Errors are:\n")
    assert "line 1" in out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.kicad_pcb")]) == 2
    assert "Could not read" in capsys.readouterr().err


def test_recovered_regions(tmp_path, capsys):
    path = tmp_path / "damaged.kicad_pcb"
    path.write_text('(kicad_pcb (version 1) (bad "x) (net 0 ""))\n', encoding="utf-8")
    assert main([str(path)]) == 0
    assert "Inv" in capsys.readouterr().out
    assert main([str(path), "--strict"]) == 1
