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
Parse a KiCad S-expression file and print its trace.

Usage:
    kicad-sexp-parse board.kicad_pcb
    python -m kicad_sexp.parse_file -v schematic.kicad_sch
"""

import argparse
import logging
import sys
from pathlib import Path

from .sexp_parser import SexpParseError, SexpParser
from .sexp_printer import pretty_print


logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Parse a KiCad S-expression file (.kicad_sch, .kicad_pcb) and print its trace"
    )
    parser.add_argument(
        "input_file",
        type=Path,
        help="File to parse"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log a diagnostic for every skipped invalid region"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error if any region had to be skipped"
    )

    args = parser.parse_args(argv)

    # Console-only logging, the parser itself never configures handlers
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        content = args.input_file.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: Could not read {args.input_file}: {e}", file=sys.stderr)
        return 2

    sexp_parser = SexpParser(content.strip())
    try:
        sexps = sexp_parser.parse()
    except SexpParseError as e:
        print("Parse failed. Errors are:")
        for error in e.errors:
            print(error)
        return 1

    print("Parse success. We got:")
    pretty_print(sexps)
    print()

    if sexp_parser.recovered:
        logger.warning(f"Skipped {len(sexp_parser.recovered)} invalid region(s) in {args.input_file}")
        if args.strict:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
