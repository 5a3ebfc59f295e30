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
S-Expression Parser

Recursive parser for KiCad S-expression files (.kicad_sch, .kicad_pcb).

An item is the first literal recognizer that matches at the current offset,
or a parenthesized list of items. When a parenthesized region cannot be
parsed, the parser skips to its matching ')' and emits an Invalid node, so
one corrupt subtree does not take its siblings down with it. Anything that
cannot be recovered that way fails the whole parse with SexpParseError.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .sexp_literals import LITERAL_RECOGNIZERS, LiteralMismatch, skip_whitespace
from .sexp_nodes import Invalid, Sexp, SexpList, Span


logger = logging.getLogger(__name__)


def line_col(text: str, pos: int) -> Tuple[int, int]:
    """1-based line and column of an offset."""
    line = text.count('\n', 0, pos) + 1
    column = pos - (text.rfind('\n', 0, pos) + 1) + 1
    return line, column


def _join_expected(expected: Tuple[str, ...]) -> str:
    if not expected:
        return "something else"
    if len(expected) == 1:
        return expected[0]
    return ", ".join(expected[:-1]) + " or " + expected[-1]


@dataclass(frozen=True)
class ParseDiagnostic:
    """Where parsing went wrong and what would have been accepted there."""
    span: Span
    line: int
    column: int
    expected: Tuple[str, ...]
    found: Optional[str]

    def __str__(self):
        found = repr(self.found) if self.found is not None else "end of input"
        return (f"line {self.line}, column {self.column}: "
                f"found {found}, expected {_join_expected(self.expected)}")


class SexpParseError(Exception):
    """Raised when the input cannot be parsed, even with recovery."""

    def __init__(self, errors: List[ParseDiagnostic]):
        self.errors = list(errors)
        message = f"Parse error at {self.errors[-1]}"
        if len(self.errors) > 1:
            message += f" ({len(self.errors)} errors)"
        super().__init__(message)


class SexpParser:
    """Recursive S-expression parser with bracket-skipping recovery."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)
        # One diagnostic per Invalid node in the result
        self.recovered: List[ParseDiagnostic] = []
        self._failure_pos = -1
        self._expected: List[str] = []
        # Offset of the most recently opened '(' for nesting errors
        self._innermost_open = 0

    def parse(self) -> List[Sexp]:
        """Parse the whole text into its top-level nodes."""
        self.pos = 0
        self.recovered = []
        self._failure_pos = -1
        self._expected = []
        self._innermost_open = 0

        try:
            result = self.parse_items()
        except RecursionError:
            raise SexpParseError([self._nesting_diagnostic()]) from None

        self.pos = skip_whitespace(self.text, self.pos)
        if self.pos < self.length:
            self._fail(self.pos, "end of input")
            raise SexpParseError(self.recovered + [self._diagnostic()])

        return result

    def parse_items(self) -> List[Sexp]:
        """Parse items until one fails to match."""
        items = []
        while True:
            item = self.parse_item()
            if item is None:
                return items
            items.append(item)

    def parse_item(self) -> Optional[Sexp]:
        """Parse a literal, a list, or a skipped region. Returns None if nothing fits."""
        start = self.pos
        saved_failure = (self._failure_pos, list(self._expected))

        for node_type, recognizer in LITERAL_RECOGNIZERS:
            try:
                span, end = recognizer(self.text, start)
            except LiteralMismatch as e:
                self._fail(e.pos, e.expected)
                continue
            self.pos = end
            return node_type(self.text[span[0]:span[1]], span)

        node = self.parse_list()
        if node is not None:
            return node

        return self._recover(start, saved_failure)

    def parse_list(self) -> Optional[SexpList]:
        """
        Parse a list (parenthesized expression).

        Whitespace is allowed right after '(', so '( )' is an empty list. The
        original KiCad-sexp grammar rejects that form and skips it as invalid.
        """
        start = self.pos
        open_pos = skip_whitespace(self.text, start)

        if open_pos >= self.length or self.text[open_pos] != '(':
            self._fail(open_pos, "'('")
            return None

        self._innermost_open = open_pos
        mark = len(self.recovered)
        self.pos = skip_whitespace(self.text, open_pos + 1)
        items = self.parse_items()

        if self.pos < self.length and self.text[self.pos] == ')':
            close_pos = self.pos + 1
            self.pos = skip_whitespace(self.text, close_pos)
            return SexpList(tuple(items), (open_pos, close_pos))

        # Recoveries inside a list that failed anyway are not part of the result
        self._fail(self.pos, "')'")
        del self.recovered[mark:]
        self.pos = start
        return None

    def _recover(self, start: int, saved_failure) -> Optional[Invalid]:
        """Skip a bracketed region up to its matching ')'."""
        open_pos = skip_whitespace(self.text, start)
        if open_pos >= self.length or self.text[open_pos] != '(':
            self.pos = start
            return None

        depth = 0
        close_pos = -1
        for pos in range(open_pos, self.length):
            char = self.text[pos]
            if char == '(':
                depth += 1
            elif char == ')':
                depth -= 1
                if depth == 0:
                    close_pos = pos + 1
                    break

        if close_pos < 0:
            self.pos = start
            return None

        diagnostic = self._diagnostic()
        self._failure_pos, self._expected = saved_failure
        self.recovered.append(diagnostic)
        logger.debug(f"Skipped invalid region at offsets {open_pos}-{close_pos}: {diagnostic}")

        self.pos = skip_whitespace(self.text, close_pos)
        return Invalid((open_pos, close_pos))

    def _fail(self, pos: int, expected: str):
        """Remember the furthest point any alternative reached."""
        if pos > self._failure_pos:
            self._failure_pos = pos
            self._expected = [expected]
        elif pos == self._failure_pos and expected not in self._expected:
            self._expected.append(expected)

    def _diagnostic(self) -> ParseDiagnostic:
        pos = self._failure_pos
        found = self.text[pos] if pos < self.length else None
        end = pos + 1 if found is not None else pos
        line, column = line_col(self.text, pos)
        return ParseDiagnostic((pos, end), line, column, tuple(self._expected), found)

    def _nesting_diagnostic(self) -> ParseDiagnostic:
        pos = self._innermost_open
        line, column = line_col(self.text, pos)
        return ParseDiagnostic((pos, pos + 1), line, column, ("shallower nesting",), '(')


def parse_sexp(string: str) -> List[Sexp]:
    """
    Parse a S-expression string into its top-level nodes.

    Malformed parenthesized regions come back as Invalid nodes; use
    SexpParser directly to also get a diagnostic for each of them.

    Raises:
        SexpParseError: If the text cannot be parsed
    """
    parser = SexpParser(string)
    result = parser.parse()

    if parser.recovered:
        logger.debug(f"Parsed with {len(parser.recovered)} invalid region(s)")

    return result
