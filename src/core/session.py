"""
Interactive session: read a relation row by row, print it and its closure.

The first row fixes the universe size n; the remaining n - 1 rows are parsed
against that n whatever their own length.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from src.config import Config
from src.core.closure import compute_closure
from src.core.io import LineSource, TextSink
from src.core.matrix import RelationMatrix
from src.core.parser import parse_row, strip_terminator, universe_size
from src.core.render import format_matrix, render_pairs

logger = logging.getLogger(__name__)

INTRODUCTION = (
    "We'll build the nxn relation matrix one row at a time. For example,",
    "entering the first row as 1010 will result in a 4x4 matrix.",
)


@dataclass
class SessionResult:
    """Matrices computed by a session run"""
    matrix: RelationMatrix
    closure: RelationMatrix


class Session:
    """Drives one relation from input lines to rendered output."""

    def __init__(self, source: LineSource, sink: TextSink,
                 max_size: Optional[int] = None, max_line_length: Optional[int] = None,
                 interactive: bool = True):
        self.source = source
        self.sink = sink
        self.max_size = max_size if max_size is not None else Config.MAX_UNIVERSE_SIZE
        self.max_line_length = max_line_length if max_line_length is not None else Config.MAX_LINE_LENGTH
        self.interactive = interactive

    def _read_row(self, number: int) -> str:
        line = self.source.read_line(f"Enter row {number}: ")
        return strip_terminator(line)[:self.max_line_length]

    def read_matrix(self) -> RelationMatrix:
        """
        Read the whole relation from the line source.

        Raises:
            InvalidSize: If the first row is empty or too long
        """
        if self.interactive:
            for line in INTRODUCTION:
                self.sink.write_line(line)
            self.sink.write_line()

        first = self._read_row(1)
        n = universe_size(first, self.max_size, self.max_line_length)
        matrix = RelationMatrix(n, max_size=self.max_size)
        matrix.set_row(0, parse_row(first, n))

        for i in range(1, n):
            row = self._read_row(i + 1)
            values = parse_row(row, n)
            logger.debug(f"Row {i + 1}: {row!r} -> {values}")
            matrix.set_row(i, values)

        return matrix

    def write_relation(self, heading: str, name: str, matrix: RelationMatrix) -> None:
        self.sink.write_line()
        self.sink.write_line(heading)
        self.sink.write_line()
        for line in format_matrix(matrix):
            self.sink.write_line(line)

        rendered = render_pairs(name, matrix)
        if rendered is not None:
            self.sink.write_line()
            self.sink.write_line(rendered)

    def run(self) -> SessionResult:
        """Read the relation, compute its closure and write both."""
        matrix = self.read_matrix()
        n = matrix.n
        logger.debug(f"Read a {n}x{n} relation matrix")

        self.sink.write_line()
        self.sink.write_line(f"Created a {n} x {n} matrix.")
        self.write_relation("Matrix of the relation R:", "R", matrix)

        closure = compute_closure(matrix)
        self.write_relation("Matrix of its transitive closure R*:", "R*", closure)

        return SessionResult(matrix=matrix, closure=closure)
