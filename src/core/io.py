"""
Line-oriented input sources and text sinks used by a Session.
"""
import sys
from typing import Iterable, List, Optional, Protocol, TextIO

from src.config import Config


class LineSource(Protocol):
    """Delivers one line of input at a time; returns '' at end of input."""

    def read_line(self, prompt: str = "") -> str: ...


class TextSink(Protocol):
    """Receives output one line at a time."""

    def write_line(self, text: str = "") -> None: ...


class ConsoleLineSource:
    """
    Reads lines from a stream, writing prompts to an output stream.

    At most max_line_length characters of a line are kept; the rest of an
    overlong line is read in bounded chunks and discarded, so it never
    spills into the next row.
    """

    def __init__(self, stream: Optional[TextIO] = None, prompt_stream: Optional[TextIO] = None,
                 show_prompts: bool = True, max_line_length: Optional[int] = None):
        self.stream = stream or sys.stdin
        self.prompt_stream = prompt_stream or sys.stdout
        self.show_prompts = show_prompts
        self.max_line_length = max_line_length if max_line_length is not None else Config.MAX_LINE_LENGTH

    def read_line(self, prompt: str = "") -> str:
        if prompt and self.show_prompts:
            self.prompt_stream.write(prompt)
            self.prompt_stream.flush()

        line = self.stream.readline(self.max_line_length)
        if not line or line.endswith('\n'):
            return line

        # Drop the remainder of the line
        while True:
            rest = self.stream.readline(self.max_line_length)
            if not rest or rest.endswith('\n'):
                return line


class IterableLineSource:
    """Serves lines from any iterable of strings (prompts are ignored)."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)

    def read_line(self, prompt: str = "") -> str:
        return next(self._lines, "")


class ConsoleTextSink:
    """Writes lines to a stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def write_line(self, text: str = "") -> None:
        self.stream.write(text + "\n")


class ListTextSink:
    """Collects written lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, text: str = "") -> None:
        self.lines.append(text)

    def getvalue(self) -> str:
        return "".join(line + "\n" for line in self.lines)
