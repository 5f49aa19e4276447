"""
Row parsing for relation matrices entered as text.

A row is a string of characters where position p describes cell (row, p):
'1' means related, anything else (or nothing at all) means not related.
"""
import logging
from typing import List, Optional

from src.config import Config
from src.core.errors import InvalidSize

logger = logging.getLogger(__name__)


def strip_terminator(line: str) -> str:
    """Remove a trailing line terminator ('\\n' or '\\r\\n')."""
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


def parse_row(line: str, n: int) -> List[bool]:
    """
    Convert one line of input into n booleans.

    Short lines are padded with False and characters past position n are
    ignored, so this never fails on malformed input.
    """
    return [p < len(line) and line[p] == '1' for p in range(n)]


def universe_size(first_line: str, max_size: Optional[int] = None,
                  max_line_length: Optional[int] = None) -> int:
    """
    Derive the universe size n from the first row entered.

    Args:
        first_line: The first line read, possibly with its terminator
        max_size: Largest accepted universe size (default: from config)
        max_line_length: Characters of input considered (default: from config)

    Returns:
        The number of characters in the first row

    Raises:
        InvalidSize: If the row is empty or longer than max_size
    """
    if max_size is None:
        max_size = Config.MAX_UNIVERSE_SIZE
    if max_line_length is None:
        max_line_length = Config.MAX_LINE_LENGTH

    row = strip_terminator(first_line)[:max_line_length]
    n = len(row)
    if n <= 0 or n > max_size:
        raise InvalidSize(n, max_size)

    logger.debug(f"First row {row!r} fixes the universe size at {n}")
    return n
