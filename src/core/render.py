"""
Text rendering of relation matrices.

Two forms are produced: the digit grid ("1 0 1") and the labeled set of
ordered pairs ("R = { (a, b), (b, c) }"). Index i is labeled with the i-th
lowercase letter, so pair sets are only rendered for universes of at most
26 elements; larger ones are skipped silently.
"""
from typing import List, Optional, Tuple

from src.config import Config
from src.core.matrix import RelationMatrix

LABEL_OFFSET = ord('a')


def label(i: int) -> str:
    if not 0 <= i < Config.LABEL_LIMIT:
        raise ValueError(f"No label for element {i}")
    return chr(LABEL_OFFSET + i)


def pairs(matrix: RelationMatrix) -> List[Tuple[int, int]]:
    """Related index pairs in row-major order."""
    return [(i, j) for i in range(matrix.n) for j in range(matrix.n) if matrix.get(i, j)]


def can_label(matrix: RelationMatrix) -> bool:
    return matrix.n <= Config.LABEL_LIMIT


def render_pairs(name: str, matrix: RelationMatrix) -> Optional[str]:
    """
    Render a relation as a set of labeled pairs.

    Args:
        name: Name of the relation shown before '=' (e.g. 'R' or 'R*')
        matrix: The relation to render

    Returns:
        The rendered line, or None when the universe is too large to label
    """
    if not can_label(matrix):
        return None

    body = ", ".join(f"({label(i)}, {label(j)})" for i, j in pairs(matrix))
    return f"{name} = {{ {body} }}"


def format_matrix(matrix: RelationMatrix) -> List[str]:
    """One line per row, cells as 0/1 separated by spaces."""
    return [" ".join('1' if cell else '0' for cell in row) for row in matrix.rows()]
