"""
Transitive closure of a relation matrix (Warshall's algorithm).

After the pass for hop k, w[i][j] is True iff j is reachable from i through a
path whose intermediate elements all lie in {0, ..., k}. The k loop must stay
outermost.
"""
import logging
import time

from src.core.matrix import RelationMatrix

logger = logging.getLogger(__name__)


def compute_closure(matrix: RelationMatrix) -> RelationMatrix:
    """
    Compute the transitive closure of a relation in O(n^3).

    Args:
        matrix: The relation matrix (left untouched)

    Returns:
        A new matrix holding the smallest transitive relation containing matrix
    """
    started = time.perf_counter()
    w = matrix.copy()
    n = w.n

    for k in range(n):
        for i in range(n):
            for j in range(n):
                w.set(i, j, w.get(i, j) or (w.get(i, k) and w.get(k, j)))

    logger.debug(f"Closure of {n}x{n} matrix computed in {time.perf_counter() - started:.6f}s")
    return w


def is_transitive(matrix: RelationMatrix) -> bool:
    """Check that (i, k) and (k, j) in the relation always imply (i, j)."""
    n = matrix.n
    for i in range(n):
        for k in range(n):
            if not matrix.get(i, k):
                continue
            for j in range(n):
                if matrix.get(k, j) and not matrix.get(i, j):
                    return False
    return True
