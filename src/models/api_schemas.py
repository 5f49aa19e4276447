"""Pydantic models for the closure HTTP API."""
from typing import List, Optional, Tuple, Union
from pydantic import BaseModel, Field, field_validator


# ============================================================================
# Closure
# ============================================================================

class ClosureRequest(BaseModel):
    """Request to compute the transitive closure of a relation."""

    rows: List[str] = Field(..., min_length=1)
    """Matrix rows as entered at the console, e.g. ["1010", "0100", ...]"""

    @field_validator('rows')
    @classmethod
    def validate_rows(cls, v: List[str]) -> List[str]:
        """Rows are single lines; embedded line breaks would shift the matrix."""
        for row in v:
            if '\n' in row.rstrip('\r\n'):
                raise ValueError("Rows cannot contain line breaks")
        return v


class ClosureResponse(BaseModel):
    """A relation and its transitive closure."""

    size: int
    """Universe size n, fixed by the first row"""

    relation: List[List[int]]
    """The relation matrix as 0/1 cells"""

    closure: List[List[int]]
    """The transitive closure matrix as 0/1 cells"""

    relation_set: Optional[str] = None
    """The relation as a labeled pair set (None when n > 26)"""

    closure_set: Optional[str] = None
    """The closure as a labeled pair set (None when n > 26)"""

    relation_is_transitive: bool = False
    """Whether the relation already equals its closure"""

    added_pairs: List[Union[Tuple[str, str], Tuple[int, int]]] = Field(default_factory=list)
    """Pairs present in the closure but not in the relation"""

    output: List[str] = Field(default_factory=list)
    """Lines a console session would print for the same rows"""


# ============================================================================
# Health
# ============================================================================

class HealthResponse(BaseModel):
    """Service status and limits."""

    status: str
    max_universe_size: int


# ============================================================================
# Error Response
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    """Error message describing what went wrong"""
