"""Exceptions raised by the closure core."""


class ClosureError(Exception):
    """Base class for errors raised while building or closing a relation."""


class InvalidSize(ClosureError, ValueError):
    """The universe size is not positive or exceeds the configured maximum."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        if size <= 0:
            message = f"Universe size must be positive, got {size}"
        else:
            message = f"Universe size {size} exceeds the maximum of {max_size}"
        super().__init__(message)
