"""intset exception hierarchy.

Keep this module small and dependency-free: it is imported by the core set
type, the config loader and the CLI.
"""


class IntSetError(Exception):
    """Base exception for all intset errors."""


class IntSetCapacityError(IntSetError):
    """Raised when an add or union would exceed a set's fixed capacity."""

    def __init__(self, message: str, *, capacity: int, requested: int) -> None:
        super().__init__(message)
        self.capacity = capacity
        self.requested = requested


class IntSetConfigError(IntSetError):
    """Raised for invalid configuration or command line operands."""
