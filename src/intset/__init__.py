from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from intset.bounded import MAX_SIZE, BoundedIntSet, equal
from intset.errors import IntSetCapacityError, IntSetConfigError, IntSetError


def _package_version() -> str:
    try:
        return version("intset")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = [
    "MAX_SIZE",
    "BoundedIntSet",
    "IntSetCapacityError",
    "IntSetConfigError",
    "IntSetError",
    "__version__",
    "equal",
]
