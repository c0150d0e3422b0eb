"""Error formatting and actionable hints for intset CLI output.

Only depends on the error hierarchy.
"""

from __future__ import annotations

from intset.errors import IntSetCapacityError, IntSetConfigError


def format_hint(exc: BaseException) -> str | None:
    """Return an actionable hint for a known error, or None."""
    msg = str(exc)

    if isinstance(exc, IntSetCapacityError):
        return (
            f"pass --capacity {exc.requested} (or larger), "
            "or raise set.max_size in intset.toml"
        )

    if isinstance(exc, IntSetConfigError):
        if "intset.toml" in msg and "find" in msg.lower():
            return "create an intset.toml containing `version = 1`, or drop --root"
        if "not an integer" in msg:
            return "separate members with commas or spaces, e.g. '3,1,4'"
        return None

    return None


def format_error_with_hint(exc: BaseException) -> str:
    """Format error message + optional hint for stderr output."""
    msg = (str(exc) or repr(exc)).strip()

    result = f"error: {msg}"
    hint = format_hint(exc)
    if hint:
        result += f"\nhint: {hint}"
    return result
