from __future__ import annotations

import intset


def test_core_names_are_exported() -> None:
    s = intset.BoundedIntSet([1, 2])
    assert intset.equal(s, intset.BoundedIntSet([2, 1]))
    assert intset.MAX_SIZE == 256


def test_exceptions_are_exported() -> None:
    from intset import (  # noqa: PLC0415
        IntSetCapacityError,
        IntSetConfigError,
        IntSetError,
    )

    for exc in (IntSetError, IntSetCapacityError, IntSetConfigError):
        assert issubclass(exc, Exception)


def test_version_is_a_string() -> None:
    assert isinstance(intset.__version__, str)
    assert intset.__version__
