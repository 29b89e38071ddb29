"""Absent - the marker a callback returns to drop an element."""

from __future__ import annotations

import typing


@typing.final
class AbsentType:
    """
    Type of the Absent marker.

    There is exactly one instance. Compare with `is`, never with `==`,
    so that `None`, `0`, `""` and friends stay legitimate element values.
    """

    __slots__ = ()
    _instance: typing.ClassVar[AbsentType | None] = None

    def __new__(cls) -> AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Absent"


Absent: typing.Final = AbsentType()


def is_absent(value: object) -> typing.TypeGuard[AbsentType]:
    """True when value is the Absent marker."""
    return value is Absent


__all__ = ("Absent", "AbsentType", "is_absent")
