"""Resource models: snapshot sentinel and errors."""

from __future__ import annotations

from typing import Final


class UnknownFieldError(LookupError):
    """Raised when a field name is not declared by the resource type."""

    pass


class _Null:
    """Snapshot marker for a field explicitly observed as empty."""

    __slots__ = ()
    _instance: _Null | None = None

    def __new__(cls) -> _Null:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[type[_Null], tuple[()]]:
        return (_Null, ())


NULL: Final = _Null()
"""Snapshot value meaning "known empty and clean".

Distinct from a missing snapshot, which means "dirty regardless of value".
"""
