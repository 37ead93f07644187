"""Format any value as a string without inspecting its structure."""

from __future__ import annotations

from typing import Any

from primer.servers import _quote

_REFERENCE_TYPES = (list, dict, set, bytearray)


def _type_name(v: Any) -> str:
    """The name of the type of ``v``, qualified by module unless built in."""
    t = type(v)
    if t.__module__ == "builtins":
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


def format_atom(v: Any) -> str:
    """Format ``v`` without looking inside it.

    Mutable containers and callables are shown by type and identity;
    other compound values only by type. Floats are not formatted.
    """
    if v is None:
        return "invalid"
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int):
        return str(int(v))
    if isinstance(v, str):
        return _quote(str(v))
    if isinstance(v, _REFERENCE_TYPES) or callable(v):
        return f"{_type_name(v)} 0x{id(v):x}"
    return f"{_type_name(v)} value"


def format_any(value: Any) -> str:
    """Format any value as a string."""
    return format_atom(value)