"""Deep equality for arbitrary values, safe on cyclic structures."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from typing import Any

_SCALARS = (bool, int, float, complex, str, bytes)
_FUNCTIONS = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
)


def _state(obj: Any) -> dict[str, Any] | None:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return vars(obj)
    slots = getattr(type(obj), "__slots__", None)
    if slots is not None:
        names = (slots,) if isinstance(slots, str) else slots
        return {name: getattr(obj, name, None) for name in names}
    return None


def _equal_maps(x: Mapping, y: Mapping, seen: set[tuple[int, int]]) -> bool:
    if len(x) != len(y):
        return False
    for key, value in x.items():
        if key not in y or not _equal(value, y[key], seen):
            return False
    return True


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if x is None or y is None:
        return x is None and y is None
    if type(x) is not type(y):
        return False
    if isinstance(x, _SCALARS + _FUNCTIONS + (set, frozenset)):
        return x == y

    if x is y:
        return True  # identical references
    pair = (id(x), id(y))
    if pair in seen:
        return True  # already being compared
    seen.add(pair)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        return _equal_maps(x, y, seen)
    state = _state(x)
    if state is not None:
        other = _state(y)
        return other is not None and _equal_maps(state, other, seen)
    return x == y


def equal(x: Any, y: Any) -> bool:
    """Report whether ``x`` and ``y`` are deeply equal.

    Values must have the same type. Mapping keys are compared with ``==``,
    not deeply.
    """
    return _equal(x, y, set())