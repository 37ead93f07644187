"""Display the structure of a value, one line per leaf."""

from __future__ import annotations

import dataclasses
import sys
import types
from collections.abc import Iterator
from typing import Any, TextIO

from primer.format import _type_name, format_atom

_DYNAMIC_ANNOTATIONS = {Any, object, "Any", "object", "typing.Any"}


def _is_dynamic(annotation: Any) -> bool:
    try:
        return annotation in _DYNAMIC_ANNOTATIONS
    except TypeError:
        return False


def _is_struct(v: Any) -> bool:
    if dataclasses.is_dataclass(v) and not isinstance(v, type):
        return True
    if isinstance(v, tuple) and hasattr(type(v), "_fields"):
        return True
    return (
        hasattr(v, "__dict__")
        and not callable(v)
        and not isinstance(v, types.ModuleType)
        and type(v).__module__ != "builtins"
    )


def _fields(v: Any) -> Iterator[tuple[str, Any, bool]]:
    """Yield ``(name, value, dynamic)`` for each field of ``v``."""
    hints = getattr(type(v), "__annotations__", {})
    if dataclasses.is_dataclass(v):
        for f in dataclasses.fields(v):
            yield f.name, getattr(v, f.name), _is_dynamic(f.type)
    elif isinstance(v, tuple):
        for name in type(v)._fields:
            yield name, getattr(v, name), _is_dynamic(hints.get(name))
    else:
        for name, value in vars(v).items():
            yield name, value, _is_dynamic(hints.get(name))


def _display(path: str, v: Any, out: TextIO) -> None:
    if v is None:
        out.write(f"{path} = nil\n")
    elif _is_struct(v):
        for name, value, dynamic in _fields(v):
            field_path = f"{path}.{name}"
            if dynamic and value is not None:
                out.write(f"{field_path}.type = {_type_name(value)}\n")
                _display(field_path + ".value", value, out)
            else:
                _display(field_path, value, out)
    elif isinstance(v, (list, tuple)):
        for i, item in enumerate(v):
            _display(f"{path}[{i}]", item, out)
    elif isinstance(v, dict):
        for key, value in v.items():
            _display(f"{path}[{format_atom(key)}]", value, out)
    else:
        out.write(f"{path} = {format_atom(v)}\n")


def display(name: str, x: Any, out: TextIO | None = None) -> None:
    """Write the structure of ``x`` to ``out``, naming the root ``name``.

    Fields annotated as ``Any`` or ``object`` show the type of what they
    hold before its value. Cyclic values recurse without end.
    """
    if out is None:
        out = sys.stdout
    if x is None:
        out.write(f"Display {name} (<nil>):\n{name} = invalid\n")
        return
    out.write(f"Display {name} ({_type_name(x)}):\n")
    _display(name, x, out)