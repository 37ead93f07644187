"""List the public methods of a value with their signatures."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from primer.format import _type_name

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08
_MISSING = object()


def _annotation_text(annotation: Any) -> str:
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and not hasattr(annotation, "__origin__"):
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return repr(annotation).replace("typing.", "")


def _param(name: str, annotations: dict, default: Any = _MISSING, prefix: str = "") -> str:
    text = prefix + name
    if name in annotations:
        text += ": " + _annotation_text(annotations[name])
        if default is not _MISSING:
            text += " = " + repr(default)
    elif default is not _MISSING:
        text += "=" + repr(default)
    return text


def _builtin_signature(text: str) -> str:
    inner = text.strip()[1:-1]
    parts = [p.strip() for p in inner.split(",") if p.strip()]
    parts = [p for p in parts if not p.startswith("$")]
    if parts and parts[0] == "/":
        parts = parts[1:]
    return "(" + ", ".join(parts) + ")"


def _signature_text(fn: Any) -> str:
    func = getattr(fn, "__func__", fn)
    code = getattr(func, "__code__", None)
    if code is None:
        text = getattr(fn, "__text_signature__", None)
        return _builtin_signature(text) if text else "(...)"

    skip = 1 if hasattr(fn, "__self__") and hasattr(fn, "__func__") else 0
    annotations = getattr(func, "__annotations__", None) or {}
    defaults = getattr(func, "__defaults__", None) or ()
    kwdefaults = getattr(func, "__kwdefaults__", None) or {}

    names = code.co_varnames
    npos = code.co_argcount
    nposonly = code.co_posonlyargcount
    nkw = code.co_kwonlyargcount
    positional = names[:npos]
    kwonly = names[npos:npos + nkw]
    rest = iter(names[npos + nkw:])
    varargs = next(rest) if code.co_flags & _CO_VARARGS else None
    varkw = next(rest) if code.co_flags & _CO_VARKEYWORDS else None

    parts = []
    first_default = npos - len(defaults)
    for i, name in enumerate(positional):
        if i < skip:
            continue
        default = defaults[i - first_default] if i >= first_default else _MISSING
        parts.append(_param(name, annotations, default))
        if i == nposonly - 1:
            parts.append("/")
    if varargs is not None:
        parts.append(_param(varargs, annotations, prefix="*"))
    elif kwonly:
        parts.append("*")
    for name in kwonly:
        parts.append(_param(name, annotations, kwdefaults.get(name, _MISSING)))
    if varkw is not None:
        parts.append(_param(varkw, annotations, prefix="**"))

    text = "(" + ", ".join(parts) + ")"
    if "return" in annotations:
        text += " -> " + _annotation_text(annotations["return"])
    return text


def method_signatures(x: Any) -> list[str]:
    """One line per public method of ``x``, sorted by name."""
    t = _type_name(x)
    lines = []
    for name in sorted(dir(type(x))):
        if name.startswith("_"):
            continue
        try:
            attr = getattr(x, name)
        except AttributeError:
            continue
        if not callable(attr) or isinstance(attr, type):
            continue
        lines.append(f"func ({t}) {name}{_signature_text(attr)}")
    return lines


def print_methods(x: Any, out: TextIO | None = None) -> None:
    """Write the type of ``x`` and its method set to ``out``."""
    if out is None:
        out = sys.stdout
    out.write(f"type {_type_name(x)}\n")
    for line in method_signatures(x):
        out.write(line + "\n")