"""Populate dataclass fields from URL query parameters."""

from __future__ import annotations

import dataclasses
import re
import typing
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import parse_qsl

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_NAMED_TYPES = {"str": str, "int": int, "bool": bool, "float": float, "list": list}
_LIST_TEXT = re.compile(r"(?:typing\.)?(?:list|List)\[(.+)\]")


class ParamError(ValueError):
    """A request parameter could not be parsed or stored."""


def _parse_query(query: str) -> dict[str, list[str]]:
    """Parse a URL query string into lists of values per name."""
    bad = _BAD_ESCAPE.search(query)
    if bad:
        raise ParamError(f'invalid URL escape "{query[bad.start():bad.start() + 3]}"')
    form: dict[str, list[str]] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        form.setdefault(key, []).append(value)
    return form


def _parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f'strconv.ParseBool: parsing "{value}": invalid syntax')


def _parse_int(value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise ValueError(f'strconv.ParseInt: parsing "{value}": invalid syntax')
    n = int(value)
    if not _INT64_MIN <= n <= _INT64_MAX:
        raise ValueError(f'strconv.ParseInt: parsing "{value}": value out of range')
    return n


def _type_label(t: Any) -> str:
    return getattr(t, "__name__", None) or str(t)


def _populate(t: Any, value: str) -> Any:
    if t is str:
        return value
    if t is bool:
        return _parse_bool(value)
    if t is int:
        return _parse_int(value)
    raise ValueError(f"unsupported kind {_type_label(t)}")


def _resolve(annotation: Any) -> Any:
    """Turn a field annotation written as text into the type it names."""
    if not isinstance(annotation, str):
        return annotation
    text = annotation.strip()
    match = _LIST_TEXT.fullmatch(text)
    if match:
        return list[_resolve(match.group(1))]
    return _NAMED_TYPES.get(text, text)


def _list_element(annotation: Any) -> Any | None:
    if typing.get_origin(annotation) is list:
        args = typing.get_args(annotation)
        return args[0] if args else str
    if annotation is list:
        return str
    return None


def unpack(query: str | Mapping[str, Sequence[str]], target: Any) -> None:
    """Set the fields of the dataclass instance ``target`` from ``query``.

    A field is matched by its ``http`` metadata entry, or else by its
    lower-cased name. List fields collect every value; other fields take
    each value in turn. Unknown parameters are ignored. Raises
    ``ParamError`` for a malformed query or a value that does not convert.
    """
    if not dataclasses.is_dataclass(target) or isinstance(target, type):
        raise TypeError("unpack target must be a dataclass instance")
    form = _parse_query(query) if isinstance(query, str) else query

    fields: dict[str, tuple[str, Any]] = {}
    for f in dataclasses.fields(target):
        key = f.metadata.get("http") or f.name.lower()
        fields[key] = (f.name, _resolve(f.type))

    for name, values in form.items():
        if name not in fields:
            continue
        attr, annotation = fields[name]
        elem = _list_element(annotation)
        for value in values:
            try:
                if elem is not None:
                    current = getattr(target, attr) or []
                    setattr(target, attr, [*current, _populate(elem, value)])
                else:
                    setattr(target, attr, _populate(annotation, value))
            except ValueError as exc:
                raise ParamError(f"{name}: {exc}") from exc