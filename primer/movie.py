"""Movies encoded as JSON."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

_HTML_SAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Movie:
    title: str
    year: int
    color: bool = False
    actors: list[str] | None = field(default_factory=list)


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def movie_to_dict(movie: Movie) -> dict[str, Any]:
    """The JSON object for ``movie``; ``color`` appears only when true."""
    d: dict[str, Any] = {"Title": movie.title, "released": movie.year}
    if movie.color:
        d["color"] = True
    d["Actors"] = movie.actors
    return d


def _html_safe(text: str) -> str:
    return "".join(_HTML_SAFE.get(ch, ch) for ch in text)


def marshal(movies: Iterable[Movie]) -> str:
    """Compact JSON for ``movies``."""
    data = [movie_to_dict(m) for m in movies]
    return _html_safe(json.dumps(data, separators=(",", ":"), ensure_ascii=False))


def marshal_indent(movies: Iterable[Movie]) -> str:
    """JSON for ``movies`` indented by four spaces."""
    data = [movie_to_dict(m) for m in movies]
    return _html_safe(json.dumps(data, indent=4, ensure_ascii=False))


def _lookup(obj: Mapping[str, Any], name: str) -> Any:
    if name in obj:
        return obj[name]
    for key, value in obj.items():
        if key.lower() == name.lower():
            return value
    return ""


def titles(data: str | bytes) -> list[str]:
    """The titles of the movies in a JSON array."""
    return [_lookup(item, "Title") for item in json.loads(data)]


def main(argv: list[str] | None = None) -> int:
    try:
        print(marshal(MOVIES))
        data = marshal_indent(MOVIES)
        print(data)
        names = titles(data)
    except (TypeError, ValueError) as exc:
        print(f"JSON marshaling failed: {exc}", file=sys.stderr)
        return 1
    print("[" + " ".join("{" + t + "}" for t in names) + "]")
    return 0