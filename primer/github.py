"""Search the GitHub issue tracker."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

ISSUES_URL = "https://api.github.com/search/issues"


class SearchError(Exception):
    """The search query was answered with an unsuccessful status."""


@dataclass
class User:
    login: str = ""
    html_url: str = ""


@dataclass
class Issue:
    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime | None = None
    body: str = ""  # in Markdown format


@dataclass
class IssuesSearchResult:
    total_count: int = 0
    items: list[Issue] = field(default_factory=list)


def _get(obj: Mapping[str, Any], name: str, default: Any = None) -> Any:
    """Look up ``name``, preferring an exact key and falling back to any case."""
    if name in obj:
        return obj[name]
    lowered = name.lower()
    for key, value in obj.items():
        if key.lower() == lowered:
            return value
    return default


def _parse_time(value: str | None) -> datetime | None:
    if value is None:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _parse_user(obj: Mapping[str, Any] | None) -> User | None:
    if obj is None:
        return None
    return User(login=_get(obj, "login", ""), html_url=_get(obj, "html_url", ""))


def _parse_issue(obj: Mapping[str, Any]) -> Issue:
    return Issue(
        number=_get(obj, "number", 0),
        html_url=_get(obj, "html_url", ""),
        title=_get(obj, "title", ""),
        state=_get(obj, "state", ""),
        user=_parse_user(_get(obj, "user")),
        created_at=_parse_time(_get(obj, "created_at")),
        body=_get(obj, "body", ""),
    )


def parse_search_result(data: str | bytes | Mapping[str, Any]) -> IssuesSearchResult:
    """Build a search result from a JSON document or an already decoded mapping."""
    obj = data if isinstance(data, Mapping) else json.loads(data)
    items = _get(obj, "items") or []
    return IssuesSearchResult(
        total_count=_get(obj, "total_count", 0),
        items=[_parse_issue(item) for item in items],
    )


def search_issues(terms: list[str]) -> IssuesSearchResult:
    """Query the issue tracker for ``terms``.

    Raises ``SearchError`` on an unsuccessful status and ``OSError`` when the
    server cannot be reached.
    """
    q = urllib.parse.quote_plus(" ".join(terms))
    url = f"{ISSUES_URL}?q={q}"
    try:
        with urllib.request.urlopen(url) as resp:
            status, reason = resp.status, resp.reason
            body = resp.read()
    except urllib.error.HTTPError as exc:
        raise SearchError(f"search query failed: {exc.code} {exc.reason}") from exc
    if status != 200:
        raise SearchError(f"search query failed: {status} {reason}")
    return parse_search_result(body)