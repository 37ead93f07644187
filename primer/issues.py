"""Present issue search results as a text table, an HTML page or a report."""

from __future__ import annotations

import sys
import urllib.parse
from datetime import datetime, timezone

from primer.github import Issue, IssuesSearchResult, SearchError, search_issues

_HTML_ESCAPES = {
    "&": "&amp;",
    "'": "&#39;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "+": "&#43;",
    "\0": "\ufffd",
}
_SAFE_SCHEMES = {"http", "https", "mailto"}
_UNSAFE_URL = "#ZgotmplZ"
_RULE = "-" * 40


def _escape(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)


def _url(url: str) -> str:
    colon = url.find(":")
    if colon >= 0 and "/" not in url[:colon]:
        if url[:colon].lower() not in _SAFE_SCHEMES:
            return _UNSAFE_URL
    return _escape(urllib.parse.quote(url, safe="!#$%&'()*+,-./:;=?@[]_~"))


def _login(issue: Issue) -> str:
    return issue.user.login if issue.user else ""


def format_table(result: IssuesSearchResult) -> str:
    """One line per issue: number, user and title, truncated to fit."""
    lines = [f"{result.total_count} issues:\n"]
    for item in result.items:
        lines.append(f"#{item.number:<5d} {_login(item)[:9]:>9} {item.title[:55]}\n")
    return "".join(lines)


def render_html(result: IssuesSearchResult) -> str:
    """An HTML table of the issues, with text and links escaped."""
    parts = [
        f"\n<h1>{result.total_count} issues</h1>\n"
        "<table>\n"
        "<tr style='text-align: left'>\n"
        "  <th>#</th>\n"
        "  <th>State</th>\n"
        "  <th>User</th>\n"
        "  <th>Title</th>\n"
        "</tr>\n"
    ]
    for item in result.items:
        user_url = item.user.html_url if item.user else ""
        parts.append(
            "\n<tr>\n"
            f"  <td><a href='{_url(item.html_url)}'>{item.number}</a></td>\n"
            f"  <td>{_escape(item.state)}</td>\n"
            f"  <td><a href='{_url(user_url)}'>{_escape(_login(item))}</a></td>\n"
            f"  <td><a href='{_url(item.html_url)}'>{_escape(item.title)}</a></td>\n"
            "</tr>\n"
        )
    parts.append("\n</table>\n")
    return "".join(parts)


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Whole days elapsed from ``t`` to ``now``."""
    if now is None:
        now = datetime.now(timezone.utc)
    return int((now - t).total_seconds() / 3600 / 24)


def render_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """A plain-text report with one block per issue."""
    parts = [f"{result.total_count} issues:\n"]
    for item in result.items:
        created = item.created_at or datetime.min.replace(tzinfo=timezone.utc)
        parts.append(
            f"{_RULE}\n"
            f"Number: {item.number}\n"
            f"User:   {_login(item)}\n"
            f"Title:  {item.title[:64]}\n"
            f"Age:    {days_ago(created, now)} days\n"
        )
    return "".join(parts)


def _run(argv: list[str] | None, render) -> int:
    terms = sys.argv[1:] if argv is None else argv
    try:
        result = search_issues(terms)
    except (SearchError, OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(render(result), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    return _run(argv, format_table)


def html_main(argv: list[str] | None = None) -> int:
    return _run(argv, render_html)


def report_main(argv: list[str] | None = None) -> int:
    return _run(argv, render_report)