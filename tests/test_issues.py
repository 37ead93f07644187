import urllib.error
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from primer.github import Issue, IssuesSearchResult, User
from primer.issues import days_ago, format_table, main, render_html, render_report

CREATED = datetime(2014, 1, 1, tzinfo=timezone.utc)


def _issue(number, login, title, url="https://example.com/issues/1"):
    return Issue(
        number=number,
        html_url=url,
        title=title,
        state="open",
        user=User(login=login, html_url="https://example.com/" + login),
        created_at=CREATED,
    )


def test_format_table_matches_documented_layout():
    result = IssuesSearchResult(
        total_count=13,
        items=[
            _issue(5680, "eaigner", "encoding/json: set key converter on en/decoder"),
            _issue(6050, "gopherbot", "encoding/json: provide tokenizer"),
            _issue(9650, "cespare", "encoding/json: Decoding gives errPhase when unmarshaling"),
        ],
    )
    lines = format_table(result).splitlines()
    assert lines == [
        "13 issues:",
        "#5680    eaigner encoding/json: set key converter on en/decoder",
        "#6050  gopherbot encoding/json: provide tokenizer",
        "#9650    cespare encoding/json: Decoding gives errPhase when unmarshalin",
    ]


def test_days_ago_truncates():
    assert days_ago(CREATED, CREATED + timedelta(days=750, hours=23)) == 750
    assert days_ago(CREATED, CREATED) == 0


def test_render_report():
    result = IssuesSearchResult(
        total_count=13,
        items=[_issue(5680, "eaigner", "encoding/json: set key converter on en/decoder")],
    )
    out = render_report(result, CREATED + timedelta(days=750, hours=5))
    assert out == (
        "13 issues:\n"
        "----------------------------------------\n"
        "Number: 5680\n"
        "User:   eaigner\n"
        "Title:  encoding/json: set key converter on en/decoder\n"
        "Age:    750 days\n"
    )


def test_render_report_truncates_title():
    long_title = "t" * 100
    result = IssuesSearchResult(total_count=1, items=[_issue(1, "u", long_title)])
    out = render_report(result, CREATED)
    assert f"Title:  {long_title[:64]}\n" in out
    assert long_title[:65] not in out


def test_render_html_structure_and_escaping():
    result = IssuesSearchResult(total_count=1, items=[_issue(1, "u", "<b>x</b>")])
    out = render_html(result)
    assert "<h1>1 issues</h1>" in out
    assert "<td><a href='https://example.com/issues/1'>1</a></td>" in out
    assert "<td><a href='https://example.com/u'>u</a></td>" in out
    assert "&lt;b&gt;x&lt;/b&gt;" in out
    assert "<b>x</b>" not in out
    assert out.endswith("</tr>\n\n</table>\n")


def test_render_html_blocks_unsafe_urls():
    result = IssuesSearchResult(
        total_count=1, items=[_issue(1, "u", "t", url="javascript:alert(1)")]
    )
    out = render_html(result)
    assert "javascript:" not in out
    assert "href='#ZgotmplZ'" in out


def test_main_reports_network_failure(capsys):
    with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
        assert main(["json"]) == 1
    assert "down" in capsys.readouterr().err