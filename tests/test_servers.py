import threading
import urllib.request
from http.server import ThreadingHTTPServer

import pytest

from primer.servers import (
    CountingHandler,
    EchoHandler,
    ReportHandler,
    path_reply,
    request_report,
)


@pytest.fixture(autouse=True)
def _no_proxy(monkeypatch):
    for name in ("http_proxy", "HTTP_PROXY", "all_proxy", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)


def _running(handler_class):
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler_class)
    threading.Thread(target=server.serve_forever, daemon=True).start()
    return server


@pytest.fixture
def serve_with():
    servers = []

    def start(handler_class):
        server = _running(handler_class)
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}"

    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


def _get(url, headers=None):
    req = urllib.request.Request(url, headers=headers or {})
    with urllib.request.urlopen(req) as resp:
        return resp.read().decode("utf-8")


def test_path_reply_quotes_path():
    assert path_reply("/hello") == 'URL.Path = "/hello"\n'


def test_path_reply_escapes():
    assert path_reply('/a"b\n') == 'URL.Path = "/a\\"b\\n"\n'


def test_request_report_layout():
    report = request_report(
        "GET",
        "/?q=1",
        "HTTP/1.1",
        {"Accept": ["*/*"], "X-Two": ["a", "b"]},
        "localhost:8000",
        "127.0.0.1:5555",
        {"q": ["1"]},
    )
    assert report.splitlines() == [
        "GET /?q=1 HTTP/1.1",
        'Header["Accept"] = ["*/*"]',
        'Header["X-Two"] = ["a" "b"]',
        'Host = "localhost:8000"',
        'RemoteAddr = "127.0.0.1:5555"',
        'Form["q"] = ["1"]',
    ]


def test_echo_handler(serve_with):
    base = serve_with(EchoHandler)
    body = _get(base + "/some/path?x=1")
    assert body == 'URL.Path = "/some/path"\n'
    assert body == path_reply("/some/path")


def test_counting_handler_counts(serve_with):
    base = serve_with(CountingHandler)
    before = _get(base + "/count")
    assert before.startswith("Count ")
    n = int(before.split()[1])
    assert _get(base + "/abc") == path_reply("/abc")
    assert _get(base + "/def") == 'URL.Path = "/def"\n'
    assert _get(base + "/count") == f"Count {n + 2}\n"


def test_report_handler(serve_with):
    base = serve_with(ReportHandler)
    target = "/?q=query&q=more&empty="
    body = _get(base + target, headers={"X-Custom": "value"})
    lines = body.splitlines()
    host = base.removeprefix("http://")
    expected = request_report(
        "GET", target, "HTTP/1.1", {}, host, "", {"q": ["query", "more"]}
    ).splitlines()
    assert lines[0] == expected[0] == "GET /?q=query&q=more&empty= HTTP/1.1"
    assert 'Header["X-Custom"] = ["value"]' in lines
    assert f'Host = "{host}"' in lines
    assert 'Form["q"] = ["query" "more"]' in lines
    assert expected[-1] in lines
    assert 'Form["empty"] = [""]' in lines
    assert not any(line.startswith('Header["Host"]') for line in lines)