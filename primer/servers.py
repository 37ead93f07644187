"""Minimal HTTP servers that echo the request path, count requests or report requests."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from collections.abc import Mapping, Sequence
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, unquote, urlsplit

_log = logging.getLogger(__name__)

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _quote(s: str) -> str:
    """Double-quote ``s`` with backslash escapes for special characters."""
    parts = ['"']
    for ch in s:
        code = ord(ch)
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif code < 0x80:
            parts.append(f"\\x{code:02x}")
        elif code < 0x10000:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def _quote_list(values: Sequence[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def _canonical(name: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def path_reply(path: str) -> str:
    """Describe the path component of a request URL."""
    return f"URL.Path = {_quote(path)}\n"


def request_report(
    method: str,
    target: str,
    proto: str,
    headers: Mapping[str, Sequence[str]],
    host: str,
    remote_addr: str,
    form: Mapping[str, Sequence[str]],
) -> str:
    """Describe a request: its start line, headers, host, peer and form values."""
    lines = [f"{method} {target} {proto}\n"]
    lines.extend(f"Header[{_quote(k)}] = {_quote_list(v)}\n" for k, v in headers.items())
    lines.append(f"Host = {_quote(host)}\n")
    lines.append(f"RemoteAddr = {_quote(remote_addr)}\n")
    lines.extend(f"Form[{_quote(k)}] = {_quote_list(v)}\n" for k, v in form.items())
    return "".join(lines)


class _TextHandler(BaseHTTPRequestHandler):
    def _reply(self, text: str) -> None:
        body = text.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _url_path(self) -> str:
        return unquote(urlsplit(self.path).path)

    def log_message(self, format, *args):
        _log.debug("%s - %s", self.address_string(), format % args)


class EchoHandler(_TextHandler):
    """Echo the path component of every requested URL."""

    def do_GET(self) -> None:
        self._reply(path_reply(self._url_path()))


class CountingHandler(_TextHandler):
    """Echo the path and count requests; ``/count`` reports the count."""

    count = 0
    _lock = threading.Lock()

    def do_GET(self) -> None:
        cls = type(self)
        if self._url_path() == "/count":
            with cls._lock:
                text = f"Count {cls.count}\n"
            self._reply(text)
            return
        with cls._lock:
            cls.count += 1
        self._reply(path_reply(self._url_path()))


class ReportHandler(_TextHandler):
    """Describe the request back to the client."""

    def do_GET(self) -> None:
        headers: dict[str, list[str]] = {}
        for name, value in self.headers.items():
            key = _canonical(name)
            if key != "Host":
                headers.setdefault(key, []).append(value)
        form = parse_qs(urlsplit(self.path).query, keep_blank_values=True)
        host, port = self.client_address[:2]
        self._reply(
            request_report(
                self.command,
                self.path,
                self.request_version,
                headers,
                self.headers.get("Host", ""),
                f"{host}:{port}",
                form,
            )
        )


def serve(handler_class: type[BaseHTTPRequestHandler], address: tuple[str, int] = ("localhost", 8000)) -> None:
    """Serve requests with ``handler_class`` until interrupted."""
    with ThreadingHTTPServer(address, handler_class) as httpd:
        httpd.serve_forever()


_HANDLERS = {"echo": EchoHandler, "count": CountingHandler, "report": ReportHandler}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="server", description="Run a small HTTP server.")
    parser.add_argument("kind", nargs="?", choices=sorted(_HANDLERS), default="echo")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    ns = parser.parse_args(argv)
    try:
        serve(_HANDLERS[ns.kind], (ns.host, ns.port))
    except OSError as exc:
        print(f"server: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0