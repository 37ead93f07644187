"""Fetch URLs, one at a time or all at once, reporting times and sizes."""

from __future__ import annotations

import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed

_CHUNK = 32 * 1024


def _open(url: str):
    """Open ``url``; an HTTP error status still yields its response body."""
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as exc:
        return exc


def fetch(url: str) -> bytes:
    """Return the body found at ``url``.

    Raises ``OSError`` when the server cannot be reached or the body cannot
    be read, and ``ValueError`` for a malformed URL.
    """
    with _open(url) as resp:
        return resp.read()


def fetch_report(url: str) -> str:
    """Fetch ``url``, discard the body and describe the time and size taken.

    Failures are described in the returned text rather than raised.
    """
    start = time.perf_counter()
    try:
        resp = _open(url)
    except (OSError, ValueError) as exc:
        return str(exc)
    nbytes = 0
    try:
        with resp:
            while chunk := resp.read(_CHUNK):
                nbytes += len(chunk)
    except OSError as exc:
        return f"while reading {url}: {exc}"
    secs = time.perf_counter() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch every URL concurrently, yielding reports as they complete."""
    urls = list(urls)
    if not urls:
        return
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(fetch_report, url) for url in urls]
        for future in as_completed(futures):
            yield future.result()


def main(argv: list[str] | None = None) -> int:
    """Print the content found at each URL; stop at the first failure."""
    urls = sys.argv[1:] if argv is None else argv
    sys.stdout.flush()
    out = sys.stdout.buffer
    for url in urls:
        try:
            resp = _open(url)
        except (OSError, ValueError) as exc:
            print(f"fetch: {exc}", file=sys.stderr)
            return 1
        try:
            with resp:
                body = resp.read()
        except OSError as exc:
            print(f"fetch: reading {url}: {exc}", file=sys.stderr)
            return 1
        out.write(body)
    out.flush()
    return 0


def fetchall_main(argv: list[str] | None = None) -> int:
    """Fetch all URLs in parallel and report their times and sizes."""
    urls = sys.argv[1:] if argv is None else argv
    start = time.perf_counter()
    for report in fetch_all(urls):
        print(report)
    print(f"{time.perf_counter() - start:.2f}s elapsed")
    return 0