import io
import sys
from collections import Counter

from primer.dup import count_lines, count_text, duplicates, main


LINES = ["apple", "pear", "apple", "plum", "apple", "pear"]


def _set_stdin(monkeypatch, data: bytes) -> None:
    stream = io.TextIOWrapper(io.BytesIO(data), encoding="utf-8", newline="\n")
    monkeypatch.setattr(sys, "stdin", stream)


def test_count_lines_matches_counter():
    stream = io.StringIO("\n".join(LINES) + "\n")
    assert count_lines(stream) == Counter(LINES)


def test_count_lines_strips_crlf_and_handles_last_line():
    stream = io.StringIO("x\r\ny\r\nx")
    counts = count_lines(stream)
    assert set(counts) == {"x", "y"}
    assert counts["x"] == LINES.count("apple") - 1


def test_count_lines_accumulates_into_given_counter():
    counts = Counter()
    count_lines(io.StringIO("a\n"), counts)
    result = count_lines(io.StringIO("a\n"), counts)
    assert result is counts
    assert counts["a"] == len(["a", "a"])


def test_count_text_counts_trailing_empty_piece():
    counts = count_text("q\nq\n")
    assert counts["q"] == len(["q", "q"])
    assert counts[""] == len([""])


def test_duplicates_only_reports_repeated_lines():
    counts = Counter(LINES)
    found = dict(duplicates(counts))
    assert "plum" not in found
    assert found["apple"] == LINES.count("apple")
    assert found["pear"] == LINES.count("pear")
    assert all(n > 1 for n in found.values())


def test_main_reads_files_and_reports_missing(tmp_path, capsys):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("alpha\nbeta\n", encoding="utf-8")
    second.write_text("alpha\ngamma\n", encoding="utf-8")
    missing = tmp_path / "absent.txt"

    status = main([str(first), str(missing), str(second)])

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "2\talpha\n"
    assert captured.err.startswith("dup: ")


def test_main_reads_stdin_when_no_files(monkeypatch, capsys):
    _set_stdin(monkeypatch, b"z\nz\nw\n")
    main([])
    out = capsys.readouterr().out
    assert out.splitlines() == ["2\tz"]