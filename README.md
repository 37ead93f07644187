# primer

A collection of small, self-contained command-line tools and library
modules: text filters, temperature conversion, image generators, tiny HTTP
servers, a GitHub issue search client, value inspection helpers and a
deep-equality checker.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Every tool below can be run as a command after installation.

| Command | What it does |
| --- | --- |
| `primer-hello` | Prints a greeting. |
| `primer-echo [-n] [-s SEP] ARGS...` | Prints its arguments joined by `SEP` (a space by default); `-n` omits the trailing newline. |
| `primer-dup [FILES...]` | Prints each line that occurs more than once, with its count; reads standard input when no files are given. |
| `primer-dedup` | Prints each line of standard input once, dropping repeats. |
| `primer-charcount` | Counts the Unicode characters on standard input and the lengths of their UTF-8 encodings, and reports invalid bytes. |
| `primer-basename` | Strips directories and the last `.suffix` from each line of standard input. |
| `primer-comma NUMBERS...` | Inserts a comma at every power of 1000. |
| `primer-printints` | Prints `[1, 2, 3]`. |
| `primer-rev` | Shows a reversal and a rotation, then reverses the integers on each line of standard input. |
| `primer-boiling` | Prints the boiling point of water in °F and °C. |
| `primer-ftoc` | Prints two Fahrenheit-to-Celsius conversions. |
| `primer-cf NUMBERS...` | Treats each number as both °F and °C and converts it. |
| `primer-cross` | Prints the current operating system and architecture. |
| `primer-sha256` | Prints and compares the SHA-256 digests of `x` and `X`. |
| `primer-netflag` | Shows interface flags used as a bit field. |
| `primer-graph` | Demonstrates a directed graph held as a map of sets. |
| `primer-movie` | Prints a list of movies as compact and indented JSON, then their titles. |
| `primer-fetch URLS...` | Prints the body found at each URL, stopping at the first failure. |
| `primer-fetchall URLS...` | Fetches URLs in parallel and reports the time and size of each. |
| `primer-server [echo\|count\|report] [--host HOST] [--port PORT]` | Runs a small HTTP server (on `localhost:8000` by default) that echoes the request path, also counts requests (`/count` reports the count), or describes the whole request. |
| `primer-issues TERMS...` | Prints a table of GitHub issues matching the terms. |
| `primer-issueshtml TERMS...` | Prints the same issues as an HTML table. |
| `primer-issuesreport TERMS...` | Prints a text report of the issues, with their age in days. |
| `primer-lissajous [web]` | Writes an animated GIF of a random Lissajous figure to standard output, or serves one per request on `localhost:8000` with `web`. |
| `primer-mandelbrot [--func NAME] [--width W] [--height H]` | Writes a PNG fractal to standard output; `NAME` is `mandelbrot` (the default), `acos`, `sqrt` or `newton`. |
| `primer-surface` | Writes an SVG rendering of a 3-D surface to standard output. |
| `primer-jpeg` | Reads an image from standard input and writes it as JPEG, reporting the input format on standard error. |

For example:

```
primer-mandelbrot | primer-jpeg > mandelbrot.jpg
primer-comma 1 12 1234 1234567890
printf 'a\nb\na\n' | primer-dup
```

## Library use

The modules are usable on their own.

```python
from primer.word import is_palindrome
from primer.tempconv import Celsius, c_to_f, f_to_c
from primer.popcount import pop_count
from primer.equal import equal

is_palindrome("A man, a plan, a canal: Panama")   # True
str(f_to_c(212.0))                                 # '100°C'
pop_count(0xFF)                                    # 8
equal([1, 2, 3], [1, 2, 3])                        # True
```

Other modules include:

- `primer.strutil` — `basename`, `comma`, `ints_to_string`
- `primer.slices` — `nonempty`, `reverse`, `rotate_left`
- `primer.treesort` — `sort`, an in-place sort through a binary tree
- `primer.dup` and `primer.dedup` — count repeated lines, drop repeats
- `primer.charcount` — `count_chars` for UTF-8 byte data
- `primer.graph` — `Graph`, a directed graph of string nodes
- `primer.netflag` — `Flags` and helpers for testing and changing bits
- `primer.format` and `primer.display` — describe arbitrary values
- `primer.methods` — list the method signatures of a value
- `primer.params` — `unpack` query parameters into a dataclass instance
- `primer.github` — `search_issues` against the GitHub issue search API
- `primer.issues` — render search results as a table, HTML or a report
- `primer.movie` — encode `Movie` records as JSON
- `primer.fetch` — `fetch`, `fetch_report` and `fetch_all`
- `primer.servers` — request handlers and `serve`
- `primer.lissajous`, `primer.mandelbrot`, `primer.surface` — image generators

## What this package does not do

- It has no S-expression encoder, decoder or pretty printer; the
  `primer.sexpr` package is empty.
- It has no bzip2 compression writer or compression command.
- It has no HTTP endpoint that unpacks search parameters; `primer.params`
  offers `unpack` for use in your own handlers.