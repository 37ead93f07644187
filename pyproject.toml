[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primer"
version = "0.1.0"
description = "Small command-line tools and libraries: line counting, echo, temperature conversion, fractals, HTTP servers, issue search, deep equality and more"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "examples",
    "palindrome",
    "popcount",
    "mandelbrot",
    "lissajous",
    "deep-equality",
    "command-line",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
primer-dup = "primer.dup:main"
primer-echo = "primer.echo:main"
primer-hello = "primer.basics:hello_main"
primer-boiling = "primer.basics:boiling_main"
primer-ftoc = "primer.basics:ftoc_main"
primer-cross = "primer.basics:cross_main"
primer-sha256 = "primer.basics:sha256_main"
primer-cf = "primer.tempconv:main"
primer-basename = "primer.strutil:basename_main"
primer-comma = "primer.strutil:comma_main"
primer-printints = "primer.strutil:printints_main"
primer-netflag = "primer.netflag:main"
primer-fetch = "primer.fetch:main"
primer-fetchall = "primer.fetch:fetchall_main"
primer-server = "primer.servers:main"
primer-lissajous = "primer.lissajous:main"
primer-mandelbrot = "primer.mandelbrot:main"
primer-surface = "primer.surface:main"
primer-jpeg = "primer.jpeg:main"
primer-rev = "primer.slices:main"
primer-charcount = "primer.charcount:main"
primer-dedup = "primer.dedup:main"
primer-graph = "primer.graph:main"
primer-issues = "primer.issues:main"
primer-issueshtml = "primer.issues:html_main"
primer-issuesreport = "primer.issues:report_main"
primer-movie = "primer.movie:main"

[tool.hatch.build.targets.wheel]
packages = ["primer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
