"""Small introductory programs: greeting, temperatures, platform, hashing."""

from __future__ import annotations

import argparse
import hashlib
import platform
import sys

from primer.tempconv import Celsius, Fahrenheit

BOILING_F = 212.0

_OS_NAMES = {"win32": "windows", "cygwin": "windows"}
_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}


def greeting() -> str:
    return "Hello, 世界"


def fahrenheit_to_celsius(f: float) -> float:
    return (f - 32) * 5 / 9


def boiling_point() -> str:
    """Describe the boiling point of water in both scales."""
    f = Fahrenheit(BOILING_F)
    c = Celsius(fahrenheit_to_celsius(f))
    return f"boiling point = {f} or {c}"


def platform_pair() -> tuple[str, str]:
    """Return the operating system and processor architecture names."""
    os_name = sys.platform
    for prefix in ("linux", "freebsd", "openbsd", "netbsd"):
        if os_name.startswith(prefix):
            os_name = prefix
    os_name = _OS_NAMES.get(os_name, os_name)
    machine = platform.machine().lower()
    return os_name, _ARCH_NAMES.get(machine, machine)


def sha256_comparison(a: bytes | str, b: bytes | str) -> tuple[str, str, bool]:
    """Return the hex SHA-256 digests of ``a`` and ``b`` and whether they match."""
    da = hashlib.sha256(a.encode() if isinstance(a, str) else a).digest()
    db = hashlib.sha256(b.encode() if isinstance(b, str) else b).digest()
    return da.hex(), db.hex(), da == db


def _accept_args(prog: str, description: str, argv: list[str] | None) -> None:
    """Handle ``--help``; any other arguments are ignored."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.parse_known_args(argv)


def hello_main(argv: list[str] | None = None) -> int:
    _accept_args("helloworld", "Print a greeting.", argv)
    sys.stdout.write(f"{greeting()}\n")
    return 0


def boiling_main(argv: list[str] | None = None) -> int:
    _accept_args("boiling", "Print the boiling point of water.", argv)
    sys.stdout.write(f"{boiling_point()}\n")
    return 0


def ftoc_main(argv: list[str] | None = None) -> int:
    _accept_args("ftoc", "Print two Fahrenheit-to-Celsius conversions.", argv)
    for f in (32.0, BOILING_F):
        print(f"{Fahrenheit(f)} = {Celsius(fahrenheit_to_celsius(f))}")
    return 0


def cross_main(argv: list[str] | None = None) -> int:
    _accept_args("cross", "Print the operating system and architecture.", argv)
    os_name, arch = platform_pair()
    sys.stdout.write(f"{os_name} {arch}\n")
    return 0


def sha256_main(argv: list[str] | None = None) -> int:
    _accept_args("sha256", "Compare the SHA-256 digests of x and X.", argv)
    first, second, same = sha256_comparison(b"x", b"X")
    print(first)
    print(second)
    print("true" if same else "false")
    return 0