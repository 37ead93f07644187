"""Palindrome checks for word games."""

from __future__ import annotations


def is_palindrome_naive(s: str) -> bool:
    """Report whether ``s`` reads the same forward and backward.

    A first attempt: it compares the bytes of the UTF-8 encoding at the
    offset of each character. Case, punctuation and non-ASCII text defeat it.
    """
    data = s.encode("utf-8")
    last = len(data) - 1
    offset = 0
    for ch in s:
        if data[offset] != data[last - offset]:
            return False
        offset += len(ch.encode("utf-8"))
    return True


def is_palindrome(s: str) -> bool:
    """Report whether ``s`` reads the same forward and backward.

    Letter case is ignored, as are non-letters.
    """
    letters = [ch.lower()[0] for ch in s if ch.isalpha()]
    return letters == letters[::-1]