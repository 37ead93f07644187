import random

import pytest

from primer.word import is_palindrome, is_palindrome_naive


@pytest.mark.parametrize("text", ["detartrated", "kayak"])
def test_naive_palindrome(text):
    assert is_palindrome_naive(text) is True


def test_naive_non_palindrome():
    assert is_palindrome_naive("palindrome") is False


def test_naive_fails_on_french_palindrome():
    assert is_palindrome_naive("été") is False


def test_naive_fails_on_canal_palindrome():
    assert is_palindrome_naive("A man, a plan, a canal: Panama") is False


@pytest.mark.parametrize(
    "text, want",
    [
        ("", True),
        ("a", True),
        ("aa", True),
        ("ab", False),
        ("kayak", True),
        ("detartrated", True),
        ("A man, a plan, a canal: Panama", True),
        ("Evil I did dwell; lewd did I live.", True),
        ("Able was I ere I saw Elba", True),
        ("été", True),
        ("Et se resservir, ivresse reste.", True),
        ("palindrome", False),
        ("desserts", False),
    ],
)
def test_is_palindrome(text, want):
    assert is_palindrome(text) is want


def test_example():
    assert is_palindrome("A man, a plan, a canal: Panama") is True
    assert is_palindrome("palindrome") is False


def _random_palindrome(rng: random.Random) -> str:
    n = rng.randrange(25)
    runes = [""] * n
    for i in range((n + 1) // 2):
        r = chr(rng.randrange(0x1000))
        runes[i] = r
        runes[n - 1 - i] = r
    return "".join(runes)


def test_random_palindromes():
    rng = random.Random(20160101)
    for _ in range(1000):
        p = _random_palindrome(rng)
        assert is_palindrome(p), p