import random

import pytest

from gopl.word import is_palindrome, is_palindrome_bytes


@pytest.mark.parametrize("word", ["detartrated", "kayak"])
def test_bytes_palindrome(word):
    assert is_palindrome_bytes(word) is True


def test_bytes_non_palindrome():
    assert is_palindrome_bytes("palindrome") is False


def test_bytes_version_fails_on_french():
    assert is_palindrome_bytes("été") is False


def test_bytes_version_fails_on_punctuation():
    assert is_palindrome_bytes("A man, a plan, a canal: Panama") is False


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


@pytest.mark.parametrize("seed", [1, 42, 2016])
def test_random_palindromes(seed):
    rng = random.Random(seed)
    failures = [p for p in (_random_palindrome(rng) for _ in range(1000)) if not is_palindrome(p)]
    assert failures == []