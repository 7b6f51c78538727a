from anagram import _anagram
from anagram.antypes import T, WordFunc


def _anwrap(func: WordFunc[T], *words: str) -> T:
    for position, word in enumerate(words):
        if not isinstance(word, str):
            raise TypeError(
                f"Argument {position} must be str, not {type(word).__name__}"
            )
    return func(*words)


def factorial(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Argument must be int, not {type(n).__name__}")
    if n < 0:
        raise ValueError("factorial() not defined for negative values")
    return _anagram.factorial(n)


def count(word: str) -> int:
    """Number of distinct arrangements of the characters of word."""
    return _anwrap(_anagram.count, word)


def occurences(haystack: str, needle: str) -> int:
    """
    Number of (possibly overlapping) windows of haystack that are anagrams
    of needle. An empty needle matches at all len(haystack) + 1 positions.
    """
    return _anwrap(_anagram.occurences, haystack, needle)


def is_anagram(a: str, b: str) -> bool:
    return _anwrap(_anagram.is_anagram, a, b)


def get_next(word: str) -> str:
    """
    Next lexicographically greater arrangement of word's characters. The
    greatest arrangement wraps around to the smallest, e.g. "cba" -> "abc".
    """
    return _anwrap(_anagram.get_next, word)


def anagrams(word: str) -> tuple[str, ...]:
    """All distinct arrangements of word, in lexicographic order."""
    return _anwrap(_anagram.anagrams, word)
