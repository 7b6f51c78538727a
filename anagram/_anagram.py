"""
core routines. arguments are assumed valid; type checks occur in
anagram.anagram.
"""
from collections import Counter
from math import factorial as _math_factorial, prod

from anagram.antypes import FreqTable, OrderedT


def factorial(n: int) -> int:
    # python ints don't overflow, so this is exact for any n
    return _math_factorial(n)


def freq_table(word: str) -> FreqTable:
    return Counter(word)


def count(word: str) -> int:
    denominator = prod(factorial(f) for f in freq_table(word).values())
    return factorial(len(word)) // denominator


def occurences(haystack: str, needle: str) -> int:
    width = len(needle)
    if width > len(haystack):
        return 0
    target, window = freq_table(needle), freq_table(haystack[:width])
    matches = int(window == target)
    for i in range(width, len(haystack)):
        incoming, outgoing = haystack[i], haystack[i - width]
        window[incoming] += 1
        window[outgoing] -= 1
        # zero entries would break == against target
        if window[outgoing] == 0:
            del window[outgoing]
        matches += window == target
    return matches


def is_anagram(a: str, b: str) -> bool:
    if len(a) != len(b):
        return False
    return freq_table(a) == freq_table(b)


def next_permutation(seq: list[OrderedT]) -> None:
    """
    Rearrange seq in place into its lexicographic successor, wrapping the
    last arrangement around to the first (ascending) one.
    """
    i = len(seq) - 2
    while i >= 0 and not seq[i] < seq[i + 1]:
        i -= 1
    if i < 0:
        seq.reverse()
        return
    j = len(seq) - 1
    while not seq[i] < seq[j]:
        j -= 1
    seq[i], seq[j] = seq[j], seq[i]
    seq[i + 1:] = reversed(seq[i + 1:])


def get_next(word: str) -> str:
    chars = list(word)
    next_permutation(chars)
    return "".join(chars)


def anagrams(word: str) -> tuple[str, ...]:
    chars = sorted(word)
    perms = []
    for _ in range(count(word)):
        perms.append("".join(chars))
        next_permutation(chars)
    return tuple(perms)
