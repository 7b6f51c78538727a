from anagram.anagram import (
    anagrams, count, factorial, get_next, is_anagram, occurences
)
