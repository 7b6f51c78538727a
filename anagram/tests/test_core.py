from itertools import permutations

from anagram._anagram import freq_table, next_permutation


def test_freq_table():
    table = freq_table("helloworldhello")
    assert table["l"] == 5
    assert table["o"] == 3
    assert table["z"] == 0
    assert freq_table("") == {}


def test_next_permutation_in_place():
    seq = [1, 2, 3]
    assert next_permutation(seq) is None
    assert seq == [1, 3, 2]
    seq = [3, 2, 1]
    next_permutation(seq)
    assert seq == [1, 2, 3]


def test_next_permutation_multiset():
    obj = [1, 2, 2, 4]
    res = [tuple(obj)]
    for _ in range(11):
        next_permutation(obj)
        res.append(tuple(obj))
    # ordered, hence list check
    assert res == sorted(set(permutations((1, 4, 2, 2))))
    next_permutation(obj)
    assert obj == [1, 2, 2, 4]


def test_next_permutation_trivial():
    for seq in ([], [7], [7, 7]):
        before = list(seq)
        next_permutation(seq)
        assert seq == before
