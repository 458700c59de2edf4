from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.strings import (
    MOD,
    distinct_subsequences,
    longest_common_subsequence,
    number_search,
    reverse_each_word,
    reverse_words,
    smallest_string,
)

lowercase = st.text(alphabet="abcz", min_size=1, max_size=12)


def test_smallest_string_single_a():
    assert smallest_string("a") == "z"


def test_smallest_string_example():
    assert smallest_string("cbabc") == "baabc"


@given(st.integers(min_value=1, max_value=10))
def test_smallest_string_all_a(n):
    assert smallest_string("a" * n) == "a" * (n - 1) + "z"


@given(lowercase.filter(lambda s: set(s) != {"a"}))
def test_smallest_string_shifts_one_block(s):
    result = smallest_string(s)
    assert len(result) == len(s)
    assert result < s
    changed = [i for i, (x, y) in enumerate(zip(s, result)) if x != y]
    assert changed[0] == len(s) - len(s.lstrip("a"))
    assert changed == list(range(changed[0], changed[-1] + 1))
    assert all(ord(s[i]) - ord(result[i]) == 1 for i in changed)


def test_smallest_string_empty_raises():
    with pytest.raises(ValueError):
        smallest_string("")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("H3ello9-9", 4),
        ("One Number*1*", 0),
        ("Hello6 9World 2, Nic8e D7ay!", 2),
    ],
)
def test_number_search_examples(text, expected):
    assert number_search(text) == expected


def test_number_search_without_letters_raises():
    with pytest.raises(ValueError):
        number_search("123 !")


def test_reverse_words_example():
    assert reverse_words("i like this program very much") == "much very program this like i"


@given(st.text(alphabet="ab "))
def test_reverse_words_involution(s):
    assert reverse_words(reverse_words(s)) == s


@given(st.text(alphabet="abc "))
def test_reverse_each_word_involution_and_spaces(s):
    result = reverse_each_word(s)
    assert reverse_each_word(result) == s
    assert [i for i, ch in enumerate(result) if ch == " "] == [
        i for i, ch in enumerate(s) if ch == " "
    ]
    assert sorted(result) == sorted(s)


def _all_subsequences(s):
    return {"".join(c) for r in range(len(s) + 1) for c in combinations(s, r)}


@given(st.text(alphabet="abc", max_size=8))
def test_distinct_subsequences_brute_force(s):
    assert distinct_subsequences(s) == len(_all_subsequences(s))


@given(st.integers(min_value=0, max_value=30))
def test_distinct_subsequences_repeated_letter(n):
    assert distinct_subsequences("a" * n) == n + 1


def test_distinct_subsequences_is_reduced():
    result = distinct_subsequences("abcdefghijklmnopqrstuvwxyz" * 3)
    assert 0 <= result < MOD


@given(st.text(alphabet="abcd", max_size=10))
def test_lcs_with_itself(s):
    assert longest_common_subsequence(s, s) == len(s)
    assert longest_common_subsequence(s, "") == 0


@given(st.text(alphabet="abcd", max_size=10), st.text(alphabet="abcd", max_size=10))
def test_lcs_symmetric_and_bounded(a, b):
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert 0 <= result <= min(len(a), len(b))


@given(st.text(alphabet="abcd", max_size=12))
def test_lcs_with_own_subsequence(s):
    sub = s[::2]
    assert longest_common_subsequence(s, sub) == len(sub)