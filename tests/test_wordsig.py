"""
Tests for pattern signatures.
"""
from itertools import product

import pytest

from wordsig import is_good, signature_of


def bijective(a, b):
    """Brute-force check for a consistent one-to-one substitution a -> b."""
    if len(a) != len(b):
        return False
    fwd, back = {}, {}
    for x, y in zip(a, b):
        if fwd.setdefault(x, y) != y or back.setdefault(y, x) != x:
            return False
    return True


class TestSignature:

    @pytest.mark.parametrize("word, expected", [
        ("egg", (0, 1, 1)),
        ("add", (0, 1, 1)),
        ("abc", (0, 1, 2)),
        ("aa", (0, 0)),
        ("banana", (0, 1, 2, 1, 2, 1)),
        ("x", (0,)),
    ])
    def test_known_words(self, word, expected):
        sig, _ = signature_of(word)
        assert sig == expected

    def test_empty_word(self):
        assert signature_of("") == ((), False)

    def test_any_hashable_units(self):
        sig, good = signature_of(["the", "cat", "the"])
        assert sig == (0, 1, 0)
        assert good

    def test_unicode_code_points(self):
        assert signature_of("ééa")[0] == signature_of("xxy")[0]

    def test_different_lengths_never_match(self):
        assert signature_of("aab")[0] != signature_of("aabb")[0]

    def test_matches_bijection_on_small_alphabet(self):
        words = ["".join(p) for p in product("abc", repeat=3)]
        for a in words:
            for b in words:
                assert (signature_of(a)[0] == signature_of(b)[0]) == bijective(a, b), (a, b)


class TestGoodness:

    def test_repeated_character_is_good(self):
        assert signature_of("egg")[1]
        assert signature_of("aa")[1]

    def test_all_distinct_is_not_good(self):
        assert not signature_of("abc")[1]
        assert not signature_of("z")[1]

    def test_is_good_on_raw_signature(self):
        assert is_good((0, 1, 0))
        assert not is_good((0, 1, 2))
        assert not is_good(())

    def test_good_iff_repeat(self):
        for word in ("".join(p) for p in product("ab", repeat=3)):
            assert signature_of(word)[1] == (len(set(word)) < len(word))
