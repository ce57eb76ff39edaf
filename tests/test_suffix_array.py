import random

import pytest

from sacheck.suffix_array import SuffixArray, as_symbols, build_suffix_array


def brute_range(text, lower_bound, upper_bound):
    return [i for i in range(len(text)) if lower_bound <= text[i:] < upper_bound]


def test_build_suffix_array():
    assert build_suffix_array("banana") == [5, 3, 1, 0, 4, 2]
    assert build_suffix_array("") == []


def test_as_symbols():
    assert as_symbols("abc") == "abc"
    assert as_symbols([1, 2]) == (1, 2)


def test_range_query_banana():
    engine = SuffixArray("banana")
    assert engine.range_query("a", "b") == [1, 3, 5]
    assert engine.range_query("ba", "bb") == [0]
    assert engine.range_query("n", "n") == []
    assert engine.range_query("x", "z") == []


def test_rank():
    engine = SuffixArray("banana")
    assert engine.rank("") == 0
    assert engine.rank("b") == 3
    assert engine.rank("z") == 6


def test_bound_bits():
    engine = SuffixArray("banana")
    assert str(engine.bound_bits("b")) == '010101'
    assert str(engine.bound_bits("")) == '000000'


def test_range_query_bits_banana():
    engine = SuffixArray("banana")
    assert engine.range_query_bits("a", "b") == [1, 3, 5]
    assert engine.range_query_bits("ba", "bb") == [0]


def test_integer_symbols():
    engine = SuffixArray([3, 1, 2, 1])
    assert engine.suffix_array == [3, 1, 2, 0]
    assert engine.range_query([1], [2]) == [1, 3]
    assert engine.range_query_bits((1,), (2,)) == [1, 3]


@pytest.mark.parametrize('alphabet', ['ab', 'acgt', 'abcdefghij'])
def test_random_texts_against_brute_force(alphabet):
    rng = random.Random(alphabet)
    for _ in range(30):
        text = ''.join(rng.choice(alphabet) for _ in range(rng.randint(1, 40)))
        engine = SuffixArray(text)
        for _ in range(10):
            lower_bound, upper_bound = sorted(
                ''.join(rng.choice(alphabet) for _ in range(rng.randint(0, 4))) for _ in range(2))
            expected = brute_range(text, lower_bound, upper_bound)
            assert engine.range_query(lower_bound, upper_bound) == expected
            assert engine.range_query_bits(lower_bound, upper_bound) == expected


def test_lower_bits_are_subset_of_upper_bits():
    engine = SuffixArray("mississippi$")
    low = engine.bound_bits("is")
    top = engine.bound_bits("ss")
    assert all(t for l, t in zip(low.bits, top.bits) if l)
