import random

import numpy as np
import pytest

from sacheck.bitvector import BitVector
from sacheck.errors import BitLengthMismatchError, PreconditionError
from sacheck.range_indices import retrieve_range_indices


def random_subset_pair(n, rng):
    top = [rng.randint(0, 1) for _ in range(n)]
    low = [bit & rng.randint(0, 1) for bit in top]
    return low, top


def test_single_position_in_range():
    assert retrieve_range_indices('01100', '01110') == [3]


@pytest.mark.parametrize('bits', ['', '0', '1', '0000', '1111', '1010011'])
def test_equal_encodings_give_nothing(bits):
    assert retrieve_range_indices(bits, bits) == []


@pytest.mark.parametrize('n', [0, 1, 7, 64, 65, 1000])
def test_empty_against_full(n):
    assert retrieve_range_indices([0] * n, [1] * n) == list(range(n))


@pytest.mark.parametrize('n', [1, 2, 10, 100, 513])
def test_random_subsets(n):
    rng = random.Random(n)
    for _ in range(20):
        low, top = random_subset_pair(n, rng)
        positions = retrieve_range_indices(low, top)
        expected = [i for i in range(n) if top[i] and not low[i]]
        assert positions == expected
        assert all(a < b for a, b in zip(positions, positions[1:]))


def test_accepts_bit_vectors_and_arrays():
    low = BitVector.from_positions(6, [1])
    top = np.array([0, 1, 1, 0, 0, 1], dtype=bool)
    assert retrieve_range_indices(low, top) == [2, 5]


def test_inputs_are_not_modified():
    low = BitVector('0100')
    top = BitVector('1101')
    retrieve_range_indices(low, top)
    assert str(low) == '0100'
    assert str(top) == '1101'


def test_positions_are_plain_ints():
    assert all(type(i) is int for i in retrieve_range_indices('000', '011'))


def test_length_mismatch_fails_fast():
    with pytest.raises(BitLengthMismatchError) as exc_info:
        retrieve_range_indices('0110', '01110')
    assert isinstance(exc_info.value, PreconditionError)
    assert exc_info.value.low_size == 4
    assert exc_info.value.top_size == 5


def test_non_subset_still_xors():
    assert retrieve_range_indices('101', '011') == [0, 1]
