import bisect
import logging

from sacheck.bitvector import BitVector
from sacheck.range_indices import retrieve_range_indices


def as_symbols(seq):
    """Strings stay strings, any other symbol sequence becomes a tuple."""
    if isinstance(seq, str):
        return seq
    return tuple(seq)


def build_suffix_array(text):
    """Naive approach to build the suffix array."""
    suffixes = [(text[i:], i) for i in range(len(text))]
    suffixes.sort()  # Sort the suffixes lexicographically
    return [index for (_, index) in suffixes]


class SuffixArray:
    """Reference range-query engine over a text of characters or integer symbols."""

    def __init__(self, text):
        self.text = as_symbols(text)
        self.suffix_array = build_suffix_array(self.text)
        logging.debug(f"Built suffix array over {len(self.text)} symbols")

    def __len__(self):
        return len(self.suffix_array)

    def rank(self, bound):
        """Number of suffixes lexicographically smaller than bound."""
        bound = as_symbols(bound)
        return bisect.bisect_left(self.suffix_array, bound, key=lambda i: self.text[i:])

    def range_query(self, lower_bound, upper_bound):
        """Start positions of the suffixes in [lower_bound, upper_bound), ascending."""
        top = self.rank(lower_bound)
        bottom = self.rank(upper_bound)
        return sorted(self.suffix_array[top:bottom])

    def bound_bits(self, bound):
        """Bit i is set when the suffix starting at i is smaller than bound."""
        below = self.suffix_array[:self.rank(bound)]
        return BitVector.from_positions(len(self.text), below)

    def range_query_bits(self, lower_bound, upper_bound):
        """range_query answered through the lower/upper membership bit vectors."""
        low_bits = self.bound_bits(lower_bound)
        top_bits = self.bound_bits(upper_bound)
        return retrieve_range_indices(low_bits, top_bits)
