from sacheck.bitvector import BitVector


def retrieve_range_indices(low_bits, top_bits):
    """
    Positions set in top_bits but not in low_bits, ascending.

    low_bits must be a bit-subset of top_bits: every item passing the lower
    bound test also passes the upper one. Under that condition XOR clears
    exactly the items below the lower bound, leaving the items inside the
    range. The subset condition is not checked; the XOR is returned as-is
    when it does not hold.
    """
    low_bits = BitVector(low_bits)
    top_bits = BitVector(top_bits)

    # raises BitLengthMismatchError on differing sizes
    in_range = low_bits ^ top_bits

    # flatnonzero sizes the result to the popcount and scans low to high
    return in_range.ones().tolist()
