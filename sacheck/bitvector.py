import numpy as np

from sacheck.errors import BitLengthMismatchError


class BitVector:
    """Fixed-length bit sequence with rank/select support.

    Bit i set means item i satisfies some bound predicate. The vector is
    never modified after construction; operators return new vectors.
    """

    def __init__(self, bits):
        if isinstance(bits, BitVector):
            bits = bits.bits
        elif isinstance(bits, str):
            bits = [int(b) for b in bits]
        raw = np.asarray(bits)
        if raw.ndim != 1:
            raise ValueError("bit vector must be one-dimensional")
        if raw.size and not np.isin(raw, (0, 1)).all():
            raise ValueError("bit vector entries must be 0 or 1")

        self.bits = raw.astype(np.uint8)
        self.size = len(self.bits)
        self.rank_support = np.zeros(self.size + 1, dtype=np.int64)
        self.rank_support[1:] = np.cumsum(self.bits)

    @classmethod
    def from_positions(cls, size, positions):
        positions = list(positions)
        outside = [p for p in positions if not 0 <= p < size]
        if outside:
            raise ValueError(f"positions {outside} are outside a bit vector of size {size}")
        bits = np.zeros(size, dtype=np.uint8)
        bits[positions] = 1
        return cls(bits)

    def __len__(self):
        return self.size

    def __getitem__(self, i):
        return int(self.bits[i])

    def __eq__(self, other):
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.bits, other.bits))

    def __xor__(self, other):
        if not isinstance(other, BitVector):
            return NotImplemented
        if self.size != other.size:
            raise BitLengthMismatchError(self.size, other.size)
        return BitVector(np.bitwise_xor(self.bits, other.bits))

    def __str__(self):
        return ''.join(str(b) for b in self.bits)

    def __repr__(self):
        return f"BitVector('{self}')"

    def count(self):
        """Population count."""
        return int(self.rank_support[-1])

    def rank(self, i):
        """Number of set bits in positions 0..i inclusive."""
        return int(self.rank_support[i + 1])

    def select(self, k):
        """Position of the k-th set bit (1-based), or -1 when there is none."""
        if k < 1 or k > self.count():
            return -1
        return int(np.searchsorted(self.rank_support, k)) - 1

    def ones(self):
        """Positions of the set bits, ascending."""
        return np.flatnonzero(self.bits)
