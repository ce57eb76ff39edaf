import bisect
import logging
import numbers
import re
from operator import itemgetter

from sacheck.errors import (BoundOrderError, InputTooLargeError, PositionOutOfRangeError, ScenarioFormatError,
                            ScenarioIOError)
from sacheck.suffix_array import SuffixArray, as_symbols

# naive_check is quadratic in the text length
NAIVE_CHECK_LIMIT = 100

_CHAR = re.compile(r'\S')
_TOKEN = re.compile(r'\S+')


class _ScenarioReader:
    """Whitespace-skipping token reader over the text of a scenario file."""

    def __init__(self, text, symbol_type):
        if symbol_type not in (str, int):
            raise ValueError(f"unsupported symbol type: {symbol_type!r}")
        self.text = text
        self.symbol_type = symbol_type
        self.pos = 0

    def _next(self, pattern, what):
        match = pattern.search(self.text, self.pos)
        if match is None:
            raise ScenarioFormatError(f"unexpected end of input while reading {what}")
        self.pos = match.end()
        return match.group()

    def read_int(self, what, signed=False):
        token = self._next(_TOKEN, what)
        try:
            value = int(token)
        except ValueError:
            raise ScenarioFormatError(f"expected an integer for {what}, got {token!r}") from None
        if value < 0 and not signed:
            raise ScenarioFormatError(f"{what} must not be negative, got {value}")
        return value

    def read_symbols(self, what):
        """Length followed by that many symbols."""
        size = self.read_int(f"length of {what}")
        if self.symbol_type is str:
            return ''.join(self._next(_CHAR, what) for _ in range(size))
        return tuple(self.read_int(what, signed=True) for _ in range(size))


def _format_symbols(symbols):
    if isinstance(symbols, str):
        if any(c.isspace() for c in symbols):
            raise ScenarioFormatError(f"whitespace symbols cannot be stored: {symbols!r}")
        return f"{len(symbols)} {symbols}" if symbols else "0"
    return ' '.join(str(s) for s in (len(symbols), *symbols))


class RangeCase:
    """
    One range-query scenario: a text, a lower and an upper bound prefix and
    the suffix start positions expected for them.

    The expected positions are kept sorted ascending. Candidates produced by
    an engine can be validated against them with check(), or against a brute
    force recomputation from the text with naive_check().
    """

    def __init__(self, data, lower_bound, upper_bound, output):
        self._data = as_symbols(data)
        self._lower_bound = as_symbols(lower_bound)
        self._upper_bound = as_symbols(upper_bound)
        _check_bounds(self._data, self._lower_bound, self._upper_bound)
        # sort to guarantee that order is preserved
        self._output = sorted(int(i) for i in output)
        for position in self._output:
            if not 0 <= position < len(self._data):
                raise PositionOutOfRangeError(position, len(self._data))

    @classmethod
    def from_engine(cls, data, lower_bound, upper_bound, engine_factory=SuffixArray):
        """Author a case whose output is whatever the engine answers. The engine is trusted."""
        _check_bounds(as_symbols(data), as_symbols(lower_bound), as_symbols(upper_bound))
        engine = engine_factory(data)
        output = engine.range_query(lower_bound, upper_bound)
        logging.debug(f"Engine reported {len(output)} positions for [{lower_bound!r}, {upper_bound!r})")
        return cls(data, lower_bound, upper_bound, output)

    @classmethod
    def loads(cls, text, symbol_type=str):
        reader = _ScenarioReader(text, symbol_type)
        data = reader.read_symbols("text")
        lower_bound = reader.read_symbols("lower bound")
        upper_bound = reader.read_symbols("upper bound")
        count = reader.read_int("output size")
        output = [reader.read_int("output position") for _ in range(count)]
        for position in output:
            if position >= len(data):
                raise ScenarioFormatError(f"output position {position} is outside a text of length {len(data)}")
        return cls(data, lower_bound, upper_bound, output)

    @classmethod
    def load(cls, path, symbol_type=str):
        """
        Read a case from a file laid out as

            [length of text] [text]
            [length of lower bound] [lower bound]
            [length of upper bound] [upper bound]
            [N = number of positions] [N integers]
        """
        try:
            with open(path, encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            logging.error(f"Problem opening file: {path}")
            raise ScenarioIOError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            logging.error(f"Error reading {path}")
            raise ScenarioFormatError(f"{path}: not valid UTF-8 text") from e

        try:
            return cls.loads(text, symbol_type)
        except ScenarioFormatError as e:
            logging.error(f"Error reading {path}: {e}")
            raise ScenarioFormatError(f"{path}: {e}") from e

    def dumps(self):
        blocks = [
            _format_symbols(self._data),
            _format_symbols(self._lower_bound),
            _format_symbols(self._upper_bound),
            _format_symbols(self._output),
        ]
        return '\n'.join(blocks) + '\n'

    def save(self, path):
        content = self.dumps()
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            logging.error(f"Problem writing file: {path}")
            raise ScenarioIOError(path, e.strerror or str(e)) from e

    @property
    def data(self):
        return self._data

    @property
    def lower_bound(self):
        return self._lower_bound

    @property
    def upper_bound(self):
        return self._upper_bound

    @property
    def output(self):
        return list(self._output)

    def check(self, candidate):
        """Exact replay: candidate must equal the stored output in order. It is not re-sorted."""
        return _same_positions(self._output, candidate)

    def naive_check(self, candidate):
        """
        Recompute the answer from the text alone and compare it with candidate.

        Only meant for very small cases; texts longer than NAIVE_CHECK_LIMIT
        raise InputTooLargeError. A suffix is counted when it is strictly
        greater than the lower bound and strictly smaller than the upper bound.
        """
        n = len(self._data)
        if n > NAIVE_CHECK_LIMIT:
            logging.error(f"Text length is too big: {n}")
            raise InputTooLargeError(n, NAIVE_CHECK_LIMIT)

        # (suffix, start) pairs so no start position is ever dropped
        suffixes = sorted((self._data[i:], i) for i in range(n))
        low = bisect.bisect_right(suffixes, self._lower_bound, key=itemgetter(0))
        up = bisect.bisect_left(suffixes, self._upper_bound, key=itemgetter(0))
        expected = sorted(start for _, start in suffixes[low:up])
        return _same_positions(expected, candidate)

    def __eq__(self, other):
        if not isinstance(other, RangeCase):
            return NotImplemented
        return (self._data, self._lower_bound, self._upper_bound, self._output) == \
            (other._data, other._lower_bound, other._upper_bound, other._output)

    def __repr__(self):
        return (f"RangeCase(data={self._data!r}, lower_bound={self._lower_bound!r}, "
                f"upper_bound={self._upper_bound!r}, output={self._output!r})")


def _check_bounds(data, lower_bound, upper_bound):
    if len({isinstance(s, str) for s in (data, lower_bound, upper_bound)}) > 1:
        raise TypeError("text and bounds must use the same symbol type")
    if not isinstance(data, str):
        # only integer tuples can be written and read back
        for symbols in (data, lower_bound, upper_bound):
            if not all(isinstance(s, numbers.Integral) and not isinstance(s, bool) for s in symbols):
                raise TypeError(f"symbol sequences must be strings or integer tuples, got {symbols!r}")
    if lower_bound > upper_bound:
        raise BoundOrderError(lower_bound, upper_bound)


def _same_positions(expected, candidate):
    candidate = list(candidate)
    if len(expected) != len(candidate):
        return False
    return all(a == b for a, b in zip(expected, candidate))
