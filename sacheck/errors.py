class HarnessError(Exception):
    """Base class for every failure raised by the verification kit."""


class ScenarioIOError(HarnessError, OSError):
    """A scenario file could not be opened, read or written."""

    def __init__(self, path, message):
        self.path = path
        super().__init__(f"{path}: {message}")


class ScenarioFormatError(HarnessError, ValueError):
    """A scenario field is malformed or the input ends before it is complete."""


class PreconditionError(HarnessError, ValueError):
    pass


class BoundOrderError(PreconditionError):
    def __init__(self, lower_bound, upper_bound):
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        super().__init__(f"lower bound {lower_bound!r} is greater than upper bound {upper_bound!r}")


class InputTooLargeError(PreconditionError):
    def __init__(self, length, limit):
        self.length = length
        self.limit = limit
        super().__init__(f"text length {length} exceeds the naive check limit of {limit}")


class BitLengthMismatchError(PreconditionError):
    def __init__(self, low_size, top_size):
        self.low_size = low_size
        self.top_size = top_size
        super().__init__(f"bit vectors differ in length: {low_size} != {top_size}")


class PositionOutOfRangeError(PreconditionError):
    def __init__(self, position, length):
        self.position = position
        self.length = length
        super().__init__(f"position {position} is outside a text of length {length}")
