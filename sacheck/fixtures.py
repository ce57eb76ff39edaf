import logging
import random
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

from sacheck.errors import HarnessError, InputTooLargeError
from sacheck.range_case import RangeCase
from sacheck.suffix_array import SuffixArray

CASE_FILE_PATTERN = "case_{:04d}.txt"


@dataclass
class CaseResult:
    path: Path = None
    exact: bool = False
    naive: bool = None  # None when the text is too long for the naive check
    error: str = None

    @property
    def passed(self):
        return self.error is None and self.exact and self.naive is not False


def generate_random_bounds(text, count, max_length=5, rng=None):
    """Random (lower, upper) pairs cut from the text, each ordered lower <= upper."""
    if not text:
        raise ValueError("cannot cut bounds from an empty text")
    rng = rng or random.Random()
    bounds = []
    for _ in range(count):
        pair = []
        for _ in range(2):
            length = rng.randint(1, min(max_length, len(text)))  # Ensure length doesn't exceed text length
            start = rng.randint(0, len(text) - length)
            pair.append(text[start:start + length])
        bounds.append(tuple(sorted(pair)))
    return bounds


def author_cases(text, bounds, engine_factory=SuffixArray):
    return [RangeCase.from_engine(text, lower, upper, engine_factory) for lower, upper in bounds]


def save_cases(cases, directory):
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for i, case in enumerate(tqdm(cases, desc="Saving cases", disable=len(cases) < 2)):
        path = directory / CASE_FILE_PATTERN.format(i)
        case.save(path)
        paths.append(path)
    logging.info(f"Saved {len(paths)} cases to {directory}")
    return paths


def load_cases(directory, symbol_type=str):
    """Load every case file of a directory as (path, case) pairs, in file name order."""
    paths = sorted(Path(directory).glob("case_*.txt"))
    return [(path, RangeCase.load(path, symbol_type)) for path in tqdm(paths, desc="Loading cases", disable=len(paths) < 2)]


def verify_case(case, engine_factory=SuffixArray, path=None):
    """Run the engine on a case and validate its answer with both checks."""
    engine = engine_factory(case.data)
    candidate = sorted(engine.range_query(case.lower_bound, case.upper_bound))
    result = CaseResult(path=path, exact=case.check(candidate))
    try:
        result.naive = case.naive_check(candidate)
    except InputTooLargeError:
        logging.debug(f"Skipping naive check for {path or case!r}")
    return result


def verify_cases(directory, engine_factory=SuffixArray, symbol_type=str):
    """
    Verify every case file in a directory. A case that cannot be loaded or
    checked is recorded in its result and the remaining cases still run.
    """
    results = []
    paths = sorted(Path(directory).glob("case_*.txt"))
    for path in tqdm(paths, desc="Verifying cases", disable=len(paths) < 2):
        try:
            case = RangeCase.load(path, symbol_type)
            result = verify_case(case, engine_factory, path)
        except HarnessError as e:
            result = CaseResult(path=path, error=str(e))
        if result.passed:
            logging.info(f"{path.name}: passed")
        else:
            logging.warning(f"{path.name}: FAILED (exact={result.exact}, naive={result.naive}, error={result.error})")
        results.append(result)
    return results
