# main.py
import logging
import random
import sys
import tempfile
from pathlib import Path

from sacheck.fixtures import author_cases, generate_random_bounds, save_cases, verify_cases
from sacheck.range_case import RangeCase
from sacheck.suffix_array import SuffixArray

# every text ends with a sentinel that never appears in a bound
TEXTS = {
    'banana': "banana$",
    'mississippi': "mississippi$",
    'fox': "thequickbrownfoxjumpsoverthelazydog$",
}
CASES_PER_TEXT = 10
SEED = 1234

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    rng = random.Random(SEED)
    passed = check_banana()

    with tempfile.TemporaryDirectory() as directory:
        for name, text in TEXTS.items():
            bounds = generate_random_bounds(text[:-1], CASES_PER_TEXT, rng=rng)
            cases = author_cases(text, bounds)
            passed &= check_bit_vector_engine(cases)

            case_dir = Path(directory) / name
            save_cases(cases, case_dir)
            results = verify_cases(case_dir)
            failed = [r for r in results if not r.passed]
            print(f"{name}: {len(results) - len(failed)}/{len(results)} cases passed")
            passed &= not failed

    print("All checks passed" if passed else "Some checks FAILED")
    return 0 if passed else 1

def check_banana():
    case = RangeCase("banana", "ba", "bb", [0])
    results = [case.naive_check([0]), not case.naive_check([]), not case.naive_check([0, 2])]
    print(f"banana in ['ba', 'bb'): {case.output}, naive check {'ok' if all(results) else 'FAILED'}")
    return all(results)

def check_bit_vector_engine(cases):
    """The bit-vector range query must replay every authored case exactly."""
    ok = True
    for case in cases:
        engine = SuffixArray(case.data)
        candidate = engine.range_query_bits(case.lower_bound, case.upper_bound)
        if not case.check(candidate):
            logging.warning(f"Bit-vector query disagrees for {case!r}: {candidate}")
            ok = False
    return ok

if __name__ == "__main__":
    sys.exit(main())
