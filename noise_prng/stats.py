import math
from typing import Dict, Iterable, List

from .sampling import round_half_away

# Share of a normal distribution within +/- n standard deviations (68-95-99.7).
PREDICTION_INTERVALS: Dict[float, float] = {
    1.0: 0.68269,
    1.5: 0.86639,
    2.0: 0.95450,
    2.5: 0.98758,
    3.0: 0.99730,
}


def _clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))


def expected_mean(lo: int, hi: int) -> int:
    """Centre of ``[lo, hi]``, truncated toward zero."""
    return int((hi + lo) / 2)


def expected_variance(lo: int, hi: int, num_trials: int) -> int:
    """Irwin-Hall variance of the averaged draw, in integer arithmetic."""
    span = hi - lo + 1
    # Discrete uniform variance is (n^2 - 1) / 12; averaging divides by trials.
    return ((span * span - 1) // 12) // num_trials


def expected_stddev(lo: int, hi: int, num_trials: int) -> float:
    return math.sqrt(expected_variance(lo, hi, num_trials))


def histogram(values: Iterable[int], lo: int, hi: int) -> List[int]:
    """Bucket integer samples into ``hi - lo + 1`` bins."""
    bins = [0] * (hi - lo + 1)
    for value in values:
        if value < lo or value > hi:
            raise ValueError(f"Sample {value} outside [{lo}, {hi}]")
        bins[value - lo] += 1
    return bins


def interval_coverage(
    bins: List[int], lo: int, hi: int, stddev: float, deviations: float
) -> float:
    """Fraction of samples in ``[mean - d*sd, mean + d*sd)``, bounds rounded."""
    total = sum(bins)
    if total == 0:
        return 0.0

    mean = expected_mean(lo, hi)
    lbound = _clamp(round_half_away(mean - deviations * stddev), lo, hi)
    ubound = _clamp(round_half_away(mean + deviations * stddev), lo, hi)
    accum = sum(bins[j - lo] for j in range(lbound, ubound))
    return accum / total


def coverage_table(
    bins: List[int], lo: int, hi: int, num_trials: int
) -> List[Dict[str, float]]:
    """Observed vs predicted share for every entry of PREDICTION_INTERVALS."""
    stddev = expected_stddev(lo, hi, num_trials)
    rows = []
    for deviations, predicted in PREDICTION_INTERVALS.items():
        actual = interval_coverage(bins, lo, hi, stddev, deviations)
        rows.append(
            {
                "deviations": deviations,
                "predicted": predicted,
                "actual": round(actual, 5),
                "error": round(abs(actual - predicted), 5),
            }
        )
    return rows
