"""Bias-free range mapping and Irwin-Hall sampling."""

import itertools

import pytest

from noise_prng import DistributionRequest, InvalidRangeError, PrngError, RangeRequest, RangeTooLargeError
from noise_prng.sampling import (
    check_range,
    normal_dist,
    rejection_threshold,
    round_half_away,
    unbiased_draw,
)


def _scripted(values):
    it = iter(values)
    return lambda: next(it)


def test_check_range_accepts_degenerate_interval():
    assert check_range(3, 3).span == 1


def test_check_range_rejects_inverted_interval():
    with pytest.raises(InvalidRangeError):
        check_range(5, 1)


def test_rejection_threshold_matches_leftover_region():
    assert rejection_threshold(4, 3) == 1
    assert rejection_threshold(1 << 32, 1 << 16) == 0
    assert rejection_threshold(32768, 3000) == 32768 % 3000


def test_unbiased_draw_skips_leftover_values():
    # Domain 0..3 mapped onto 3 values: 0 is the biased leftover.
    draw = _scripted([0, 0, 2])
    assert unbiased_draw(draw, 4, 3) == 2


def test_unbiased_draw_is_uniform_over_exhaustive_domain():
    counts = [0, 0, 0]
    for value in range(1, 4):
        counts[unbiased_draw(_scripted([value]), 4, 3)] += 1
    assert counts == [1, 1, 1]


def test_unbiased_draw_full_domain_returns_raw_value():
    assert unbiased_draw(_scripted([7]), 8, 8) == 7


def test_unbiased_draw_rejects_span_beyond_domain():
    with pytest.raises(RangeTooLargeError):
        unbiased_draw(_scripted([0]), 8, 9)


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (-0.5, -1), (2.4, 2), (-2.4, -2), (-2.6, -3), (0.0, 0)],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away(value) == expected


def test_normal_dist_averages_trials():
    samples = itertools.cycle([0, 10])
    request = DistributionRequest(0, 10, 4)
    assert normal_dist(lambda lo, hi: next(samples), request) == 5


def test_normal_dist_validates_before_sampling():
    calls = []

    def sample(lo, hi):
        calls.append((lo, hi))
        return lo

    with pytest.raises(PrngError):
        normal_dist(sample, DistributionRequest(0, 10, 0))
    with pytest.raises(InvalidRangeError):
        normal_dist(sample, DistributionRequest(10, 0, 3))
    assert calls == []


def test_range_request_span():
    assert RangeRequest(-500, 2499).span == 3000
