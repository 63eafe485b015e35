"""Bounded and approximate-normal sampling shared by both generators."""

from typing import Callable

from .errors import RangeTooLargeError
from .models import DistributionRequest, RangeRequest


def check_range(min: int, max: int) -> RangeRequest:
    """Validate a closed interval before any generator state is touched."""
    return RangeRequest(min, max).validate()


def rejection_threshold(domain: int, bound: int) -> int:
    """Size of the leftover region that would bias ``draw % bound``."""
    # Draws below this value are rejected; what remains is an exact multiple
    # of ``bound``.
    return domain % bound


def unbiased_draw(draw: Callable[[], int], domain: int, bound: int) -> int:
    """Map a raw draw in ``[0, domain)`` onto ``[0, bound)`` without bias.

    ``bound == domain`` short-circuits to a raw draw; there is nothing to
    reduce and nothing to reject.
    """
    if bound > domain:
        raise RangeTooLargeError(
            f"Range of {bound} values exceeds generator domain of {domain}"
        )
    if bound == domain:
        return draw()

    threshold = rejection_threshold(domain, bound)
    r = draw()
    while r < threshold:
        r = draw()
    return r % bound


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value - 0.5) if value < 0.0 else int(value + 0.5)


def normal_dist(sample: Callable[[int, int], int], request: DistributionRequest) -> int:
    """Irwin-Hall approximation: mean of ``num_trials`` uniform draws.

    The variance of the result is the single-draw variance divided by
    ``num_trials``.
    """
    request.validate()
    accum = 0
    for _ in range(request.num_trials):
        accum += sample(request.min, request.max)
    return round_half_away(accum / request.num_trials)
