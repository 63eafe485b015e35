"""Public package surface for the deterministic noise generators."""

from .audit import AuditConfig, run_prng_audit
from .errors import InvalidRangeError, PrngError, RangeTooLargeError
from .models import DistributionRequest, RangeRequest
from .prng import PcgRandom, PseudoRandom

__all__ = [
    "AuditConfig",
    "DistributionRequest",
    "InvalidRangeError",
    "PcgRandom",
    "PrngError",
    "PseudoRandom",
    "RangeRequest",
    "RangeTooLargeError",
    "run_prng_audit",
]
