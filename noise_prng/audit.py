"""Deterministic audit run exercising both generators end to end."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from .prng import PcgRandom, PseudoRandom
from .stats import coverage_table, expected_stddev, histogram


@dataclass
class AuditConfig:
    """Seeds and sample sizes for one audit run."""

    legacy_seed: int = 814538
    pcg_seed: int = 814538
    pcg_sequence: int = 998877
    sequence_length: int = 16
    range_samples: int = 32768
    range_lo: int = -500
    range_hi: int = 2499
    normal_lo: int = -120
    normal_hi: int = 120
    normal_trials: int = 20
    normal_samples: int = 61000
    bytes_length: int = 23


@dataclass
class RangeCheck:
    generator: str
    samples: int
    out_of_bounds: int
    lowest: int
    highest: int


def _range_check(name: str, rng, cfg: AuditConfig) -> RangeCheck:
    span = cfg.range_hi - cfg.range_lo + 1
    out_of_bounds = 0
    lowest = cfg.range_hi
    highest = cfg.range_lo

    for _ in range(cfg.range_samples):
        lo = rng.next() % span + cfg.range_lo
        hi = rng.next() % span + cfg.range_lo
        if lo > hi:
            lo, hi = hi, lo

        value = rng.range(lo, hi)
        if value < lo or value > hi:
            out_of_bounds += 1
        lowest = min(lowest, value)
        highest = max(highest, value)

    return RangeCheck(
        generator=name,
        samples=cfg.range_samples,
        out_of_bounds=out_of_bounds,
        lowest=lowest,
        highest=highest,
    )


def run_prng_audit(cfg: AuditConfig) -> Dict[str, Any]:
    """Run every generator operation, fully driven by the configured seeds."""

    legacy = PseudoRandom(cfg.legacy_seed)
    pcg = PcgRandom(cfg.pcg_seed, cfg.pcg_sequence)

    legacy_sequence = [legacy.next() for _ in range(cfg.sequence_length)]
    pcg_sequence = [pcg.next() for _ in range(cfg.sequence_length)]

    range_checks: List[RangeCheck] = [
        _range_check("PseudoRandom", legacy, cfg),
        _range_check("PcgRandom", pcg, cfg),
    ]

    buf = bytearray(cfg.bytes_length)
    pcg.bytes(buf, cfg.bytes_length)

    samples = (
        pcg.rand_normal_dist(cfg.normal_lo, cfg.normal_hi, cfg.normal_trials)
        for _ in range(cfg.normal_samples)
    )
    bins = histogram(samples, cfg.normal_lo, cfg.normal_hi)

    return {
        "config": asdict(cfg),
        "sequences": {
            "PseudoRandom": legacy_sequence,
            "PcgRandom": pcg_sequence,
        },
        "range": [asdict(check) for check in range_checks],
        "bytes": buf.hex(),
        "normal": {
            "stddev": round(
                expected_stddev(cfg.normal_lo, cfg.normal_hi, cfg.normal_trials), 4
            ),
            "coverage": coverage_table(
                bins, cfg.normal_lo, cfg.normal_hi, cfg.normal_trials
            ),
        },
        "final_state": {
            "PseudoRandom": legacy.seed,
            "PcgRandom": list(pcg.get_state()),
        },
    }


if __name__ == "__main__":
    import json

    result = run_prng_audit(AuditConfig())
    print(json.dumps(result, indent=2))
