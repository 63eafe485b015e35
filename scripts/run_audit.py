"""Command line harness for the deterministic generator audit."""

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "audit_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from noise_prng import AuditConfig, PcgRandom, PseudoRandom, run_prng_audit


def _parse_seed(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x hex), received '{value}'."
        ) from exc


def _parse_positive(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Value must be a positive integer.")
    return parsed


def _parse_interval(value: str) -> tuple[int, int]:
    """Parse a CLI `lo,hi` pair into an ordered interval."""

    lo_text, sep, hi_text = value.partition(",")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected 'lo,hi', received '{value}'.")
    try:
        lo, hi = int(lo_text.strip()), int(hi_text.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Interval bounds must be integers.") from exc
    if lo > hi:
        raise argparse.ArgumentTypeError(
            f"Interval lower bound {lo} exceeds upper bound {hi}."
        )
    return lo, hi


def build_parser() -> argparse.ArgumentParser:
    defaults = AuditConfig()
    parser = argparse.ArgumentParser(description="Audit the deterministic noise generators")
    parser.add_argument(
        "--legacy-seed",
        type=_parse_seed,
        default=defaults.legacy_seed,
        help="PseudoRandom seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=defaults.pcg_seed,
        help="PcgRandom seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--sequence",
        type=_parse_seed,
        default=defaults.pcg_sequence,
        help="PcgRandom stream selector",
    )
    parser.add_argument(
        "--length",
        type=_parse_positive,
        default=defaults.sequence_length,
        help="Number of raw outputs to record per generator",
    )
    parser.add_argument(
        "--range",
        dest="range_interval",
        metavar="lo,hi",
        type=_parse_interval,
        default=(defaults.range_lo, defaults.range_hi),
        help="Interval the random range requests are drawn from",
    )
    parser.add_argument(
        "--range-samples",
        type=_parse_positive,
        default=defaults.range_samples,
        help="Number of range requests per generator",
    )
    parser.add_argument(
        "--normal",
        dest="normal_interval",
        metavar="lo,hi",
        type=_parse_interval,
        default=(defaults.normal_lo, defaults.normal_hi),
        help="Interval for the approximate normal distribution",
    )
    parser.add_argument(
        "--trials",
        type=_parse_positive,
        default=defaults.normal_trials,
        help="Uniform draws averaged per normal sample",
    )
    parser.add_argument(
        "--normal-samples",
        type=_parse_positive,
        default=defaults.normal_samples,
        help="Number of normal samples to bucket",
    )
    parser.add_argument(
        "--bytes",
        dest="bytes_length",
        type=_parse_positive,
        default=defaults.bytes_length,
        help="Number of random bytes to record",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "audit_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def _check_generator_limits(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject intervals the generators would refuse mid-run."""

    for flag, (lo, hi) in (("--range", args.range_interval), ("--normal", args.normal_interval)):
        if lo < PcgRandom.RANDOM_MIN or hi > PcgRandom.RANDOM_MAX:
            parser.error(f"{flag} bounds must fit in a signed 32-bit integer, got {lo},{hi}.")

    # Range requests are drawn inside --range and also sent to PseudoRandom.
    legacy_span = (PseudoRandom.RANDOM_RANGE + 1) // 10
    lo, hi = args.range_interval
    if hi - lo > legacy_span:
        parser.error(
            f"--range spans {hi - lo + 1} values; PseudoRandom accepts at most {legacy_span + 1}."
        )


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    _check_generator_limits(parser, args)

    cfg = AuditConfig(
        legacy_seed=args.legacy_seed,
        pcg_seed=args.seed,
        pcg_sequence=args.sequence,
        sequence_length=args.length,
        range_samples=args.range_samples,
        range_lo=args.range_interval[0],
        range_hi=args.range_interval[1],
        normal_lo=args.normal_interval[0],
        normal_hi=args.normal_interval[1],
        normal_trials=args.trials,
        normal_samples=args.normal_samples,
        bytes_length=args.bytes_length,
    )
    result = run_prng_audit(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
