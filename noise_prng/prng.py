# Deterministic generators for noise and map generation (no external deps).
# Both must reproduce the engine's historical output bit for bit.
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .errors import PrngError, RangeTooLargeError
from .models import DistributionRequest
from .sampling import check_range, normal_dist, unbiased_draw

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _clock_seed(clock: Callable[[], float]) -> int:
    return int(clock())


@dataclass
class PseudoRandom:
    """Legacy ANSI C ``rand()`` style LCG producing 15-bit values.

    Pass ``seed`` for reproducible output; leave it out to seed from
    ``clock`` (wall-clock time by default).
    """

    RANDOM_MIN = 0
    RANDOM_MAX = 0x7FFF
    RANDOM_RANGE = 0x7FFF

    seed: Optional[int] = None
    clock: Callable[[], float] = field(default=time.time, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.seed is None:
            self.seed = _clock_seed(self.clock)
        self.seed = _to_int32(self.seed)

    def reseed(self, seed: int) -> None:
        self.seed = _to_int32(seed)

    def next(self) -> int:
        self.seed = _to_int32(self.seed * 1103515245 + 12345)
        # Signed division truncates toward zero, unlike an arithmetic shift.
        if self.seed < 0:
            quotient = -(-self.seed // 65536)
        else:
            quotient = self.seed // 65536
        return quotient % (self.RANDOM_MAX + 1)

    def range(self, min: int, max: int) -> int:
        check_range(min, max)
        # Engine limit: at most a tenth of the output domain.
        if max - min > (self.RANDOM_RANGE + 1) // 10:
            raise RangeTooLargeError(
                f"Range too large for PseudoRandom: min={min}, max={max}"
            )
        return min + unbiased_draw(self.next, self.RANDOM_RANGE + 1, max - min + 1)

    def rand_normal_dist(self, min: int, max: int, num_trials: int = 6) -> int:
        return normal_dist(self.range, DistributionRequest(min, max, num_trials))


@dataclass
class PcgRandom:
    """PCG-XSH-RR: 64-bit state, 32-bit output.

    ``sequence`` selects one of 2**63 streams; the increment derived from it
    is always odd.
    """

    RANDOM_MIN = -0x7FFFFFFF - 1
    RANDOM_MAX = 0x7FFFFFFF
    RANDOM_RANGE = 0xFFFFFFFF

    MULTIPLIER = 6364136223846793005
    DEFAULT_SEQUENCE = 0xDA3E39CB94B95BDB

    seed: Optional[int] = None
    sequence: int = DEFAULT_SEQUENCE
    clock: Callable[[], float] = field(default=time.time, repr=False, compare=False)
    state: int = field(init=False, default=0)
    inc: int = field(init=False, default=1)

    def __post_init__(self) -> None:
        if self.seed is None:
            self.seed = _clock_seed(self.clock)
        self.reseed(self.seed, self.sequence)

    def reseed(self, seed: int, sequence: int = DEFAULT_SEQUENCE) -> None:
        self.seed = seed
        self.sequence = sequence
        # Two warm-up steps; assigning the seed directly breaks the period.
        self.state = 0
        self.inc = ((sequence << 1) | 1) & _MASK64
        self.next()
        self.state = (self.state + seed) & _MASK64
        self.next()

    def get_state(self) -> Tuple[int, int]:
        return self.state, self.inc

    def set_state(self, state: Tuple[int, int]) -> None:
        self.state = state[0] & _MASK64
        self.inc = (state[1] | 1) & _MASK64

    def next(self) -> int:
        oldstate = self.state
        self.state = (oldstate * self.MULTIPLIER + self.inc) & _MASK64
        xorshifted = (((oldstate >> 18) ^ oldstate) >> 27) & _MASK32
        rot = oldstate >> 59
        return (xorshifted >> rot) | ((xorshifted << ((-rot) & 31)) & _MASK32)

    def range(self, min: int, max: int) -> int:
        check_range(min, max)
        if min < self.RANDOM_MIN or max > self.RANDOM_MAX:
            raise RangeTooLargeError(
                f"Range exceeds 32-bit signed bounds: min={min}, max={max}"
            )

        bound = (max - min + 1) & _MASK32
        if bound == 0:
            # The whole 32-bit span: every output is already in range.
            return min + self.next()
        return min + unbiased_draw(self.next, self.RANDOM_RANGE + 1, bound)

    def bytes(self, out, length: int, offset: int = 0) -> None:
        """Fill ``out[offset:offset + length]`` with generator output.

        Each word is written low byte first. A trailing partial word only
        contributes its low bytes; the rest of that word is discarded.
        """
        view = memoryview(out).cast("B")
        if offset < 0 or length < 0 or offset + length > view.nbytes:
            raise PrngError(
                f"Cannot write {length} bytes at offset {offset} into a "
                f"{view.nbytes}-byte buffer"
            )

        pos = offset
        end = offset + length
        while pos < end:
            take = min(4, end - pos)
            view[pos:pos + take] = self.next().to_bytes(4, "little")[:take]
            pos += take

    def rand_normal_dist(self, min: int, max: int, num_trials: int = 6) -> int:
        return normal_dist(self.range, DistributionRequest(min, max, num_trials))
