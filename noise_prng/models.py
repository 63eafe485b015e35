from dataclasses import dataclass

from .errors import InvalidRangeError, PrngError


@dataclass(frozen=True)
class RangeRequest:
    min: int
    max: int

    @property
    def span(self) -> int:
        return self.max - self.min + 1

    def validate(self) -> "RangeRequest":
        if self.min > self.max:
            raise InvalidRangeError(
                f"Invalid range (max < min): min={self.min}, max={self.max}"
            )
        return self


@dataclass(frozen=True)
class DistributionRequest:
    min: int
    max: int
    num_trials: int = 6

    @property
    def bounds(self) -> RangeRequest:
        return RangeRequest(self.min, self.max)

    def validate(self) -> "DistributionRequest":
        self.bounds.validate()
        if self.num_trials < 1:
            raise PrngError(f"num_trials must be at least 1, got {self.num_trials}")
        return self
