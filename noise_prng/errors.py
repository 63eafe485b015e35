"""Exceptions raised by the generators and sampling helpers."""


class PrngError(ValueError):
    """Base class for every generator failure."""


class InvalidRangeError(PrngError):
    """Raised when a range request has ``min > max``."""


class RangeTooLargeError(PrngError):
    """Raised when a span cannot be served by the generator's output domain."""
