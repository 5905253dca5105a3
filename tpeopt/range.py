"""Half-open parameter ranges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


class RangeError(ValueError):
    """Raised when a range cannot be constructed."""


class NonFiniteRangeError(RangeError):
    """The range is not finite."""

    def __init__(self) -> None:
        super().__init__("not a finite range")


class EmptyRangeError(RangeError):
    """The range contains no values."""

    def __init__(self) -> None:
        super().__init__("an empty range")


def _format_float(x: float) -> str:
    if x.is_integer():
        text = str(int(x))
        return "-" + text if math.copysign(1.0, x) < 0 and x == 0 else text
    return format(Decimal(repr(x)), "f")


@dataclass(frozen=True)
class Range:
    """A range with an inclusive start and an exclusive end."""

    start: float
    end: float

    def __post_init__(self) -> None:
        start = float(self.start)
        end = float(self.end)
        if not math.isfinite(end - start):
            raise NonFiniteRangeError()
        if not start < end:
            raise EmptyRangeError()
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    def width(self) -> float:
        """Width of the range."""
        return self.end - self.start

    def contains(self, v: float) -> bool:
        """Return True if ``v`` lies within the range."""
        return self.start <= v < self.end

    def __str__(self) -> str:
        return f"{_format_float(self.start)}..{_format_float(self.end)}"