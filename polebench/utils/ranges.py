"""Closed scalar intervals used for bounds, clamping and random draws."""

from __future__ import annotations

from dataclasses import dataclass

import torch


@dataclass(frozen=True)
class BoundedRange:
    """A closed interval ``[low, high]``.

    Attributes:
        low: Lower bound (inclusive).
        high: Upper bound (inclusive).
    """

    low: float
    high: float

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(
                f"Range lower bound {self.low} exceeds upper bound {self.high}"
            )

    @classmethod
    def symmetric(cls, half_width: float) -> BoundedRange:
        """Return ``[-half_width, half_width]``."""
        return cls(-abs(half_width), abs(half_width))

    @property
    def length(self) -> float:
        return self.high - self.low

    def bound(self, value: torch.Tensor) -> torch.Tensor:
        """Clamp *value* into the range."""
        return torch.clamp(value, self.low, self.high)

    def contains(self, value: torch.Tensor) -> torch.Tensor:
        """Elementwise membership test (bounds count as inside)."""
        return (value >= self.low) & (value <= self.high)

    def strictly_within(self, other: BoundedRange) -> bool:
        """True if this range lies in the open interior of *other*."""
        return other.low < self.low and self.high < other.high

    def sample(
        self,
        shape: tuple[int, ...] = (),
        *,
        generator: torch.Generator | None = None,
        dtype: torch.dtype = torch.float64,
    ) -> torch.Tensor:
        """Draw values uniformly from ``[low, high)``."""
        u = torch.rand(shape, generator=generator, dtype=dtype)
        return self.low + u * self.length
