"""Elevation - cumulative climb and descent along a path."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Elevation:
    """Climb and descent in meters, kept apart and never netted.

    Attributes:
        positive: Total gain in meters (>= 0)
        negative: Magnitude of total loss in meters (>= 0)
    """

    positive: float = 0.0
    negative: float = 0.0

    def __add__(self, other: "Elevation") -> "Elevation":
        return Elevation(positive=self.positive + other.positive, negative=self.negative + other.negative)
