"""Trace - an ordered path of geographic samples.

The order of locations is the path order: each pair of adjacent locations
defines one segment of the path. A Trace owns its locations and stores them
as a tuple, so they cannot be edited once the trace is built.

Whole-trace metrics:
- length: sum of segment distances (km)
- elevation: sum of segment gains and losses (m)
- area: bounding box over all locations
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from navigo.errors import EmptyTraceError
from navigo.model.area import Area
from navigo.model.elevation import Elevation
from navigo.model.location import Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trace:
    """Immutable, ordered sequence of locations.

    Attributes:
        locations: Locations in path order (converted to a tuple)

    Example:
        trace = Trace(locations=[paris, moscow])
        print(f"{trace.length():.0f} km")  # 2486 km
    """

    locations: Sequence[Location] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "locations", tuple(self.locations))

    @classmethod
    def from_coordinates(cls, rows: Iterable[Sequence[float]]) -> "Trace":
        """Build a trace from [longitude, latitude, altitude] rows."""
        return cls(locations=[Location(longitude=row[0], latitude=row[1], altitude=row[2]) for row in rows])

    def __len__(self) -> int:
        return len(self.locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.locations)

    def __getitem__(self, index: int) -> Location:
        return self.locations[index]

    def segments(self) -> Iterator[tuple[Location, Location]]:
        """Consecutive (from, to) location pairs in path order."""
        return zip(self.locations, self.locations[1:])

    def length(self) -> float:
        """Total path length in kilometers (0 for fewer than two locations)."""
        total = 0.0
        for start, end in self.segments():
            total += start.distance_to(other=end)
        return total

    def elevation(self) -> Elevation:
        """Total climb and descent in meters ({0, 0} for fewer than two locations)."""
        total = Elevation()
        for start, end in self.segments():
            total += start.elevation_to(other=end)
        return total

    def area(self) -> Area:
        """Bounding box over all locations.

        Raises:
            EmptyTraceError: If the trace has no locations.
        """
        return Area.from_locations(self.locations)

    def get_section(self, start_index: int, end_index: int) -> list[Location]:
        """Locations strictly between start_index and end_index.

        Both endpoints are excluded. Inverted or out-of-range indices are not
        rejected, they yield an empty or partial section.

        Raises:
            EmptyTraceError: If the trace has no locations.
        """
        if not self.locations:
            raise EmptyTraceError("could not compute section of an empty trace")

        if start_index >= end_index or end_index > len(self.locations):
            logger.debug(
                f"Section indices ({start_index}, {end_index}) are inverted or out of range "
                f"for {len(self.locations)} locations"
            )

        return [location for index, location in enumerate(self.locations) if start_index < index < end_index]

    def __repr__(self) -> str:
        return f"Trace({len(self.locations)} locations)"
