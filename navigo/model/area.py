"""Area - axis-aligned bounding box over latitude and longitude."""

from collections.abc import Iterable
from dataclasses import dataclass

from navigo.errors import EmptyTraceError
from navigo.model.location import Location


@dataclass(frozen=True)
class Area:
    """Smallest lat/lon rectangle containing a set of locations.

    Attributes:
        min_longitude: Western edge (decimal degrees)
        max_longitude: Eastern edge (decimal degrees)
        min_latitude: Southern edge (decimal degrees)
        max_latitude: Northern edge (decimal degrees)
    """

    min_longitude: float
    max_longitude: float
    min_latitude: float
    max_latitude: float

    @classmethod
    def from_locations(cls, locations: Iterable[Location]) -> "Area":
        """Bounding box of the given locations.

        Raises:
            EmptyTraceError: If no locations are given.
        """
        iterator = iter(locations)
        first = next(iterator, None)
        if first is None:
            raise EmptyTraceError("could not compute area of an empty trace")

        min_lon = max_lon = first.longitude
        min_lat = max_lat = first.latitude
        for location in iterator:
            min_lon = min(min_lon, location.longitude)
            max_lon = max(max_lon, location.longitude)
            min_lat = min(min_lat, location.latitude)
            max_lat = max(max_lat, location.latitude)

        return cls(min_longitude=min_lon, max_longitude=max_lon, min_latitude=min_lat, max_latitude=max_lat)

    def contains(self, location: Location) -> bool:
        """True if location lies strictly inside; boundary points are outside."""
        return location.is_in_area(area=self)
