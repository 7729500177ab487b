"""Location - a single geographic sample of a trace.

A Location is the geometry atom: longitude, latitude and altitude.
Locations compare by exact field equality, no tolerance is applied.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from navigo.core.geo_calculator import GeoCalculator
from navigo.model.elevation import Elevation

if TYPE_CHECKING:
    from navigo.model.area import Area


@dataclass(frozen=True)
class Location:
    """A geographic sample with altitude.

    No validation is performed: NaN or duplicate coordinates are accepted
    and propagate into every metric computed from them.

    Attributes:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees
        altitude: Altitude in meters

    Example:
        paris = Location(longitude=2.350987, latitude=48.856667, altitude=35.0)
    """

    longitude: float
    latitude: float
    altitude: float = 0.0

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.latitude, self.longitude)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order."""
        return (self.longitude, self.latitude)

    def distance_to(self, other: "Location") -> float:
        """Great-circle distance to another location in kilometers."""
        return GeoCalculator.haversine_distance_km(
            lat1=self.latitude,
            lon1=self.longitude,
            lat2=other.latitude,
            lon2=other.longitude,
        )

    def bearing_to(self, other: "Location") -> float:
        """Initial bearing towards another location (0-360°, clockwise from North)."""
        return GeoCalculator.initial_bearing_deg(
            lon1=self.longitude,
            lat1=self.latitude,
            lon2=other.longitude,
            lat2=other.latitude,
        )

    def elevation_to(self, other: "Location") -> Elevation:
        """Gain or loss when moving from this location to another."""
        return GeoCalculator.elevation_delta(from_altitude=self.altitude, to_altitude=other.altitude)

    def is_in_area(self, area: "Area") -> bool:
        return GeoCalculator.is_in_area(lon=self.longitude, lat=self.latitude, area=area)

    def is_in_radius(self, center: "Location", radius_km: float) -> bool:
        return GeoCalculator.is_in_radius(
            lon=self.longitude,
            lat=self.latitude,
            center_lon=center.longitude,
            center_lat=center.latitude,
            radius_km=radius_km,
        )

    def __repr__(self) -> str:
        return f"Location(lon={self.longitude}, lat={self.latitude}, alt={self.altitude}m)"
