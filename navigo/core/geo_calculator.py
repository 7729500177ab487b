"""Geodesic calculations on Earth's surface.

Provides the geographic helper functions every trace metric is built on:
- Distance calculation (Haversine formula)
- Bearing calculation (initial heading between points)
- Elevation delta (gain or loss between two altitudes)
- Containment tests (bounding area, radius)

All calculations use a spherical Earth approximation (R = 6,371 km).
"""

from math import asin, atan2, cos, degrees, radians, sin, sqrt
from typing import TYPE_CHECKING

from navigo.constants import GeoConfig

if TYPE_CHECKING:
    from navigo.model.area import Area
    from navigo.model.elevation import Elevation

# Earth's radius in kilometers (spherical approximation)
EARTH_RADIUS_KM = GeoConfig.EARTH_RADIUS_KM


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    Coordinates are in decimal degrees.
    Bearings are in degrees clockwise from North (0-360).
    Distances are in kilometers, altitudes in meters.
    """

    EARTH_RADIUS_KM = EARTH_RADIUS_KM

    @staticmethod
    def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Altitude plays no part: the distance is measured on the sphere surface.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in kilometers.
        """
        dlat = radians(lat1 - lat2)
        dlon = radians(lon1 - lon2)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        return EARTH_RADIUS_KM * (2 * asin(sqrt(a)))

    @staticmethod
    def initial_bearing_deg(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
        """Calculate initial bearing from point 1 to point 2.

        Args:
            lon1: Longitude of start point (decimal degrees)
            lat1: Latitude of start point (decimal degrees)
            lon2: Longitude of end point (decimal degrees)
            lat2: Latitude of end point (decimal degrees)

        Returns:
            Bearing in degrees (0-360, clockwise from North).
        """
        lat1_rad, lat2_rad = radians(lat1), radians(lat2)
        dlon = radians(lon2 - lon1)
        y = sin(dlon) * cos(lat2_rad)
        x = cos(lat1_rad) * sin(lat2_rad) - sin(lat1_rad) * cos(lat2_rad) * cos(dlon)
        full_circle = GeoConfig.FULL_CIRCLE_DEG
        return (degrees(atan2(y, x)) + full_circle) % full_circle

    @staticmethod
    def elevation_delta(from_altitude: float, to_altitude: float) -> "Elevation":
        """Split the altitude change between two points into gain or loss.

        Exactly one component is non-zero. No change counts as a loss of 0 m.

        Args:
            from_altitude: Altitude of start point in meters
            to_altitude: Altitude of end point in meters

        Returns:
            Elevation with the climb in `positive` or the descent in `negative`.
        """
        # Elevation lives in the model package, which imports this module
        from navigo.model.elevation import Elevation

        delta = to_altitude - from_altitude
        if delta > 0:
            return Elevation(positive=delta, negative=0.0)
        return Elevation(positive=0.0, negative=abs(delta))

    @staticmethod
    def is_in_area(lon: float, lat: float, area: "Area") -> bool:
        """Check whether a point lies strictly inside a bounding area.

        Points exactly on the boundary are outside.
        """
        return (
            area.min_longitude < lon < area.max_longitude
            and area.min_latitude < lat < area.max_latitude
        )

    @staticmethod
    def is_in_radius(
        lon: float,
        lat: float,
        center_lon: float,
        center_lat: float,
        radius_km: float,
    ) -> bool:
        """Check whether a point lies strictly within radius_km of a center.

        A point exactly radius_km away is outside.
        """
        distance = GeoCalculator.haversine_distance_km(lat1=lat, lon1=lon, lat2=center_lat, lon2=center_lon)
        return distance < radius_km
