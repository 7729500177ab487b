"""Configuration constants for navigo.

All tunable parameters are centralized here.

Classes:
    GeoConfig: Spherical earth model and angle conventions
    AnalyzerConfig: Cumulative statistics starting values
"""


class GeoConfig:
    """Spherical earth model used by every geodesic calculation."""

    # Mean Earth radius (spherical approximation)
    EARTH_RADIUS_KM = 6371.0

    # Bearings are normalized into [0, FULL_CIRCLE_DEG)
    FULL_CIRCLE_DEG = 360.0


class AnalyzerConfig:
    """Cumulative statistics parameters."""

    # Distance mark of the first location of any trace
    START_DISTANCE_KM = 0.0
