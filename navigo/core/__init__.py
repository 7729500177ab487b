"""Core computation classes for trace analytics.

- GeoCalculator: Geodesic calculations (distances, bearings, elevation, containment)
- Analyzer: Cumulative statistics and distance-mark queries (import directly from analyzer module)
"""

from navigo.core.geo_calculator import GeoCalculator

# Analyzer has a circular import with model.location
# Import directly: from navigo.core.analyzer import Analyzer

__all__ = [
    "GeoCalculator",
]
