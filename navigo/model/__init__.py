"""Data model classes for trace analytics.

- Location: Geometry atom (longitude, latitude, altitude)
- Elevation: Climb and descent totals, never netted
- Area: Axis-aligned bounding box
- Trace: Ordered, immutable sequence of locations with whole-trace metrics
"""

from navigo.model.elevation import Elevation
from navigo.model.location import Location
from navigo.model.area import Area
from navigo.model.trace import Trace

__all__ = [
    "Location",
    "Elevation",
    "Area",
    "Trace",
]
