"""navigo - analytics and distance queries over GPS traces.

Computes derived metrics of a recorded path (length, elevation gain/loss,
bounding area) and answers queries against it (closest location, location
at a distance mark, section between two distance marks).

Modules:
    core: Geodesic calculations and the trace Analyzer
    model: Data structures (Location, Elevation, Area, Trace)
    errors: TraceError hierarchy raised by failing queries

Example:
    from navigo import Analyzer, Location, build_trace

    trace = build_trace([paris, moscow])
    analyzer = Analyzer(trace=trace)
    analyzer.get_location_at(distance=1000.0)
"""

from collections.abc import Iterable

from navigo.core.analyzer import Analyzer, Stats
from navigo.core.geo_calculator import GeoCalculator
from navigo.errors import (
    EmptyTraceError,
    LocationNotFoundError,
    NegativeMarkError,
    NegativeValuesError,
    NoStatisticsError,
    OutOfBoundsError,
    TraceError,
    TraceErrorKind,
)
from navigo.model import Area, Elevation, Location, Trace

__all__ = [
    "build_trace",
    "Analyzer",
    "Stats",
    "GeoCalculator",
    "Location",
    "Elevation",
    "Area",
    "Trace",
    "TraceError",
    "TraceErrorKind",
    "EmptyTraceError",
    "LocationNotFoundError",
    "NegativeMarkError",
    "NegativeValuesError",
    "NoStatisticsError",
    "OutOfBoundsError",
]


def build_trace(locations: Iterable[Location]) -> Trace:
    """Build a trace from locations given in path order."""
    return Trace(locations=list(locations))
