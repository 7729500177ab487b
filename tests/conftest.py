"""Shared pytest fixtures for navigo tests.

Provides reference locations and a small recorded trace for all tests.
All fixtures use explicit values with documented rationale.

TRACE FIXTURE:
    A 10-location walk in the Pyrenees (lon~0.328, lat~42.83), about 30-60 m
    between samples. Cumulative distance marks (km, rounded):
        index:  0      1      2      3      4      5      6 ...
        mark:   0.000  0.060  0.093  0.151  0.197  0.241  ...
    The 0.2 km mark therefore resolves to index 4.
    Altitudes climb 10 m in total and drop 4 m in total.
"""

import pytest

from navigo.core.analyzer import Analyzer
from navigo.model.location import Location
from navigo.model.trace import Trace

# [longitude, latitude, altitude]
PYRENEES_COORDINATES = [
    [0.32733, 42.8299, 791.0],
    [0.32802, 42.82972, 792.0],
    [0.3284, 42.8296, 792.0],
    [0.32882, 42.829181, 792.0],
    [0.328684, 42.828782, 793.0],
    [0.32851, 42.82841, 795.0],
    [0.32819, 42.82799, 798.0],
    [0.3278, 42.8277, 796.0],
    [0.32741, 42.82745, 794.0],
    [0.32702, 42.82712, 797.0],
]


# =============================================================================
# REFERENCE LOCATIONS
# =============================================================================


@pytest.fixture
def paris() -> Location:
    """Paris at sea level."""
    return Location(longitude=2.350987, latitude=48.856667, altitude=0.0)


@pytest.fixture
def moscow() -> Location:
    """Moscow at sea level (~2486 km north-east of Paris)."""
    return Location(longitude=37.617634, latitude=55.755787, altitude=0.0)


# =============================================================================
# TRACES
# =============================================================================


@pytest.fixture
def empty_trace() -> Trace:
    """Trace without any location."""
    return Trace(locations=[])


@pytest.fixture
def paris_moscow_trace(paris: Location, moscow: Location) -> Trace:
    """Two-location trace, one long segment."""
    return Trace(locations=[paris, moscow])


@pytest.fixture
def pyrenees_trace() -> Trace:
    """10-location recorded walk (see module docstring for distance marks)."""
    return Trace.from_coordinates(PYRENEES_COORDINATES)


@pytest.fixture
def pyrenees_analyzer(pyrenees_trace: Trace) -> Analyzer:
    """Analyzer over the Pyrenees walk."""
    return Analyzer(trace=pyrenees_trace)


@pytest.fixture
def empty_analyzer(empty_trace: Trace) -> Analyzer:
    """Analyzer over an empty trace (no statistics)."""
    return Analyzer(trace=empty_trace)
