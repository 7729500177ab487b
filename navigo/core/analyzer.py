"""Trace analyzer - distance-mark and nearest-location queries.

The Analyzer walks a trace once, at construction, and records cumulative
statistics for every location: distance travelled and elevation gained
and lost since the start of the trace. All queries are answered from
those statistics:
- closest location to an arbitrary point
- index of an exact location
- location at a distance mark (nearest cumulative distance)
- section of the trace between two distance marks

The trace is referenced, never copied. It is treated as immutable for the
analyzer's lifetime; statistics are not recomputed.
"""

import logging
from dataclasses import dataclass

import numpy as np

from navigo.constants import AnalyzerConfig
from navigo.errors import (
    EmptyTraceError,
    LocationNotFoundError,
    NegativeMarkError,
    NegativeValuesError,
    NoStatisticsError,
    OutOfBoundsError,
)
from navigo.model.elevation import Elevation
from navigo.model.location import Location
from navigo.model.trace import Trace

logger = logging.getLogger(__name__)


def _first_minimum_index(values: np.ndarray) -> int:
    """Index of the first minimum of values, scanning in order.

    A NaN entry never replaces the current best. A NaN first entry is never
    replaced, so index 0 is returned.
    """
    if np.isnan(values[0]):
        return 0
    return int(np.argmin(np.where(np.isnan(values), np.inf, values)))


@dataclass(frozen=True)
class Stats:
    """Cumulative statistics at one location of a trace.

    Attributes:
        distance: Kilometers travelled from the first location
        elevation: Climb and descent in meters from the first location
    """

    distance: float
    elevation: Elevation


class Analyzer:
    """Answers distance and position queries against a single trace.

    Statistics are index-aligned with the trace locations and non-decreasing
    in every field. An empty trace has no statistics.

    Example:
        analyzer = Analyzer(trace=trace)
        location = analyzer.get_location_at(distance=0.2)
        section = analyzer.get_trace_section(start=0.0, end=0.2)
    """

    def __init__(self, trace: Trace) -> None:
        """Compute cumulative statistics for the trace.

        Args:
            trace: Trace to analyze. Must not change while the analyzer is used.
        """
        self.trace = trace
        self._statistics = self._compute_statistics(trace=trace)
        self._distances = np.array([stats.distance for stats in self._statistics], dtype=float)
        logger.debug(f"Computed statistics for {len(self._statistics)} locations, total {self.total_distance:.3f} km")

    @staticmethod
    def _compute_statistics(trace: Trace) -> tuple[Stats, ...]:
        if not len(trace):
            return ()

        steps = [(start.distance_to(other=end), start.elevation_to(other=end)) for start, end in trace.segments()]
        start_km = AnalyzerConfig.START_DISTANCE_KM
        distances = np.cumsum([start_km] + [distance for distance, _ in steps])
        gains = np.cumsum([0.0] + [elevation.positive for _, elevation in steps])
        losses = np.cumsum([0.0] + [elevation.negative for _, elevation in steps])

        return tuple(
            Stats(distance=float(distance), elevation=Elevation(positive=float(gain), negative=float(loss)))
            for distance, gain, loss in zip(distances, gains, losses)
        )

    @property
    def statistics(self) -> tuple[Stats, ...]:
        """Cumulative statistics, one entry per trace location."""
        return self._statistics

    @property
    def total_distance(self) -> float:
        """Distance mark of the last location (0.0 for an empty trace)."""
        if not self._statistics:
            return AnalyzerConfig.START_DISTANCE_KM
        return self._statistics[-1].distance

    def compute_closest_location(self, current_location: Location) -> Location:
        """Trace location nearest to current_location.

        Ties go to the location that comes first in the trace.

        Raises:
            EmptyTraceError: If the trace has no locations.
        """
        if not len(self.trace):
            raise EmptyTraceError("cannot find closest location in an empty trace")

        distances = np.array([current_location.distance_to(other=location) for location in self.trace])
        return self.trace[_first_minimum_index(distances)]

    def find_location_index(self, current_location: Location) -> int:
        """Index of the first location exactly equal to current_location.

        Raises:
            LocationNotFoundError: If no location matches all three coordinates.
        """
        for index, location in enumerate(self.trace):
            if (
                location.longitude == current_location.longitude
                and location.latitude == current_location.latitude
                and location.altitude == current_location.altitude
            ):
                return index
        raise LocationNotFoundError(f"{current_location} not found in trace")

    def find_location_index_at(self, distance: float) -> int:
        """Index of the location whose distance mark is nearest to distance.

        Ties go to the first index.

        Args:
            distance: Distance mark in kilometers from the trace start

        Raises:
            NegativeMarkError: If distance is negative.
            NoStatisticsError: If no statistics were computed.
            EmptyTraceError: If the trace has no locations.
            OutOfBoundsError: If the resolved index lies beyond the trace.
        """
        if distance < 0:
            raise NegativeMarkError(f"negative mark: {distance}")

        if not self._statistics:
            raise NoStatisticsError("no statistics computed for this trace")

        if not len(self.trace):
            raise EmptyTraceError("could not compute statistics for an empty trace")

        index = _first_minimum_index(np.abs(distance - self._distances))

        if index > len(self.trace):
            raise OutOfBoundsError(f"index {index} is beyond {len(self.trace)} locations")
        return index

    def get_location_at(self, distance: float) -> Location:
        """Location nearest to the given distance mark.

        Raises:
            Same errors as find_location_index_at.
        """
        return self.trace[self.find_location_index_at(distance=distance)]

    def get_trace_section(self, start: float, end: float) -> list[Location]:
        """Locations strictly between the distance marks start and end.

        Both marks are resolved to their nearest locations, which are then
        excluded from the section (see Trace.get_section).

        Args:
            start: Section start in kilometers
            end: Section end in kilometers

        Raises:
            NoStatisticsError: If no statistics were computed.
            OutOfBoundsError: If end lies beyond the total trace distance.
            NegativeValuesError: If start is negative.
        """
        if not self._statistics:
            raise NoStatisticsError("no statistics computed for this trace")

        if self.total_distance < end:
            logger.debug(f"Section end {end} km exceeds trace distance {self.total_distance:.3f} km")
            raise OutOfBoundsError(f"section end {end} exceeds trace distance {self.total_distance}")

        if start < 0:
            raise NegativeValuesError(f"negative section start: {start}")

        start_index = self.find_location_index_at(distance=start)
        end_index = self.find_location_index_at(distance=end)
        return self.trace.get_section(start_index=start_index, end_index=end_index)

    def __repr__(self) -> str:
        return f"Analyzer({self.trace!r}, {self.total_distance:.3f} km)"
