"""Errors raised by trace queries.

Every failure carries a TraceErrorKind so callers can branch on the kind
without matching message strings. All errors derive from TraceError, which
is a ValueError: each one means the query cannot be answered for the given
trace or arguments.
"""

from enum import Enum


class TraceErrorKind(Enum):
    """Distinguishable failure kinds of trace operations."""

    EMPTY_TRACE = "empty_trace"
    NOT_FOUND = "not_found"
    NEGATIVE_MARK = "negative_mark"
    NEGATIVE_VALUES = "negative_values"
    NO_STATISTICS = "no_statistics"
    OUT_OF_BOUNDS = "out_of_bounds"


class TraceError(ValueError):
    """Base class for all trace query failures."""

    kind: TraceErrorKind
    default_message = "trace error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)


class EmptyTraceError(TraceError):
    """Operation needs at least one location and the trace has none."""

    kind = TraceErrorKind.EMPTY_TRACE
    default_message = "empty trace"


class LocationNotFoundError(TraceError):
    """Exact-match lookup found no matching location."""

    kind = TraceErrorKind.NOT_FOUND
    default_message = "location not found"


class NegativeMarkError(TraceError):
    """A distance mark is negative."""

    kind = TraceErrorKind.NEGATIVE_MARK
    default_message = "negative mark"


class NegativeValuesError(TraceError):
    """A section start bound is negative."""

    kind = TraceErrorKind.NEGATIVE_VALUES
    default_message = "negative values"


class NoStatisticsError(TraceError):
    """The cumulative statistics are empty."""

    kind = TraceErrorKind.NO_STATISTICS
    default_message = "no statistics computed"


class OutOfBoundsError(TraceError):
    """A distance mark or resolved index lies beyond the trace."""

    kind = TraceErrorKind.OUT_OF_BOUNDS
    default_message = "out of bounds"
