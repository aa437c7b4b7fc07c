"""Errors raised by the filtering core and its data sources."""


class InvalidInputError(ValueError):
    """Raised when a filter is asked to work on a missing (None) flight collection."""


class FlightDataError(ValueError):
    """Raised when flight data read from a file has the wrong structure."""
