"""Exceptions raised by the simulation core."""


class GravtrailsError(Exception):
    """Base class for all gravtrails errors."""


class InvalidConfiguration(GravtrailsError, ValueError):
    """A body configuration record cannot be turned into a body."""


class InvalidArgument(GravtrailsError, ValueError):
    """A controller setter or tick received a nonsensical value."""
