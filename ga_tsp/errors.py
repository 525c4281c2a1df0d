class GATSPError(Exception):
    """Base class for errors raised by ga_tsp."""


class InvalidInputError(GATSPError, ValueError):
    """City input or chromosome arguments that cannot form a valid tour."""


class ConfigurationError(GATSPError, ValueError):
    """Evolution settings outside their accepted range."""
