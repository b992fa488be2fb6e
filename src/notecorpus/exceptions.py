"""Exceptions raised by the discovery engine."""


class ConfigurationError(ValueError):
    """Raised when the discovery configuration cannot be honoured.

    The typical case is a backend preference entry naming a search tool
    that has no query builder.
    """

    pass
