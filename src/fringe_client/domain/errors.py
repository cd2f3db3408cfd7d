class FringeClientError(Exception):
    """Base class for errors reported by the session and configuration layer."""


class ConfigError(FringeClientError):
    """The configuration endpoint answered, but without the mandatory fields."""
