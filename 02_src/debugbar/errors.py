"""Exception types raised by the debugbar package."""


class DebugBarError(Exception):
    """Base class for debugbar errors."""


class ConfigurationError(DebugBarError, ValueError):
    """Invalid settings or a collector asked for a collaborator it was not given."""
