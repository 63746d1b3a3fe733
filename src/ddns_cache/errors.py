class DDNSCacheError(Exception):
    """Base class for all ddns_cache errors."""


class ConfigurationError(DDNSCacheError, ValueError):
    """
    Missing or structurally invalid provider/alias configuration.

    The only error class that aborts a seeding pass.
    """


class ResolutionError(DDNSCacheError):
    """A resolver backend could not turn a hostname into an address."""
