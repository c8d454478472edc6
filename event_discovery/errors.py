"""Exception hierarchy for the outer surfaces of event discovery.

The search engine itself never raises for query input; these errors come from
loading configuration, registries and catalogs.
"""


class EventDiscoveryError(Exception):
    """Base event discovery error."""
    pass


class ConfigurationError(EventDiscoveryError):
    """Invalid or unreadable configuration."""
    pass


class CatalogError(EventDiscoveryError):
    """Catalog could not be loaded or contains invalid events."""
    pass
