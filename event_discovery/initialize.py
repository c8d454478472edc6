"""
Application Initialization for Event Discovery Search

This module handles start-up for the command line application: it reads the
configuration and builds the shared search registries once, so a bad
registries file fails fast instead of on the first query.

Example Usage:
    from event_discovery.initialize import initialize

    initialize()
"""

import logging

from . import __version__
from .config import config
from .search.registries import SearchRegistries, configured_registries

logger = logging.getLogger(__name__)


def initialize() -> SearchRegistries:
    """Initialize the package.

    Returns:
        The registries searches will use.

    Raises:
        ConfigurationError: If the configured registries file is invalid.
    """
    try:
        registries = configured_registries()

        logger.info(
            f"Initialized Event Discovery Search {__version__} "
            f"in {config.environment} environment"
        )
        return registries
    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        raise
