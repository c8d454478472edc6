"""
Event Discovery Search - Free-text Discovery over an Events Catalog

This package provides a lexical relevance-scoring and ranking engine for an
events-discovery product. Users type informal phrases ("cheap yoga classes",
"jazz tonight") and get semantically relevant, locally prioritized results
without a trained ranking model.

Key Features:
- Tokenization and one-hop ("firewalled") synonym expansion
- Venue and city entity recognition with tiered proximity scoring
- Time and price intent parsing from the raw query
- Multi-signal weighted scoring with strict dominance between match types
- Threshold filtering with a browsing-mode bypass for filter-only queries
- Deterministic title-match-first ranking
- Optional intent extraction through an HTTP service or offline rules

Version: 1.0.0
License: MIT
"""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("event-discovery-search")
except PackageNotFoundError:
    __version__ = "1.0.0"

logger = logging.getLogger(__name__)

__all__ = ["__version__"]
