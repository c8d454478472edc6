"""
Event Catalog Loading

The catalog is supplied wholesale by an external collaborator (a fixture file
or a database export). This module reads it from a YAML or JSON file into
immutable `Event` records; the search engine never writes back to it.

Accepted document shapes:
- a list of event mappings
- a mapping with an `events` list

Example Usage:
    from event_discovery.catalog import load_catalog

    events = load_catalog("data/events.yaml")
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .errors import CatalogError
from .search.search_models import Event

logger = logging.getLogger(__name__)


def _read_document(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                return yaml.safe_load(f)
            elif path.suffix == ".json":
                return json.load(f)
            else:
                raise CatalogError(f"Unsupported catalog format: {path.suffix}")
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise CatalogError(f"Failed to read catalog {path}: {e}")


def parse_events(records: List[Dict[str, Any]]) -> List[Event]:
    """Parse raw event records.

    Args:
        records: Event mappings in the catalog wire format.

    Returns:
        Parsed events, in input order.

    Raises:
        CatalogError: If a record is missing a field or has invalid values.
    """
    events = []
    for index, record in enumerate(records):
        try:
            events.append(Event.from_dict(record))
        except KeyError as e:
            raise CatalogError(f"Event #{index} is missing required field {e}")
        except (AttributeError, TypeError, ValueError) as e:
            raise CatalogError(f"Event #{index} is invalid: {e}")
    return events


def load_catalog(path: Union[str, Path]) -> List[Event]:
    """Load an event catalog file.

    Args:
        path: YAML or JSON catalog file.

    Returns:
        Parsed events.

    Raises:
        CatalogError: If the file cannot be read or parsed.
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    document = _read_document(path)
    if isinstance(document, dict):
        document = document.get("events")
    if not isinstance(document, list):
        raise CatalogError(f"Catalog {path} must contain a list of events")

    events = parse_events(document)
    logger.info(f"Loaded {len(events)} events from {path}")
    return events
