"""
Reference data loaders.

Reads the ULD catalog and the aircraft database from JSON files. Unreadable
files and malformed entries never abort planning: the loader logs a warning and
returns what it could parse.

Catalog file (array, order preserved):
    [{"Prefix": "AKE", "ULD Type": "LD3", "Width (slots)": 1, "Deck": "Lower", "Notes": ""}]

Aircraft file (array):
    [{"model": "B757-200PCF", "mtw": 39780,
      "mainDeck": {"slots": 15, "rowLength": 3, "slotArms": [...], "noseSlots": 1, "tailSlots": 1},
      "lowerDeck": {"slots": 4}}]
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from loadplanner.domain import AircraftProfile, CatalogEntry

logger = logging.getLogger(__name__)


def _read_json_array(path: str | Path) -> list[Any]:
    """Read a JSON array from a file, or an empty list if that is not possible."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning("Reference file not found: %s", path)
        return []
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return []

    if not isinstance(data, list):
        logger.warning("Expected a JSON array in %s, got %s", path, type(data).__name__)
        return []
    return data


def parse_catalog(entries: list[Any]) -> list[CatalogEntry]:
    """Validate raw catalog entries, skipping malformed ones."""
    catalog = []
    for position, raw in enumerate(entries):
        try:
            catalog.append(CatalogEntry.model_validate(raw))
        except ValidationError as e:
            logger.warning("Skipping catalog entry #%d: %s", position + 1, e.errors()[0]["msg"])
    return catalog


def parse_aircraft_db(entries: list[Any]) -> dict[str, AircraftProfile]:
    """Validate raw aircraft entries keyed by model, skipping malformed ones."""
    db: dict[str, AircraftProfile] = {}
    for position, raw in enumerate(entries):
        try:
            profile = AircraftProfile.model_validate(raw)
        except ValidationError as e:
            logger.warning("Skipping aircraft entry #%d: %s", position + 1, e.errors()[0]["msg"])
            continue
        db[profile.model] = profile
    return db


def load_catalog(path: str | Path) -> list[CatalogEntry]:
    """Load the ULD catalog from a JSON file."""
    catalog = parse_catalog(_read_json_array(path))
    logger.info("Loaded %d catalog entries from %s", len(catalog), path)
    return catalog


def load_aircraft_db(path: str | Path) -> dict[str, AircraftProfile]:
    """Load aircraft profiles from a JSON file."""
    db = parse_aircraft_db(_read_json_array(path))
    logger.info("Loaded %d aircraft profiles from %s", len(db), path)
    return db
