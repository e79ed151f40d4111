"""
Reference and synthetic data for the ULD Load Planner.

- Loaders: ULD catalog and aircraft database JSON files
- Synthetic: seeded ULD request generation
"""

from .loaders import load_catalog, load_aircraft_db, parse_catalog, parse_aircraft_db

__all__ = [
    "load_catalog",
    "load_aircraft_db",
    "parse_catalog",
    "parse_aircraft_db",
]
