"""
ULD load request generator.

Generates realistic synthetic ULD requests for demos and tests:
- Identifier mix by catalog prefix
- Weights drawn per unit type
- Deck affinity following the catalog deck hint
"""

import numpy as np

from loadplanner.domain import DEFAULT_ULD_CATALOG, CatalogEntry, DeckAffinity, ULDRequest


class ULDRequestGenerator:
    """
    Generate synthetic ULD load requests.

    Based on typical freighter loads:
    - Mostly LD3 containers and standard pallets
    - A minority of wide (2-slot) units
    - A few units that must avoid nose/tail positions
    """

    # Request mix by catalog prefix (probabilities)
    PREFIX_MIX = {
        "AKE": 0.35,
        "PMC": 0.25,
        "PAG": 0.15,
        "AMA": 0.10,
        "ALF": 0.10,
        "PGA": 0.05,
    }

    # Gross weight ranges (kg) by slot width
    WEIGHT_RANGES = {
        1: (300.0, 1500.0),
        2: (1200.0, 4500.0),
    }

    RESTRICTED_DISALLOWED_SHARE = 0.2

    def __init__(self, seed: int | None = None, catalog: list[CatalogEntry] | None = None):
        """Initialize generator with optional random seed."""
        self.rng = np.random.default_rng(seed)
        catalog = DEFAULT_ULD_CATALOG if catalog is None else catalog
        self.catalog = {e.prefix: e for e in catalog}
        self._serial = 10000

    def _next_id(self, prefix: str) -> str:
        self._serial += 1
        return f"{prefix}{self._serial}XX"

    def generate(self, count: int = 10) -> list[ULDRequest]:
        """
        Generate ULD requests.

        Args:
            count: Number of requests to generate

        Returns:
            List of ULDRequest objects in loading order
        """
        prefixes = list(self.PREFIX_MIX.keys())
        probs = np.array(list(self.PREFIX_MIX.values()))
        probs = probs / probs.sum()

        requests = []
        for prefix in self.rng.choice(prefixes, size=count, p=probs):
            entry = self.catalog.get(prefix)
            width = entry.width_slots if entry else 1
            low, high = self.WEIGHT_RANGES.get(width, self.WEIGHT_RANGES[1])
            requests.append(
                ULDRequest(
                    uld_id=self._next_id(str(prefix)),
                    weight_kg=round(float(self.rng.uniform(low, high)), 1),
                    affinity=entry.deck if entry else DeckAffinity.ANY,
                    allow_restricted=bool(self.rng.random() >= self.RESTRICTED_DISALLOWED_SHARE),
                )
            )
        return requests
