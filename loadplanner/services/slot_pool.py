"""
Slot pool construction.

Builds the addressable slots of each cargo deck from an aircraft profile,
regenerating balance arms when the profile's arm list does not match the slot
count and applying the nose/tail restriction rule.
"""

import logging
from collections.abc import Iterator

import numpy as np

from loadplanner.config import PlannerSettings
from loadplanner.domain import AircraftProfile, DeckName, DeckProfile, Slot, SlotClass

logger = logging.getLogger(__name__)


def generate_default_arms(n: int, fore_arm: float = 10.0, aft_arm: float = 40.0) -> list[float]:
    """
    Linearly interpolate n arms from the fore to the aft reference arm.

    A single slot sits at the midpoint; no slots yields no arms.
    """
    if n <= 0:
        return []
    if n == 1:
        return [(fore_arm + aft_arm) / 2.0]
    t = np.arange(n, dtype=float) / (n - 1)
    return (fore_arm * (1 - t) + aft_arm * t).tolist()


def restriction_counts(deck: DeckProfile, default_restricted: int = 1) -> tuple[int, int]:
    """Get (fore, aft) restricted slot counts, applying the default when unspecified."""
    default = default_restricted if deck.slots > 0 else 0
    fore = deck.fore_restricted if deck.fore_restricted is not None else default
    aft = deck.aft_restricted if deck.aft_restricted is not None else default
    return fore, aft


def build_deck_slots(
    name: DeckName,
    deck: DeckProfile,
    fore_arm: float,
    aft_arm: float,
    default_restricted: int = 1,
) -> list[Slot]:
    """Create the slots of one deck in index order."""
    arms = list(deck.slot_arms)
    if not deck.has_consistent_arms:
        if arms:
            logger.warning(
                "%s deck has %d arms for %d slots, regenerating",
                name.value, len(arms), deck.slots,
            )
        arms = generate_default_arms(deck.slots, fore_arm, aft_arm)

    fore, aft = restriction_counts(deck, default_restricted)

    slots = []
    for i in range(deck.slots):
        if i < fore:
            slot_class = SlotClass.FORE_RESTRICTED
        elif i >= deck.slots - aft:
            slot_class = SlotClass.AFT_RESTRICTED
        else:
            slot_class = SlotClass.NORMAL
        slots.append(Slot(deck=name, index=i, arm=arms[i], slot_class=slot_class))
    return slots


class SlotPool:
    """
    Ordered slots of every deck on an aircraft.

    Slots are addressed by (deck, index). Free slots are always derived from
    occupancy rather than tracked separately.

    Usage:
        pool = SlotPool.from_aircraft(AIRCRAFT_PROFILES["B757-200PCF"])
        pool.free_slots(DeckName.MAIN)
    """

    DECK_ORDER = (DeckName.MAIN, DeckName.LOWER)

    def __init__(self, decks: dict[DeckName, list[Slot]]):
        self._decks = {name: list(decks.get(name, [])) for name in self.DECK_ORDER}

    @classmethod
    def from_aircraft(
        cls,
        aircraft: AircraftProfile,
        settings: PlannerSettings | None = None,
    ) -> "SlotPool":
        """Build the pool for an aircraft, using settings for arm and restriction defaults."""
        settings = settings or PlannerSettings()
        decks = {
            DeckName.MAIN: build_deck_slots(
                DeckName.MAIN,
                aircraft.main_deck,
                settings.main_fore_arm,
                settings.main_aft_arm,
                settings.default_restricted_slots,
            ),
            DeckName.LOWER: build_deck_slots(
                DeckName.LOWER,
                aircraft.lower_deck,
                settings.lower_fore_arm,
                settings.lower_aft_arm,
                settings.default_restricted_slots,
            ),
        }
        return cls(decks)

    def slots(self, deck: DeckName) -> list[Slot]:
        """Get the slots of a deck in index order."""
        return self._decks[deck]

    def slot(self, deck: DeckName, index: int) -> Slot:
        return self._decks[deck][index]

    def __iter__(self) -> Iterator[Slot]:
        for deck in self.DECK_ORDER:
            yield from self._decks[deck]

    def __len__(self) -> int:
        return sum(len(slots) for slots in self._decks.values())

    def free_slots(self, deck: DeckName | None = None) -> list[Slot]:
        """Get currently free slots, optionally for one deck."""
        slots = self._decks[deck] if deck is not None else list(self)
        return [s for s in slots if s.is_free]

    def mean_arm(self) -> float:
        """Unweighted mean arm of all slots on all decks."""
        arms = [s.arm for s in self]
        if not arms:
            return 0.0
        return float(np.mean(arms))

    def occupy(self, deck: DeckName, indices: list[int], uld_id: str, weight_share_kg: float) -> None:
        """Mark slots as holding a ULD's weight share."""
        for i in indices:
            self._decks[deck][i].occupy(uld_id, weight_share_kg)

    def snapshot(self, deck: DeckName) -> list[Slot]:
        """Copy of a deck's slot state for read-only consumers."""
        return [s.model_copy() for s in self._decks[deck]]
