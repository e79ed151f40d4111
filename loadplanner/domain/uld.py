"""
ULD (Unit Load Device) domain models.

ULDs are standardized containers and pallets loaded into aircraft cargo decks.
Each ULD occupies one or more contiguous deck slots, as declared by the catalog.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator


class DeckAffinity(str, Enum):
    """Deck a ULD is allowed to be loaded on."""

    MAIN = "MAIN"
    LOWER = "LOWER"
    ANY = "ANY"


def _coerce_affinity(value: Any) -> Any:
    """Accept case-insensitive affinity names (e.g. "Lower", "any")."""
    if isinstance(value, str):
        return value.strip().upper()
    return value


class ULDRequest(BaseModel):
    """
    A ULD submitted for loading.

    Immutable for the duration of a planning run.
    """

    uld_id: Annotated[str, Field(min_length=1, description="ULD identifier (e.g., AKE12345DL)")]
    weight_kg: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    affinity: DeckAffinity = DeckAffinity.ANY
    allow_restricted: bool = True

    model_config = {"frozen": True}

    @field_validator("uld_id")
    @classmethod
    def validate_uld_id(cls, v: str) -> str:
        """Strip surrounding whitespace; an empty identifier is rejected."""
        v = v.strip()
        if not v:
            raise ValueError("ULD ID must not be blank")
        return v

    @field_validator("affinity", mode="before")
    @classmethod
    def normalize_affinity(cls, v: Any) -> Any:
        return _coerce_affinity(v)


class CatalogEntry(BaseModel):
    """
    ULD catalog entry.

    Maps an identifier prefix to the number of contiguous slots the ULD occupies.
    Field aliases follow the keys of the catalog JSON file.
    """

    prefix: str = Field(..., min_length=1, alias="Prefix")
    uld_type: str = Field(default="", alias="ULD Type")
    width_slots: int = Field(default=1, ge=1, alias="Width (slots)")
    deck: DeckAffinity = Field(default=DeckAffinity.ANY, alias="Deck")
    notes: str = Field(default="", alias="Notes")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("deck", mode="before")
    @classmethod
    def normalize_deck(cls, v: Any) -> Any:
        """The deck hint is informational; unknown hints read as ANY."""
        v = _coerce_affinity(v)
        if v not in {a.value for a in DeckAffinity} and not isinstance(v, DeckAffinity):
            return DeckAffinity.ANY
        return v

    def matches(self, uld_id: str) -> bool:
        """Check if this entry's prefix is a literal prefix of the ULD ID."""
        return uld_id.startswith(self.prefix)


def _entry(prefix: str, uld_type: str, width: int, deck: DeckAffinity, notes: str) -> CatalogEntry:
    return CatalogEntry(
        prefix=prefix,
        uld_type=uld_type,
        width_slots=width,
        deck=deck,
        notes=notes,
    )


# Built-in catalog, order is significant (first matching prefix wins)
DEFAULT_ULD_CATALOG: list[CatalogEntry] = [
    # Lower deck containers
    _entry("AKE", "LD3", 1, DeckAffinity.LOWER, "Most common half-width container"),
    _entry("AKH", "LD3-45", 1, DeckAffinity.LOWER, "Reduced height LD3 for narrow-body holds"),
    _entry("DPE", "LD2", 1, DeckAffinity.LOWER, "Small half-width container"),
    _entry("AKC", "LD1", 1, DeckAffinity.LOWER, "Half-width container, B747 lower deck"),
    _entry("ALF", "LD6", 2, DeckAffinity.LOWER, "Full-width container"),
    _entry("DQF", "LD8", 2, DeckAffinity.LOWER, "Full-width container, B767 lower deck"),
    _entry("ALP", "LD11", 2, DeckAffinity.LOWER, "Full-width rectangular container"),
    # Pallets and full-size containers
    _entry("AAP", "LD9", 2, DeckAffinity.ANY, "Contoured 88x125 container"),
    _entry("AAF", "LD26", 2, DeckAffinity.ANY, "Contoured 88x125 container"),
    _entry("PAG", "LD7", 1, DeckAffinity.ANY, "88x125 pallet"),
    _entry("PMC", "LD39", 1, DeckAffinity.ANY, "96x125 pallet"),
    # Main deck units
    _entry("AMA", "M1", 1, DeckAffinity.MAIN, "96x125 main deck container"),
    _entry("AMJ", "M1H", 1, DeckAffinity.MAIN, "96x125 high main deck container"),
    _entry("PGA", "M6", 2, DeckAffinity.MAIN, "20ft main deck pallet"),
]
