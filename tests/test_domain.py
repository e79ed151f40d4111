"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from loadplanner.domain import (
    AIRCRAFT_PROFILES,
    DEFAULT_ULD_CATALOG,
    AircraftProfile,
    AssignmentRecord,
    CatalogEntry,
    DeckAffinity,
    DeckName,
    DeckProfile,
    LoadPlanResult,
    PlacementOutcome,
    Slot,
    SlotClass,
    ULDRequest,
)


class TestULDRequest:
    """Tests for ULD request model."""

    def test_defaults(self):
        """Test a ULD defaults to any deck with restricted slots allowed."""
        uld = ULDRequest(uld_id="AKE12345XX", weight_kg=500)
        assert uld.affinity == DeckAffinity.ANY
        assert uld.allow_restricted is True

    def test_affinity_case_insensitive(self):
        """Test affinity accepts mixed case names."""
        uld = ULDRequest(uld_id="AKE1", weight_kg=1, affinity="Lower")
        assert uld.affinity == DeckAffinity.LOWER

    def test_unknown_affinity_rejected(self):
        """Test an unknown affinity is a validation error."""
        with pytest.raises(ValidationError):
            ULDRequest(uld_id="AKE1", weight_kg=1, affinity="UPPER")

    def test_negative_weight_rejected(self):
        """Test weight must be non-negative."""
        with pytest.raises(ValidationError):
            ULDRequest(uld_id="AKE1", weight_kg=-1)

    def test_non_finite_weight_rejected(self):
        """Test infinite and NaN weights are validation errors."""
        with pytest.raises(ValidationError):
            ULDRequest(uld_id="AKE1", weight_kg=float("inf"))
        with pytest.raises(ValidationError):
            ULDRequest(uld_id="AKE1", weight_kg=float("nan"))

    def test_blank_id_rejected(self):
        """Test identifier must not be blank."""
        with pytest.raises(ValidationError):
            ULDRequest(uld_id="   ", weight_kg=1)

    def test_id_stripped(self):
        """Test surrounding whitespace is removed from the identifier."""
        assert ULDRequest(uld_id=" AKE1 ").uld_id == "AKE1"

    def test_frozen(self):
        """Test requests are immutable."""
        uld = ULDRequest(uld_id="AKE1", weight_kg=1)
        with pytest.raises(ValidationError):
            uld.weight_kg = 2


class TestCatalogEntry:
    """Tests for catalog entries."""

    def test_from_file_keys(self):
        """Test entries validate from catalog file keys."""
        entry = CatalogEntry.model_validate(
            {"Prefix": "ALF", "ULD Type": "LD6", "Width (slots)": 2, "Deck": "Lower", "Notes": "x"}
        )
        assert entry.prefix == "ALF"
        assert entry.uld_type == "LD6"
        assert entry.width_slots == 2
        assert entry.deck == DeckAffinity.LOWER

    def test_width_must_be_positive(self):
        """Test a zero width is rejected."""
        with pytest.raises(ValidationError):
            CatalogEntry(prefix="X", width_slots=0)

    def test_unknown_deck_hint_reads_as_any(self):
        """Test an unrecognized deck hint does not invalidate the entry."""
        entry = CatalogEntry(prefix="X", deck="Upper")
        assert entry.deck == DeckAffinity.ANY

    def test_matches_literal_prefix(self):
        """Test prefix matching is a literal starts-with check."""
        entry = CatalogEntry(prefix="LD3", width_slots=1)
        assert entry.matches("LD3001")
        assert not entry.matches("XLD3001")

    def test_default_catalog_prefixes_unique(self):
        """Test the built-in catalog has no duplicate prefixes."""
        prefixes = [e.prefix for e in DEFAULT_ULD_CATALOG]
        assert len(prefixes) == len(set(prefixes))


class TestAircraftModels:
    """Tests for aircraft profiles."""

    def test_profiles_defined(self):
        """Test built-in aircraft are registered by model."""
        assert "B757-200PCF" in AIRCRAFT_PROFILES
        for model, profile in AIRCRAFT_PROFILES.items():
            assert profile.model == model

    def test_from_file_keys(self):
        """Test profiles validate from aircraft file keys."""
        profile = AircraftProfile.model_validate(
            {
                "model": "X1",
                "mtw": 1000,
                "mainDeck": {"slots": 3, "rowLength": 2, "slotArms": [1, 2, 3], "noseSlots": 0},
            }
        )
        assert profile.mtw_kg == 1000
        assert profile.main_deck.row_length == 2
        assert profile.main_deck.fore_restricted == 0
        assert profile.main_deck.aft_restricted is None
        assert profile.lower_deck.slots == 0

    def test_malformed_arms_dropped(self):
        """Test non-numeric arm lists are discarded."""
        deck = DeckProfile(slots=2, slot_arms=["a", "b"])
        assert deck.slot_arms == []
        assert not deck.has_consistent_arms

    def test_deck_lookup(self):
        """Test deck access by name."""
        profile = AIRCRAFT_PROFILES["B757-200PCF"]
        assert profile.deck(DeckName.MAIN).slots == 15
        assert profile.deck(DeckName.LOWER).slots == 4
        assert profile.total_slots == 19


class TestSlot:
    """Tests for slot model."""

    def test_occupy(self):
        """Test occupying a free slot."""
        slot = Slot(deck=DeckName.MAIN, index=0, arm=10.0)
        slot.occupy("AKE1", 250.0)
        assert slot.occupied
        assert slot.occupant_id == "AKE1"
        assert slot.occupant_weight_kg == 250.0

    def test_double_occupancy_rejected(self):
        """Test a slot holds at most one ULD."""
        slot = Slot(deck=DeckName.MAIN, index=0, arm=10.0)
        slot.occupy("AKE1", 250.0)
        with pytest.raises(ValueError):
            slot.occupy("AKE2", 100.0)

    def test_geometry_immutable(self):
        """Test arm and restriction class cannot change."""
        slot = Slot(deck=DeckName.MAIN, index=0, arm=10.0, slot_class=SlotClass.FORE_RESTRICTED)
        with pytest.raises(ValidationError):
            slot.arm = 20.0
        with pytest.raises(ValidationError):
            slot.slot_class = SlotClass.NORMAL

    def test_label(self):
        """Test 1-based slot label."""
        assert Slot(deck=DeckName.LOWER, index=2, arm=0).label == "lower[3]"


class TestPlanModels:
    """Tests for load plan models."""

    def test_record_position(self):
        """Test position label for placed and unassigned records."""
        placed = AssignmentRecord(
            uld_id="A",
            weight_kg=1,
            width_slots=1,
            outcome=PlacementOutcome.PLACED,
            deck=DeckName.MAIN,
            start_index=4,
            slot_indices=[4],
        )
        unassigned = AssignmentRecord(
            uld_id="B", weight_kg=1, width_slots=1, outcome=PlacementOutcome.UNASSIGNED
        )
        assert placed.position == "main[5]"
        assert unassigned.position == "UNASSIGNED"

    def test_result_aggregates(self):
        """Test CG arm and counts on a plan result."""
        result = LoadPlanResult(
            aircraft_model="X",
            target_arm=20.0,
            assignments=[
                AssignmentRecord(
                    uld_id="A",
                    weight_kg=100,
                    width_slots=1,
                    outcome=PlacementOutcome.PLACED,
                    deck=DeckName.MAIN,
                    start_index=0,
                    slot_indices=[0],
                ),
                AssignmentRecord(uld_id="B", weight_kg=5, width_slots=1, outcome=PlacementOutcome.UNASSIGNED),
            ],
            total_weight_kg=100,
            total_moment=2500,
        )
        assert result.cg_arm == 25.0
        assert result.placed_count == 1
        assert result.unassigned_count == 1
        assert [a.uld_id for a in result.unassigned()] == ["B"]

    def test_empty_result_has_no_cg(self):
        """Test CG is undefined for an empty load."""
        result = LoadPlanResult(aircraft_model="X", target_arm=0.0)
        assert result.cg_arm is None
