"""Tests for the core data models."""

import pytest

from core.models import CountBounds, GenerationOptions, Monkey, StyleCatalog


class TestGenerationOptions:
    """Test suite for GenerationOptions validation."""

    def test_accepts_valid_limits(self):
        """Test that positive max_tokens and temperature in [0, 1] are accepted."""
        options = GenerationOptions(max_tokens=150, temperature=0.2)
        assert options.max_tokens == 150
        assert options.temperature == 0.2

    @pytest.mark.parametrize("max_tokens", [0, -10])
    def test_rejects_non_positive_max_tokens(self, max_tokens):
        """Test that max_tokens must be positive."""
        with pytest.raises(ValueError):
            GenerationOptions(max_tokens=max_tokens, temperature=0.5)

    @pytest.mark.parametrize("temperature", [-0.1, 1.5])
    def test_rejects_temperature_out_of_range(self, temperature):
        """Test that temperature must lie within [0.0, 1.0]."""
        with pytest.raises(ValueError):
            GenerationOptions(max_tokens=100, temperature=temperature)


class TestStyleCatalog:
    """Test suite for StyleCatalog lookups."""

    @pytest.fixture
    def catalog(self):
        return StyleCatalog(
            default="clean",
            entries={"clean": "Tell a clean joke", "pun": "Tell a pun"},
        )

    def test_known_key_is_case_insensitive(self, catalog):
        """Test that lookup lower-cases the caller's value."""
        assert catalog.key_for("PUN") == "pun"
        assert catalog.instruction("Pun") == "Tell a pun"

    @pytest.mark.parametrize("value", ["banana", "", None])
    def test_unknown_value_resolves_to_default(self, catalog, value):
        """Test that unknown, empty or missing values resolve to the default entry."""
        assert catalog.key_for(value) == "clean"
        assert catalog.instruction(value) == "Tell a clean joke"

    def test_keys_lists_entries_in_order(self, catalog):
        assert catalog.keys == ["clean", "pun"]

    def test_default_must_be_an_entry(self):
        """Test that a catalog whose default is missing is rejected."""
        with pytest.raises(ValueError):
            StyleCatalog(default="missing", entries={"clean": "x"})


class TestCountBounds:
    """Test suite for CountBounds.clamp."""

    @pytest.mark.parametrize("value,expected", [(1, 1), (7, 7), (10, 10)])
    def test_in_range_passes_through(self, value, expected):
        assert CountBounds(default=3, maximum=10).clamp(value) == expected

    @pytest.mark.parametrize("value", [0, -1, 11, 1000])
    def test_out_of_range_becomes_default(self, value):
        assert CountBounds(default=3, maximum=10).clamp(value) == 3


class TestMonkey:
    """Test suite for the Monkey roster record."""

    def test_from_dict_accepts_capitalized_keys(self):
        """Test that the remote feed's "Name"/"Population" spelling is understood."""
        monkey = Monkey.from_dict({
            "Name": "Baboon",
            "Location": "Africa & Asia",
            "Population": 10000,
            "Latitude": -8.78,
            "Longitude": 34.51,
        })
        assert monkey.name == "Baboon"
        assert monkey.location == "Africa & Asia"
        assert monkey.population == 10000
        assert monkey.latitude == -8.78

    def test_from_dict_without_name_returns_none(self):
        assert Monkey.from_dict({"location": "nowhere"}) is None
        assert Monkey.from_dict({"name": 42}) is None

    def test_from_dict_drops_non_string_text_fields(self):
        """Test that non-string location/details/image values become empty strings."""
        monkey = Monkey.from_dict({"name": "A", "location": 42, "details": ["x"], "image": {"url": "y"}})
        assert monkey.location == ""
        assert monkey.details == ""
        assert monkey.image == ""

    def test_from_dict_tolerates_bad_numbers(self):
        """Test that malformed optional metadata falls back to zero."""
        monkey = Monkey.from_dict({"name": "Capuchin", "population": "lots", "latitude": None})
        assert monkey.population == 0
        assert monkey.latitude == 0.0

    def test_matches_is_case_insensitive(self):
        monkey = Monkey(name="Alice")
        assert monkey.matches("ALICE")
        assert monkey.matches("alice")
        assert not monkey.matches("Bob")

    def test_to_dict_round_trips_fields(self):
        monkey = Monkey(name="Alice", location="Zoo", population=3)
        data = monkey.to_dict()
        assert data["name"] == "Alice"
        assert data["location"] == "Zoo"
        assert data["population"] == 3
        assert Monkey.from_dict(data) == monkey
