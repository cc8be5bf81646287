"""Tests for data models."""

import pytest
from pydantic import ValidationError

from restaurant_wall.models import (
    AppState,
    Cuisine,
    Location,
    PriceRange,
    Restaurant,
    RestaurantDraft,
    ViewMode,
    restaurant_list_adapter,
)


class TestPriceRange:
    """Tests for the PriceRange enum."""

    def test_tiers_follow_symbol_count(self):
        """Test that each tier matches the number of symbols."""
        for price_range in PriceRange:
            assert price_range.tier == len(price_range.value)

    def test_tiers_strictly_increase(self):
        """Test that tiers are 1, 2, 3, 4 in declaration order."""
        assert [p.tier for p in PriceRange] == [1, 2, 3, 4]

    def test_from_tier(self):
        """Test looking up a price range by tier."""
        assert PriceRange.from_tier(1) == PriceRange.BUDGET
        assert PriceRange.from_tier(4) == PriceRange.LUXURY

    def test_from_tier_out_of_range(self):
        """Test that unknown tiers are rejected."""
        with pytest.raises(ValueError, match="between 1 and 4"):
            PriceRange.from_tier(5)


class TestCuisine:
    """Tests for the Cuisine enum."""

    def test_values(self):
        """Test that all expected cuisines exist."""
        assert [c.value for c in Cuisine] == [
            "Italian",
            "Japanese",
            "Mexican",
            "Indian",
            "American",
            "French",
            "Thai",
            "Other",
        ]

    def test_all_is_not_a_cuisine(self):
        """Test that the filter sentinel cannot be stored."""
        with pytest.raises(ValueError):
            Cuisine("All")


class TestRestaurantDraft:
    """Tests for the RestaurantDraft model."""

    def test_create_from_wire_format(self, draft_data):
        """Test creating a draft from API field names."""
        draft = RestaurantDraft.model_validate(draft_data())

        assert draft.name == "Tofu House"
        assert draft.cuisine == Cuisine.JAPANESE
        assert draft.price_range == PriceRange.MODERATE
        assert draft.recommended_by == "Sam"
        assert draft.location.latitude == 52.52
        assert draft.location.longitude == 13.405

    def test_create_from_field_names(self):
        """Test creating a draft with Python attribute names."""
        draft = RestaurantDraft(
            name="Green Bowl",
            cuisine=Cuisine.THAI,
            description="Curries",
            price_range=PriceRange.BUDGET,
            rating=5,
            recommended_by="Alex",
            location=Location(latitude=1.0, longitude=2.0, address="2 Side St"),
        )

        assert draft.price_range.tier == 1

    @pytest.mark.parametrize("rating", [0, 6])
    def test_invalid_rating(self, draft_data, rating):
        """Test that ratings outside 1-5 are rejected."""
        with pytest.raises(ValidationError):
            RestaurantDraft.model_validate(draft_data(rating=rating))

    def test_invalid_price_range(self, draft_data):
        """Test that unknown price symbols are rejected."""
        with pytest.raises(ValidationError):
            RestaurantDraft.model_validate(draft_data(priceRange="$$"))

    def test_invalid_cuisine(self, draft_data):
        """Test that the All sentinel is not a valid cuisine."""
        with pytest.raises(ValidationError):
            RestaurantDraft.model_validate(draft_data(cuisine="All"))

    def test_missing_location(self, draft_data):
        """Test that location is required."""
        data = draft_data()
        del data["location"]
        with pytest.raises(ValidationError):
            RestaurantDraft.model_validate(data)

    def test_draft_immutable(self, make_draft):
        """Test that drafts are frozen."""
        draft = make_draft()
        with pytest.raises(ValidationError):
            draft.name = "Other"


class TestRestaurant:
    """Tests for the Restaurant model."""

    def test_requires_identity(self, draft_data):
        """Test that a restaurant needs an id and timestamp."""
        with pytest.raises(ValidationError):
            Restaurant.model_validate(draft_data())

    def test_to_payload_uses_api_names(self, make_restaurant):
        """Test serialization to the API's JSON shape."""
        restaurant = make_restaurant(id="abc", timestamp=1234)
        payload = restaurant.to_payload()

        assert payload["id"] == "abc"
        assert payload["timestamp"] == 1234
        assert payload["priceRange"] == "€€"
        assert payload["recommendedBy"] == "Sam"
        assert payload["cuisine"] == "Japanese"
        assert payload["location"] == {
            "lat": 52.52,
            "lng": 13.405,
            "address": "1 Main St",
        }

    def test_payload_validates_back(self, make_restaurant):
        """Test that a serialized restaurant is accepted again."""
        restaurant = make_restaurant()
        assert Restaurant.model_validate(restaurant.to_payload()) == restaurant

    def test_created_at(self, make_restaurant):
        """Test conversion of the millisecond timestamp."""
        restaurant = make_restaurant(timestamp=1_700_000_000_500)
        assert restaurant.created_at.timestamp() == pytest.approx(1_700_000_000.5)

    def test_list_adapter_rejects_bad_records(self, make_restaurant):
        """Test that one invalid record fails the whole list."""
        good = make_restaurant().to_payload()
        bad = {**good, "rating": 9}
        with pytest.raises(ValidationError):
            restaurant_list_adapter.validate_python([good, bad])


class TestAppState:
    """Tests for the AppState model."""

    def test_defaults(self):
        """Test the initial state."""
        state = AppState()

        assert state.restaurants == ()
        assert state.search_term == ""
        assert state.selected_cuisine == "All"
        assert state.price_filter == "all"
        assert state.sort_by == "newest"
        assert state.selected_restaurant is None
        assert state.is_loading is True
        assert state.error is None
        assert state.view_mode == ViewMode.BOTH

    def test_state_immutable(self):
        """Test that state is frozen."""
        state = AppState()
        with pytest.raises(ValidationError):
            state.error = "boom"
