"""Tests for the search criteria builder."""

import copy
from datetime import datetime, timezone

import pydantic
import pytest

from yelp_search.distance import Distance
from yelp_search.exceptions import (
    AreaTooLarge,
    CriteriaValidationError,
    IncompatibleCriteria,
    TooManyResults,
)
from yelp_search.models import Coordinates, PricingLevel
from yelp_search.search.criteria import SearchCriteria
from yelp_search.search.options import Attribute, SortingMode


def query_pairs(query_string: str) -> set[str]:
    """Split a rendered query string into its key=value pairs."""
    assert query_string.startswith("?")
    return set(query_string[1:].split("&"))


@pytest.fixture
def criteria() -> SearchCriteria:
    """Fixture for a search around a city."""
    return SearchCriteria.by_location("San Antonio")


class TestFactories:
    """Tests for the ways a search can be centered."""

    def test_by_location(self, criteria: SearchCriteria) -> None:
        """Test that a location search only sets the location."""
        assert criteria.query_parameters() == {"location": "San Antonio"}

    def test_by_coordinates(self) -> None:
        """Test that a coordinates search sets latitude and longitude only."""
        criteria = SearchCriteria.by_coordinates(29.426786, -98.489576)
        assert criteria.query_parameters() == {
            "latitude": "29.426786",
            "longitude": "-98.489576",
        }

    def test_by_point(self) -> None:
        """Test that a Coordinates model can center a search."""
        point = Coordinates(latitude=29.426786, longitude=-98.489576)
        assert SearchCriteria.by_point(point) == SearchCriteria.by_coordinates(
            29.426786, -98.489576
        )

    def test_out_of_range_coordinates(self) -> None:
        """Test that impossible coordinates are rejected."""
        with pytest.raises(pydantic.ValidationError):
            SearchCriteria.by_coordinates(91.0, 0.0)

    def test_constructor_does_not_accept_raw_parameters(self) -> None:
        """Test that a location and coordinates cannot be mixed through the constructor."""
        with pytest.raises(TypeError):
            SearchCriteria({"location": "Austin", "latitude": "1.0", "longitude": "2.0"})

    def test_parameters_are_copied_on_construction(self) -> None:
        """Test that changing the source mapping does not leak into the criteria."""
        parameters = {"location": "Austin"}
        criteria = SearchCriteria._from_parameters(parameters)

        parameters["latitude"] = "1.0"

        assert criteria.query_parameters() == {"location": "Austin"}


class TestLimitAndOffset:
    """Tests for page size and offset handling."""

    def test_default_values(self, criteria: SearchCriteria) -> None:
        """Test that limit and offset have defaults even when never set."""
        assert criteria.limit() == 20
        assert criteria.offset() == 0
        assert "limit" not in criteria.to_query_string()

    def test_access_to_current_values(self, criteria: SearchCriteria) -> None:
        """Test reading back explicitly set values."""
        criteria.limit(5).offset(15)
        assert criteria.limit() == 5
        assert criteria.offset() == 15

    @pytest.mark.parametrize("limit", [1, 20, 50])
    def test_accepted_limits(self, criteria: SearchCriteria, limit: int) -> None:
        """Test that limits up to 50 are accepted."""
        assert criteria.limit(limit) is criteria
        assert criteria.limit() == limit

    def test_does_not_allow_more_than_50_results(self) -> None:
        """Test that 51 results per page are rejected."""
        with pytest.raises(TooManyResults, match="too many results"):
            SearchCriteria.by_coordinates(29.426786, -98.489576).limit(51)

    def test_rejected_limit_leaves_criteria_untouched(self, criteria: SearchCriteria) -> None:
        """Test that a failed mutator does not change the parameters."""
        criteria.limit(10)
        with pytest.raises(TooManyResults):
            criteria.limit(51)
        assert criteria.limit() == 10

    def test_limit_must_be_positive(self, criteria: SearchCriteria) -> None:
        """Test that requesting no results is rejected."""
        with pytest.raises(ValueError):
            criteria.limit(0)

    def test_offset_cannot_be_negative(self, criteria: SearchCriteria) -> None:
        """Test that negative offsets are rejected."""
        with pytest.raises(ValueError):
            criteria.offset(-1)

    def test_non_integer_limit_and_offset_are_rejected(self, criteria: SearchCriteria) -> None:
        """Test that fractional values fail when set, not when read back."""
        with pytest.raises(TypeError):
            criteria.limit(5.5)
        with pytest.raises(TypeError):
            criteria.offset(2.5)

        assert criteria.limit() == 20
        assert criteria.offset() == 0
        assert criteria.pagination(5).total_pages == 1


class TestRadius:
    """Tests for restricting the search area."""

    def test_radius_is_sent_in_whole_meters(self, criteria: SearchCriteria) -> None:
        """Test that 2 miles (3218.688 meters) is sent as 3218."""
        criteria.within_a_radius_of(Distance.in_miles(2))
        assert criteria.query_parameters()["radius"] == "3218"

    def test_largest_radius_is_accepted(self, criteria: SearchCriteria) -> None:
        """Test the 40000 meters boundary."""
        criteria.within_a_radius_of(Distance.in_meters(40000))
        assert criteria.query_parameters()["radius"] == "40000"

    def test_does_not_allow_a_radius_bigger_than_40000_meters(
        self, criteria: SearchCriteria
    ) -> None:
        """Test that 40001 meters is rejected."""
        with pytest.raises(AreaTooLarge, match="area too large"):
            criteria.within_a_radius_of(Distance.in_meters(40001))

    def test_radius_limit_applies_to_any_unit(self, criteria: SearchCriteria) -> None:
        """Test that the limit is checked after normalizing units."""
        criteria.within_a_radius_of(Distance.in_kilometers(40))
        assert criteria.query_parameters()["radius"] == "40000"

        with pytest.raises(AreaTooLarge):
            criteria.within_a_radius_of(Distance.in_miles(25))


class TestOpeningHours:
    """Tests for the mutually exclusive opening filters."""

    def test_open_now(self, criteria: SearchCriteria) -> None:
        """Test that open_now is sent as 'true'."""
        criteria.open_now()
        assert criteria.query_parameters()["open_now"] == "true"

    def test_open_at_timestamp(self, criteria: SearchCriteria) -> None:
        """Test that open_at is sent as unix seconds."""
        criteria.open_at(1500000000)
        assert criteria.query_parameters()["open_at"] == "1500000000"

    def test_open_at_datetime(self, criteria: SearchCriteria) -> None:
        """Test that datetimes are converted to unix seconds."""
        criteria.open_at(datetime(2017, 7, 14, 2, 40, tzinfo=timezone.utc))
        assert criteria.query_parameters()["open_at"] == "1500000000"

    def test_open_at_rejects_fractional_timestamps(self, criteria: SearchCriteria) -> None:
        """Test that open_at only accepts whole seconds."""
        with pytest.raises(TypeError):
            criteria.open_at(1500000000.5)
        assert "open_at" not in criteria.query_parameters()

    def test_open_now_then_open_at(self) -> None:
        """Test that open_at cannot follow open_now."""
        with pytest.raises(IncompatibleCriteria, match="incompatible: open_now vs open_at"):
            SearchCriteria.by_coordinates(29.426786, -98.489576).open_now().open_at(
                int(datetime.now().timestamp())
            )

    def test_open_at_then_open_now(self, criteria: SearchCriteria) -> None:
        """Test that open_now cannot follow open_at."""
        with pytest.raises(IncompatibleCriteria, match="incompatible: open_at vs open_now"):
            criteria.open_at(1500000000).open_now()

    def test_validation_errors_share_a_base(self) -> None:
        """Test that every validation error can be caught as a ValueError."""
        for error in (TooManyResults, AreaTooLarge, IncompatibleCriteria):
            assert issubclass(error, CriteriaValidationError)
            assert issubclass(error, ValueError)


class TestFilters:
    """Tests for term, category, pricing, attribute, sorting and locale filters."""

    def test_adds_several_attributes(self, criteria: SearchCriteria) -> None:
        """Test that attributes are comma-joined in the order given."""
        criteria.with_attributes(
            Attribute.CASHBACK, Attribute.DEALS, Attribute.GENDER_NEUTRAL_RESTROOMS
        )
        assert "cashback,deals,gender_neutral_restrooms" in str(criteria)

    def test_attribute_order_is_preserved(self, criteria: SearchCriteria) -> None:
        """Test that attributes are not reordered."""
        criteria.with_attributes(Attribute.DEALS, Attribute.HOT_AND_NEW)
        assert criteria.query_parameters()["attributes"] == "deals,hot_and_new"

    def test_attributes_are_required(self, criteria: SearchCriteria) -> None:
        """Test that an empty attribute list is rejected."""
        with pytest.raises(ValueError):
            criteria.with_attributes()

    def test_single_pricing_level(self, criteria: SearchCriteria) -> None:
        """Test that a pricing level is sent as its numeric code."""
        criteria.with_pricing(PricingLevel.MODERATE)
        assert criteria.query_parameters()["price"] == "2"

    def test_several_pricing_levels(self, criteria: SearchCriteria) -> None:
        """Test that several pricing levels are comma-joined."""
        criteria.with_pricing(PricingLevel.INEXPENSIVE, PricingLevel.MODERATE)
        assert criteria.query_parameters()["price"] == "1,2"

    def test_sort_by(self, criteria: SearchCriteria) -> None:
        """Test that the sorting mode is sent as its token."""
        criteria.sort_by(SortingMode.REVIEW_COUNT)
        assert criteria.query_parameters()["sort_by"] == "review_count"

    def test_term_and_categories(self, criteria: SearchCriteria) -> None:
        """Test that term and categories are sent verbatim."""
        criteria.with_term("bbq").in_categories("bars,french")
        parameters = criteria.query_parameters()
        assert parameters["term"] == "bbq"
        assert parameters["categories"] == "bars,french"

    @pytest.mark.parametrize("locale", ["es_MX", "es-MX"])
    def test_locale(self, criteria: SearchCriteria, locale: str) -> None:
        """Test that locales are sent as hyphenated language-region tags."""
        criteria.with_locale(locale)
        assert criteria.query_parameters()["locale"] == "es-MX"

    def test_setting_a_parameter_twice_keeps_the_last_value(
        self, criteria: SearchCriteria
    ) -> None:
        """Test that each key appears only once."""
        criteria.with_term("bbq").with_term("tacos")
        assert criteria.to_query_string().count("term=") == 1
        assert "term=tacos" in criteria.to_query_string()


class TestSerialization:
    """Tests for rendering criteria as query strings."""

    def test_can_be_represented_as_a_query_string(self, criteria: SearchCriteria) -> None:
        """Test the full San Antonio example for page 2."""
        criteria.with_term("restaurants").within_a_radius_of(Distance.in_miles(2)).in_categories(
            "mexican"
        ).with_pricing(PricingLevel.MODERATE).with_attributes(
            Attribute.HOT_AND_NEW, Attribute.DEALS
        ).open_now().limit(5).offset(5).sort_by(SortingMode.REVIEW_COUNT)

        assert query_pairs(criteria.query_string_for_page(2)) == {
            "open_now=true",
            "offset=5",
            "price=2",
            "limit=5",
            "location=San+Antonio",
            "term=restaurants",
            "attributes=hot_and_new%2Cdeals",
            "categories=mexican",
            "sort_by=review_count",
            "radius=3218",
        }

    def test_to_query_string(self, criteria: SearchCriteria) -> None:
        """Test that the current parameters are encoded."""
        criteria.with_term("fish & chips").offset(40)
        assert query_pairs(criteria.to_query_string()) == {
            "location=San+Antonio",
            "term=fish+%26+chips",
            "offset=40",
        }

    def test_query_string_for_page_does_not_change_the_criteria(
        self, criteria: SearchCriteria
    ) -> None:
        """Test that rendering a page leaves the offset untouched."""
        criteria.limit(10).offset(30)
        assert "offset=20" in criteria.query_string_for_page(3)
        assert criteria.offset() == 30

    def test_add_query_parameters_to(self, criteria: SearchCriteria) -> None:
        """Test injecting parameters into an existing mapping."""
        params = {"existing": "value"}
        criteria.limit(3).add_query_parameters_to(params)
        assert params == {"existing": "value", "location": "San Antonio", "limit": "3"}

    def test_query_parameters_is_a_copy(self, criteria: SearchCriteria) -> None:
        """Test that the returned mapping cannot alter the criteria."""
        criteria.query_parameters()["term"] = "ignored"
        assert "term" not in criteria.query_parameters()

    def test_copy_is_independent(self, criteria: SearchCriteria) -> None:
        """Test that a copy does not share parameters with the original."""
        clone = copy.copy(criteria)
        clone.with_term("tacos")
        assert clone != criteria
        assert "term" not in criteria.query_parameters()
