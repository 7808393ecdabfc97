"""Closed sets of values accepted by the search endpoint."""

from enum import Enum


class SortingMode(Enum):
    """Order in which the API returns businesses."""

    BEST_MATCH = "best_match"
    RATING = "rating"
    REVIEW_COUNT = "review_count"
    DISTANCE = "distance"

    @property
    def token(self) -> str:
        return self.value


class Attribute(Enum):
    """Business features a search can be restricted to."""

    HOT_AND_NEW = "hot_and_new"
    REQUEST_A_QUOTE = "request_a_quote"
    RESERVATION = "reservation"
    WAITLIST_RESERVATION = "waitlist_reservation"
    CASHBACK = "cashback"
    DEALS = "deals"
    GENDER_NEUTRAL_RESTROOMS = "gender_neutral_restrooms"
    OPEN_TO_ALL = "open_to_all"
    WHEELCHAIR_ACCESSIBLE = "wheelchair_accessible"

    @property
    def token(self) -> str:
        return self.value

    @staticmethod
    def join(*attributes: "Attribute") -> str:
        """Join the tokens of several attributes, keeping the order they were given in."""
        return ",".join(attribute.token for attribute in attributes)
