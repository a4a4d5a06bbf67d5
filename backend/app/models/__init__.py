"""Models package - re-exports for convenience."""

from backend.app.models.common import (
    CurrencyCode,
    DocumentKind,
    IataCode,
    TravelClass,
    Visibility,
)
from backend.app.models.flights import (
    Dictionaries,
    FareDetail,
    FlightOffer,
    FlightSearchParams,
    Itinerary,
    Location,
    OfferPrice,
    Price,
    SearchFlightsResponse,
    Segment,
    TravelerPricing,
)
from backend.app.models.records import (
    ChatRecord,
    DocumentRecord,
    MessageRecord,
    OrganizationRecord,
    SuggestionRecord,
    UserRecord,
    VoteRecord,
)

__all__ = [
    # Common
    "IataCode",
    "CurrencyCode",
    "Visibility",
    "DocumentKind",
    "TravelClass",
    # Flight search
    "FlightSearchParams",
    "SearchFlightsResponse",
    "FlightOffer",
    "Itinerary",
    "Segment",
    "Price",
    "OfferPrice",
    "TravelerPricing",
    "FareDetail",
    "Dictionaries",
    "Location",
    # Records
    "UserRecord",
    "OrganizationRecord",
    "ChatRecord",
    "MessageRecord",
    "VoteRecord",
    "DocumentRecord",
    "SuggestionRecord",
]
