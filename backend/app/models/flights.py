"""Flight search contracts - request parameters and flight-offer response shapes.

Wire names are camelCase as sent to and returned by the upstream flight
search API; Python attribute names are snake_case. Either spelling is
accepted on input.
"""

from datetime import date
from typing import Annotated

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from backend.app.models.common import CurrencyCode, IataCode, TravelClass

DEFAULT_CURRENCY = "USD"
DEFAULT_MAX_RESULTS = 5
MAX_RESULTS_LIMIT = 250

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


class CamelModel(BaseModel):
    """Base model speaking the upstream camelCase wire format."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _split_codes(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [code.strip().upper() for code in raw.split(",") if code.strip()]


class FlightSearchParams(CamelModel):
    """Validated flight search request."""

    origin_location_code: IataCode = Field(..., description="IATA code of the departure airport")
    destination_location_code: IataCode = Field(
        ..., description="IATA code of the arrival airport"
    )
    departure_date: date = Field(..., description="Date of departure in YYYY-MM-DD format")
    return_date: date | None = Field(
        None, description="Optional date of return in YYYY-MM-DD format"
    )
    adults: Annotated[int, Field(ge=1)] = Field(
        ..., description="Number of adult passengers (12+ years)"
    )
    children: Annotated[int, Field(ge=0)] | None = Field(
        None, description="Number of child passengers (2-11 years)"
    )
    infants: Annotated[int, Field(ge=0)] | None = Field(
        None, description="Number of infant passengers (0-2 years)"
    )
    travel_class: TravelClass | None = Field(
        None, description="Preferred cabin class for the flight"
    )
    max_price: float | None = Field(None, description="Maximum price for the flight")
    currency_code: CurrencyCode | None = Field(
        DEFAULT_CURRENCY, description="Three-letter currency code"
    )
    non_stop: bool | None = Field(False, description="Filter for direct flights only")
    max_results: Annotated[int, Field(ge=1, le=MAX_RESULTS_LIMIT)] | None = Field(
        DEFAULT_MAX_RESULTS, alias="max", description="Maximum number of results to return"
    )
    included_airline_codes: str | None = Field(
        None, description="Comma-separated list of preferred airline IATA codes"
    )
    excluded_airline_codes: str | None = Field(
        None, description="Comma-separated list of airline IATA codes to exclude"
    )

    @field_validator("return_date")
    @classmethod
    def validate_return_after_departure(cls, v: date | None, info: ValidationInfo) -> date | None:
        """Ensure returnDate >= departureDate."""
        if v is not None and "departure_date" in info.data and v < info.data["departure_date"]:
            raise ValueError("returnDate must be on or after departureDate")
        return v

    @property
    def included_airlines(self) -> list[str]:
        """Preferred airline codes as a list."""
        return _split_codes(self.included_airline_codes)

    @property
    def excluded_airlines(self) -> list[str]:
        """Excluded airline codes as a list."""
        return _split_codes(self.excluded_airline_codes)

    def to_query(self) -> dict[str, str | int | float]:
        """Serialize to upstream query parameters.

        Wire names, nulls dropped, dates ISO formatted, booleans as
        lowercase strings.
        """
        query: dict[str, str | int | float] = {}
        for key, value in self.model_dump(by_alias=True, exclude_none=True, mode="json").items():
            if isinstance(value, bool):
                query[key] = "true" if value else "false"
            else:
                query[key] = value
        return query


# Response shapes


class FlightEndpoint(CamelModel):
    """Departure or arrival point of a segment."""

    iata_code: str
    terminal: str | None = None
    at: str

    @field_validator("terminal", mode="before")
    @classmethod
    def validate_terminal_not_null(cls, v: object) -> object:
        """Terminal may be omitted but not sent as null."""
        if v is None:
            raise ValueError("terminal must be a string when present")
        return v


class Aircraft(CamelModel):
    code: str


class OperatingCarrier(CamelModel):
    carrier_code: str


class Segment(CamelModel):
    """A single flight between two airports."""

    departure: FlightEndpoint
    arrival: FlightEndpoint
    carrier_code: str
    number: str
    aircraft: Aircraft
    operating: OperatingCarrier
    duration: str
    id: str
    number_of_stops: int | float
    blacklisted_in_eu: bool = Field(..., alias="blacklistedInEU")


class Itinerary(CamelModel):
    """One directional leg of a trip."""

    duration: str
    segments: list[Segment]


class Price(CamelModel):
    """Amounts are decimal strings as sent upstream."""

    currency: str
    total: str
    base: str


class Fee(CamelModel):
    amount: str
    type: str


class OfferPrice(Price):
    """Offer-level price with fees and grand total."""

    fees: list[Fee]
    grand_total: str


class PricingOptions(CamelModel):
    fare_type: list[str]
    included_checked_bags_only: bool


class CheckedBags(CamelModel):
    weight: int | float
    weight_unit: str


class FareDetail(CamelModel):
    """Fare basis and baggage allowance for one segment."""

    segment_id: str
    cabin: str
    fare_basis: str
    booking_class: str = Field(..., alias="class")
    included_checked_bags: CheckedBags


class TravelerPricing(CamelModel):
    """Per-passenger fare breakdown."""

    traveler_id: str
    fare_option: str
    traveler_type: str
    price: Price
    fare_details_by_segment: list[FareDetail]


class FlightOffer(CamelModel):
    """A bookable flight offer."""

    type: str
    id: str
    source: str
    instant_ticketing_required: bool
    non_homogeneous: bool
    one_way: bool
    last_ticketing_date: str
    number_of_bookable_seats: int | float
    itineraries: list[Itinerary]
    price: OfferPrice
    pricing_options: PricingOptions
    validating_airline_codes: list[str]
    traveler_pricings: list[TravelerPricing]


class Location(CamelModel):
    city_code: str
    country_code: str


class Dictionaries(CamelModel):
    """Code lookup tables shipped alongside the offers."""

    locations: dict[str, Location]
    aircraft: dict[str, str]
    currencies: dict[str, str]
    carriers: dict[str, str]

    def location(self, code: str) -> Location | None:
        return self.locations.get(code)

    def aircraft_name(self, code: str) -> str | None:
        return self.aircraft.get(code)

    def currency_name(self, code: str) -> str | None:
        return self.currencies.get(code)

    def carrier_name(self, code: str) -> str | None:
        return self.carriers.get(code)


class Links(CamelModel):
    self_url: str = Field(..., alias="self")

    @field_validator("self_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure the link parses as a URL while keeping the original text."""
        try:
            _url_adapter.validate_python(v)
        except ValidationError as exc:
            raise ValueError(f"self must be a valid URL, got {v!r}") from exc
        return v


class Meta(CamelModel):
    count: int | float
    links: Links


class SearchFlightsResponse(CamelModel):
    """Full flight offers search response."""

    meta: Meta
    data: list[FlightOffer]
    dictionaries: Dictionaries
