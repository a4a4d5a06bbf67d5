"""Common types and enums shared across all models."""

from enum import Enum
from typing import Annotated

from pydantic import Field

# Three-letter IATA airport, airline or city code.
IataCode = Annotated[str, Field(min_length=3, max_length=3)]

# ISO 4217 currency code.
CurrencyCode = Annotated[str, Field(min_length=3, max_length=3)]


class Visibility(str, Enum):
    """Chat visibility."""

    public = "public"
    private = "private"


class DocumentKind(str, Enum):
    """Document content kind."""

    text = "text"
    sheet = "sheet"


class TravelClass(str, Enum):
    """Cabin class accepted by the flight search API."""

    ECONOMY = "ECONOMY"
    PREMIUM_ECONOMY = "PREMIUM_ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"
