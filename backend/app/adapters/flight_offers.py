"""Entry points for validating flight search requests and parsing offer responses."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from backend.app.models.flights import FlightSearchParams, SearchFlightsResponse
from backend.app.utils.logging import StructuredValidationLogger

_validation_logger = StructuredValidationLogger()


def parse_search_params(raw: Mapping[str, Any]) -> FlightSearchParams:
    """Validate raw search input (e.g. query-string values) into typed parameters.

    Absent optional fields take their defaults: currencyCode "USD",
    nonStop False, max 5. Empty strings are treated as absent.

    Args:
        raw: Mapping of wire (camelCase) or attribute names to values

    Returns:
        Validated FlightSearchParams

    Raises:
        pydantic.ValidationError: Identifying each offending field and constraint
    """
    cleaned = {key: value for key, value in raw.items() if value != ""}
    try:
        params = FlightSearchParams.model_validate(cleaned)
    except ValidationError as exc:
        _validation_logger.log_failure("FlightSearchParams", exc)
        raise

    _validation_logger.log_success("FlightSearchParams")
    return params


def parse_search_response(payload: Mapping[str, Any]) -> SearchFlightsResponse:
    """Parse a decoded flight offers search response.

    Raises:
        pydantic.ValidationError: Listing every schema violation with its nested path
    """
    try:
        response = SearchFlightsResponse.model_validate(payload)
    except ValidationError as exc:
        _validation_logger.log_failure("SearchFlightsResponse", exc)
        raise

    _validation_logger.log_success("SearchFlightsResponse")
    return response


def parse_search_response_json(body: str | bytes) -> SearchFlightsResponse:
    """Parse a raw JSON flight offers search response body."""
    try:
        response = SearchFlightsResponse.model_validate_json(body)
    except ValidationError as exc:
        _validation_logger.log_failure("SearchFlightsResponse", exc)
        raise

    _validation_logger.log_success("SearchFlightsResponse")
    return response
