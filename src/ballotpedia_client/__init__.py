"""Typed async client for the Ballotpedia data API.

Public API:
    - BallotpediaClient: Async client, one method per API query
    - BallotpediaError / BallotpediaAPIError / BallotpediaValidationError: Error hierarchy
    - RequestOptions / ElectionDateOptions: Query filters
    - DistrictsResponse / ElectionDatesResponse: Typed response envelopes
"""

from ballotpedia_client.client import BASE_URL, BallotpediaClient, handle_response, validate_coordinates
from ballotpedia_client.errors import BallotpediaAPIError, BallotpediaError, BallotpediaValidationError
from ballotpedia_client.schemas import (
    District,
    DistrictsResponse,
    DistrictType,
    Election,
    ElectionDateOptions,
    ElectionDatesPage,
    ElectionDatesResponse,
    ElectionDateType,
    ElectionType,
    Envelope,
    OfficeBranch,
    OfficeLevel,
    RequestOptions,
)

__all__ = [
    "BASE_URL",
    "BallotpediaAPIError",
    "BallotpediaClient",
    "BallotpediaError",
    "BallotpediaValidationError",
    "District",
    "DistrictType",
    "DistrictsResponse",
    "Election",
    "ElectionDateOptions",
    "ElectionDateType",
    "ElectionDatesPage",
    "ElectionDatesResponse",
    "ElectionType",
    "Envelope",
    "OfficeBranch",
    "OfficeLevel",
    "RequestOptions",
    "handle_response",
    "validate_coordinates",
]
