"""Async client for the Ballotpedia data API.

Every operation validates its arguments before any request is made, sends
a single GET, and funnels the response through :func:`handle_response`.
Unexpected failures are flattened into a :class:`BallotpediaError` carrying
the operation's fixed message, with the original exception chained.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import httpx
from loguru import logger

from ballotpedia_client.errors import BallotpediaAPIError, BallotpediaError, BallotpediaValidationError
from ballotpedia_client.schemas import (
    DistrictsResponse,
    ElectionDateOptions,
    ElectionDatesResponse,
    RequestOptions,
)

if TYPE_CHECKING:
    from types import TracebackType

    from ballotpedia_client.core.config import Settings

BASE_URL = "https://api4.ballotpedia.org/data/"

DISTRICTS_FAILED = "Failed to fetch districts"
OFFICEHOLDERS_FAILED = "Failed to fetch officeholders"
ELECTION_DATES_FAILED = "Failed to fetch election dates"
ELECTIONS_FAILED = "Failed to fetch elections"

_MIN_YEAR = 1776
_MAX_YEAR = 9999


# ---------------------------------------------------------------------------
# Validation and query helpers
# ---------------------------------------------------------------------------


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Check a point lies within WGS84 bounds (inclusive).

    Raises:
        BallotpediaValidationError: If either coordinate is out of range.
    """
    if not (-90 <= latitude <= 90):
        msg = "Latitude must be between -90 and 90 degrees"
        raise BallotpediaValidationError(msg)
    if not (-180 <= longitude <= 180):
        msg = "Longitude must be between -180 and 180 degrees"
        raise BallotpediaValidationError(msg)


def _validate_page(page: int | None) -> None:
    if page is not None and page < 1:
        msg = "Page number must be greater than 0"
        raise BallotpediaValidationError(msg)


def _join(values: Iterable[str] | None) -> str | None:
    """Comma-join a list option in caller order; None when nothing was given."""
    if not values:
        return None
    return ",".join(str(value) for value in values)


def _build_params(**params: Any) -> dict[str, Any]:
    """Drop unset parameters, keeping the order they were given in."""
    return {key: value for key, value in params.items() if value is not None and value != ""}


def handle_response(response: httpx.Response, error_message: str) -> dict[str, Any]:
    """Normalize a raw API response into a success envelope or an error.

    Args:
        response: The HTTP response to inspect.
        error_message: Operation-specific message used for HTTP failures.

    Returns:
        The decoded ``{success, data, message}`` envelope, unmodified.

    Raises:
        BallotpediaAPIError: The HTTP status was not 2xx (body is not read).
        BallotpediaError: The body was not JSON or the envelope reported failure.
    """
    if not response.is_success:
        logger.warning("Ballotpedia API error: {} {}", response.status_code, response.reason_phrase)
        raise BallotpediaAPIError(error_message, response.status_code, response.reason_phrase)

    try:
        envelope = response.json()
    except ValueError as exc:
        logger.warning("Ballotpedia returned a non-JSON response")
        msg = "Failed to parse API response"
        raise BallotpediaError(msg) from exc

    if not isinstance(envelope, dict) or not envelope.get("success"):
        message = envelope.get("message") if isinstance(envelope, dict) else None
        logger.warning("Ballotpedia reported an unsuccessful response: {!r}", message)
        raise BallotpediaError(message or "Unknown API error")

    return envelope


@contextmanager
def _operation(error_message: str) -> Iterator[None]:
    """Flatten non-library failures raised inside one operation."""
    try:
        yield
    except BallotpediaError:
        raise
    except Exception as exc:
        logger.error("{}: {}: {}", error_message, type(exc).__name__, exc)
        raise BallotpediaError(error_message) from exc


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class BallotpediaClient:
    """Query districts, officeholders and elections from Ballotpedia.

    Args:
        api_key: Ballotpedia API key, sent as ``x-api-key`` on every call.
        timeout: Request timeout in seconds for the client-owned HTTP client.
        http_client: Optional pre-configured ``httpx.AsyncClient``. When given,
            the caller owns it and :meth:`close` leaves it open.

    Raises:
        BallotpediaValidationError: If the API key is missing or empty.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key:
            msg = "API key is required"
            raise BallotpediaValidationError(msg)

        self._headers = {
            "x-api-key": api_key,
            "Content-Type": "application/json",
        }
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, *, http_client: httpx.AsyncClient | None = None) -> BallotpediaClient:
        """Build a client from environment-backed settings."""
        return cls(settings.ballotpedia_api_key, timeout=settings.ballotpedia_timeout, http_client=http_client)

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        return dict(self._headers)

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> BallotpediaClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get_districts(self, latitude: float, longitude: float) -> DistrictsResponse:
        """Fetch the voting districts containing a point.

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.

        Returns:
            The typed districts envelope.
        """
        with _operation(DISTRICTS_FAILED):
            validate_coordinates(latitude, longitude)
            params = _build_params(lat=latitude, long=longitude)
            envelope = await self._get("districts/point", params, DISTRICTS_FAILED)
            return DistrictsResponse.model_validate(envelope)

    async def get_officeholders(
        self,
        latitude: float,
        longitude: float,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        """Fetch the current officeholders representing a point.

        Only ``options.collections`` is sent; other filters are ignored.
        """
        options = options or RequestOptions()
        with _operation(OFFICEHOLDERS_FAILED):
            validate_coordinates(latitude, longitude)
            params = _build_params(lat=latitude, long=longitude, collections=_join(options.collections))
            return await self._get("officeholders", params, OFFICEHOLDERS_FAILED)

    async def get_election_dates_by_point(self, latitude: float, longitude: float) -> dict[str, Any]:
        """Fetch election dates for the districts containing a point."""
        with _operation(ELECTION_DATES_FAILED):
            validate_coordinates(latitude, longitude)
            params = _build_params(lat=latitude, long=longitude)
            return await self._get("election_dates/point", params, ELECTION_DATES_FAILED)

    async def get_election_dates(self, options: ElectionDateOptions | None = None) -> ElectionDatesResponse:
        """List election dates filtered by state, type and year.

        Args:
            options: Optional filters. ``year`` must fall within 1776-9999
                and ``page`` must be at least 1.

        Returns:
            The typed election-dates envelope.
        """
        options = options or ElectionDateOptions()
        with _operation(ELECTION_DATES_FAILED):
            if options.year is not None and not (_MIN_YEAR <= options.year <= _MAX_YEAR):
                msg = "Invalid year specified"
                raise BallotpediaValidationError(msg)
            _validate_page(options.page)

            params = _build_params(
                state=options.state,
                type=_join(options.types),
                year=options.year,
                page=options.page,
            )
            envelope = await self._get("election_dates/list", params, ELECTION_DATES_FAILED)
            return ElectionDatesResponse.model_validate(envelope)

    async def get_elections_by_point(
        self,
        latitude: float,
        longitude: float,
        election_date: str,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        """Fetch ballots and results for a point on an election date.

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.
            election_date: Election date as ``YYYY-MM-DD``.
            options: Only ``collections`` is sent.
        """
        options = options or RequestOptions()
        with _operation(ELECTIONS_FAILED):
            validate_coordinates(latitude, longitude)
            if not election_date:
                msg = "Election date is required"
                raise BallotpediaValidationError(msg)

            params = _build_params(
                lat=latitude,
                long=longitude,
                election_date=election_date,
                collections=_join(options.collections),
            )
            return await self._get("elections/point", params, ELECTIONS_FAILED)

    async def get_elections_by_state(
        self,
        state: str,
        election_date: str,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        """Fetch statewide ballots and results on an election date.

        Args:
            state: Two-letter state abbreviation.
            election_date: Election date as ``YYYY-MM-DD``.
            options: Collections, office level/branch and district type
                filters, plus the result page (at least 1).
        """
        options = options or RequestOptions()
        with _operation(ELECTIONS_FAILED):
            if not state:
                msg = "State is required"
                raise BallotpediaValidationError(msg)
            if not election_date:
                msg = "Election date is required"
                raise BallotpediaValidationError(msg)
            _validate_page(options.page)

            params = _build_params(
                state=state,
                election_date=election_date,
                collections=_join(options.collections),
                office_level=_join(options.office_levels),
                office_branch=_join(options.office_branches),
                district_type=_join(options.district_types),
                page=options.page,
            )
            return await self._get("elections/statewide", params, ELECTIONS_FAILED)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _get(self, path: str, params: dict[str, Any], error_message: str) -> dict[str, Any]:
        """Send an authenticated GET and normalize the response."""
        url = f"{BASE_URL}{path}"
        logger.debug("GET {} params={}", url, params)
        response = await self._client.get(url, params=params, headers=self._headers)
        return handle_response(response, error_message)
