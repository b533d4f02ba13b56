"""Unit tests for argument validation performed before any request."""

from collections.abc import Awaitable, Callable
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from ballotpedia_client.client import BallotpediaClient, validate_coordinates
from ballotpedia_client.errors import BallotpediaValidationError
from ballotpedia_client.schemas import ElectionDateOptions, RequestOptions

PointCall = Callable[[BallotpediaClient, float, float], Awaitable[Any]]

# Every operation that takes a latitude/longitude pair
_POINT_OPERATIONS: dict[str, PointCall] = {
    "districts": lambda c, lat, lng: c.get_districts(lat, lng),
    "officeholders": lambda c, lat, lng: c.get_officeholders(lat, lng),
    "election_dates_by_point": lambda c, lat, lng: c.get_election_dates_by_point(lat, lng),
    "elections_by_point": lambda c, lat, lng: c.get_elections_by_point(lat, lng, "2024-11-05"),
}


class TestValidateCoordinates:
    """Bounds checks shared by every point query."""

    @pytest.mark.parametrize(
        ("latitude", "longitude"),
        [(90, 180), (-90, -180), (0, 0), (37.7749, -122.4194)],
    )
    def test_in_range_passes(self, latitude: float, longitude: float) -> None:
        validate_coordinates(latitude, longitude)

    @pytest.mark.parametrize("latitude", [90.0001, -90.0001, 1000, float("nan")])
    def test_latitude_out_of_range(self, latitude: float) -> None:
        with pytest.raises(BallotpediaValidationError, match="Latitude must be between -90 and 90 degrees"):
            validate_coordinates(latitude, 0)

    @pytest.mark.parametrize("longitude", [180.0001, -180.0001, 360])
    def test_longitude_out_of_range(self, longitude: float) -> None:
        with pytest.raises(BallotpediaValidationError, match="Longitude must be between -180 and 180 degrees"):
            validate_coordinates(0, longitude)

    def test_latitude_checked_first(self) -> None:
        with pytest.raises(BallotpediaValidationError, match="Latitude"):
            validate_coordinates(100, 200)


class TestPointOperationsRejectBadCoordinates:
    """No point query reaches the network with invalid coordinates."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", list(_POINT_OPERATIONS.values()), ids=list(_POINT_OPERATIONS))
    @pytest.mark.parametrize(
        ("latitude", "longitude", "message"),
        [
            (91, 0, "Latitude must be between -90 and 90 degrees"),
            (-91, 0, "Latitude must be between -90 and 90 degrees"),
            (0, 181, "Longitude must be between -180 and 180 degrees"),
            (0, -181, "Longitude must be between -180 and 180 degrees"),
        ],
    )
    async def test_rejected_without_request(
        self,
        client: BallotpediaClient,
        operation: PointCall,
        latitude: float,
        longitude: float,
        message: str,
    ) -> None:
        with (
            patch.object(client._client, "get", new_callable=AsyncMock) as mock_get,
            pytest.raises(BallotpediaValidationError) as exc_info,
        ):
            await operation(client, latitude, longitude)

        assert exc_info.value.message == message
        mock_get.assert_not_called()

    @pytest.mark.asyncio
    async def test_elections_by_point_requires_date(self, client: BallotpediaClient) -> None:
        with (
            patch.object(client._client, "get", new_callable=AsyncMock) as mock_get,
            pytest.raises(BallotpediaValidationError, match="Election date is required"),
        ):
            await client.get_elections_by_point(37.7749, -122.4194, "")
        mock_get.assert_not_called()


class TestElectionDatesValidation:
    """Year and page checks on the election-date list query."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("year", [1775, 10000, 0, -2024])
    async def test_invalid_year(self, client: BallotpediaClient, year: int) -> None:
        with (
            patch.object(client._client, "get", new_callable=AsyncMock) as mock_get,
            pytest.raises(BallotpediaValidationError, match="Invalid year specified"),
        ):
            await client.get_election_dates(ElectionDateOptions(year=year))
        mock_get.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("year", [1776, 2024, 9999])
    async def test_valid_year_reaches_transport(
        self,
        recording_client: tuple[BallotpediaClient, list],
        year: int,
    ) -> None:
        client, requests = recording_client
        await client.get_election_dates(ElectionDateOptions(year=year))
        assert requests[0].url.params["year"] == str(year)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page", [0, -1])
    async def test_invalid_page(self, client: BallotpediaClient, page: int) -> None:
        with (
            patch.object(client._client, "get", new_callable=AsyncMock) as mock_get,
            pytest.raises(BallotpediaValidationError, match="Page number must be greater than 0"),
        ):
            await client.get_election_dates(ElectionDateOptions(page=page))
        mock_get.assert_not_called()

    @pytest.mark.asyncio
    async def test_page_one_passes(self, recording_client: tuple[BallotpediaClient, list]) -> None:
        client, requests = recording_client
        await client.get_election_dates(ElectionDateOptions(page=1))
        assert requests[0].url.params["page"] == "1"

    @pytest.mark.asyncio
    async def test_year_checked_before_page(self, client: BallotpediaClient) -> None:
        with pytest.raises(BallotpediaValidationError, match="Invalid year specified"):
            await client.get_election_dates(ElectionDateOptions(year=1, page=0))


class TestElectionsByStateValidation:
    """Required fields and page check on the statewide elections query."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("state", "election_date", "message"),
        [
            ("", "2024-11-05", "State is required"),
            ("CA", "", "Election date is required"),
            ("", "", "State is required"),
        ],
    )
    async def test_missing_required_field(
        self,
        client: BallotpediaClient,
        state: str,
        election_date: str,
        message: str,
    ) -> None:
        with (
            patch.object(client._client, "get", new_callable=AsyncMock) as mock_get,
            pytest.raises(BallotpediaValidationError, match=message),
        ):
            await client.get_elections_by_state(state, election_date)
        mock_get.assert_not_called()

    @pytest.mark.asyncio
    async def test_page_zero_rejected(self, client: BallotpediaClient) -> None:
        with (
            patch.object(client._client, "get", new_callable=AsyncMock) as mock_get,
            pytest.raises(BallotpediaValidationError, match="Page number must be greater than 0"),
        ):
            await client.get_elections_by_state("CA", "2024-11-05", RequestOptions(page=0))
        mock_get.assert_not_called()

    @pytest.mark.asyncio
    async def test_page_one_passes(self, recording_client: tuple[BallotpediaClient, list]) -> None:
        client, requests = recording_client
        await client.get_elections_by_state("CA", "2024-11-05", RequestOptions(page=1))
        assert len(requests) == 1
