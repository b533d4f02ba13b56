"""Shared fixtures for Ballotpedia client tests."""

from collections.abc import AsyncGenerator

import httpx
import pytest

from ballotpedia_client.client import BallotpediaClient


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def client(api_key: str) -> BallotpediaClient:
    """Client whose HTTP calls are patched by each test."""
    return BallotpediaClient(api_key=api_key)


@pytest.fixture
async def recording_client(api_key: str) -> AsyncGenerator[tuple[BallotpediaClient, list[httpx.Request]]]:
    """Client over an httpx.MockTransport that records every request it receives."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path.endswith("election_dates/list"):
            return httpx.Response(200, json={"success": True, "data": {"total_pages": 0, "elections": []}})
        return httpx.Response(200, json={"success": True, "data": [], "message": None})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        yield BallotpediaClient(api_key=api_key, http_client=http_client), requests
