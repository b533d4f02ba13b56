"""Typer CLI exposing each Ballotpedia query as a command.

Every command reads the API key from ``BALLOTPEDIA_API_KEY`` and prints the
JSON response envelope.
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Annotated, Any

import typer
from pydantic import BaseModel

from ballotpedia_client.client import BallotpediaClient
from ballotpedia_client.core.config import get_settings
from ballotpedia_client.core.logging import setup_logging
from ballotpedia_client.errors import BallotpediaError
from ballotpedia_client.schemas import (
    DistrictType,
    ElectionDateOptions,
    ElectionDateType,
    OfficeBranch,
    OfficeLevel,
    RequestOptions,
)

app = typer.Typer(name="ballotpedia", help="Query the Ballotpedia data API")

Latitude = Annotated[float, typer.Option("--lat", help="WGS84 latitude")]
Longitude = Annotated[float, typer.Option("--long", help="WGS84 longitude")]
Collections = Annotated[list[str] | None, typer.Option("--collection", help="Collection to include (repeatable)")]


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


async def _call(operation: Callable[[BallotpediaClient], Awaitable[Any]]) -> Any:
    async with BallotpediaClient.from_settings(get_settings()) as client:
        return await operation(client)


def _run(operation: Callable[[BallotpediaClient], Awaitable[Any]]) -> None:
    """Run one client operation and print its envelope as JSON."""
    try:
        result = asyncio.run(_call(operation))
    except BallotpediaError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e

    payload = result.model_dump(mode="json", exclude_unset=True) if isinstance(result, BaseModel) else result
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def districts(latitude: Latitude, longitude: Longitude) -> None:
    """List the voting districts containing a point."""
    _run(lambda client: client.get_districts(latitude, longitude))


@app.command()
def officeholders(latitude: Latitude, longitude: Longitude, collection: Collections = None) -> None:
    """List the current officeholders for a point."""
    options = RequestOptions(collections=collection)
    _run(lambda client: client.get_officeholders(latitude, longitude, options))


@app.command("election-dates-point")
def election_dates_point(latitude: Latitude, longitude: Longitude) -> None:
    """List election dates for the districts containing a point."""
    _run(lambda client: client.get_election_dates_by_point(latitude, longitude))


@app.command("election-dates")
def election_dates(
    state: Annotated[str | None, typer.Option("--state", help="Two-letter state abbreviation")] = None,
    election_type: Annotated[
        list[ElectionDateType] | None, typer.Option("--type", help="Election type (repeatable)")
    ] = None,
    year: Annotated[int | None, typer.Option("--year", help="Election year")] = None,
    page: Annotated[int | None, typer.Option("--page", help="Result page (1-based)")] = None,
) -> None:
    """List election dates filtered by state, type and year."""
    options = ElectionDateOptions(state=state, types=election_type, year=year, page=page)
    _run(lambda client: client.get_election_dates(options))


@app.command()
def elections(
    latitude: Latitude,
    longitude: Longitude,
    election_date: Annotated[str, typer.Option("--date", help="Election date (YYYY-MM-DD)")],
    collection: Collections = None,
) -> None:
    """Show ballots and results for a point on an election date."""
    options = RequestOptions(collections=collection)
    _run(lambda client: client.get_elections_by_point(latitude, longitude, election_date, options))


@app.command("elections-statewide")
def elections_statewide(
    state: Annotated[str, typer.Option("--state", help="Two-letter state abbreviation")],
    election_date: Annotated[str, typer.Option("--date", help="Election date (YYYY-MM-DD)")],
    collection: Collections = None,
    office_level: Annotated[list[OfficeLevel] | None, typer.Option("--office-level", help="Office level")] = None,
    office_branch: Annotated[list[OfficeBranch] | None, typer.Option("--office-branch", help="Office branch")] = None,
    district_type: Annotated[
        list[DistrictType] | None, typer.Option("--district-type", help="District type")
    ] = None,
    page: Annotated[int | None, typer.Option("--page", help="Result page (1-based)")] = None,
) -> None:
    """Show statewide ballots and results on an election date."""
    options = RequestOptions(
        collections=collection,
        office_levels=office_level,
        office_branches=office_branch,
        district_types=district_type,
        page=page,
    )
    _run(lambda client: client.get_elections_by_state(state, election_date, options))
