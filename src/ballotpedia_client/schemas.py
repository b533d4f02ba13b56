"""Pydantic v2 schemas and enumerations for Ballotpedia API data.

Enumerated fields accept values outside the known set and keep the raw
string, so new categories added upstream never break decoding.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class DistrictType(StrEnum):
    """District categories used by Ballotpedia."""

    COUNTRY = "Country"
    CONGRESS = "Congress"
    STATE = "State"
    STATE_LEGISLATIVE_UPPER = "State Legislative (Upper)"
    STATE_LEGISLATIVE_LOWER = "State Legislative (Lower)"
    JUDICIAL_DISTRICT = "Judicial District"
    COUNTY = "County"
    COUNTY_SUBDIVISION = "County subdivision"
    CITY_TOWN = "City-town"
    SCHOOL_DISTRICT = "School District"
    STATE_SUBDIVISION = "State subdivision"
    SPECIAL_DISTRICT_SUBDIVISION = "Special district subdivision"
    JUDICIAL_DISTRICT_SUBDIVISION = "Judicial district subdivision"
    SPECIAL_DISTRICT = "Special District"
    CITY_TOWN_SUBDIVISION = "City-town subdivision"
    SCHOOL_DISTRICT_SUBDIVISION = "School district subdivision"


class ElectionType(StrEnum):
    """Election types returned on election records."""

    SPECIAL = "Special"
    GENERAL = "General"
    PRIMARY = "Primary"
    RECALL = "Recall"
    GENERAL_RUNOFF = "General Runoff"


class ElectionDateType(StrEnum):
    """Election types accepted by the election-date list filter."""

    GENERAL = "General"
    PRIMARY = "Primary"
    SPECIAL = "Special"
    RECALL = "Recall"


class OfficeLevel(StrEnum):
    FEDERAL = "Federal"
    STATE = "State"
    LOCAL = "Local"


class OfficeBranch(StrEnum):
    LEGISLATIVE = "Legislative"
    EXECUTIVE = "Executive"
    JUDICIAL = "Judicial"


# Try the enum first, fall back to the raw string for unrecognized values
_DistrictTypeField = Annotated[DistrictType | str | None, Field(union_mode="left_to_right")]
_ElectionTypeField = Annotated[ElectionType | str | None, Field(union_mode="left_to_right")]


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------
#
# Every record field is optional: a successful envelope must always decode,
# however sparse its records are. Dump with ``exclude_unset=True`` to get
# back exactly the keys the API sent.


class District(BaseModel):
    """A voting district containing a queried point."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int | str | None = None
    name: str | None = None
    type: _DistrictTypeField = None
    url: str | None = None
    ocdid: str | None = None
    nces_id: str | None = None
    geo_id: str | None = None
    state: str | None = None
    end_date: str | None = Field(default=None, description="Null while the district is active")


class Election(BaseModel):
    """An election date record."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int | str | None = None
    date: str | None = None
    type: _ElectionTypeField = None
    description: str | None = None
    candidate_lists_complete: bool | None = None
    district_name: str | None = None
    district_type: _DistrictTypeField = None
    state: str | None = None


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class Envelope(BaseModel, Generic[T]):
    """The ``{success, data, message}`` wrapper around every API payload.

    A value that does not fit its declared type is kept as the raw decoded
    value, so an envelope the API marked successful always validates.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    success: Annotated[bool | Any, Field(union_mode="left_to_right")]
    data: Annotated[T | Any, Field(union_mode="left_to_right")] = None
    message: Annotated[str | None | Any, Field(union_mode="left_to_right")] = None


class ElectionDatesPage(BaseModel):
    """One page of the election-date list."""

    model_config = ConfigDict(frozen=True, extra="allow")

    total_pages: int | None = None
    elections: list[Election] = Field(default_factory=list)


class DistrictsResponse(Envelope[list[District]]):
    """Envelope returned by the districts-by-point endpoint."""


class ElectionDatesResponse(Envelope[ElectionDatesPage]):
    """Envelope returned by the election-date list endpoint."""


# ---------------------------------------------------------------------------
# Query options
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RequestOptions:
    """Optional filters for officeholder and election queries.

    Only ``collections`` applies to point queries; the remaining filters
    are used by the statewide elections query.
    """

    collections: list[str] | None = None
    office_levels: list[OfficeLevel | str] | None = None
    office_branches: list[OfficeBranch | str] | None = None
    district_types: list[DistrictType | str] | None = None
    page: int | None = None


@dataclass(frozen=True)
class ElectionDateOptions:
    """Optional filters for the election-date list query."""

    state: str | None = None
    types: list[ElectionDateType | str] | None = None
    year: int | None = None
    page: int | None = None
