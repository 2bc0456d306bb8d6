"""Trends endpoints: available locations, trends by place, closest locations."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping

from .api import Requester


@dataclass
class PlaceType:
    """The kind of a trends location."""

    code: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlaceType:
        return cls(code=data.get("code") or 0, name=data.get("name") or "")


@dataclass
class Location:
    """A location that trending topic information exists for."""

    country: str = ""
    country_code: str = ""
    name: str = ""
    parent_id: int = 0
    place_type: PlaceType = field(default_factory=PlaceType)
    url: str = ""
    woeid: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Location:
        return cls(
            country=data.get("country") or "",
            country_code=data.get("countryCode") or "",
            name=data.get("name") or "",
            parent_id=data.get("parentid") or 0,
            place_type=PlaceType.from_dict(data.get("placeType") or {}),
            url=data.get("url") or "",
            woeid=data.get("woeid") or 0,
        )


@dataclass
class Trend:
    """A trending topic."""

    name: str = ""
    url: str = ""
    promoted_content: str = ""
    query: str = ""
    tweet_volume: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Trend:
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(
            **{key: value for key, value in data.items() if key in names and value is not None}
        )


@dataclass
class TrendsLocation:
    """A location a list of trends applies to."""

    name: str = ""
    woeid: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TrendsLocation:
        return cls(name=data.get("name") or "", woeid=data.get("woeid") or 0)


@dataclass
class TrendsList:
    """A list of trends for some locations."""

    trends: list[Trend] = field(default_factory=list)
    as_of: str = ""
    created_at: str = ""
    locations: list[TrendsLocation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TrendsList:
        return cls(
            trends=[Trend.from_dict(item) for item in data.get("trends") or []],
            as_of=data.get("as_of") or "",
            created_at=data.get("created_at") or "",
            locations=[TrendsLocation.from_dict(item) for item in data.get("locations") or []],
        )


@dataclass
class TrendsPlaceParams:
    """Parameters for TrendsService.place."""

    woeid: int = field(default=0, metadata={"key": "id"})
    exclude: str = ""


@dataclass
class ClosestParams:
    """Parameters for TrendsService.closest; both are always sent."""

    lat: float = field(default=0.0, metadata={"omitempty": False})
    long: float = field(default=0.0, metadata={"omitempty": False})


def _locations(data: Any) -> list[Location]:
    return [Location.from_dict(item) for item in data or []]


class TrendsService:
    """Access to the trends endpoints."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.with_path("trends/")

    def available(self) -> list[Location]:
        """Return the locations that trending topic information exists for."""
        data, _ = self._requester.get("available.json")
        return _locations(data)

    def place(self, woeid: int, params: TrendsPlaceParams | None = None) -> list[TrendsList]:
        """Return the top trending topics for the location ``woeid``."""
        params = dataclasses.replace(params or TrendsPlaceParams(), woeid=woeid)
        data, _ = self._requester.get("place.json", params)
        return [TrendsList.from_dict(item) for item in data or []]

    def closest(self, params: ClosestParams | None = None) -> list[Location]:
        """Return trend locations closest to a given point."""
        data, _ = self._requester.get("closest.json", params or ClosestParams())
        return _locations(data)