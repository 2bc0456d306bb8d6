"""Standard Tweet search endpoint."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .api import Requester
from .models import Tweet


@dataclass
class SearchMetadata:
    """Describes a search result."""

    count: int = 0
    since_id: int = 0
    since_id_str: str = ""
    max_id: int = 0
    max_id_str: str = ""
    refresh_url: str = ""
    next_results: str = ""
    completed_in: float = 0.0
    query: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SearchMetadata:
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(
            **{key: value for key, value in data.items() if key in names and value is not None}
        )


@dataclass
class Search:
    """The result of a Tweet search."""

    statuses: list[Tweet] = field(default_factory=list)
    metadata: Optional[SearchMetadata] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Search:
        metadata = data.get("search_metadata")
        return cls(
            statuses=[Tweet.from_dict(item) for item in data.get("statuses") or []],
            metadata=SearchMetadata.from_dict(metadata) if metadata is not None else None,
        )


@dataclass
class SearchTweetParams:
    """Parameters for SearchService.tweets."""

    query: str = field(default="", metadata={"key": "q"})
    geocode: str = ""
    lang: str = ""
    locale: str = ""
    result_type: str = ""
    count: int = 0
    since_id: int = 0
    max_id: int = 0
    until: str = ""
    since: str = ""
    filter: str = ""
    include_entities: Optional[bool] = None
    tweet_mode: str = ""


class SearchService:
    """Access to the search endpoint."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.with_path("search/")

    def tweets(self, params: SearchTweetParams | None = None) -> Search:
        """Return Tweets matching a search query."""
        data, _ = self._requester.get("tweets.json", params)
        return Search.from_dict(data or {})