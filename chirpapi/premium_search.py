"""Premium full-archive and 30-day search and count endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .api import Requester
from .models import Tweet


@dataclass
class RequestParameters:
    """The parameters a premium search request was answered for."""

    max_results: int = 0
    from_date: str = ""
    to_date: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RequestParameters:
        return cls(
            max_results=data.get("maxResults") or 0,
            from_date=data.get("fromDate") or "",
            to_date=data.get("toDate") or "",
        )


@dataclass
class PremiumSearch:
    """The result of a premium Tweet search."""

    results: list[Tweet] = field(default_factory=list)
    next: str = ""
    request_parameters: Optional[RequestParameters] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PremiumSearch:
        parameters = data.get("requestParameters")
        return cls(
            results=[Tweet.from_dict(item) for item in data.get("results") or []],
            next=data.get("next") or "",
            request_parameters=(
                RequestParameters.from_dict(parameters) if parameters is not None else None
            ),
        )


@dataclass
class RequestCountParameters:
    """The parameters a premium count request was answered for."""

    bucket: str = ""
    from_date: str = ""
    to_date: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RequestCountParameters:
        return cls(
            bucket=data.get("bucket") or "",
            from_date=data.get("fromDate") or "",
            to_date=data.get("toDate") or "",
        )


@dataclass
class TweetCount:
    """Number of matching Tweets within one time period."""

    time_period: str = ""
    count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TweetCount:
        return cls(time_period=data.get("timePeriod") or "", count=data.get("count") or 0)


@dataclass
class PremiumSearchCount:
    """The result of a premium count request."""

    results: list[TweetCount] = field(default_factory=list)
    total_count: int = 0
    request_parameters: Optional[RequestCountParameters] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PremiumSearchCount:
        parameters = data.get("requestParameters")
        return cls(
            results=[TweetCount.from_dict(item) for item in data.get("results") or []],
            total_count=data.get("totalCount") or 0,
            request_parameters=(
                RequestCountParameters.from_dict(parameters) if parameters is not None else None
            ),
        )


@dataclass
class PremiumSearchTweetParams:
    """Parameters for the premium search endpoints."""

    query: str = ""
    tag: str = ""
    from_date: str = field(default="", metadata={"key": "fromDate"})
    to_date: str = field(default="", metadata={"key": "toDate"})
    max_results: int = field(default=0, metadata={"key": "maxResults"})
    next: str = ""


@dataclass
class PremiumSearchCountTweetParams:
    """Parameters for the premium count endpoints."""

    query: str = ""
    tag: str = ""
    from_date: str = field(default="", metadata={"key": "fromDate"})
    to_date: str = field(default="", metadata={"key": "toDate"})
    bucket: str = ""
    next: str = ""


class PremiumSearchService:
    """Access to the premium search endpoints of a labelled environment."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.with_path("tweets/search/")

    def _search(self, path: str, params: Any) -> PremiumSearch:
        data, _ = self._requester.get(path, params)
        return PremiumSearch.from_dict(data or {})

    def _count(self, path: str, params: Any) -> PremiumSearchCount:
        data, _ = self._requester.get(path, params)
        return PremiumSearchCount.from_dict(data or {})

    def search_full_archive(
        self, params: PremiumSearchTweetParams | None, label: str
    ) -> PremiumSearch:
        """Search Tweets back to the very first one."""
        return self._search(f"fullarchive/{label}.json", params)

    def search_30_days(
        self, params: PremiumSearchTweetParams | None, label: str
    ) -> PremiumSearch:
        """Search Tweets posted within the last 30 days."""
        return self._search(f"30day/{label}.json", params)

    def count_full_archive(
        self, params: PremiumSearchCountTweetParams | None, label: str
    ) -> PremiumSearchCount:
        """Count matching Tweets back to the very first one."""
        return self._count(f"fullarchive/{label}/counts.json", params)

    def count_30_days(
        self, params: PremiumSearchCountTweetParams | None, label: str
    ) -> PremiumSearchCount:
        """Count matching Tweets posted within the last 30 days."""
        return self._count(f"30day/{label}/counts.json", params)