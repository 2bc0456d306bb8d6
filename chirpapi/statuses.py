"""Status (Tweet) endpoints: show, lookup, update, retweet, destroy, oEmbed."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .api import Requester
from .models import Tweet


def _param(key: str, default: Any = None, **options: Any) -> Any:
    metadata = {"key": key, **options}
    if default is list:
        return field(default_factory=list, metadata=metadata)
    return field(default=default, metadata=metadata)


@dataclass
class OEmbedTweet:
    """A Tweet in oEmbed format."""

    url: str = ""
    provider_url: str = ""
    provider_name: str = ""
    author_name: str = ""
    version: str = ""
    author_url: str = ""
    type: str = ""
    html: str = ""
    height: int = 0
    width: int = 0
    cache_age: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OEmbedTweet:
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(
            **{key: value for key, value in data.items() if key in names and value is not None}
        )


@dataclass
class StatusShowParams:
    """Parameters for StatusService.show."""

    id: int = _param("id", 0)
    trim_user: Optional[bool] = _param("trim_user")
    include_my_retweet: Optional[bool] = _param("include_my_retweet")
    include_entities: Optional[bool] = _param("include_entities")
    tweet_mode: str = _param("tweet_mode", "")


@dataclass
class StatusLookupParams:
    """Parameters for StatusService.lookup."""

    id: list[int] = _param("id", list, comma=True)
    trim_user: Optional[bool] = _param("trim_user")
    include_entities: Optional[bool] = _param("include_entities")
    map: Optional[bool] = _param("map")
    tweet_mode: str = _param("tweet_mode", "")


@dataclass
class StatusUpdateParams:
    """Parameters for StatusService.update."""

    status: str = _param("status", "")
    in_reply_to_status_id: int = _param("in_reply_to_status_id", 0)
    possibly_sensitive: Optional[bool] = _param("possibly_sensitive")
    lat: Optional[float] = _param("lat")
    long: Optional[float] = _param("long")
    place_id: str = _param("place_id", "")
    display_coordinates: Optional[bool] = _param("display_coordinates")
    trim_user: Optional[bool] = _param("trim_user")
    media_ids: list[int] = _param("media_ids", list, comma=True)
    tweet_mode: str = _param("tweet_mode", "")
    attachment_url: str = _param("attachment_url", "")


@dataclass
class StatusRetweetParams:
    """Parameters for StatusService.retweet."""

    id: int = _param("id", 0)
    trim_user: Optional[bool] = _param("trim_user")
    tweet_mode: str = _param("tweet_mode", "")


@dataclass
class StatusUnretweetParams:
    """Parameters for StatusService.unretweet."""

    id: int = _param("id", 0)
    trim_user: Optional[bool] = _param("trim_user")
    tweet_mode: str = _param("tweet_mode", "")


@dataclass
class StatusRetweetsParams:
    """Parameters for StatusService.retweets."""

    id: int = _param("id", 0)
    count: int = _param("count", 0)
    trim_user: Optional[bool] = _param("trim_user")
    tweet_mode: str = _param("tweet_mode", "")


@dataclass
class StatusDestroyParams:
    """Parameters for StatusService.destroy."""

    id: int = _param("id", 0)
    trim_user: Optional[bool] = _param("trim_user")
    tweet_mode: str = _param("tweet_mode", "")


@dataclass
class StatusOEmbedParams:
    """Parameters for StatusService.oembed.

    ``hide_thread`` and ``omit_script`` are sent under the ``hide_media``
    key, as the service has always done.
    """

    id: int = _param("id", 0)
    url: str = _param("url", "")
    align: str = _param("align", "")
    max_width: int = _param("maxwidth", 0)
    hide_media: Optional[bool] = _param("hide_media")
    hide_thread: Optional[bool] = _param("hide_media")
    omit_script: Optional[bool] = _param("hide_media")
    widget_type: str = _param("widget_type", "")
    hide_tweet: Optional[bool] = _param("hide_tweet")


def _tweet(data: Any) -> Tweet:
    return Tweet.from_dict(data or {})


def _tweets(data: Any) -> list[Tweet]:
    return [Tweet.from_dict(item) for item in data or []]


class StatusService:
    """Access to the status endpoints."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.with_path("statuses/")

    def show(self, tweet_id: int, params: StatusShowParams | None = None) -> Tweet:
        """Return the requested Tweet."""
        params = dataclasses.replace(params or StatusShowParams(), id=tweet_id)
        data, _ = self._requester.get("show.json", params)
        return _tweet(data)

    def lookup(
        self, ids: list[int], params: StatusLookupParams | None = None
    ) -> list[Tweet]:
        """Return Tweets for ``params.id`` followed by ``ids``."""
        params = params or StatusLookupParams()
        params = dataclasses.replace(params, id=[*params.id, *ids])
        data, _ = self._requester.get("lookup.json", params)
        return _tweets(data)

    def update(self, status: str, params: StatusUpdateParams | None = None) -> Tweet:
        """Post a new Tweet with the text ``status``."""
        params = dataclasses.replace(params or StatusUpdateParams(), status=status)
        data, _ = self._requester.post("update.json", params)
        return _tweet(data)

    def retweet(self, tweet_id: int, params: StatusRetweetParams | None = None) -> Tweet:
        """Retweet a Tweet; returns the original with retweet details."""
        params = dataclasses.replace(params or StatusRetweetParams(), id=tweet_id)
        data, _ = self._requester.post(f"retweet/{params.id}.json", params)
        return _tweet(data)

    def unretweet(
        self, tweet_id: int, params: StatusUnretweetParams | None = None
    ) -> Tweet:
        """Undo a retweet; returns the original Tweet."""
        params = dataclasses.replace(params or StatusUnretweetParams(), id=tweet_id)
        data, _ = self._requester.post(f"unretweet/{params.id}.json", params)
        return _tweet(data)

    def retweets(
        self, tweet_id: int, params: StatusRetweetsParams | None = None
    ) -> list[Tweet]:
        """Return the most recent retweets of a Tweet."""
        params = dataclasses.replace(params or StatusRetweetsParams(), id=tweet_id)
        data, _ = self._requester.get(f"retweets/{params.id}.json", params)
        return _tweets(data)

    def destroy(self, tweet_id: int, params: StatusDestroyParams | None = None) -> Tweet:
        """Delete a Tweet and return it."""
        params = dataclasses.replace(params or StatusDestroyParams(), id=tweet_id)
        data, _ = self._requester.post(f"destroy/{params.id}.json", params)
        return _tweet(data)

    def oembed(self, params: StatusOEmbedParams | None = None) -> OEmbedTweet:
        """Return a Tweet in oEmbed format."""
        data, _ = self._requester.get("oembed.json", params)
        return OEmbedTweet.from_dict(data or {})