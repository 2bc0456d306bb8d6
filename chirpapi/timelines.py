"""Status timeline endpoints: user, home, mentions and retweets of me."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .api import Requester
from .models import Tweet


@dataclass
class UserTimelineParams:
    """Parameters for TimelineService.user_timeline."""

    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    since_id: int = 0
    max_id: int = 0
    trim_user: Optional[bool] = None
    exclude_replies: Optional[bool] = None
    include_retweets: Optional[bool] = field(default=None, metadata={"key": "include_rts"})
    tweet_mode: str = ""


@dataclass
class HomeTimelineParams:
    """Parameters for TimelineService.home_timeline."""

    count: int = 0
    since_id: int = 0
    max_id: int = 0
    trim_user: Optional[bool] = None
    exclude_replies: Optional[bool] = None
    contributor_details: Optional[bool] = None
    include_entities: Optional[bool] = None
    tweet_mode: str = ""


@dataclass
class MentionTimelineParams:
    """Parameters for TimelineService.mention_timeline."""

    count: int = 0
    since_id: int = 0
    max_id: int = 0
    trim_user: Optional[bool] = None
    contributor_details: Optional[bool] = None
    include_entities: Optional[bool] = None
    tweet_mode: str = ""


@dataclass
class RetweetsOfMeTimelineParams:
    """Parameters for TimelineService.retweets_of_me_timeline.

    ``include_user_entities`` is always sent, empty when unset.
    """

    count: int = 0
    since_id: int = 0
    max_id: int = 0
    trim_user: Optional[bool] = None
    include_entities: Optional[bool] = None
    include_user_entities: Optional[bool] = field(default=None, metadata={"omitempty": False})
    tweet_mode: str = ""


class TimelineService:
    """Access to the status timeline endpoints."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.with_path("statuses/")

    def _timeline(self, path: str, params: Any) -> list[Tweet]:
        data, _ = self._requester.get(path, params)
        return [Tweet.from_dict(item) for item in data or []]

    def user_timeline(self, params: UserTimelineParams | None = None) -> list[Tweet]:
        """Return recent Tweets from the specified user."""
        return self._timeline("user_timeline.json", params)

    def home_timeline(self, params: HomeTimelineParams | None = None) -> list[Tweet]:
        """Return recent Tweets and retweets from the user and those they follow."""
        return self._timeline("home_timeline.json", params)

    def mention_timeline(self, params: MentionTimelineParams | None = None) -> list[Tweet]:
        """Return recent mentions of the authenticated user."""
        return self._timeline("mentions_timeline.json", params)

    def retweets_of_me_timeline(
        self, params: RetweetsOfMeTimelineParams | None = None
    ) -> list[Tweet]:
        """Return the user's most recent Tweets that others have retweeted."""
        return self._timeline("retweets_of_me.json", params)