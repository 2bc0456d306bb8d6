"""The client that bundles every API service."""

from __future__ import annotations

from typing import Any, Optional

import requests

from .api import API_URL, UPLOAD_URL, Requester
from .media import MediaService
from .premium_search import PremiumSearchService
from .rate_limits import RateLimitService
from .search import SearchService
from .statuses import StatusService
from .streams import StreamService
from .timelines import TimelineService
from .trends import TrendsService
from .users import UserService


class Client:
    """Entry point to the API services.

    Authentication is the job of ``session`` (for instance its ``auth`` or
    headers). A session the client creates itself is closed by ``close``.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        base = Requester(self.session, API_URL)
        upload = Requester(self.session, UPLOAD_URL)
        self.media = MediaService(upload)
        self.rate_limits = RateLimitService(base)
        self.search = SearchService(base)
        self.premium_search = PremiumSearchService(base)
        self.statuses = StatusService(base)
        self.streams = StreamService(base)
        self.timelines = TimelineService(base)
        self.trends = TrendsService(base)
        self.users = UserService(base)

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()