"""User endpoints: show, lookup and search."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from .api import Requester
from .models import User


@dataclass
class UserShowParams:
    """Parameters for UserService.show."""

    user_id: int = 0
    screen_name: str = ""
    include_entities: Optional[bool] = None


@dataclass
class UserLookupParams:
    """Parameters for UserService.lookup."""

    user_id: list[int] = field(default_factory=list, metadata={"comma": True})
    screen_name: list[str] = field(default_factory=list, metadata={"comma": True})
    include_entities: Optional[bool] = None


@dataclass
class UserSearchParams:
    """Parameters for UserService.search; ``page`` is 1-based."""

    query: str = field(default="", metadata={"key": "q"})
    page: int = 0
    count: int = 0
    include_entities: Optional[bool] = None


class UserService:
    """Access to the user endpoints."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.with_path("users/")

    def show(self, params: UserShowParams | None = None) -> User:
        """Return the requested user."""
        data, _ = self._requester.get("show.json", params)
        return User.from_dict(data or {})

    def lookup(self, params: UserLookupParams | None = None) -> list[User]:
        """Return the requested users."""
        data, _ = self._requester.get("lookup.json", params)
        return [User.from_dict(item) for item in data or []]

    def search(self, query: str, params: UserSearchParams | None = None) -> list[User]:
        """Search public accounts for ``query``."""
        params = dataclasses.replace(params or UserSearchParams(), query=query)
        data, _ = self._requester.get("search.json", params)
        return [User.from_dict(item) for item in data or []]