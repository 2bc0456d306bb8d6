"""Rate limit status endpoint."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .api import Requester


@dataclass
class RateLimitResource:
    """Limit status of a single endpoint."""

    limit: int = 0
    remaining: int = 0
    reset: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RateLimitResource:
        return cls(
            limit=data.get("limit") or 0,
            remaining=data.get("remaining") or 0,
            reset=data.get("reset") or 0,
        )


@dataclass
class RateLimitContext:
    """The authentication context the limits apply to."""

    access_token: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RateLimitContext:
        return cls(access_token=data.get("access_token") or "")


_Group = dict[str, Optional[RateLimitResource]]


@dataclass
class RateLimitResources:
    """Limit status of endpoints, grouped by resource family."""

    application: _Group = field(default_factory=dict)
    favorites: _Group = field(default_factory=dict)
    followers: _Group = field(default_factory=dict)
    friends: _Group = field(default_factory=dict)
    friendships: _Group = field(default_factory=dict)
    geo: _Group = field(default_factory=dict)
    help: _Group = field(default_factory=dict)
    lists: _Group = field(default_factory=dict)
    search: _Group = field(default_factory=dict)
    statuses: _Group = field(default_factory=dict)
    trends: _Group = field(default_factory=dict)
    users: _Group = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RateLimitResources:
        return cls(
            **{
                f.name: {
                    endpoint: RateLimitResource.from_dict(item) if item is not None else None
                    for endpoint, item in (data.get(f.name) or {}).items()
                }
                for f in dataclasses.fields(cls)
            }
        )


@dataclass
class RateLimit:
    """Current rate limits of resource families."""

    rate_limit_context: Optional[RateLimitContext] = None
    resources: Optional[RateLimitResources] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RateLimit:
        context = data.get("rate_limit_context")
        resources = data.get("resources")
        return cls(
            rate_limit_context=(
                RateLimitContext.from_dict(context) if context is not None else None
            ),
            resources=(
                RateLimitResources.from_dict(resources) if resources is not None else None
            ),
        )


@dataclass
class RateLimitParams:
    """Parameters for RateLimitService.status."""

    resources: list[str] = field(default_factory=list, metadata={"comma": True})


class RateLimitService:
    """Access to the rate limit status endpoint."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.with_path("application/")

    def status(self, params: RateLimitParams | None = None) -> RateLimit:
        """Return the current rate limits of the requested resource families."""
        data, _ = self._requester.get("rate_limit_status.json", params)
        return RateLimit.from_dict(data or {})