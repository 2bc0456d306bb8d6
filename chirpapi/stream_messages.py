"""Streaming message records and decoding of raw stream messages."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from .models import Tweet, User


def _known(cls, data: Mapping[str, Any]) -> dict[str, Any]:
    names = {f.name for f in dataclasses.fields(cls)}
    return {key: value for key, value in data.items() if key in names and value is not None}


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass
class StatusDeletion:
    """A Tweet has been deleted."""

    id: int = 0
    id_str: str = ""
    user_id: int = 0
    user_id_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StatusDeletion:
        return cls(**_known(cls, data))


@dataclass
class LocationDeletion:
    """Geolocation data must be stripped from a range of Tweets."""

    user_id: int = 0
    user_id_str: str = ""
    up_to_status_id: int = 0
    up_to_status_id_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LocationDeletion:
        return cls(**_known(cls, data))


@dataclass
class StreamLimit:
    """The stream matched more statuses than allowed; ``track`` are undelivered."""

    track: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StreamLimit:
        return cls(**_known(cls, data))


@dataclass
class StatusWithheld:
    """A Tweet has been withheld in certain countries."""

    id: int = 0
    user_id: int = 0
    withheld_in_countries: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StatusWithheld:
        values = _known(cls, data)
        if "withheld_in_countries" in values:
            values["withheld_in_countries"] = list(values["withheld_in_countries"])
        return cls(**values)


@dataclass
class UserWithheld:
    """A user has been withheld in certain countries."""

    id: int = 0
    withheld_in_countries: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserWithheld:
        values = _known(cls, data)
        if "withheld_in_countries" in values:
            values["withheld_in_countries"] = list(values["withheld_in_countries"])
        return cls(**values)


@dataclass
class StreamDisconnect:
    """The stream has been shut down."""

    code: int = 0
    stream_name: str = ""
    reason: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StreamDisconnect:
        return cls(**_known(cls, data))


@dataclass
class StallWarning:
    """The client is falling behind in the stream."""

    code: str = ""
    message: str = ""
    percent_full: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StallWarning:
        return cls(**_known(cls, data))


@dataclass
class FriendsList:
    """Ids of some of a user's friends."""

    friends: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FriendsList:
        return cls(friends=list(data.get("friends") or []))


@dataclass
class Event:
    """A non-Tweet notification such as a like, retweet or follow."""

    event: str = ""
    created_at: str = ""
    target: Optional[User] = None
    source: Optional[User] = None
    target_object: Optional[Tweet] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        values = _known(cls, data)
        for key in ("target", "source"):
            if key in values:
                values[key] = User.from_dict(_mapping(values[key]))
        if "target_object" in values:
            values["target_object"] = Tweet.from_dict(_mapping(values["target_object"]))
        return cls(**values)


def _direct_message(value: Any) -> dict[str, Any]:
    return dict(_mapping(value))


# Checked in order: the first key present decides the message type.
_DECODERS: list[tuple[str, Callable[[Mapping[str, Any]], Any]]] = [
    ("retweet_count", Tweet.from_dict),
    ("direct_message", lambda data: _direct_message(data["direct_message"])),
    (
        "delete",
        lambda data: StatusDeletion.from_dict(
            _mapping(_mapping(data["delete"]).get("status"))
        ),
    ),
    ("scrub_geo", lambda data: LocationDeletion.from_dict(_mapping(data["scrub_geo"]))),
    ("limit", lambda data: StreamLimit.from_dict(_mapping(data["limit"]))),
    (
        "status_withheld",
        lambda data: StatusWithheld.from_dict(_mapping(data["status_withheld"])),
    ),
    ("user_withheld", lambda data: UserWithheld.from_dict(_mapping(data["user_withheld"]))),
    ("disconnect", lambda data: StreamDisconnect.from_dict(_mapping(data["disconnect"]))),
    ("warning", lambda data: StallWarning.from_dict(_mapping(data["warning"]))),
    ("friends", FriendsList.from_dict),
    ("event", Event.from_dict),
]


def decode_message(data: Mapping[str, Any]) -> Any:
    """Turn a decoded stream message into its record type.

    Direct messages come back as their inner mapping. A message of unknown
    type is returned as ``data`` itself.
    """
    for key, decode in _DECODERS:
        if key in data:
            return decode(data)
    return data


def get_message(token: bytes | str) -> Any:
    """Parse one raw stream message and decode it.

    Raises ValueError if the token is not a JSON object.
    """
    data = json.loads(token)
    if not isinstance(data, dict):
        raise ValueError(f"stream message is not a JSON object: {type(data).__name__}")
    return decode_message(data)