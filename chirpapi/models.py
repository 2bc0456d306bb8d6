"""Tweet, user and place records as returned by the API."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

_RUBY_DATE = "%a %b %d %H:%M:%S %z %Y"


def _build(cls, data: Mapping[str, Any], **converters: Callable[[Any], Any]):
    names = {f.name for f in fields(cls)}
    values = {key: value for key, value in data.items() if key in names and value is not None}
    for key, convert in converters.items():
        if key in values:
            values[key] = convert(values[key])
    return cls(**values)


def _pair(value) -> tuple[float, float]:
    lon, lat = value
    return (float(lon), float(lat))


@dataclass
class Coordinates:
    """A longitude/latitude point."""

    coordinates: tuple[float, float] = (0.0, 0.0)
    type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Coordinates:
        return _build(cls, data, coordinates=_pair)


@dataclass
class BoundingBox:
    """Polygons of (longitude, latitude) pairs bounding a place."""

    coordinates: list[list[tuple[float, float]]] = field(default_factory=list)
    type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BoundingBox:
        return _build(
            cls,
            data,
            coordinates=lambda rings: [[_pair(point) for point in ring] for ring in rings],
        )


@dataclass
class Place:
    """A named location."""

    attributes: dict[str, str] = field(default_factory=dict)
    bounding_box: Optional[BoundingBox] = None
    country: str = ""
    country_code: str = ""
    full_name: str = ""
    geometry: Optional[BoundingBox] = None
    id: str = ""
    name: str = ""
    place_type: str = ""
    polylines: list[str] = field(default_factory=list)
    url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Place:
        return _build(
            cls,
            data,
            bounding_box=BoundingBox.from_dict,
            geometry=BoundingBox.from_dict,
            attributes=dict,
            polylines=list,
        )


@dataclass
class TweetIdentifier:
    """The id by which a Tweet can be identified."""

    id: int = 0
    id_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TweetIdentifier:
        return _build(cls, data)


@dataclass
class ExtendedTweet:
    """Fields embedded in extended Tweets served in compatibility mode."""

    full_text: str = ""
    display_text_range: Optional[list[int]] = None
    entities: Optional[dict[str, Any]] = None
    extended_entities: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ExtendedTweet:
        return _build(cls, data, display_text_range=list)


@dataclass
class Tweet:
    """A Tweet, also called a status."""

    coordinates: Optional[Coordinates] = None
    created_at: str = ""
    current_user_retweet: Optional[TweetIdentifier] = None
    entities: Optional[dict[str, Any]] = None
    favorite_count: int = 0
    favorited: bool = False
    filter_level: str = ""
    id: int = 0
    id_str: str = ""
    in_reply_to_screen_name: str = ""
    in_reply_to_status_id: int = 0
    in_reply_to_status_id_str: str = ""
    in_reply_to_user_id: int = 0
    in_reply_to_user_id_str: str = ""
    lang: str = ""
    possibly_sensitive: bool = False
    quote_count: int = 0
    reply_count: int = 0
    retweet_count: int = 0
    retweeted: bool = False
    retweeted_status: Optional[Tweet] = None
    source: str = ""
    scopes: dict[str, Any] = field(default_factory=dict)
    text: str = ""
    full_text: str = ""
    display_text_range: Optional[list[int]] = None
    place: Optional[Place] = None
    truncated: bool = False
    user: Optional[User] = None
    withheld_copyright: bool = False
    withheld_in_countries: list[str] = field(default_factory=list)
    withheld_scope: str = ""
    extended_entities: Optional[dict[str, Any]] = None
    extended_tweet: Optional[ExtendedTweet] = None
    quoted_status_id: int = 0
    quoted_status_id_str: str = ""
    quoted_status: Optional[Tweet] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tweet:
        return _build(
            cls,
            data,
            coordinates=Coordinates.from_dict,
            current_user_retweet=TweetIdentifier.from_dict,
            retweeted_status=cls.from_dict,
            quoted_status=cls.from_dict,
            place=Place.from_dict,
            user=User.from_dict,
            extended_tweet=ExtendedTweet.from_dict,
            display_text_range=list,
            withheld_in_countries=list,
            scopes=dict,
        )

    def created_at_time(self) -> datetime:
        """Parse ``created_at``; raises ValueError when it is malformed."""
        return datetime.strptime(self.created_at, _RUBY_DATE)


@dataclass
class User:
    """An account."""

    contributors_enabled: bool = False
    created_at: str = ""
    default_profile: bool = False
    default_profile_image: bool = False
    description: str = ""
    email: str = ""
    entities: Optional[dict[str, Any]] = None
    favourites_count: int = 0
    follow_request_sent: bool = False
    following: bool = False
    followers_count: int = 0
    friends_count: int = 0
    geo_enabled: bool = False
    id: int = 0
    id_str: str = ""
    is_translator: bool = False
    lang: str = ""
    listed_count: int = 0
    location: str = ""
    name: str = ""
    notifications: bool = False
    profile_background_color: str = ""
    profile_background_image_url: str = ""
    profile_background_image_url_https: str = ""
    profile_background_tile: bool = False
    profile_banner_url: str = ""
    profile_image_url: str = ""
    profile_image_url_https: str = ""
    profile_link_color: str = ""
    profile_sidebar_border_color: str = ""
    profile_sidebar_fill_color: str = ""
    profile_text_color: str = ""
    profile_use_background_image: bool = False
    protected: bool = False
    screen_name: str = ""
    show_all_inline_media: bool = False
    status: Optional[Tweet] = None
    statuses_count: int = 0
    time_zone: str = ""
    url: str = ""
    utc_offset: int = 0
    verified: bool = False
    withheld_in_countries: list[str] = field(default_factory=list)
    withheld_scope: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        return _build(cls, data, status=Tweet.from_dict, withheld_in_countries=list)