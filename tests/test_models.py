from datetime import datetime, timedelta, timezone

import pytest

from chirpapi.models import (
    BoundingBox,
    Coordinates,
    ExtendedTweet,
    Place,
    Tweet,
    TweetIdentifier,
    User,
)


def test_tweet_with_user():
    tweet = Tweet.from_dict(
        {
            "user": {"screen_name": "dghubble"},
            "text": ".@audreyr use a DONTREADME file if you really want people to read it :P",
        }
    )
    assert tweet == Tweet(
        user=User(screen_name="dghubble"),
        text=".@audreyr use a DONTREADME file if you really want people to read it :P",
    )


def test_tweet_with_retweeted_status():
    tweet = Tweet.from_dict(
        {
            "id": 581980947630202020,
            "text": "RT @jack: just setting up my twttr",
            "retweeted_status": {"id": 20, "text": "just setting up my twttr"},
        }
    )
    assert tweet == Tweet(
        id=581980947630202020,
        text="RT @jack: just setting up my twttr",
        retweeted_status=Tweet(id=20, text="just setting up my twttr"),
    )


def test_nulls_and_unknown_keys_use_defaults():
    tweet = Tweet.from_dict({"id": 20, "text": None, "unknown_field": 1, "user": None})
    assert tweet == Tweet(id=20)


def test_tweet_nested_records():
    tweet = Tweet.from_dict(
        {
            "coordinates": {"coordinates": [-122.42219, 37.826706], "type": "Point"},
            "current_user_retweet": {"id": 20, "id_str": "20"},
            "extended_tweet": {"full_text": "just setting up my twttr", "display_text_range": [0, 24]},
            "quoted_status": {"id": 40},
        }
    )
    assert tweet.coordinates == Coordinates(coordinates=(-122.42219, 37.826706), type="Point")
    assert tweet.current_user_retweet == TweetIdentifier(id=20, id_str="20")
    assert tweet.extended_tweet == ExtendedTweet(
        full_text="just setting up my twttr", display_text_range=[0, 24]
    )
    assert tweet.quoted_status == Tweet(id=40)


def test_place_with_bounding_box():
    place = Place.from_dict(
        {
            "name": "Sweden",
            "country_code": "SE",
            "bounding_box": {
                "type": "Polygon",
                "coordinates": [[[-122.42219, 37.826706], [-122.400612831116, 37.781157]]],
            },
        }
    )
    assert place.name == "Sweden"
    assert place.country_code == "SE"
    assert place.bounding_box == BoundingBox(
        coordinates=[[(-122.42219, 37.826706), (-122.400612831116, 37.781157)]],
        type="Polygon",
    )
    assert place.geometry is None


def test_user_with_status():
    user = User.from_dict(
        {
            "name": "XKCD Comic",
            "favourites_count": 2,
            "time_zone": "UTC",
            "status": {"text": "Gophercon talks!"},
        }
    )
    assert user == User(
        name="XKCD Comic",
        favourites_count=2,
        time_zone="UTC",
        status=Tweet(text="Gophercon talks!"),
    )


def test_created_at_time():
    tweet = Tweet(created_at="Sat Sep 04 16:10:54 +0000 2010")
    assert tweet.created_at_time() == datetime(2010, 9, 4, 16, 10, 54, tzinfo=timezone.utc)


def test_created_at_time_reference_layout():
    tweet = Tweet(created_at="Mon Jan 02 15:04:05 -0700 2006")
    parsed = tweet.created_at_time()
    assert parsed == datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=-7)))


@pytest.mark.parametrize("value", ["", "2010-09-04T16:10:54Z"])
def test_created_at_time_rejects_bad_values(value):
    with pytest.raises(ValueError):
        Tweet(created_at=value).created_at_time()