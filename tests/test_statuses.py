from urllib.parse import parse_qsl, urlsplit

import pytest
import requests
import responses

from chirpapi.api import APIError, ErrorDetail, Requester
from chirpapi.models import Tweet, User
from chirpapi.statuses import (
    OEmbedTweet,
    StatusDestroyParams,
    StatusLookupParams,
    StatusOEmbedParams,
    StatusRetweetParams,
    StatusRetweetsParams,
    StatusService,
    StatusShowParams,
    StatusUnretweetParams,
    StatusUpdateParams,
)

BASE = "https://api.twitter.com/1.1/statuses/"


@pytest.fixture
def mock():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return StatusService(Requester(requests.Session()))


def query_of(call):
    return dict(parse_qsl(urlsplit(call.request.url).query))


def form_of(call):
    body = call.request.body or ""
    if isinstance(body, bytes):
        body = body.decode()
    return dict(parse_qsl(body))


def test_show(mock, service):
    mock.add(
        responses.GET,
        BASE + "show.json",
        json={
            "user": {"screen_name": "example_user"},
            "text": "use a DONTREADME file if you really want people to read it :P",
        },
    )
    params = StatusShowParams(id=5441, include_entities=False)
    tweet = service.show(589488862814076930, params)
    assert mock.calls[0].request.method == "GET"
    assert query_of(mock.calls[0]) == {
        "id": "589488862814076930",
        "include_entities": "false",
    }
    assert tweet == Tweet(
        user=User(screen_name="example_user"),
        text="use a DONTREADME file if you really want people to read it :P",
    )


def test_show_handles_none_params(mock, service):
    mock.add(responses.GET, BASE + "show.json", json={})
    tweet = service.show(589488862814076930, None)
    assert query_of(mock.calls[0]) == {"id": "589488862814076930"}
    assert tweet == Tweet()


def test_lookup(mock, service):
    mock.add(
        responses.GET,
        BASE + "lookup.json",
        json=[
            {"id": 20, "text": "just setting up my twttr"},
            {"id": 573893817000140800, "text": "Don't get lost #PaxEast2015"},
        ],
    )
    params = StatusLookupParams(id=[20], trim_user=True)
    tweets = service.lookup([573893817000140800], params)
    assert query_of(mock.calls[0]) == {"id": "20,573893817000140800", "trim_user": "true"}
    assert tweets == [
        Tweet(id=20, text="just setting up my twttr"),
        Tweet(id=573893817000140800, text="Don't get lost #PaxEast2015"),
    ]
    assert params.id == [20]


def test_lookup_handles_none_params(mock, service):
    mock.add(responses.GET, BASE + "lookup.json", json=[])
    tweets = service.lookup([20, 573893817000140800], None)
    assert query_of(mock.calls[0]) == {"id": "20,573893817000140800"}
    assert tweets == []


def test_update(mock, service):
    mock.add(
        responses.POST,
        BASE + "update.json",
        json={"id": 581980947630845953, "text": "very informative tweet"},
    )
    params = StatusUpdateParams(media_ids=[123456789, 987654321], lat=37.826706, long=-122.422190)
    tweet = service.update("very informative tweet", params)
    call = mock.calls[0]
    assert call.request.method == "POST"
    assert query_of(call) == {}
    assert form_of(call) == {
        "status": "very informative tweet",
        "media_ids": "123456789,987654321",
        "lat": "37.826706",
        "long": "-122.42219",
    }
    assert tweet == Tweet(id=581980947630845953, text="very informative tweet")


def test_update_handles_none_params(mock, service):
    mock.add(responses.POST, BASE + "update.json", json={"id": 1, "text": "very informative tweet"})
    tweet = service.update("very informative tweet", None)
    assert form_of(mock.calls[0]) == {"status": "very informative tweet"}
    assert tweet == Tweet(id=1, text="very informative tweet")


def test_api_error(mock, service):
    mock.add(
        responses.POST,
        BASE + "update.json",
        status=403,
        json={"errors": [{"message": "Status is a duplicate", "code": 187}]},
    )
    with pytest.raises(APIError) as info:
        service.update("very informative tweet", None)
    assert info.value == APIError([ErrorDetail(message="Status is a duplicate", code=187)])
    assert info.value.status_code == 403
    assert form_of(mock.calls[0]) == {"status": "very informative tweet"}


def test_http_error(mock, service):
    with pytest.raises(requests.ConnectionError):
        service.update("very informative tweet", None)


def test_retweet(mock, service):
    mock.add(
        responses.POST,
        BASE + "retweet/20.json",
        json={
            "id": 581980947630202020,
            "text": "RT @jack: just setting up my twttr",
            "retweeted_status": {"id": 20, "text": "just setting up my twttr"},
        },
    )
    tweet = service.retweet(20, StatusRetweetParams(trim_user=True))
    call = mock.calls[0]
    assert query_of(call) == {}
    assert form_of(call) == {"id": "20", "trim_user": "true"}
    assert tweet == Tweet(
        id=581980947630202020,
        text="RT @jack: just setting up my twttr",
        retweeted_status=Tweet(id=20, text="just setting up my twttr"),
    )


def test_retweet_handles_none_params(mock, service):
    mock.add(responses.POST, BASE + "retweet/20.json", json={"id": 21, "text": "RT"})
    tweet = service.retweet(20, None)
    assert form_of(mock.calls[0]) == {"id": "20"}
    assert tweet == Tweet(id=21, text="RT")


def test_unretweet(mock, service):
    mock.add(
        responses.POST,
        BASE + "unretweet/20.json",
        json={
            "id": 581980947630202020,
            "text": "RT @jack: just setting up my twttr",
            "retweeted_status": {"id": 20, "text": "just setting up my twttr"},
        },
    )
    tweet = service.unretweet(20, StatusUnretweetParams(trim_user=True))
    call = mock.calls[0]
    assert call.request.method == "POST"
    assert query_of(call) == {}
    assert form_of(call) == {"id": "20", "trim_user": "true"}
    assert tweet == Tweet(
        id=581980947630202020,
        text="RT @jack: just setting up my twttr",
        retweeted_status=Tweet(id=20, text="just setting up my twttr"),
    )


def test_retweets(mock, service):
    mock.add(
        responses.GET,
        BASE + "retweets/20.json",
        json=[
            {"text": "RT @jack: just setting up my twttr"},
            {"text": "RT @jack: just setting up my twttr"},
        ],
    )
    retweets = service.retweets(20, StatusRetweetsParams(count=2))
    assert query_of(mock.calls[0]) == {"id": "20", "count": "2"}
    assert retweets == [
        Tweet(text="RT @jack: just setting up my twttr"),
        Tweet(text="RT @jack: just setting up my twttr"),
    ]


def test_retweets_handles_none_params(mock, service):
    mock.add(responses.GET, BASE + "retweets/20.json", json=[{"text": "RT one"}])
    retweets = service.retweets(20, None)
    assert query_of(mock.calls[0]) == {"id": "20"}
    assert retweets == [Tweet(text="RT one")]


def test_destroy(mock, service):
    mock.add(
        responses.POST,
        BASE + "destroy/40.json",
        json={"id": 40, "text": "wishing I had another sammich"},
    )
    tweet = service.destroy(40, StatusDestroyParams(trim_user=True))
    call = mock.calls[0]
    assert query_of(call) == {}
    assert form_of(call) == {"id": "40", "trim_user": "true"}
    assert tweet == Tweet(id=40, text="wishing I had another sammich")


def test_destroy_handles_none_params(mock, service):
    mock.add(responses.POST, BASE + "destroy/40.json", json={"id": 40})
    tweet = service.destroy(40, None)
    assert form_of(mock.calls[0]) == {"id": "40"}
    assert tweet == Tweet(id=40)


def test_oembed(mock, service):
    mock.add(
        responses.GET,
        BASE + "oembed.json",
        json={
            "url": "https://example.com/statuses/691076766878691329",
            "width": 400,
            "html": "<blockquote></blockquote>",
        },
    )
    params = StatusOEmbedParams(id=691076766878691329, max_width=400, hide_media=True)
    oembed = service.oembed(params)
    assert query_of(mock.calls[0]) == {
        "id": "691076766878691329",
        "maxwidth": "400",
        "hide_media": "true",
    }
    assert oembed == OEmbedTweet(
        url="https://example.com/statuses/691076766878691329",
        width=400,
        html="<blockquote></blockquote>",
    )


def test_oembed_from_dict_ignores_unknown_keys():
    result = OEmbedTweet.from_dict({"version": "1.0", "unknown": 1, "cache_age": None})
    assert result == OEmbedTweet(version="1.0")