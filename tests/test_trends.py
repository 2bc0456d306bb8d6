from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from chirpapi.api import APIError, Requester
from chirpapi.trends import (
    ClosestParams,
    Location,
    PlaceType,
    Trend,
    TrendsList,
    TrendsLocation,
    TrendsPlaceParams,
    TrendsService,
)

BASE = "https://api.twitter.com/1.1/trends/"

SWEDEN = {
    "country": "Sweden",
    "countryCode": "SE",
    "name": "Sweden",
    "parentid": 1,
    "placeType": {"code": 12, "name": "Country"},
    "url": "http://where.yahooapis.com/v1/place/23424954",
    "woeid": 23424954,
}

EXPECTED_SWEDEN = Location(
    country="Sweden",
    country_code="SE",
    name="Sweden",
    parent_id=1,
    place_type=PlaceType(code=12, name="Country"),
    url="http://where.yahooapis.com/v1/place/23424954",
    woeid=23424954,
)


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return TrendsService(Requester())


def _query(mocked, index=0):
    return parse_qs(urlsplit(mocked.calls[index].request.url).query, keep_blank_values=True)


def test_available(mocked, service):
    mocked.add(responses.GET, BASE + "available.json", json=[SWEDEN])
    assert service.available() == [EXPECTED_SWEDEN]
    assert mocked.calls[0].request.method == "GET"
    assert _query(mocked) == {}


def test_place(mocked, service):
    mocked.add(
        responses.GET,
        BASE + "place.json",
        json=[
            {
                "trends": [{"name": "#gotwitter"}],
                "as_of": "2017-02-08T16:18:18Z",
                "created_at": "2017-02-08T16:10:33Z",
                "locations": [{"name": "Worldwide", "woeid": 1}],
            }
        ],
    )
    places = service.place(123456, TrendsPlaceParams())
    assert places == [
        TrendsList(
            trends=[Trend(name="#gotwitter")],
            as_of="2017-02-08T16:18:18Z",
            created_at="2017-02-08T16:10:33Z",
            locations=[TrendsLocation(name="Worldwide", woeid=1)],
        )
    ]
    assert _query(mocked) == {"id": ["123456"]}


def test_place_without_params_overrides_woeid(mocked, service):
    mocked.add(responses.GET, BASE + "place.json", json=[])
    assert service.place(1) == []
    assert _query(mocked) == {"id": ["1"]}


def test_place_argument_wins_over_params(mocked, service):
    mocked.add(
        responses.GET,
        BASE + "place.json",
        json=[{"trends": [], "locations": [{"name": "Somewhere", "woeid": 42}]}],
    )
    places = service.place(42, TrendsPlaceParams(woeid=7, exclude="hashtags"))
    assert _query(mocked) == {"id": ["42"], "exclude": ["hashtags"]}
    assert places == [TrendsList(trends=[], locations=[TrendsLocation(name="Somewhere", woeid=42)])]


def test_closest(mocked, service):
    mocked.add(responses.GET, BASE + "closest.json", json=[SWEDEN])
    locations = service.closest(ClosestParams(lat=37.781157, long=-122.400612831116))
    assert locations == [EXPECTED_SWEDEN]
    assert _query(mocked) == {"lat": ["37.781157"], "long": ["-122.400612831116"]}


def test_closest_sends_zero_coordinates(mocked, service):
    mocked.add(responses.GET, BASE + "closest.json", json=[])
    assert service.closest(ClosestParams()) == []
    assert _query(mocked) == {"lat": ["0"], "long": ["0"]}


def test_trend_null_volume_defaults_to_zero():
    trend = Trend.from_dict({"name": "#x", "tweet_volume": None})
    assert trend == Trend(name="#x", tweet_volume=0)


def test_available_api_error(mocked, service):
    mocked.add(
        responses.GET,
        BASE + "available.json",
        status=429,
        json={"errors": [{"message": "Rate limit exceeded", "code": 88}]},
    )
    with pytest.raises(APIError) as info:
        service.available()
    assert info.value.errors[0].message == "Rate limit exceeded"