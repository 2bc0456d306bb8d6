# chirpapi

A small client for the Twitter v1.1 API: statuses, users, search, premium
search, timelines, trends, rate limits, chunked media upload and the
streaming endpoints.

## Installing

```
pip install chirpapi
```

For running the test suite:

```
pip install "chirpapi[test]"
pytest
```

## Usage

Construct a `chirpapi.client.Client` around a `requests.Session` that already
carries your authentication (for example OAuth1 signing). If no session is
given, the client creates one and closes it in `close()` or when its `with`
block ends. The services are attributes of the client:

| attribute        | class                                        |
|------------------|----------------------------------------------|
| `statuses`       | `chirpapi.statuses.StatusService`            |
| `users`          | `chirpapi.users.UserService`                 |
| `search`         | `chirpapi.search.SearchService`              |
| `premium_search` | `chirpapi.premium_search.PremiumSearchService` |
| `timelines`      | `chirpapi.timelines.TimelineService`         |
| `trends`         | `chirpapi.trends.TrendsService`              |
| `rate_limits`    | `chirpapi.rate_limits.RateLimitService`      |
| `media`          | `chirpapi.media.MediaService`                |
| `streams`        | `chirpapi.streams.StreamService`             |

```python
import requests

from chirpapi.client import Client
from chirpapi.statuses import StatusUpdateParams

session = requests.Session()  # configure authentication here

with Client(session) as client:
    tweet = client.statuses.update(
        "hello world",
        StatusUpdateParams(lat=37.826706, long=-122.42219),
    )
    print(tweet.id, tweet.text)

    for user in client.users.search("news", None):
        print(user.name)
```

Each endpoint takes an optional parameters dataclass (`StatusShowParams`,
`UserLookupParams`, `SearchTweetParams`, `HomeTimelineParams` and so on).
Fields left at their empty value are not sent; list fields such as
`StatusLookupParams.id` or `StatusUpdateParams.media_ids` are sent
comma-separated. Results come back as dataclasses such as
`chirpapi.models.Tweet` and `chirpapi.models.User`;
`Tweet.created_at_time()` parses the `created_at` text into a `datetime`.

### Errors

Any response with a status outside 200–299 raises `chirpapi.api.APIError`.
Its `errors` holds the `ErrorDetail` entries (`message`, `code`) of the
error document, if there was one, and `status_code` the HTTP status.
Errors that happen while connecting come from `requests`.

### Media upload

`client.media.upload(data, "video/mp4")` sends the file in 1 MiB chunks
(INIT, APPEND, FINALIZE) and returns a `MediaUploadResult`. Files larger
than 15 MiB raise `ValueError` before anything is sent. When the result
carries `processing_info`, poll `client.media.status(media_id)` until
processing is done.

### Streams

`client.streams.filter`, `sample`, `user`, `site` and `firehose` return a
`chirpapi.streams.Stream`. Iterate over it to receive decoded messages:
`Tweet`, `StatusDeletion`, `LocationDeletion`, `StreamLimit`,
`StatusWithheld`, `UserWithheld`, `StreamDisconnect`, `StallWarning`,
`FriendsList` and `Event` from `chirpapi.stream_messages`; a direct message
comes as the `dict` inside it, a message of an unknown kind as a plain
`dict`, and a message that is not a JSON object as a `ValueError` instance.
A failure to connect is yielded as the `requests` exception and ends the
stream.

The stream reconnects with exponential back-off (`ExponentialBackOff`) on
503 and with a more aggressive back-off on 420 and 429; any other status
ends it.

```python
from chirpapi.streams import StreamFilterParams

with client.streams.filter(StreamFilterParams(track=["python"])) as stream:
    for message in stream:
        print(message)
```

Call `stream.stop()`, or leave the `with` block, to close the connection.

## What is not covered

The client has no services for account settings, direct messages,
favorites, followers, friends, friendships, lists or help/configuration.
It does not sign requests itself; authentication is left to the session
you pass in.