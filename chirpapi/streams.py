"""Streaming API connections with reconnection and backoff."""

from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

import requests

from .api import Requester, encode_params
from .stream_messages import get_message
from .streamreader import iter_stream_messages, sleep_or_done

USER_AGENT = "chirpapi v0.1"
PUBLIC_STREAM_URL = "https://stream.twitter.com/1.1/"
USER_STREAM_URL = "https://userstream.twitter.com/1.1/"
SITE_STREAM_URL = "https://sitestream.twitter.com/1.1/"

_READ_ERRORS = (requests.RequestException, OSError, ValueError, AttributeError)


class ExponentialBackOff:
    """Growing, randomised delays between reconnection attempts.

    ``next_backoff`` returns the next delay in seconds, or None once
    ``max_elapsed_time`` seconds have passed since the last reset.
    """

    def __init__(
        self,
        initial_interval: float = 5.0,
        multiplier: float = 2.0,
        max_interval: float = 320.0,
        randomization_factor: float = 0.5,
        max_elapsed_time: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.initial_interval = initial_interval
        self.multiplier = multiplier
        self.max_interval = max_interval
        self.randomization_factor = randomization_factor
        self.max_elapsed_time = max_elapsed_time
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        """Start again from the initial interval."""
        self._current = self.initial_interval
        self._start = self._clock()

    def next_backoff(self) -> Optional[float]:
        if (
            self.max_elapsed_time is not None
            and self._clock() - self._start > self.max_elapsed_time
        ):
            return None
        delay = self._randomize(self._current)
        self._current = min(self._current * self.multiplier, self.max_interval)
        return delay

    def _randomize(self, interval: float) -> float:
        if self.randomization_factor == 0:
            return interval
        delta = self.randomization_factor * interval
        return random.uniform(interval - delta, interval + delta)


def _new_backoff() -> ExponentialBackOff:
    return ExponentialBackOff(initial_interval=5.0, multiplier=2.0, max_interval=320.0)


def _new_aggressive_backoff() -> ExponentialBackOff:
    return ExponentialBackOff(initial_interval=60.0, multiplier=2.0, max_interval=960.0)


def _comma() -> Any:
    return field(default_factory=list, metadata={"comma": True})


@dataclass
class StreamFilterParams:
    """Parameters for StreamService.filter."""

    filter_level: str = ""
    follow: list[str] = _comma()
    language: list[str] = _comma()
    locations: list[str] = _comma()
    stall_warnings: Optional[bool] = None
    track: list[str] = _comma()


@dataclass
class StreamSampleParams:
    """Parameters for StreamService.sample."""

    stall_warnings: Optional[bool] = None
    language: list[str] = _comma()


@dataclass
class StreamUserParams:
    """Parameters for StreamService.user."""

    filter_level: str = ""
    language: list[str] = _comma()
    locations: list[str] = _comma()
    replies: str = ""
    stall_warnings: Optional[bool] = None
    track: list[str] = _comma()
    with_: str = field(default="", metadata={"key": "with"})


@dataclass
class StreamSiteParams:
    """Parameters for StreamService.site."""

    filter_level: str = ""
    follow: list[str] = _comma()
    language: list[str] = _comma()
    replies: str = ""
    stall_warnings: Optional[bool] = None
    with_: str = field(default="", metadata={"key": "with"})


@dataclass
class StreamFirehoseParams:
    """Parameters for StreamService.firehose."""

    count: int = 0
    filter_level: str = ""
    language: list[str] = _comma()
    stall_warnings: Optional[bool] = None


def _message(data: bytes) -> Any:
    try:
        return get_message(data)
    except ValueError as exc:
        return exc


class Stream:
    """A connection to a streaming endpoint, iterated for its messages.

    Iterating connects, yields decoded messages and reconnects with
    backoff after 503 (exponential) and 420/429 (aggressive) responses.
    Iteration ends on any other status, when a backoff gives up, or after
    ``stop``. Undecodable messages and connection failures are yielded as
    exception instances; a connection failure also ends the stream.
    """

    def __init__(
        self,
        session: requests.Session,
        request: requests.Request,
        exp_backoff: Any = None,
        agg_backoff: Any = None,
    ) -> None:
        self._session = session
        self._request = request
        self._exp_backoff = exp_backoff if exp_backoff is not None else _new_backoff()
        self._agg_backoff = agg_backoff if agg_backoff is not None else _new_aggressive_backoff()
        self._done = threading.Event()
        self._response: Optional[requests.Response] = None

    def stop(self) -> None:
        """End the stream, interrupting a blocked read or a backoff wait."""
        self._done.set()
        response = self._response
        if response is not None:
            response.close()

    def __iter__(self) -> Iterator[Any]:
        yield from self._run()

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()

    def _send(self) -> requests.Response:
        prepared = self._session.prepare_request(self._request)
        settings = self._session.merge_environment_settings(
            prepared.url, {}, True, None, None
        )
        return self._session.send(prepared, **settings)

    def _run(self) -> Iterator[Any]:
        wait: Optional[float] = 0.0
        try:
            while not self._done.is_set():
                try:
                    response = self._send()
                except requests.RequestException as exc:
                    yield exc
                    return
                self._response = response
                try:
                    status = response.status_code
                    if status == 200:
                        yield from self._receive(response)
                        self._exp_backoff.reset()
                        self._agg_backoff.reset()
                    elif status == 503:
                        wait = self._exp_backoff.next_backoff()
                    elif status in (420, 429):
                        wait = self._agg_backoff.next_backoff()
                    else:
                        return
                finally:
                    response.close()
                if wait is None:
                    return
                sleep_or_done(wait, self._done)
        finally:
            self._done.set()

    def _receive(self, response: requests.Response) -> Iterator[Any]:
        try:
            for data in iter_stream_messages(response.iter_content(chunk_size=None)):
                if self._done.is_set():
                    return
                if not data:
                    continue
                yield _message(data)
        except _READ_ERRORS:
            return


class StreamService:
    """Opens streams on the public, user and site streaming endpoints."""

    def __init__(self, requester: Requester) -> None:
        headers = {**requester.headers, "User-Agent": USER_AGENT}
        session = requester.session
        self._session = session
        self._public = Requester(session, PUBLIC_STREAM_URL, headers).with_path("statuses/")
        self._user = Requester(session, USER_STREAM_URL, headers)
        self._site = Requester(session, SITE_STREAM_URL, headers)

    def _open(self, requester: Requester, method: str, path: str, params: Any) -> Stream:
        request = requests.Request(
            method,
            requester.url(path),
            params=encode_params(params),
            headers=dict(requester.headers),
        )
        return Stream(self._session, request)

    def filter(self, params: StreamFilterParams | None = None) -> Stream:
        """Messages matching one or more filter predicates."""
        return self._open(self._public, "POST", "filter.json", params)

    def sample(self, params: StreamSampleParams | None = None) -> Stream:
        """A small sample of public messages."""
        return self._open(self._public, "GET", "sample.json", params)

    def user(self, params: StreamUserParams | None = None) -> Stream:
        """Messages specific to the authenticated user."""
        return self._open(self._user, "GET", "user.json", params)

    def site(self, params: StreamSiteParams | None = None) -> Stream:
        """Messages for a set of users; requires special permission."""
        return self._open(self._site, "GET", "site.json", params)

    def firehose(self, params: StreamFirehoseParams | None = None) -> Stream:
        """All public messages; requires special permission."""
        return self._open(self._public, "GET", "firehose.json", params)