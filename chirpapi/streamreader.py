"""Splitting of streaming response bodies into messages."""

from __future__ import annotations

import threading
from typing import Any, Iterable, Iterator


def _lines(body: Any) -> Iterator[bytes]:
    """Yield pieces of ``body`` ending at each newline (the last may not)."""
    readline = getattr(body, "readline", None)
    if readline is not None:
        yield from iter(readline, b"")
        return
    pending = bytearray()
    search_from = 0
    for chunk in body:
        if not chunk:
            continue
        pending += chunk
        while (index := pending.find(b"\n", search_from)) >= 0:
            yield bytes(pending[: index + 1])
            del pending[: index + 1]
            search_from = 0
        search_from = len(pending)
    if pending:
        yield bytes(pending)


def iter_stream_messages(body: Any | Iterable[bytes]) -> Iterator[bytes]:
    """Yield the messages of a stream body, which are separated by CRLF.

    ``body`` is a binary file-like object or an iterable of byte chunks.
    A message may itself contain bare newlines. Empty messages (keep-alives)
    are yielded as ``b""``; a trailing message without a terminator is
    yielded at the end of the body.
    """
    message = bytearray()
    for line in _lines(body):
        if line.endswith(b"\r\n"):
            message += line.rstrip(b"\r\n")
            yield bytes(message)
            message.clear()
        else:
            message += line
    if message:
        yield bytes(message)


def sleep_or_done(delay: float, done: threading.Event) -> bool:
    """Wait up to ``delay`` seconds, returning early if ``done`` is set.

    Returns True if ``done`` was set.
    """
    return done.wait(delay)