"""HTTP plumbing shared by the API services: parameter encoding, requests, errors."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests

API_URL = "https://api.twitter.com/1.1/"
UPLOAD_URL = "https://upload.twitter.com/1.1/"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def encode_params(params: Any) -> list[tuple[str, str]]:
    """Encode a parameter object into a list of (key, value) pairs.

    ``params`` may be None, a mapping, or a dataclass instance. Dataclass
    fields may carry metadata: ``key`` (the wire name, default the field
    name), ``omitempty`` (default True: skip None, "", 0 and empty lists;
    False stays included) and ``comma`` (join a list with commas instead
    of repeating the key).
    """
    if params is None:
        return []
    if isinstance(params, Mapping):
        items = [(str(key), value, {}) for key, value in params.items()]
    elif dataclasses.is_dataclass(params) and not isinstance(params, type):
        items = [
            (f.metadata.get("key", f.name), getattr(params, f.name), f.metadata)
            for f in dataclasses.fields(params)
        ]
    else:
        raise TypeError(f"cannot encode parameters of type {type(params).__name__}")

    pairs: list[tuple[str, str]] = []
    for key, value, options in items:
        if options.get("omitempty", True) and _is_empty(value):
            continue
        if value is None:
            pairs.append((key, ""))
        elif isinstance(value, (list, tuple, set, frozenset)):
            encoded = [_format_value(item) for item in value]
            if options.get("comma", False):
                pairs.append((key, ",".join(encoded)))
            else:
                pairs.extend((key, item) for item in encoded)
        else:
            pairs.append((key, _format_value(value)))
    return pairs


@dataclass
class ErrorDetail:
    """One error entry reported by the API."""

    message: str = ""
    code: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ErrorDetail:
        return cls(message=data.get("message") or "", code=data.get("code") or 0)


class APIError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, errors=(), status_code: int | None = None) -> None:
        self.errors: list[ErrorDetail] = list(errors)
        self.status_code = status_code
        super().__init__(self.errors)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> APIError:
        return cls([ErrorDetail.from_dict(item) for item in data.get("errors") or []])

    def __str__(self) -> str:
        details = ", ".join(f"{error.code} {error.message}" for error in self.errors)
        if details:
            return f"API error: {details}"
        return f"API error: HTTP status {self.status_code}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self.errors == other.errors

    __hash__ = Exception.__hash__


class Requester:
    """Sends JSON API requests relative to a base URL."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str = API_URL,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url
        self.headers = dict(headers or {})

    def with_path(self, path: str) -> Requester:
        """Return a requester whose base URL is resolved against ``path``."""
        return Requester(self.session, self.url(path), self.headers)

    def with_base(self, base_url: str) -> Requester:
        """Return a requester with a different base URL."""
        return Requester(self.session, base_url, self.headers)

    def url(self, path: str) -> str:
        return urljoin(self.base_url, path)

    def get(self, path: str, params: Any = None) -> tuple[Any, requests.Response]:
        """GET ``path`` with ``params`` in the query; return (decoded JSON, response)."""
        response = self.session.get(
            self.url(path), params=encode_params(params), headers=self.headers
        )
        return self._receive(response), response

    def post(self, path: str, params: Any = None) -> tuple[Any, requests.Response]:
        """POST ``params`` as a form to ``path``; return (decoded JSON, response)."""
        response = self.session.post(
            self.url(path), data=encode_params(params), headers=self.headers
        )
        return self._receive(response), response

    @staticmethod
    def _receive(response: requests.Response) -> Any:
        if 200 <= response.status_code < 300:
            if response.status_code == 204 or not response.content:
                return None
            return response.json()
        try:
            data = response.json() if response.content else None
        except ValueError:
            data = None
        error = APIError.from_dict(data) if isinstance(data, Mapping) else APIError()
        error.status_code = response.status_code
        raise error