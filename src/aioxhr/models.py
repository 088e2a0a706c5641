from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, cast

from .types import (
    DEFAULT_ALLOWED_STATUSES,
    DEFAULT_HEADERS,
    URL,
    Body,
    HeaderMap,
    Method,
    StatusCode,
)


class HeaderStore:
    """Default headers written onto every outgoing request.

    ``get`` hands out the live mapping, not a copy, so later calls to ``set``
    are visible to anyone holding on to it. Only ``None`` counts as a missing
    value: an empty string is stored as an empty header rather than deleting
    the entry.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._headers: HeaderMap = dict(
            DEFAULT_HEADERS if initial is None else initial
        )

    def get(self) -> HeaderMap:
        return self._headers

    def set(
        self, key_or_map: str | Mapping[str, str], value: str | None = None
    ) -> HeaderMap:
        if isinstance(key_or_map, Mapping):
            for key, val in key_or_map.items():
                self._headers[key] = val
        elif value is not None:
            self._headers[key_or_map] = value
        elif key_or_map in self._headers:
            del self._headers[key_or_map]
        return self._headers

    def __contains__(self, key: object) -> bool:
        return key in self._headers

    def __repr__(self) -> str:
        return f"HeaderStore({self._headers!r})"


class StatusPolicy:
    """Set of status codes classified as success; everything else is an error."""

    def __init__(
        self, initial: Iterable[StatusCode] = DEFAULT_ALLOWED_STATUSES
    ) -> None:
        self._allowed: set[StatusCode] = set()
        for status in initial:
            self._allowed.add(self._check(status))

    @staticmethod
    def _check(status: Any) -> StatusCode:
        if isinstance(status, bool) or not isinstance(status, int):
            raise TypeError(f"Status codes must be integers, got {status!r}")
        return status

    def get(self) -> set[StatusCode]:
        return self._allowed

    def configure(
        self, status_or_list: StatusCode | Iterable[StatusCode]
    ) -> set[StatusCode]:
        if isinstance(status_or_list, Iterable) and not isinstance(
            status_or_list, (str, bytes)
        ):
            codes = [self._check(status) for status in status_or_list]
            self._allowed.update(codes)
        else:
            status = self._check(status_or_list)
            if status in self._allowed:
                self._allowed.discard(status)
            else:
                self._allowed.add(status)
        return self._allowed

    def allows(self, status: StatusCode) -> bool:
        return status in self._allowed

    def __repr__(self) -> str:
        return f"StatusPolicy({sorted(self._allowed)!r})"


@dataclass(frozen=True)
class RequestSpec:
    method: Method
    url: URL
    body: Body = None


@dataclass(frozen=True)
class ResponseEnvelope:
    """
    One completed request. Exactly one of ``body`` (the decoded JSON payload)
    and ``error`` (the transport's status text, used when the payload was
    empty) is meaningful; ``error`` being ``None`` marks a parsed body, which
    may itself legitimately be ``None`` for a literal ``null`` payload.
    """

    status: StatusCode
    headers: HeaderMap = field(default_factory=dict)
    body: Any = None
    error: str | None = None

    @property
    def has_body(self) -> bool:
        return self.error is None

    @property
    def json(self) -> Any:
        return self.body


@dataclass(frozen=True)
class Outcome:
    error: ResponseEnvelope | None = None
    response: ResponseEnvelope | None = None

    def __post_init__(self) -> None:
        if (self.error is None) == (self.response is None):
            raise ValueError("Outcome needs exactly one of error or response")

    @property
    def ok(self) -> bool:
        return self.response is not None

    @property
    def envelope(self) -> ResponseEnvelope:
        return cast(
            ResponseEnvelope,
            self.response if self.response is not None else self.error,
        )

    def __iter__(self) -> Iterator[ResponseEnvelope | None]:
        yield self.error
        yield self.response


Callback = Callable[[ResponseEnvelope | None, ResponseEnvelope | None], Any]
