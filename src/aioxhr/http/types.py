from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class Request:
    method: Literal["GET"] | Literal["POST"] | Literal["PUT"] | Literal["DELETE"]
    url: str
    headers: dict[str, str] | None
    body: bytes | None


@dataclass(frozen=True)
class Response:
    status: int
    headers: str
    body: bytes
    status_text: str = ""


@dataclass
class RequestFailed(Exception):
    inner: Exception

    def __str__(self) -> str:
        return str(self.inner) or type(self.inner).__name__


HttpImplementation = Callable[[Request], Awaitable[Response]]
TransportFactory = Callable[[], HttpImplementation]
