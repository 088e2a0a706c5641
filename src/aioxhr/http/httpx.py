from dataclasses import dataclass

import httpx

from ..types import Timeout
from .types import HttpImplementation, Request, RequestFailed, Response


def render_headers(headers: httpx.Headers) -> str:
    return "\r\n".join(
        f"{name.decode('latin-1')}: {value.decode('latin-1')}"
        for name, value in headers.raw
    )


@dataclass(frozen=True)
class HTTPX:
    """
    Transport backed by httpx. Without a ``client`` every request opens and
    closes its own ``httpx.AsyncClient``.
    """

    client: httpx.AsyncClient | None = None
    timeout: Timeout | None = None

    async def __call__(self, request: Request) -> Response:
        if self.client is not None:
            return await self._send(self.client, request)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._send(client, request)

    async def _send(self, client: httpx.AsyncClient, request: Request) -> Response:
        try:
            response = await client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
                timeout=(
                    httpx.USE_CLIENT_DEFAULT if self.timeout is None else self.timeout
                ),
            )
        except httpx.HTTPError as exc:
            raise RequestFailed(exc)
        return Response(
            status=response.status_code,
            headers=render_headers(response.headers),
            body=response.content,
            status_text=response.reason_phrase,
        )


def default_transport_factory(timeout: Timeout | None = None) -> HttpImplementation:
    return HTTPX(timeout=timeout)
