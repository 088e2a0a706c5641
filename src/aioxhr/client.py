from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping

from .config import ClientConfig
from .errors import InvalidRequest, TransportUnavailable
from .http.httpx import default_transport_factory
from .http.types import (
    HttpImplementation,
    Request,
    RequestFailed,
    Response,
    TransportFactory,
)
from .models import (
    Callback,
    HeaderStore,
    Outcome,
    RequestSpec,
    ResponseEnvelope,
    StatusPolicy,
)
from .parsing import parse_response
from .types import URL, Body, HeaderMap, Method, StatusCode
from .utils import encode_body, logger, to_method

TIMED_OUT = "Request timed out"


class Client:
    """
    Issues requests through a transport and classifies each completed
    response as success or error.

    Default headers and the set of success statuses belong to the client.
    Headers are read when a request is built, statuses when its response
    arrives, so changing either while requests are in flight affects those
    requests accordingly.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._headers = HeaderStore(self.config.headers)
        self._statuses = StatusPolicy(self.config.allowed_statuses)
        # The deadline is enforced around the transport call, not inside it.
        self._transport_factory = transport_factory or default_transport_factory
        self._pending: set[asyncio.Task[Outcome]] = set()

    def headers(
        self,
        key_or_map: str | Mapping[str, str] | None = None,
        value: str | None = None,
    ) -> HeaderMap:
        if key_or_map is None:
            return self._headers.get()
        return self._headers.set(key_or_map, value)

    def allows(
        self, status_or_list: StatusCode | Iterable[StatusCode] | None = None
    ) -> set[StatusCode]:
        if status_or_list is None:
            return self._statuses.get()
        return self._statuses.configure(status_or_list)

    async def request(
        self, method: Method | str, url: URL, body: Body = None
    ) -> Outcome:
        spec = self._build_spec(method, url, body)
        transport = self._acquire_transport()
        request = Request(
            method=spec.method.value,
            url=spec.url,
            headers=dict(self._headers.get()),
            body=encode_body(spec.body),
        )
        logger.debug("Dispatching %s %s", request.method, request.url)
        response = await self._exchange(transport, request)
        envelope = parse_response(response)
        outcome = self._classify(envelope)
        logger.debug(
            "%s %s completed with status %d (%s)",
            request.method,
            request.url,
            envelope.status,
            "success" if outcome.ok else "error",
        )
        return outcome

    def dispatch(
        self,
        method: Method | str,
        url: URL,
        body: Body = None,
        *,
        callback: Callback,
    ) -> asyncio.Task[Outcome]:
        """
        Schedule a request on the running loop and return without waiting.

        ``callback(err, resp)`` is called exactly once when the response
        arrives. Invalid arguments raise immediately; faults raised while the
        request runs, such as an unparseable body, are left on the returned
        task and never reach the callback.
        """
        self._build_spec(method, url, body)
        task = asyncio.get_running_loop().create_task(
            self._request_with_callback(method, url, body, callback)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def get(
        self, url: URL, body: Body = None, *, callback: Callback | None = None
    ) -> Outcome:
        return await self._bound(Method.get, url, body, callback)

    async def post(
        self, url: URL, body: Body = None, *, callback: Callback | None = None
    ) -> Outcome:
        return await self._bound(Method.post, url, body, callback)

    async def put(
        self, url: URL, body: Body = None, *, callback: Callback | None = None
    ) -> Outcome:
        return await self._bound(Method.put, url, body, callback)

    async def delete(
        self, url: URL, body: Body = None, *, callback: Callback | None = None
    ) -> Outcome:
        return await self._bound(Method.delete, url, body, callback)

    async def _bound(
        self, method: Method, url: URL, body: Body, callback: Callback | None
    ) -> Outcome:
        if callback is None:
            return await self.request(method, url, body)
        return await self._request_with_callback(method, url, body, callback)

    async def _request_with_callback(
        self, method: Method | str, url: URL, body: Body, callback: Callback
    ) -> Outcome:
        outcome = await self.request(method, url, body)
        callback(outcome.error, outcome.response)
        return outcome

    def _build_spec(self, method: Method | str, url: URL, body: Body) -> RequestSpec:
        if not isinstance(url, str) or not url:
            raise InvalidRequest(f"URL must be a non-empty string, got {url!r}")
        return RequestSpec(method=to_method(method), url=url, body=body)

    def _acquire_transport(self) -> HttpImplementation:
        try:
            transport = self._transport_factory()
        except Exception as exc:
            raise TransportUnavailable(f"Could not construct transport: {exc}") from exc
        if transport is None:
            raise TransportUnavailable("Transport factory returned no transport")
        return transport

    async def _exchange(
        self, transport: HttpImplementation, request: Request
    ) -> Response:
        try:
            if self.config.timeout is None:
                return await transport(request)
            return await asyncio.wait_for(transport(request), self.config.timeout)
        except RequestFailed as exc:
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            return Response(status=0, headers="", body=b"", status_text=str(exc))
        except asyncio.TimeoutError:
            logger.warning(
                "%s %s timed out after %ss",
                request.method,
                request.url,
                self.config.timeout,
            )
            return Response(status=0, headers="", body=b"", status_text=TIMED_OUT)

    def _classify(self, envelope: ResponseEnvelope) -> Outcome:
        if self._statuses.allows(envelope.status):
            return Outcome(response=envelope)
        return Outcome(error=envelope)
