import json
import logging

from .errors import InvalidRequest
from .types import Body, Method

logger = logging.getLogger("aioxhr")


def encode_body(body: Body) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


def to_method(method: Method | str) -> Method:
    if isinstance(method, Method):
        return method
    try:
        return Method(method.upper())
    except (AttributeError, ValueError):
        raise InvalidRequest(f"Unsupported HTTP method: {method!r}") from None
