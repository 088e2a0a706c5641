from enum import Enum
from typing import Any

Timeout = float | int
Numeric = float | int

HeaderMap = dict[str, str]
StatusCode = int
URL = str

# Anything json.dumps accepts, or a pre-encoded payload.
Body = str | bytes | dict[str, Any] | list[Any] | Numeric | bool | None


class Method(Enum):
    get = "GET"
    post = "POST"
    put = "PUT"
    delete = "DELETE"


DEFAULT_HEADERS: HeaderMap = {"Content-Type": "application/json"}
DEFAULT_ALLOWED_STATUSES: tuple[StatusCode, ...] = (200, 304)
