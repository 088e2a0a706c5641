from .client import Client
from .config import ClientConfig
from .errors import InvalidRequest, MalformedBody, TransportUnavailable, XhrError
from .http.types import Request, RequestFailed, Response
from .models import HeaderStore, Outcome, ResponseEnvelope, StatusPolicy
from .types import Method

__all__ = [
    "Client",
    "ClientConfig",
    "HeaderStore",
    "InvalidRequest",
    "MalformedBody",
    "Method",
    "Outcome",
    "Request",
    "RequestFailed",
    "Response",
    "ResponseEnvelope",
    "StatusPolicy",
    "TransportUnavailable",
    "XhrError",
]
