from dataclasses import dataclass


class XhrError(Exception):
    pass


class TransportUnavailable(XhrError):
    """
    No transport could be constructed for a request, either because the
    factory raised or because it returned nothing.
    """


class InvalidRequest(XhrError, ValueError):
    pass


@dataclass
class MalformedBody(XhrError, ValueError):
    status: int
    text: str

    def __str__(self) -> str:
        preview = self.text[:200]
        return f"Response with status {self.status} is not valid JSON: {preview!r}"
