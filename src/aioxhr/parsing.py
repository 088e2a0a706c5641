import json
import re

from .errors import MalformedBody
from .http.types import Response
from .models import ResponseEnvelope
from .types import HeaderMap

HEADER_SEPARATOR = re.compile(r":\s?")


def parse_headers(blob: str) -> HeaderMap:
    """
    Parse a raw ``Name: Value`` header block as delivered by the transport.

    Lines are CRLF delimited, empty lines are skipped and the first literal
    double quote of each line is dropped. Only the first colon separates the
    name from the value, so values such as dates keep their own colons. When
    a name repeats, the last line wins.
    """
    headers: HeaderMap = {}
    for line in blob.split("\r\n"):
        if not line:
            continue
        parts = HEADER_SEPARATOR.split(line.replace('"', "", 1), maxsplit=1)
        headers[parts[0]] = parts[1] if len(parts) > 1 else ""
    return headers


def parse_body(status: int, body: bytes) -> object:
    text = body.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedBody(status, text) from exc


def parse_response(response: Response) -> ResponseEnvelope:
    headers = parse_headers(response.headers)
    if len(response.body):
        return ResponseEnvelope(
            status=response.status,
            headers=headers,
            body=parse_body(response.status, response.body),
        )
    return ResponseEnvelope(
        status=response.status, headers=headers, error=response.status_text
    )
