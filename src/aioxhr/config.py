"""Client configuration, optionally read from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .types import DEFAULT_ALLOWED_STATUSES, DEFAULT_HEADERS, StatusCode, Timeout

TIMEOUT_ENV = "AIOXHR_TIMEOUT"
ALLOWED_STATUSES_ENV = "AIOXHR_ALLOWED_STATUSES"


@dataclass(frozen=True)
class ClientConfig:
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    allowed_statuses: tuple[StatusCode, ...] = DEFAULT_ALLOWED_STATUSES
    # None means requests have no deadline.
    timeout: Timeout | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        env = os.environ if environ is None else environ
        timeout: Timeout | None = None
        if env.get(TIMEOUT_ENV):
            timeout = float(env[TIMEOUT_ENV])
        allowed = DEFAULT_ALLOWED_STATUSES
        if env.get(ALLOWED_STATUSES_ENV):
            codes = env[ALLOWED_STATUSES_ENV].split(",")
            allowed = tuple(int(code) for code in codes if code.strip())
        return cls(allowed_statuses=allowed, timeout=timeout)
