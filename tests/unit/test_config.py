import pytest

from aioxhr.client import Client
from aioxhr.config import ClientConfig


def test_defaults() -> None:
    config = ClientConfig()
    assert dict(config.headers) == {"Content-Type": "application/json"}
    assert config.allowed_statuses == (200, 304)
    assert config.timeout is None


def test_from_env() -> None:
    config = ClientConfig.from_env(
        {"AIOXHR_TIMEOUT": "1.5", "AIOXHR_ALLOWED_STATUSES": "200, 201,204"}
    )
    assert config.timeout == 1.5
    assert config.allowed_statuses == (200, 201, 204)


def test_from_empty_env() -> None:
    assert ClientConfig.from_env({}) == ClientConfig()


def test_from_env_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        ClientConfig.from_env({"AIOXHR_ALLOWED_STATUSES": "ok"})


def test_client_copies_config_headers() -> None:
    config = ClientConfig(headers={"Accept": "application/json"})
    client = Client(config)
    client.headers("Accept")
    assert client.headers() == {}
    assert config.headers == {"Accept": "application/json"}
