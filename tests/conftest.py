from __future__ import annotations

import pytest

from fake_foreman import SERVER_URL, FakeForeman

_ENV_VARS = (
    "FOREMAN_SERVER_URL",
    "FOREMAN_USERNAME",
    "FOREMAN_USER",
    "FOREMAN_PASSWORD",
    "FOREMAN_CLIENT_TLS_INSECURE",
    "FOREMAN_REQUEST_TIMEOUT_SECONDS",
    "FOREMAN_PROVIDER_LOGLEVEL",
    "FOREMAN_PROVIDER_LOGFILE",
    "FOREMAN_PROFILE",
    "TFFOREMAN_PROFILE",
    "TFFOREMAN_CONFIG",
    "TFFOREMAN_CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture()
def foreman() -> FakeForeman:
    return FakeForeman()


@pytest.fixture()
def client_config() -> dict[str, object]:
    return {
        "default_profile": "default",
        "profiles": {
            "default": {
                "server_url": SERVER_URL,
                "username": "admin",
                "password": "changeme",
            }
        },
    }
