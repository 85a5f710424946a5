from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
import yaml
from typer.testing import CliRunner

import tfforeman.cli as cli_module
from fake_foreman import SERVER_URL, FakeForeman
from tfforeman.client import AsyncForemanClient
from tfforeman.provider import Provider

runner = CliRunner()


@pytest.fixture()
def patched_cli(monkeypatch: pytest.MonkeyPatch, foreman: FakeForeman, tmp_path: Path) -> FakeForeman:
    def make_client(_state: Any) -> AsyncForemanClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(foreman.handler))
        return AsyncForemanClient(config={}, server_url=SERVER_URL, http_client=http_client)

    def make_provider_context(_state: Any):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(foreman.handler))
        return Provider().configure(
            {"server_url": SERVER_URL},
            config_path=str(tmp_path / "absent.yml"),
            http_client=http_client,
        )

    monkeypatch.setattr(cli_module, "_make_client", make_client)
    monkeypatch.setattr(cli_module, "_make_provider_context", make_provider_context)
    return foreman


def test_version() -> None:
    result = runner.invoke(cli_module.app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("tfforeman ")


def test_organizations_create_and_read(patched_cli: FakeForeman) -> None:
    result = runner.invoke(cli_module.app, ["organizations", "create", "production"])
    assert result.exit_code == 0, result.output
    created = json.loads(result.stdout)
    assert created["name"] == "production"
    assert created["id"] > 0

    result = runner.invoke(cli_module.app, ["organizations", "read", str(created["id"])])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["name"] == "production"


def test_organizations_update_and_delete(patched_cli: FakeForeman) -> None:
    record = patched_cli.add("staging")

    result = runner.invoke(cli_module.app, ["organizations", "update", str(record["id"]), "--name", "production"])
    assert result.exit_code == 0, result.output
    updated = json.loads(result.stdout)
    assert (updated["id"], updated["name"]) == (record["id"], "production")

    result = runner.invoke(cli_module.app, ["organizations", "delete", str(record["id"])])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"id": record["id"], "deleted": True}
    assert patched_cli.organizations == {}


def test_organizations_query_yaml(patched_cli: FakeForeman) -> None:
    patched_cli.add("production")
    result = runner.invoke(cli_module.app, ["-o", "yaml", "organizations", "query", "production"])
    assert result.exit_code == 0, result.output
    payload = yaml.safe_load(result.stdout)
    assert payload["subtotal"] == 1
    assert payload["results"][0]["name"] == "production"


def test_organizations_lookup(patched_cli: FakeForeman) -> None:
    record = patched_cli.add("production")
    result = runner.invoke(cli_module.app, ["organizations", "lookup", "production"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["id"] == str(record["id"])
    assert payload["name"] == "production"


def test_organizations_lookup_without_match_fails(patched_cli: FakeForeman) -> None:
    result = runner.invoke(cli_module.app, ["organizations", "lookup", "missing"])
    assert result.exit_code != 0
    assert "no results" in str(result.exception)


def test_configure_writes_profile(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yml"
    result = runner.invoke(
        cli_module.app,
        [
            "-c",
            str(config_file),
            "configure",
            "--server-url",
            SERVER_URL,
            "--username",
            "admin",
            "--password",
            "changeme",
        ],
    )
    assert result.exit_code == 0, result.output
    saved = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    assert saved["default_profile"] == "default"
    assert saved["profiles"]["default"]["server_url"] == SERVER_URL
    assert saved["profiles"]["default"]["password"] == "changeme"
    assert "changeme" not in result.stdout
    assert json.loads(result.stdout) == {"path": str(config_file), "profile": "default", "default_profile": "default"}


def test_invalid_log_level_is_rejected() -> None:
    result = runner.invoke(cli_module.app, ["--log-level", "chatty", "organizations", "query", "production"])
    assert result.exit_code == 2


def test_configure_named_profile_keeps_existing_default(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps({"default_profile": "main", "profiles": {"main": {"server_url": SERVER_URL}}}),
        encoding="utf-8",
    )

    result = runner.invoke(
        cli_module.app,
        ["-c", str(config_file), "-p", "lab", "configure", "--server-url", "https://lab.example.com", "--no-default"],
    )

    assert result.exit_code == 0, result.output
    saved = json.loads(config_file.read_text(encoding="utf-8"))
    assert saved["default_profile"] == "main"
    assert set(saved["profiles"]) == {"main", "lab"}
    assert saved["profiles"]["lab"]["server_url"] == "https://lab.example.com"


def test_organizations_query_table(patched_cli: FakeForeman) -> None:
    patched_cli.add("production")
    result = runner.invoke(cli_module.app, ["-o", "table", "organizations", "query", "production"])
    assert result.exit_code == 0, result.output
    assert "production" in result.stdout


def test_organizations_lookup_requires_data_source_read(monkeypatch: pytest.MonkeyPatch) -> None:
    original = Provider.data_source

    def no_read(self: Provider, name: str):
        resource = original(self, name)
        resource.read = None
        return resource

    monkeypatch.setattr(Provider, "data_source", no_read)
    result = runner.invoke(cli_module.app, ["organizations", "lookup", "production"])
    assert result.exit_code != 0
    assert "has no read operation" in str(result.exception)
