"""``tfforeman`` command line: profile setup plus the organization operations."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import SecretStr

from tfforeman import __version__
from tfforeman.client import AsyncForemanClient
from tfforeman.config import ProfileConfig, home_config_path, write_profile
from tfforeman.errors import ConfigError, ForemanError
from tfforeman.log import configure_logging
from tfforeman.models import ForemanOrganization
from tfforeman.output import OutputFormat, render
from tfforeman.provider import Provider, ProviderContext
from tfforeman.settings import RuntimeSettings

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Foreman provider CLI")
organizations_app = typer.Typer(no_args_is_help=True, help="Manage Foreman organizations")
app.add_typer(organizations_app, name="organizations")


@dataclass(frozen=True)
class Options:
    """Global options shared by every subcommand."""

    profile: str | None = None
    config_file: Path | None = None
    output: OutputFormat = "json"


def _options(ctx: typer.Context) -> Options:
    options = ctx.find_object(Options)
    return options if options is not None else Options()


def _make_client(options: Options) -> AsyncForemanClient:
    return AsyncForemanClient(profile=options.profile, config_path=options.config_file)


def _make_provider_context(options: Options) -> ProviderContext:
    return Provider().configure(
        profile=options.profile,
        config_path=str(options.config_file) if options.config_file else None,
    )


def _call(options: Options, operation: Callable[[AsyncForemanClient], Awaitable[Any]]) -> Any:
    """Open a client, run one API operation against it and close it again."""

    async def session() -> Any:
        async with _make_client(options) as client:
            return await operation(client)

    return asyncio.run(session())


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"tfforeman {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    profile: Annotated[str | None, typer.Option("--profile", "-p", help="Config profile to use")] = None,
    config_file: Annotated[Path | None, typer.Option("--config-file", "-c", help="Config file path")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="json, yaml or table")] = "json",
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (defaults to FOREMAN_PROVIDER_LOGLEVEL)"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_show_version, is_eager=True, help="Print the version and exit"),
    ] = False,
) -> None:
    env = RuntimeSettings()
    try:
        configure_logging(log_level or env.log_level, env.log_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    ctx.obj = Options(profile=profile, config_file=config_file, output=output)


@app.command("configure")
def configure(
    ctx: typer.Context,
    server_url: Annotated[str, typer.Option(help="Foreman server URL")],
    username: Annotated[str | None, typer.Option(help="Foreman API username")] = None,
    password: Annotated[str | None, typer.Option(help="Foreman API password")] = None,
    insecure: Annotated[bool, typer.Option("--insecure/--verify-tls", help="Skip TLS verification")] = False,
    default: Annotated[bool, typer.Option("--default/--no-default", help="Make this the default profile")] = True,
) -> None:
    """Save server connection settings as a named profile."""

    options = _options(ctx)
    name = options.profile or "default"
    path = options.config_file or home_config_path()
    profile = ProfileConfig(
        server_url=server_url,
        username=username,
        password=SecretStr(password) if password else None,
        client_tls_insecure=insecure,
    )
    saved = write_profile(path, name, profile, make_default=default)
    render(
        {"path": str(path), "profile": name, "default_profile": saved.default_profile},
        options.output,
    )


@organizations_app.command("create")
def organizations_create(ctx: typer.Context, name: Annotated[str, typer.Argument()]) -> None:
    options = _options(ctx)
    created = _call(options, lambda client: client.organizations.create(ForemanOrganization(name=name)))
    render(created, options.output)


@organizations_app.command("read")
def organizations_read(ctx: typer.Context, organization_id: Annotated[int, typer.Argument()]) -> None:
    options = _options(ctx)
    render(_call(options, lambda client: client.organizations.read(organization_id)), options.output)


@organizations_app.command("update")
def organizations_update(
    ctx: typer.Context,
    organization_id: Annotated[int, typer.Argument()],
    name: Annotated[str, typer.Option(help="New organization name")],
) -> None:
    options = _options(ctx)
    organization = ForemanOrganization(id=organization_id, name=name)
    render(_call(options, lambda client: client.organizations.update(organization)), options.output)


@organizations_app.command("delete")
def organizations_delete(ctx: typer.Context, organization_id: Annotated[int, typer.Argument()]) -> None:
    options = _options(ctx)
    _call(options, lambda client: client.organizations.delete(organization_id))
    render({"id": organization_id, "deleted": True}, options.output)


@organizations_app.command("query")
def organizations_query(ctx: typer.Context, name: Annotated[str, typer.Argument()]) -> None:
    options = _options(ctx)
    render(_call(options, lambda client: client.organizations.query(ForemanOrganization(name=name))), options.output)


@organizations_app.command("lookup")
def organizations_lookup(ctx: typer.Context, name: Annotated[str, typer.Argument()]) -> None:
    """Resolve exactly one organization by name, the way the data source does."""

    options = _options(ctx)
    data_source = Provider().data_source("foreman_organization")
    if data_source.read is None:
        raise ConfigError("data source foreman_organization has no read operation")
    data_source.validate({"name": name})

    d = data_source.data({"name": name})
    provider_ctx = _make_provider_context(options)
    try:
        data_source.read(d, provider_ctx)
    finally:
        provider_ctx.close()
    render(d.state(), options.output)


def run() -> None:
    try:
        app()
    except ForemanError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from exc
