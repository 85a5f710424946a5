"""Blocking facade over :class:`AsyncForemanClient`.

``client.organizations`` blocks; ``client.aorganizations`` is the async service.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

from tfforeman.client.async_client import AsyncForemanClient
from tfforeman.models import ForemanOrganization, QueryResponse
from tfforeman.services import OrganizationsService

T = TypeVar("T")


class _LoopOwner:
    """Runs coroutines to completion on one event loop kept for the client's lifetime."""

    def __init__(self) -> None:
        self._runner: asyncio.Runner | None = asyncio.Runner()

    def __call__(self, coro: Coroutine[Any, Any, T]) -> T:
        if self._runner is None:
            coro.close()
            raise RuntimeError("sync client is closed")
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return self._runner.run(coro)
        coro.close()
        raise RuntimeError("sync client methods cannot run inside an active event loop; use aorganizations")

    def shutdown(self) -> None:
        if self._runner is not None:
            self._runner.close()
            self._runner = None


class SyncOrganizations:
    def __init__(self, service: OrganizationsService, run: _LoopOwner) -> None:
        self._service = service
        self._run = run

    def create(self, org: ForemanOrganization) -> ForemanOrganization:
        return self._run(self._service.create(org))

    def read(self, organization_id: int) -> ForemanOrganization:
        return self._run(self._service.read(organization_id))

    def update(self, org: ForemanOrganization) -> ForemanOrganization:
        return self._run(self._service.update(org))

    def delete(self, organization_id: int) -> None:
        self._run(self._service.delete(organization_id))

    def query(self, org: ForemanOrganization) -> QueryResponse[ForemanOrganization]:
        return self._run(self._service.query(org))


class ForemanClient:
    """Foreman client usable from plain synchronous code.

    Takes the same arguments as :class:`AsyncForemanClient`.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._loop = _LoopOwner()
        self._client = AsyncForemanClient(*args, **kwargs)
        self.aorganizations = self._client.organizations
        self.organizations = SyncOrganizations(self.aorganizations, self._loop)
        self._open = True

    @property
    def profile_name(self) -> str:
        return self._client.profile_name

    @property
    def server_url(self) -> str:
        return self._client.server_url

    def close(self) -> None:
        if not self._open:
            return
        self._open = False
        try:
            self._loop(self._client.aclose())
        finally:
            self._loop.shutdown()

    async def aclose(self) -> None:
        if not self._open:
            return
        self._open = False
        await self._client.aclose()
        self._loop.shutdown()

    def __enter__(self) -> ForemanClient:
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    async def __aenter__(self) -> ForemanClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()
