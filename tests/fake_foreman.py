from __future__ import annotations

import json
from typing import Any

import httpx

SERVER_URL = "https://foreman.example.com"


class FakeForeman:
    """In-memory stand-in for the Foreman organizations API."""

    def __init__(self) -> None:
        self.organizations: dict[int, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self._next_id = 1

    def add(self, name: str) -> dict[str, Any]:
        record = {
            "id": self._next_id,
            "name": name,
            "title": name,
            "created_at": "2024-05-01 10:00:00 UTC",
            "updated_at": "2024-05-01 10:00:00 UTC",
        }
        self.organizations[self._next_id] = record
        self._next_id += 1
        return record

    def _not_found(self, organization_id: int) -> httpx.Response:
        return httpx.Response(
            404,
            json={"error": {"message": f"Resource organization not found by id '{organization_id}'"}},
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        segments = [segment for segment in request.url.path.split("/") if segment]
        if segments[:2] != ["api", "organizations"]:
            return httpx.Response(404, json={"error": {"message": "route not found"}})

        if len(segments) == 2:
            if request.method == "POST":
                body = json.loads(request.content)
                return httpx.Response(201, json=self.add(body["name"]))
            if request.method == "GET":
                search = request.url.params.get("search", "")
                results = list(self.organizations.values())
                if search.startswith("name="):
                    wanted = json.loads(search[len("name=") :])
                    results = [record for record in results if record["name"] == wanted]
                return httpx.Response(
                    200,
                    json={
                        "total": len(self.organizations),
                        "subtotal": len(results),
                        "page": 1,
                        "per_page": 20,
                        "search": search or None,
                        "sort": {"by": None, "order": None},
                        "results": results,
                    },
                )
            return httpx.Response(405)

        organization_id = int(segments[2])
        record = self.organizations.get(organization_id)
        if record is None:
            return self._not_found(organization_id)

        if request.method == "GET":
            return httpx.Response(200, json=record)
        if request.method == "PUT":
            body = json.loads(request.content)
            record["name"] = body["name"]
            record["updated_at"] = "2024-05-02 10:00:00 UTC"
            return httpx.Response(200, json=record)
        if request.method == "DELETE":
            del self.organizations[organization_id]
            return httpx.Response(200, json=record)
        return httpx.Response(405)
