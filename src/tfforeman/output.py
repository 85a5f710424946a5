"""Rendering of CLI results as json, yaml or a rich table."""

from __future__ import annotations

import json
from typing import Any, Literal

import yaml
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

OutputFormat = Literal["json", "yaml", "table"]


def plain(value: Any) -> Any:
    """Reduce models and containers to json-compatible values."""

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, dict):
        return {str(key): plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [plain(item) for item in value]
    return value


def _table(rows: list[dict[str, Any]]) -> Table:
    columns = list(dict.fromkeys(key for row in rows for key in row))
    table = Table(*columns, header_style="bold")
    for row in rows:
        table.add_row(*(str(row.get(column, "")) for column in columns))
    return table


def render(value: Any, output: OutputFormat = "json") -> None:
    data = plain(value)
    if output == "yaml":
        print(yaml.safe_dump(data, sort_keys=False), end="")
    elif output == "json":
        print(json.dumps(data, indent=2))
    elif isinstance(data, dict) and isinstance(data.get("results"), list):
        # query envelope: one row per organization
        Console().print(_table(data["results"]))
    elif isinstance(data, dict):
        Console().print(_table([data]))
    else:
        Console().print(data)
