from __future__ import annotations

DEFAULT_CONFIG_DIR = "~/.config/tfforeman"

API_PREFIX = "/api"
API_ACCEPT = "application/json,version=2"

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0

ORGANIZATION_ENDPOINT_PREFIX = "organizations"

# Attribute carrying documentation metadata in provider schemas.
META_ATTRIBUTE = "__meta__"
META_SUMMARY = "@SUMMARY@"
META_EXAMPLE = "@EXAMPLE@"
