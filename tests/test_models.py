from __future__ import annotations

from tfforeman.models import ForemanOrganization, QueryResponse
from tfforeman.services.organizations import quote_search_value


def test_payload_excludes_read_only_and_extra_fields() -> None:
    organization = ForemanOrganization.model_validate(
        {
            "id": 3,
            "name": "production",
            "title": "production",
            "hosts_count": 12,
            "created_at": "2024-05-01 10:00:00 UTC",
        }
    )
    assert organization.to_payload() == {"id": 3, "name": "production"}
    assert organization.to_payload(include_id=False) == {"name": "production"}


def test_query_response_decodes_typed_results() -> None:
    response = QueryResponse[ForemanOrganization].model_validate(
        {
            "total": 4,
            "subtotal": 1,
            "page": 1,
            "per_page": 20,
            "search": 'name="production"',
            "sort": {"by": None, "order": None},
            "results": [{"id": 1, "name": "production", "title": "production"}],
        }
    )
    assert response.subtotal == 1
    assert response.results == [ForemanOrganization(id=1, name="production", title="production")]


def test_quote_search_value() -> None:
    assert quote_search_value("production") == '"production"'
    assert quote_search_value('a"b') == '"a\\"b"'
    assert quote_search_value("a\\b") == '"a\\\\b"'
