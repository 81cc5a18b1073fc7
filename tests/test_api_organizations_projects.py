import json

import pytest
import respx
from httpx import Response

from edgee_mcp import api
from edgee_mcp.client import EdgeeApiError, EdgeeClient
from edgee_mcp.models import (
    CacheRule,
    DomainUpdateInput,
    OrganizationCreateInput,
    OrganizationUpdateInput,
    OrganizationUserUpdateInput,
    ProjectUpdateInput,
    ProxySettingsBackend,
    ProxySettingsCreateInput,
)

BASE = "https://api.edgee.app"

ORG = {
    "object": "organization",
    "id": "org_1",
    "name": "Acme",
    "slug": "acme",
    "type": "pro",
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-01-02T00:00:00Z",
}


@pytest.fixture
def client():
    return EdgeeClient(token="tok")


@pytest.mark.asyncio
@respx.mock
async def test_list_organizations_query(client):
    route = respx.get(f"{BASE}/v1/organizations").mock(
        return_value=Response(
            200, json={"object": "list", "has_more": False, "data": [ORG]}
        )
    )

    async with client:
        result = await api.list_organizations(client, limit=5, name="acme")

    assert result["data"] == [ORG]
    request = route.calls[0].request
    assert list(request.url.params.multi_items()) == [("limit", "5"), ("name", "acme")]


@pytest.mark.asyncio
@respx.mock
async def test_list_organizations_without_params_sends_no_query(client):
    route = respx.get(f"{BASE}/v1/organizations").mock(
        return_value=Response(200, json={"data": []})
    )

    async with client:
        await api.list_organizations(client)

    assert route.calls[0].request.url.query == b""


@pytest.mark.asyncio
@respx.mock
async def test_create_organization_posts_body(client):
    route = respx.post(f"{BASE}/v1/organizations").mock(
        return_value=Response(200, json=ORG)
    )

    async with client:
        result = await api.create_organization(
            client, OrganizationCreateInput(name="Acme", slug="acme")
        )

    assert result == ORG
    assert json.loads(route.calls[0].request.content) == {"name": "Acme", "slug": "acme"}


@pytest.mark.asyncio
@respx.mock
async def test_update_organization_uses_post_and_id_in_body(client):
    route = respx.post(f"{BASE}/v1/organizations/org_1").mock(
        return_value=Response(200, json=ORG)
    )

    async with client:
        await api.update_organization(
            client, "org_1", OrganizationUpdateInput(id="org_1", name="Acme Inc")
        )

    assert json.loads(route.calls[0].request.content) == {
        "id": "org_1",
        "name": "Acme Inc",
    }


@pytest.mark.asyncio
@respx.mock
async def test_delete_organization_returns_envelope(client):
    respx.delete(f"{BASE}/v1/organizations/org_1").mock(
        return_value=Response(
            200, json={"object": "organization", "id": "org_1", "deleted": True}
        )
    )

    async with client:
        result = await api.delete_organization(client, "org_1")

    assert result["deleted"] is True


@pytest.mark.asyncio
@respx.mock
async def test_organization_users_endpoints(client):
    list_route = respx.get(f"{BASE}/v1/organizations/org_1/users").mock(
        return_value=Response(200, json={"data": []})
    )
    update_route = respx.post(f"{BASE}/v1/organizations/org_1/users/u_1").mock(
        return_value=Response(200, json={"id": "u_1", "role": "admin"})
    )
    delete_route = respx.delete(f"{BASE}/v1/organizations/org_1/users/u_1").mock(
        return_value=Response(200, json={"id": "u_1", "deleted": True})
    )

    async with client:
        await api.list_organization_users(client, "org_1", role="member", limit=2)
        await api.update_organization_user(
            client, "org_1", "u_1", OrganizationUserUpdateInput(role="admin")
        )
        await api.delete_organization_user(client, "org_1", "u_1")

    assert list_route.calls[0].request.url.params["role"] == "member"
    assert json.loads(update_route.calls[0].request.content) == {"role": "admin"}
    assert delete_route.called


@pytest.mark.asyncio
@respx.mock
async def test_get_project_not_found_raises(client):
    respx.get(f"{BASE}/v1/projects/missing").mock(
        return_value=Response(
            404,
            json={"error": {"type": "not_found_error", "message": "Project not found"}},
        )
    )

    async with client:
        with pytest.raises(EdgeeApiError) as exc:
            await api.get_project(client, "missing")

    assert exc.value.status == 404
    assert exc.value.error_type == "not_found_error"


@pytest.mark.asyncio
@respx.mock
async def test_update_project_serializes_cache_rule_alias(client):
    route = respx.post(f"{BASE}/v1/projects/p1").mock(
        return_value=Response(200, json={"id": "p1"})
    )

    update = ProjectUpdateInput(
        id="p1",
        force_https=True,
        override_cache=[CacheRule(path="/static", ttl=60, pass_=False)],
    )
    async with client:
        await api.update_project(client, "p1", update)

    assert json.loads(route.calls[0].request.content) == {
        "id": "p1",
        "force_https": True,
        "override_cache": [{"path": "/static", "ttl": 60, "pass": False}],
    }


@pytest.mark.asyncio
@respx.mock
async def test_project_counters_query(client):
    route = respx.get(f"{BASE}/v1/projects/p1/counters").mock(
        return_value=Response(200, json={"request_count": 10, "event_count": 3})
    )

    async with client:
        result = await api.get_project_counters(client, "p1", month="2024-05")

    assert result == {"request_count": 10, "event_count": 3}
    assert dict(route.calls[0].request.url.params) == {"month": "2024-05"}


@pytest.mark.asyncio
@respx.mock
async def test_update_domain_posts_to_named_domain(client):
    route = respx.post(
        f"{BASE}/v1/projects/p1/domains/www.example.com"
    ).mock(return_value=Response(200, json={"name": "www.example.com"}))

    async with client:
        await api.update_project_domain(
            client, "p1", "www.example.com", DomainUpdateInput(ssl_status=True)
        )

    assert json.loads(route.calls[0].request.content) == {"ssl_status": True}


@pytest.mark.asyncio
@respx.mock
async def test_create_proxy_settings_body(client):
    route = respx.post(f"{BASE}/v1/projects/p1/proxy-settings").mock(
        return_value=Response(200, json={"revision": "r1"})
    )

    body = ProxySettingsCreateInput(
        description="origin",
        backends=[ProxySettingsBackend(name="main", address="1.2.3.4", default=True)],
    )
    async with client:
        await api.create_project_proxy_settings(client, "p1", body)

    assert json.loads(route.calls[0].request.content) == {
        "description": "origin",
        "backends": [{"name": "main", "address": "1.2.3.4", "default": True}],
    }


@pytest.mark.asyncio
@respx.mock
async def test_outgoing_events_path_and_paging(client):
    route = respx.get(
        f"{BASE}/v1/projects/p1/debug/data-collection/outgoing/ev_1"
    ).mock(return_value=Response(200, json={"data": []}))

    async with client:
        await api.get_outgoing_data_collection_events(
            client, "p1", "ev_1", limit=20, start_key="k2"
        )

    params = route.calls[0].request.url.params
    assert params["limit"] == "20"
    assert params["start_key"] == "k2"


@pytest.mark.asyncio
@respx.mock
async def test_repeated_get_is_idempotent(client):
    route = respx.get(f"{BASE}/v1/projects/p1").mock(
        return_value=Response(200, json={"id": "p1", "slug": "site"})
    )

    async with client:
        first = await api.get_project(client, "p1")
        second = await api.get_project(client, "p1")

    assert first == second == {"id": "p1", "slug": "site"}
    assert route.call_count == 2
    sent_first, sent_second = (call.request for call in route.calls)
    assert sent_first.method == sent_second.method == "GET"
    assert sent_first.url == sent_second.url
    assert sent_first.headers == sent_second.headers
