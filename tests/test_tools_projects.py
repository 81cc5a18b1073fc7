import json

import pytest
import respx
from httpx import Response

from edgee_mcp.client import EdgeeClient
from edgee_mcp.tools.project_extended import (
    create_project_component,
    create_project_proxy_settings,
    get_incoming_data_collection_events,
    get_project_component_counters,
    update_project_proxy_settings,
)
from edgee_mcp.tools.projects import (
    delete_project_domain,
    get_project,
    get_project_counters,
    list_project_domains,
    list_projects,
    update_project,
)

BASE = "https://api.edgee.app"

PROJECT = {
    "object": "project",
    "id": "p1",
    "organization_id": "org_1",
    "slug": "site",
    "description": "Marketing site",
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-01-01T00:00:00Z",
}


@pytest.fixture
def client():
    return EdgeeClient(token="tok")


@pytest.mark.asyncio
@respx.mock
async def test_list_projects_passes_filters(client):
    route = respx.get(f"{BASE}/v1/projects").mock(
        return_value=Response(200, json={"has_more": False, "data": [PROJECT]})
    )

    async with client:
        text = await list_projects(client, organization_id="org_1", limit=10)

    assert text.startswith("Projects:\n\nsite:\nID: p1")
    assert "More results available" not in text
    params = route.calls[0].request.url.params
    assert params["organization_id"] == "org_1"
    assert params["limit"] == "10"


@pytest.mark.asyncio
@respx.mock
async def test_get_project(client):
    respx.get(f"{BASE}/v1/projects/p1").mock(return_value=Response(200, json=PROJECT))

    async with client:
        text = await get_project(client, "p1")

    assert text.splitlines()[0] == "Project: site"
    assert "Description: Marketing site" in text


@pytest.mark.asyncio
@respx.mock
async def test_update_project_sends_only_given_settings(client):
    route = respx.post(f"{BASE}/v1/projects/p1").mock(
        return_value=Response(200, json={**PROJECT, "cache": True})
    )

    async with client:
        text = await update_project(
            client,
            id="p1",
            cache=True,
            override_cache=[{"path": "/assets", "ttl": 300, "pass": False}],
        )

    assert json.loads(route.calls[0].request.content) == {
        "id": "p1",
        "cache": True,
        "override_cache": [{"path": "/assets", "ttl": 300, "pass": False}],
    }
    assert text.startswith("Project updated successfully:")
    assert "Cache Enabled: true" in text


@pytest.mark.asyncio
@respx.mock
async def test_get_project_counters(client):
    route = respx.get(f"{BASE}/v1/projects/p1/counters").mock(
        return_value=Response(200, json={"request_count": 42, "event_count": 7})
    )

    async with client:
        text = await get_project_counters(client, "p1", day="2024-05-01")

    assert text == (
        "Project Counters for p1:\nRequest Count: 42\nEvent Count: 7\nDay: 2024-05-01"
    )
    assert dict(route.calls[0].request.url.params) == {"day": "2024-05-01"}


@pytest.mark.asyncio
@respx.mock
async def test_domains(client):
    respx.get(f"{BASE}/v1/projects/p1/domains").mock(
        return_value=Response(
            200,
            json={
                "data": [
                    {
                        "name": "www.example.com",
                        "project_id": "p1",
                        "dns_status": True,
                        "ssl_status": False,
                    }
                ]
            },
        )
    )
    respx.delete(f"{BASE}/v1/projects/p1/domains/www.example.com").mock(
        return_value=Response(200, json={"deleted": True})
    )

    async with client:
        listed = await list_project_domains(client, "p1")
        deleted = await delete_project_domain(client, "p1", "www.example.com")

    assert "Domain: www.example.com" in listed
    assert "DNS Status: Valid" in listed
    assert "SSL Status: Invalid" in listed
    assert deleted == "Domain www.example.com was successfully deleted from project p1."


@pytest.mark.asyncio
@respx.mock
async def test_proxy_settings(client):
    create_route = respx.post(f"{BASE}/v1/projects/p1/proxy-settings").mock(
        return_value=Response(
            200,
            json={
                "revision": "r1",
                "description": "origin",
                "is_active": False,
                "backends": [{"name": "main", "address": "1.2.3.4", "default": True}],
                "routes": [],
            },
        )
    )
    update_route = respx.post(f"{BASE}/v1/projects/p1/proxy-settings/r1").mock(
        return_value=Response(200, json={"revision": "r1", "is_active": True})
    )

    async with client:
        created = await create_project_proxy_settings(
            client,
            "p1",
            description="origin",
            backends=[{"name": "main", "address": "1.2.3.4", "default": True}],
        )
        updated = await update_project_proxy_settings(
            client, "p1", "r1", is_active=True
        )

    assert "Revision: r1" in created
    assert "  Backend main: 1.2.3.4 (default)" in created
    assert json.loads(create_route.calls[0].request.content)["backends"] == [
        {"name": "main", "address": "1.2.3.4", "default": True}
    ]
    assert "Active: Yes" in updated
    assert json.loads(update_route.calls[0].request.content) == {"is_active": True}


@pytest.mark.asyncio
@respx.mock
async def test_create_project_component(client):
    route = respx.post(f"{BASE}/v1/projects/p1/components").mock(
        return_value=Response(
            200,
            json={
                "id": "pc1",
                "component_id": "c1",
                "component_slug": "ga",
                "component_version": "1.0.0",
                "category": "data_collection",
                "subcategory": "analytics",
                "active": True,
                "settings": {"measurement_id": "G-1"},
            },
        )
    )

    async with client:
        text = await create_project_component(
            client,
            "p1",
            component_id="c1",
            component_slug="ga",
            component_version="1.0.0",
            category="data_collection",
            subcategory="analytics",
            settings={"measurement_id": "G-1"},
        )

    assert text.startswith("Project component created successfully:\nComponent: ga")
    assert '"measurement_id": "G-1"' in text
    assert "active" not in json.loads(route.calls[0].request.content)


@pytest.mark.asyncio
@respx.mock
async def test_component_counters(client):
    respx.get(f"{BASE}/v1/projects/p1/components/pc1/counters").mock(
        return_value=Response(
            200, json={"user_count": 3, "track_count": 2, "page_count": 1}
        )
    )

    async with client:
        text = await get_project_component_counters(client, "p1", "pc1")

    assert text == (
        "Component Counters for pc1:\nUser Count: 3\nTrack Count: 2\nPage Count: 1"
    )


@pytest.mark.asyncio
@respx.mock
async def test_incoming_events(client):
    respx.get(f"{BASE}/v1/projects/p1/debug/data-collection/incoming").mock(
        return_value=Response(
            200,
            json={
                "has_more": True,
                "last_key": "ev_9",
                "data": [
                    {
                        "uuid": "ev_1",
                        "type": "page",
                        "from": "edge",
                        "timestamp": "2024-05-01T00:00:00Z",
                        "data": {"url": "/"},
                    }
                ],
            },
        )
    )

    async with client:
        text = await get_incoming_data_collection_events(client, "p1", limit=1)

    assert "Event ev_1:\nType: page\nFrom: edge" in text
    assert "Pass start_key=ev_9" in text
