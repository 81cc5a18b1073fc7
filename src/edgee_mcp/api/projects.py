from __future__ import annotations

from typing import Optional

from edgee_mcp.api.endpoints import ENDPOINTS, execute, list_params
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    ComponentCategory,
    ComponentSubcategory,
    DeletedResponse,
    Domain,
    DomainCreateInput,
    DomainList,
    DomainUpdateInput,
    IncomingDataCollectionEventList,
    OrderDirection,
    OutgoingDataCollectionEventList,
    Project,
    ProjectComponent,
    ProjectComponentCounters,
    ProjectComponentCreateInput,
    ProjectComponentList,
    ProjectComponentUpdateInput,
    ProjectCounters,
    ProjectCreateInput,
    ProjectList,
    ProjectUpdateInput,
    ProxySettings,
    ProxySettingsCreateInput,
    ProxySettingsList,
    ProxySettingsUpdateInput,
)


async def list_projects(
    client: EdgeeClient,
    *,
    organization_id: Optional[str] = None,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> ProjectList:
    """Projects sorted by creation date, most recent first."""
    params = list_params(
        limit, start_key, order_direction, organization_id=organization_id
    )
    return await execute(client, ENDPOINTS["list_projects"], params=params)


async def get_project(
    client: EdgeeClient, id: str, organization_id: Optional[str] = None
) -> Project:
    return await execute(
        client,
        ENDPOINTS["get_project"],
        params={"organization_id": organization_id},
        id=id,
    )


async def create_project(client: EdgeeClient, input: ProjectCreateInput) -> Project:
    return await execute(client, ENDPOINTS["create_project"], body=input)


async def update_project(
    client: EdgeeClient, id: str, input: ProjectUpdateInput
) -> Project:
    return await execute(client, ENDPOINTS["update_project"], body=input, id=id)


async def delete_project(client: EdgeeClient, id: str) -> DeletedResponse:
    return await execute(client, ENDPOINTS["delete_project"], id=id)


async def get_project_counters(
    client: EdgeeClient,
    id: str,
    month: Optional[str] = None,
    day: Optional[str] = None,
) -> ProjectCounters:
    return await execute(
        client,
        ENDPOINTS["get_project_counters"],
        params={"month": month, "day": day},
        id=id,
    )


async def get_project_component_counters(
    client: EdgeeClient,
    id: str,
    component_id: str,
    month: Optional[str] = None,
    day: Optional[str] = None,
) -> ProjectComponentCounters:
    return await execute(
        client,
        ENDPOINTS["get_project_component_counters"],
        params={"month": month, "day": day},
        id=id,
        component_id=component_id,
    )


# --- Domains ---


async def list_project_domains(client: EdgeeClient, id: str) -> DomainList:
    return await execute(client, ENDPOINTS["list_project_domains"], id=id)


async def get_project_domain(client: EdgeeClient, id: str, name: str) -> Domain:
    return await execute(client, ENDPOINTS["get_project_domain"], id=id, name=name)


async def create_project_domain(
    client: EdgeeClient, id: str, input: DomainCreateInput
) -> Domain:
    return await execute(
        client, ENDPOINTS["create_project_domain"], body=input, id=id
    )


async def update_project_domain(
    client: EdgeeClient, id: str, name: str, input: DomainUpdateInput
) -> Domain:
    return await execute(
        client, ENDPOINTS["update_project_domain"], body=input, id=id, name=name
    )


async def delete_project_domain(
    client: EdgeeClient, id: str, name: str
) -> DeletedResponse:
    return await execute(
        client, ENDPOINTS["delete_project_domain"], id=id, name=name
    )


# --- Proxy settings ---


async def list_project_proxy_settings(
    client: EdgeeClient, id: str
) -> ProxySettingsList:
    return await execute(client, ENDPOINTS["list_project_proxy_settings"], id=id)


async def create_project_proxy_settings(
    client: EdgeeClient, id: str, input: ProxySettingsCreateInput
) -> ProxySettings:
    return await execute(
        client, ENDPOINTS["create_project_proxy_settings"], body=input, id=id
    )


async def update_project_proxy_settings(
    client: EdgeeClient, id: str, revision: str, input: ProxySettingsUpdateInput
) -> ProxySettings:
    return await execute(
        client,
        ENDPOINTS["update_project_proxy_settings"],
        body=input,
        id=id,
        revision=revision,
    )


# --- Project components ---


async def list_project_components(
    client: EdgeeClient,
    id: str,
    category: Optional[ComponentCategory] = None,
    subcategory: Optional[ComponentSubcategory] = None,
) -> ProjectComponentList:
    return await execute(
        client,
        ENDPOINTS["list_project_components"],
        params={"category": category, "subcategory": subcategory},
        id=id,
    )


async def get_project_component(
    client: EdgeeClient, id: str, component_id: str
) -> ProjectComponent:
    return await execute(
        client,
        ENDPOINTS["get_project_component"],
        id=id,
        component_id=component_id,
    )


async def create_project_component(
    client: EdgeeClient, id: str, input: ProjectComponentCreateInput
) -> ProjectComponent:
    return await execute(
        client, ENDPOINTS["create_project_component"], body=input, id=id
    )


async def update_project_component(
    client: EdgeeClient,
    id: str,
    component_id: str,
    input: ProjectComponentUpdateInput,
) -> ProjectComponent:
    return await execute(
        client,
        ENDPOINTS["update_project_component"],
        body=input,
        id=id,
        component_id=component_id,
    )


async def delete_project_component(
    client: EdgeeClient, id: str, component_id: str
) -> DeletedResponse:
    return await execute(
        client,
        ENDPOINTS["delete_project_component"],
        id=id,
        component_id=component_id,
    )


# --- Debug data collection ---


async def get_incoming_data_collection_events(
    client: EdgeeClient,
    id: str,
    *,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> IncomingDataCollectionEventList:
    return await execute(
        client,
        ENDPOINTS["get_incoming_data_collection_events"],
        params=list_params(limit, start_key, order_direction),
        id=id,
    )


async def get_outgoing_data_collection_events(
    client: EdgeeClient,
    id: str,
    event_id: str,
    *,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> OutgoingDataCollectionEventList:
    return await execute(
        client,
        ENDPOINTS["get_outgoing_data_collection_events"],
        params=list_params(limit, start_key, order_direction),
        id=id,
        event_id=event_id,
    )
