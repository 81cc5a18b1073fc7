"""
Component catalog.

Components can be addressed either by UUID or by ``org_slug/component_slug``.
Both forms reach the same resource and return the same payload shape; the
``*_by_uuid`` and ``*_by_slug`` pairs below differ only in the path.
"""

from __future__ import annotations

from typing import Optional

from edgee_mcp.api.endpoints import ENDPOINTS, execute
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    Component,
    ComponentCreateInput,
    ComponentList,
    ComponentUpdateInput,
    ComponentVersion,
    ComponentVersionCreateInput,
    ComponentVersionUpdateInput,
    DeletedResponse,
    PublicComponentCategory,
    PublicComponentSubcategory,
)


async def list_public_components(
    client: EdgeeClient,
    category: Optional[PublicComponentCategory] = None,
    subcategory: Optional[PublicComponentSubcategory] = None,
) -> ComponentList:
    return await execute(
        client,
        ENDPOINTS["list_public_components"],
        params={"category": category, "subcategory": subcategory},
    )


async def list_organization_components(
    client: EdgeeClient,
    id: str,
    category: Optional[PublicComponentCategory] = None,
    subcategory: Optional[PublicComponentSubcategory] = None,
) -> ComponentList:
    return await execute(
        client,
        ENDPOINTS["list_organization_components"],
        params={"category": category, "subcategory": subcategory},
        id=id,
    )


async def get_component_by_uuid(client: EdgeeClient, id: str) -> Component:
    return await execute(client, ENDPOINTS["get_component_by_uuid"], id=id)


async def get_component_by_slug(
    client: EdgeeClient, org_slug: str, component_slug: str
) -> Component:
    return await execute(
        client,
        ENDPOINTS["get_component_by_slug"],
        org_slug=org_slug,
        component_slug=component_slug,
    )


async def create_component(
    client: EdgeeClient, input: ComponentCreateInput
) -> Component:
    return await execute(client, ENDPOINTS["create_component"], body=input)


async def update_component_by_uuid(
    client: EdgeeClient, id: str, input: ComponentUpdateInput
) -> Component:
    return await execute(
        client, ENDPOINTS["update_component_by_uuid"], body=input, id=id
    )


async def update_component_by_slug(
    client: EdgeeClient,
    org_slug: str,
    component_slug: str,
    input: ComponentUpdateInput,
) -> Component:
    return await execute(
        client,
        ENDPOINTS["update_component_by_slug"],
        body=input,
        org_slug=org_slug,
        component_slug=component_slug,
    )


async def delete_component_by_uuid(client: EdgeeClient, id: str) -> DeletedResponse:
    return await execute(client, ENDPOINTS["delete_component_by_uuid"], id=id)


async def delete_component_by_slug(
    client: EdgeeClient, org_slug: str, component_slug: str
) -> DeletedResponse:
    return await execute(
        client,
        ENDPOINTS["delete_component_by_slug"],
        org_slug=org_slug,
        component_slug=component_slug,
    )


async def create_component_version_by_uuid(
    client: EdgeeClient, id: str, input: ComponentVersionCreateInput
) -> ComponentVersion:
    return await execute(
        client, ENDPOINTS["create_component_version_by_uuid"], body=input, id=id
    )


async def create_component_version_by_slug(
    client: EdgeeClient,
    org_slug: str,
    component_slug: str,
    input: ComponentVersionCreateInput,
) -> ComponentVersion:
    return await execute(
        client,
        ENDPOINTS["create_component_version_by_slug"],
        body=input,
        org_slug=org_slug,
        component_slug=component_slug,
    )


async def update_component_version_by_slug(
    client: EdgeeClient,
    org_slug: str,
    component_slug: str,
    version_id: str,
    input: ComponentVersionUpdateInput,
) -> ComponentVersion:
    return await execute(
        client,
        ENDPOINTS["update_component_version_by_slug"],
        body=input,
        org_slug=org_slug,
        component_slug=component_slug,
        version_id=version_id,
    )
