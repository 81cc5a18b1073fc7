from __future__ import annotations

from typing import Optional

from edgee_mcp.api.endpoints import ENDPOINTS, execute, list_params
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    DeletedResponse,
    OrderDirection,
    Organization,
    OrganizationCreateInput,
    OrganizationList,
    OrganizationRole,
    OrganizationUpdateInput,
    OrganizationUser,
    OrganizationUserList,
    OrganizationUserUpdateInput,
)


async def list_organizations(
    client: EdgeeClient,
    *,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
    name: Optional[str] = None,
) -> OrganizationList:
    params = list_params(limit, start_key, order_direction, name=name)
    return await execute(client, ENDPOINTS["list_organizations"], params=params)


async def get_my_organization(client: EdgeeClient) -> Organization:
    """Personal organization of the authenticated user."""
    return await execute(client, ENDPOINTS["get_my_organization"])


async def get_organization(client: EdgeeClient, id: str) -> Organization:
    return await execute(client, ENDPOINTS["get_organization"], id=id)


async def create_organization(
    client: EdgeeClient, input: OrganizationCreateInput
) -> Organization:
    return await execute(client, ENDPOINTS["create_organization"], body=input)


async def update_organization(
    client: EdgeeClient, id: str, input: OrganizationUpdateInput
) -> Organization:
    return await execute(client, ENDPOINTS["update_organization"], body=input, id=id)


async def delete_organization(client: EdgeeClient, id: str) -> DeletedResponse:
    return await execute(client, ENDPOINTS["delete_organization"], id=id)


async def list_organization_users(
    client: EdgeeClient,
    id: str,
    *,
    role: OrganizationRole,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> OrganizationUserList:
    params = list_params(limit, start_key, order_direction, role=role)
    return await execute(
        client, ENDPOINTS["list_organization_users"], params=params, id=id
    )


async def update_organization_user(
    client: EdgeeClient, id: str, user_id: str, input: OrganizationUserUpdateInput
) -> OrganizationUser:
    return await execute(
        client,
        ENDPOINTS["update_organization_user"],
        body=input,
        id=id,
        user_id=user_id,
    )


async def delete_organization_user(
    client: EdgeeClient, id: str, user_id: str
) -> DeletedResponse:
    return await execute(
        client, ENDPOINTS["delete_organization_user"], id=id, user_id=user_id
    )
