from __future__ import annotations

from typing import Optional

from edgee_mcp.api.endpoints import ENDPOINTS, execute, list_params
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    ApiToken,
    ApiTokenCreateInput,
    ApiTokenList,
    DeletedResponse,
    Invitation,
    InvitationCreateInput,
    InvitationList,
    OrderDirection,
    UploadPresign,
    UserUpdateInput,
    UserWithRoles,
)


async def get_me(client: EdgeeClient) -> UserWithRoles:
    return await execute(client, ENDPOINTS["get_me"])


async def get_user(client: EdgeeClient, id: str) -> UserWithRoles:
    return await execute(client, ENDPOINTS["get_user"], id=id)


async def update_user(
    client: EdgeeClient, id: str, input: UserUpdateInput
) -> UserWithRoles:
    # Same POST-to-resource convention as organizations and projects.
    return await execute(client, ENDPOINTS["update_user"], body=input, id=id)


# --- Invitations ---


async def list_invitations(
    client: EdgeeClient,
    *,
    organization_id: Optional[str] = None,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> InvitationList:
    params = list_params(
        limit, start_key, order_direction, organization_id=organization_id
    )
    return await execute(client, ENDPOINTS["list_invitations"], params=params)


async def get_invitation(client: EdgeeClient, id: str) -> Invitation:
    return await execute(client, ENDPOINTS["get_invitation"], id=id)


async def create_invitation(
    client: EdgeeClient, input: InvitationCreateInput
) -> Invitation:
    return await execute(client, ENDPOINTS["create_invitation"], body=input)


async def delete_invitation(client: EdgeeClient, id: str) -> DeletedResponse:
    return await execute(client, ENDPOINTS["delete_invitation"], id=id)


# --- API tokens ---


async def list_api_tokens(
    client: EdgeeClient,
    *,
    name: Optional[str] = None,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> ApiTokenList:
    params = list_params(limit, start_key, order_direction, name=name)
    return await execute(client, ENDPOINTS["list_api_tokens"], params=params)


async def get_api_token(client: EdgeeClient, id: str) -> ApiToken:
    return await execute(client, ENDPOINTS["get_api_token"], id=id)


async def create_api_token(
    client: EdgeeClient, input: ApiTokenCreateInput
) -> ApiToken:
    return await execute(client, ENDPOINTS["create_api_token"], body=input)


async def delete_api_token(client: EdgeeClient, id: str) -> DeletedResponse:
    return await execute(client, ENDPOINTS["delete_api_token"], id=id)


async def get_upload_presigned_url(client: EdgeeClient) -> UploadPresign:
    return await execute(client, ENDPOINTS["get_upload_presigned_url"])
