from __future__ import annotations

from typing import Optional

from edgee_mcp import api, formatters
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    ApiTokenCreateInput,
    InvitationCreateInput,
    InvitationRole,
    OrderDirection,
    UserUpdateInput,
)


async def get_me(client: EdgeeClient) -> str:
    """Get the user that owns the API token in use."""
    user = await api.get_me(client)
    if not user:
        return "Failed to retrieve your user information."
    return formatters.format_user(user, title="Your User Information:")


async def get_user(client: EdgeeClient, id: str) -> str:
    """Retrieve a user by ID."""
    user = await api.get_user(client, id)
    if not user:
        return f"Failed to retrieve user with ID: {id}"
    return formatters.format_user(user)


async def update_user(
    client: EdgeeClient,
    id: str,
    avatar_url: Optional[str] = None,
    terms_version: Optional[str] = None,
    privacy_version: Optional[str] = None,
) -> str:
    """Update a user profile."""
    user = await api.update_user(
        client,
        id,
        UserUpdateInput(
            avatar_url=avatar_url,
            terms_version=terms_version,
            privacy_version=privacy_version,
        ),
    )
    if not user:
        return f"Failed to update user with ID: {id}"
    return formatters.format_user(user, title="User updated successfully:")


# --- Invitations ---


async def list_invitations(
    client: EdgeeClient,
    organization_id: Optional[str] = None,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> str:
    """List pending invitations, optionally for a single organization."""
    data = await api.list_invitations(
        client,
        organization_id=organization_id,
        limit=limit,
        start_key=start_key,
        order_direction=order_direction,
    )
    if not data or "data" not in data:
        return "Failed to retrieve invitations."
    return formatters.format_list(
        "Invitations", data, formatters.format_invitation_item
    )


async def get_invitation(client: EdgeeClient, id: str) -> str:
    """Retrieve an invitation by ID."""
    invitation = await api.get_invitation(client, id)
    if not invitation:
        return f"Failed to retrieve invitation with ID: {id}"
    return formatters.format_invitation(invitation)


async def create_invitation(
    client: EdgeeClient, organization_id: str, email: str, role: InvitationRole
) -> str:
    """Invite someone to join an organization."""
    invitation = await api.create_invitation(
        client,
        InvitationCreateInput(organization_id=organization_id, email=email, role=role),
    )
    if not invitation:
        return "Failed to create invitation."
    return formatters.format_invitation(
        invitation, title="Invitation created successfully:"
    )


async def delete_invitation(client: EdgeeClient, id: str) -> str:
    """Delete an invitation."""
    result = await api.delete_invitation(client, id)
    return formatters.format_deleted(
        result,
        f"Invitation with ID {id} was successfully deleted.",
        f"Failed to delete invitation with ID: {id}",
    )


# --- API tokens ---


async def list_api_tokens(
    client: EdgeeClient,
    name: Optional[str] = None,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> str:
    """List your API tokens."""
    data = await api.list_api_tokens(
        client,
        name=name,
        limit=limit,
        start_key=start_key,
        order_direction=order_direction,
    )
    if not data or "data" not in data:
        return "Failed to retrieve API tokens."
    return formatters.format_list("API Tokens", data, formatters.format_api_token_item)


async def get_api_token(client: EdgeeClient, id: str) -> str:
    """Retrieve an API token by ID."""
    token = await api.get_api_token(client, id)
    if not token:
        return f"Failed to retrieve API token with ID: {id}"
    return formatters.format_api_token(token)


async def create_api_token(
    client: EdgeeClient, name: str, expires_at: Optional[str] = None
) -> str:
    """Create a new API token. The token value is only shown once."""
    token = await api.create_api_token(
        client, ApiTokenCreateInput(name=name, expires_at=expires_at)
    )
    if not token:
        return "Failed to create API token."
    return formatters.format_api_token(token, title="API token created successfully:")


async def delete_api_token(client: EdgeeClient, id: str) -> str:
    """Delete an API token."""
    result = await api.delete_api_token(client, id)
    return formatters.format_deleted(
        result,
        f"API token with ID {id} was successfully deleted.",
        f"Failed to delete API token with ID: {id}",
    )


async def get_upload_presigned_url(client: EdgeeClient) -> str:
    """Get a presigned URL to upload a component .wasm file."""
    presign = await api.get_upload_presigned_url(client)
    if not presign or not presign.get("upload_url"):
        return "Failed to get upload presigned URL."
    return f"Upload URL: {presign['upload_url']}"
