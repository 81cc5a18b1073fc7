from __future__ import annotations

from typing import Optional

from edgee_mcp import api, formatters
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    OrderDirection,
    OrganizationCreateInput,
    OrganizationRole,
    OrganizationUpdateInput,
    OrganizationUserUpdateInput,
)


async def list_organizations(
    client: EdgeeClient,
    limit: Optional[int] = None,
    name: Optional[str] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> str:
    """Returns a list of your Organizations. Pass the returned start_key to fetch the next page."""
    data = await api.list_organizations(
        client,
        limit=limit,
        start_key=start_key,
        order_direction=order_direction,
        name=name,
    )
    if not data or "data" not in data:
        return "Failed to retrieve organizations."
    return formatters.format_list(
        "Organizations", data, formatters.format_organization_item
    )


async def get_my_organization(client: EdgeeClient) -> str:
    """Retrieve your personal organization."""
    organization = await api.get_my_organization(client)
    if not organization:
        return "Failed to retrieve your personal organization."
    return formatters.format_organization(organization)


async def get_organization(client: EdgeeClient, id: str) -> str:
    """Retrieve an organization by ID."""
    organization = await api.get_organization(client, id)
    if not organization:
        return f"Failed to retrieve organization with ID: {id}"
    return formatters.format_organization(organization)


async def create_organization(client: EdgeeClient, name: str, slug: str) -> str:
    """Create a new Organization."""
    organization = await api.create_organization(
        client, OrganizationCreateInput(name=name, slug=slug)
    )
    if not organization:
        return "Failed to create organization."
    return formatters.format_organization(
        organization, title="Organization created successfully:"
    )


async def update_organization(
    client: EdgeeClient,
    id: str,
    name: Optional[str] = None,
    slug: Optional[str] = None,
) -> str:
    """Update an existing Organization."""
    organization = await api.update_organization(
        client, id, OrganizationUpdateInput(id=id, name=name, slug=slug)
    )
    if not organization:
        return f"Failed to update organization with ID: {id}"
    return formatters.format_organization(
        organization, title="Organization updated successfully:"
    )


async def delete_organization(client: EdgeeClient, id: str) -> str:
    """Delete an Organization."""
    result = await api.delete_organization(client, id)
    return formatters.format_deleted(
        result,
        f"Organization with ID {id} was successfully deleted.",
        f"Failed to delete organization with ID: {id}",
    )


async def list_organization_users(
    client: EdgeeClient,
    id: str,
    role: OrganizationRole,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> str:
    """List all users of an organization."""
    data = await api.list_organization_users(
        client,
        id,
        role=role,
        limit=limit,
        start_key=start_key,
        order_direction=order_direction,
    )
    if not data or "data" not in data:
        return f"Failed to retrieve users for organization with ID: {id}"
    return formatters.format_list(
        f"Users for organization {id}", data, formatters.format_organization_user
    )


async def update_organization_user(
    client: EdgeeClient, id: str, user_id: str, role: OrganizationRole
) -> str:
    """Change the role of a user in an organization."""
    user = await api.update_organization_user(
        client, id, user_id, OrganizationUserUpdateInput(role=role)
    )
    if not user:
        return f"Failed to update user {user_id} in organization {id}"
    return formatters.format_organization_user(
        user, title="Organization user updated successfully:"
    )


async def delete_organization_user(client: EdgeeClient, id: str, user_id: str) -> str:
    """Remove a user from an organization."""
    result = await api.delete_organization_user(client, id, user_id)
    return formatters.format_deleted(
        result,
        f"User {user_id} was successfully removed from organization {id}.",
        f"Failed to remove user {user_id} from organization {id}",
    )
