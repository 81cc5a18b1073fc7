"""Project sub-resources: proxy settings, project components and debug events."""

from __future__ import annotations

from typing import Dict, List, Optional

from edgee_mcp import api, formatters
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    OrderDirection,
    ProjectComponentCreateInput,
    ProjectComponentUpdateInput,
    ProxySettingsBackend,
    ProxySettingsCreateInput,
    ProxySettingsRoute,
    ProxySettingsUpdateInput,
    SettingValue,
)


async def list_project_proxy_settings(client: EdgeeClient, id: str) -> str:
    """List all proxy settings revisions for a project."""
    data = await api.list_project_proxy_settings(client, id)
    if not data or "data" not in data:
        return f"Failed to retrieve proxy settings for project with ID: {id}"
    return formatters.format_list(
        f"Proxy settings for project {id}", data, formatters.format_proxy_settings_item
    )


async def create_project_proxy_settings(
    client: EdgeeClient,
    id: str,
    description: str,
    backends: List[ProxySettingsBackend],
    routes: Optional[List[ProxySettingsRoute]] = None,
) -> str:
    """Create a new proxy settings revision for a project."""
    settings = await api.create_project_proxy_settings(
        client,
        id,
        ProxySettingsCreateInput(
            description=description, backends=backends, routes=routes
        ),
    )
    if not settings:
        return f"Failed to create proxy settings for project {id}"
    return formatters.format_proxy_settings(
        settings, title="Proxy settings created successfully:"
    )


async def update_project_proxy_settings(
    client: EdgeeClient,
    id: str,
    revision: str,
    description: Optional[str] = None,
    is_active: Optional[bool] = None,
) -> str:
    """Update a proxy settings revision for a project."""
    settings = await api.update_project_proxy_settings(
        client,
        id,
        revision,
        ProxySettingsUpdateInput(description=description, is_active=is_active),
    )
    if not settings:
        return f"Failed to update proxy settings revision {revision} for project {id}"
    return formatters.format_proxy_settings(
        settings, title="Proxy settings updated successfully:"
    )


async def get_project_component(
    client: EdgeeClient, id: str, component_id: str
) -> str:
    """Get a component installed on a project."""
    component = await api.get_project_component(client, id, component_id)
    if not component:
        return f"Failed to retrieve component {component_id} for project {id}"
    return formatters.format_project_component(component)


async def create_project_component(
    client: EdgeeClient,
    id: str,
    component_id: str,
    component_slug: str,
    component_version: str,
    category: str,
    subcategory: str,
    active: Optional[bool] = None,
    settings: Optional[Dict[str, SettingValue]] = None,
) -> str:
    """Add a component to a project."""
    component = await api.create_project_component(
        client,
        id,
        ProjectComponentCreateInput(
            component_id=component_id,
            component_slug=component_slug,
            component_version=component_version,
            category=category,
            subcategory=subcategory,
            active=active,
            settings=settings,
        ),
    )
    if not component:
        return f"Failed to create component for project {id}"
    return formatters.format_project_component(
        component, title="Project component created successfully:"
    )


async def update_project_component(
    client: EdgeeClient,
    id: str,
    component_id: str,
    component_version: Optional[str] = None,
    active: Optional[bool] = None,
    settings: Optional[Dict[str, SettingValue]] = None,
) -> str:
    """Update a component installed on a project."""
    component = await api.update_project_component(
        client,
        id,
        component_id,
        ProjectComponentUpdateInput(
            component_version=component_version, active=active, settings=settings
        ),
    )
    if not component:
        return f"Failed to update component {component_id} for project {id}"
    return formatters.format_project_component(
        component, title="Project component updated successfully:"
    )


async def delete_project_component(
    client: EdgeeClient, id: str, component_id: str
) -> str:
    """Remove a component from a project."""
    result = await api.delete_project_component(client, id, component_id)
    return formatters.format_deleted(
        result,
        f"Component {component_id} was successfully deleted from project {id}.",
        f"Failed to delete component {component_id} from project {id}",
    )


async def get_project_component_counters(
    client: EdgeeClient,
    id: str,
    component_id: str,
    month: Optional[str] = None,
    day: Optional[str] = None,
) -> str:
    """Get statistics for a component of a project."""
    counters = await api.get_project_component_counters(
        client, id, component_id, month, day
    )
    if not counters:
        return f"Failed to retrieve counters for component {component_id} in project {id}"
    return formatters.format_project_component_counters(
        counters, component_id, month, day
    )


async def get_incoming_data_collection_events(
    client: EdgeeClient,
    id: str,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> str:
    """Get incoming data collection events for a project."""
    data = await api.get_incoming_data_collection_events(
        client, id, limit=limit, start_key=start_key, order_direction=order_direction
    )
    if not data or "data" not in data:
        return f"Failed to retrieve incoming events for project {id}"
    return formatters.format_list(
        "Incoming Data Collection Events", data, formatters.format_incoming_event
    )


async def get_outgoing_data_collection_events(
    client: EdgeeClient,
    id: str,
    event_id: str,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> str:
    """Get the outgoing component calls produced by one incoming event of a project."""
    data = await api.get_outgoing_data_collection_events(
        client,
        id,
        event_id,
        limit=limit,
        start_key=start_key,
        order_direction=order_direction,
    )
    if not data or "data" not in data:
        return f"Failed to retrieve outgoing events for event {event_id} in project {id}"
    return formatters.format_list(
        f"Outgoing Data Collection Events for {event_id}",
        data,
        formatters.format_outgoing_event,
    )
