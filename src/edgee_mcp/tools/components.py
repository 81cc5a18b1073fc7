from __future__ import annotations

from typing import List, Optional

from edgee_mcp import api, formatters
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    ComponentCategory,
    ComponentCreateInput,
    ComponentSubcategory,
    ComponentUpdateInput,
    ComponentVersionCreateInput,
    ComponentVersionUpdateInput,
    ConfigurationField,
    PublicComponentCategory,
    PublicComponentSubcategory,
)


async def list_public_components(
    client: EdgeeClient,
    category: Optional[PublicComponentCategory] = None,
    subcategory: Optional[PublicComponentSubcategory] = None,
) -> str:
    """List all public components available in the Edgee registry."""
    data = await api.list_public_components(client, category, subcategory)
    if not data or "data" not in data:
        return "Failed to retrieve public components."
    return formatters.format_list(
        "Public Components", data, formatters.format_component_item
    )


async def list_organization_components(
    client: EdgeeClient,
    id: str,
    category: Optional[PublicComponentCategory] = None,
    subcategory: Optional[PublicComponentSubcategory] = None,
) -> str:
    """List all components owned by an organization."""
    data = await api.list_organization_components(client, id, category, subcategory)
    if not data or "data" not in data:
        return f"Failed to retrieve components for organization with ID: {id}"
    return formatters.format_list(
        f"Components for organization {id}", data, formatters.format_component_item
    )


async def get_component_by_uuid(client: EdgeeClient, id: str) -> str:
    """Retrieve a component by its UUID."""
    component = await api.get_component_by_uuid(client, id)
    if not component:
        return f"Failed to retrieve component with ID: {id}"
    return formatters.format_component(component)


async def get_component_by_slug(
    client: EdgeeClient, org_slug: str, component_slug: str
) -> str:
    """Retrieve a component by organization slug and component slug."""
    component = await api.get_component_by_slug(client, org_slug, component_slug)
    if not component:
        return f"Failed to retrieve component {org_slug}/{component_slug}"
    return formatters.format_component(component)


async def create_component(
    client: EdgeeClient,
    organization_id: str,
    name: str,
    slug: str,
    category: ComponentCategory,
    subcategory: ComponentSubcategory,
    documentation_link: Optional[str] = None,
    repo_link: Optional[str] = None,
    description: Optional[str] = None,
    avatar_url: Optional[str] = None,
    public: Optional[bool] = None,
) -> str:
    """Create a new component in an organization."""
    component = await api.create_component(
        client,
        ComponentCreateInput(
            organization_id=organization_id,
            name=name,
            slug=slug,
            category=category,
            subcategory=subcategory,
            documentation_link=documentation_link,
            repo_link=repo_link,
            description=description,
            avatar_url=avatar_url,
            public=public,
        ),
    )
    if not component:
        return "Failed to create component."
    return formatters.format_component(
        component, title="Component created successfully:"
    )


def _component_update(
    documentation_link: Optional[str],
    repo_link: Optional[str],
    name: Optional[str],
    description: Optional[str],
    is_archived: Optional[bool],
    public: Optional[bool],
    avatar_url: Optional[str],
) -> ComponentUpdateInput:
    return ComponentUpdateInput(
        documentation_link=documentation_link,
        repo_link=repo_link,
        name=name,
        description=description,
        is_archived=is_archived,
        public=public,
        avatar_url=avatar_url,
    )


async def update_component_by_uuid(
    client: EdgeeClient,
    id: str,
    documentation_link: Optional[str] = None,
    repo_link: Optional[str] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
    is_archived: Optional[bool] = None,
    public: Optional[bool] = None,
    avatar_url: Optional[str] = None,
) -> str:
    """Update a component by its UUID."""
    update = _component_update(
        documentation_link, repo_link, name, description, is_archived, public, avatar_url
    )
    component = await api.update_component_by_uuid(client, id, update)
    if not component:
        return f"Failed to update component with ID: {id}"
    return formatters.format_component(
        component, title="Component updated successfully:"
    )


async def update_component_by_slug(
    client: EdgeeClient,
    org_slug: str,
    component_slug: str,
    documentation_link: Optional[str] = None,
    repo_link: Optional[str] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
    is_archived: Optional[bool] = None,
    public: Optional[bool] = None,
    avatar_url: Optional[str] = None,
) -> str:
    """Update a component by organization slug and component slug."""
    update = _component_update(
        documentation_link, repo_link, name, description, is_archived, public, avatar_url
    )
    component = await api.update_component_by_slug(
        client, org_slug, component_slug, update
    )
    if not component:
        return f"Failed to update component {org_slug}/{component_slug}"
    return formatters.format_component(
        component, title="Component updated successfully:"
    )


async def delete_component_by_uuid(client: EdgeeClient, id: str) -> str:
    """Delete a component by its UUID."""
    result = await api.delete_component_by_uuid(client, id)
    return formatters.format_deleted(
        result,
        f"Component with ID {id} was successfully deleted.",
        f"Failed to delete component with ID: {id}",
    )


async def delete_component_by_slug(
    client: EdgeeClient, org_slug: str, component_slug: str
) -> str:
    """Delete a component by organization slug and component slug."""
    result = await api.delete_component_by_slug(client, org_slug, component_slug)
    return formatters.format_deleted(
        result,
        f"Component {org_slug}/{component_slug} was successfully deleted.",
        f"Failed to delete component {org_slug}/{component_slug}",
    )


async def create_component_version(
    client: EdgeeClient,
    id: str,
    version: str,
    wit_version: str,
    wasm_url: str,
    dynamic_fields: Optional[List[ConfigurationField]] = None,
    changelog: Optional[str] = None,
) -> str:
    """Publish a new version of a component, addressed by UUID.

    wasm_url is usually the URL returned by getUploadPresignedUrl once the
    .wasm file has been uploaded.
    """
    created = await api.create_component_version_by_uuid(
        client,
        id,
        ComponentVersionCreateInput(
            version=version,
            wit_version=wit_version,
            wasm_url=wasm_url,
            dynamic_fields=dynamic_fields,
            changelog=changelog,
        ),
    )
    if not created:
        return f"Failed to create version {version} for component with ID: {id}"
    return formatters.format_component_version(
        created, title="Component version created successfully:"
    )


async def create_component_version_by_slug(
    client: EdgeeClient,
    org_slug: str,
    component_slug: str,
    version: str,
    wit_version: str,
    wasm_url: str,
    dynamic_fields: Optional[List[ConfigurationField]] = None,
    changelog: Optional[str] = None,
) -> str:
    """Publish a new version of a component, addressed by organization and component slug."""
    created = await api.create_component_version_by_slug(
        client,
        org_slug,
        component_slug,
        ComponentVersionCreateInput(
            version=version,
            wit_version=wit_version,
            wasm_url=wasm_url,
            dynamic_fields=dynamic_fields,
            changelog=changelog,
        ),
    )
    if not created:
        return f"Failed to create version {version} for component {org_slug}/{component_slug}"
    return formatters.format_component_version(
        created, title="Component version created successfully:"
    )


async def update_component_version_by_slug(
    client: EdgeeClient,
    org_slug: str,
    component_slug: str,
    version_id: str,
    changelog: Optional[str] = None,
) -> str:
    """Update the changelog of a component version."""
    updated = await api.update_component_version_by_slug(
        client,
        org_slug,
        component_slug,
        version_id,
        ComponentVersionUpdateInput(changelog=changelog),
    )
    if not updated:
        return f"Failed to update version {version_id} of component {org_slug}/{component_slug}"
    return formatters.format_component_version(
        updated, title="Component version updated successfully:"
    )
