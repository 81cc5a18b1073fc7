from __future__ import annotations

from typing import List, Optional

from edgee_mcp import api, formatters
from edgee_mcp.client import EdgeeClient
from edgee_mcp.models import (
    CacheRule,
    ComponentCategory,
    ComponentSubcategory,
    DomainCreateInput,
    DomainUpdateInput,
    ForwardedHeader,
    LogSeverity,
    OrderDirection,
    ProjectCreateInput,
    ProjectUpdateInput,
)


async def list_projects(
    client: EdgeeClient,
    organization_id: Optional[str] = None,
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[OrderDirection] = None,
) -> str:
    """Returns a list of your Projects. The Projects are returned sorted by creation date, with the most recent Projects appearing first."""
    data = await api.list_projects(
        client,
        organization_id=organization_id,
        limit=limit,
        start_key=start_key,
        order_direction=order_direction,
    )
    if not data or "data" not in data:
        return "Failed to retrieve projects."
    return formatters.format_list("Projects", data, formatters.format_project_item)


async def get_project(
    client: EdgeeClient, id: str, organization_id: Optional[str] = None
) -> str:
    """Retrieve a Project by ID."""
    project = await api.get_project(client, id, organization_id)
    if not project:
        return f"Failed to retrieve project with ID: {id}"
    return formatters.format_project(project)


async def create_project(
    client: EdgeeClient,
    organization_id: str,
    slug: str,
    description: Optional[str] = None,
    external_project_url: Optional[str] = None,
) -> str:
    """Create a new Project."""
    project = await api.create_project(
        client,
        ProjectCreateInput(
            organization_id=organization_id,
            slug=slug,
            description=description,
            external_project_url=external_project_url,
        ),
    )
    if not project:
        return "Failed to create project."
    return formatters.format_project(project, title="Project created successfully:")


async def update_project(
    client: EdgeeClient,
    id: str,
    slug: Optional[str] = None,
    description: Optional[str] = None,
    external_project_url: Optional[str] = None,
    log_severity: Optional[LogSeverity] = None,
    edgee_behind_proxy_cache: Optional[bool] = None,
    force_https: Optional[bool] = None,
    cache: Optional[bool] = None,
    override_cache: Optional[List[CacheRule]] = None,
    cookie_name: Optional[str] = None,
    cookie_domain: Optional[str] = None,
    proxy_only: Optional[bool] = None,
    inject_sdk: Optional[bool] = None,
    enforce_no_store_policy: Optional[bool] = None,
    trusted_ips: Optional[List[str]] = None,
    password_protection: Optional[bool] = None,
    blocked_ips: Optional[List[str]] = None,
    cookie_whitelist: Optional[List[str]] = None,
    forwarded_headers: Optional[List[ForwardedHeader]] = None,
) -> str:
    """Update an existing Project. Only the fields you pass are changed."""
    update = ProjectUpdateInput(
        id=id,
        slug=slug,
        description=description,
        external_project_url=external_project_url,
        log_severity=log_severity,
        edgee_behind_proxy_cache=edgee_behind_proxy_cache,
        force_https=force_https,
        cache=cache,
        override_cache=override_cache,
        cookie_name=cookie_name,
        cookie_domain=cookie_domain,
        proxy_only=proxy_only,
        inject_sdk=inject_sdk,
        enforce_no_store_policy=enforce_no_store_policy,
        trusted_ips=trusted_ips,
        password_protection=password_protection,
        blocked_ips=blocked_ips,
        cookie_whitelist=cookie_whitelist,
        forwarded_headers=forwarded_headers,
    )
    project = await api.update_project(client, id, update)
    if not project:
        return f"Failed to update project with ID: {id}"
    return formatters.format_project(project, title="Project updated successfully:")


async def delete_project(client: EdgeeClient, id: str) -> str:
    """Delete a Project."""
    result = await api.delete_project(client, id)
    return formatters.format_deleted(
        result,
        f"Project with ID {id} was successfully deleted.",
        f"Failed to delete project with ID: {id}",
    )


async def get_project_counters(
    client: EdgeeClient,
    id: str,
    month: Optional[str] = None,
    day: Optional[str] = None,
) -> str:
    """Get statistics for a project. month is YYYY-MM, day is YYYY-MM-DD."""
    counters = await api.get_project_counters(client, id, month, day)
    if not counters:
        return f"Failed to retrieve counters for project with ID: {id}"
    return formatters.format_project_counters(counters, id, month, day)


# --- Domains ---


async def list_project_domains(client: EdgeeClient, id: str) -> str:
    """List all domains for a project."""
    data = await api.list_project_domains(client, id)
    if not data or "data" not in data:
        return f"Failed to retrieve domains for project with ID: {id}"
    return formatters.format_list(
        f"Domains for project {id}", data, formatters.format_domain_item
    )


async def get_project_domain(client: EdgeeClient, id: str, name: str) -> str:
    """Get a domain for a project."""
    domain = await api.get_project_domain(client, id, name)
    if not domain:
        return f"Failed to retrieve domain {name} for project {id}"
    return formatters.format_domain(domain)


async def create_project_domain(client: EdgeeClient, id: str, name: str) -> str:
    """Create a new domain for a project."""
    domain = await api.create_project_domain(client, id, DomainCreateInput(name=name))
    if not domain:
        return f"Failed to create domain {name} for project {id}"
    return formatters.format_domain(domain, title="Domain created successfully:")


async def update_project_domain(
    client: EdgeeClient,
    id: str,
    name: str,
    dns_status: Optional[bool] = None,
    ssl_status: Optional[bool] = None,
) -> str:
    """Update a domain for a project."""
    domain = await api.update_project_domain(
        client,
        id,
        name,
        DomainUpdateInput(dns_status=dns_status, ssl_status=ssl_status),
    )
    if not domain:
        return f"Failed to update domain {name} for project {id}"
    return formatters.format_domain(domain, title="Domain updated successfully:")


async def delete_project_domain(client: EdgeeClient, id: str, name: str) -> str:
    """Delete a domain from a project."""
    result = await api.delete_project_domain(client, id, name)
    return formatters.format_deleted(
        result,
        f"Domain {name} was successfully deleted from project {id}.",
        f"Failed to delete domain {name} from project {id}",
    )


async def list_project_components(
    client: EdgeeClient,
    id: str,
    category: Optional[ComponentCategory] = None,
    subcategory: Optional[ComponentSubcategory] = None,
) -> str:
    """List all components for a project."""
    data = await api.list_project_components(client, id, category, subcategory)
    if not data or "data" not in data:
        return f"Failed to retrieve components for project with ID: {id}"
    return formatters.format_list(
        f"Components for project {id}", data, formatters.format_project_component_item
    )
