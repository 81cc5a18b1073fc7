"""
Endpoint table for the Edgee API.

Every catalog operation is one row here: a name, an HTTP method and a path
template. ``execute`` renders the path and performs the single request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from edgee_mcp.client import EdgeeClient


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path: str

    def render(self, **ids: Any) -> str:
        """Interpolate path identifiers, each quoted as a single path segment."""
        try:
            return self.path.format(
                **{key: quote(str(value), safe="") for key, value in ids.items()}
            )
        except KeyError as exc:
            raise ValueError(
                f"Missing path parameter {exc.args[0]!r} for endpoint {self.name}"
            ) from exc


async def execute(
    client: EdgeeClient,
    endpoint: Endpoint,
    *,
    params: Optional[Mapping[str, Any]] = None,
    body: Any = None,
    **ids: Any,
) -> Any:
    return await client.request(
        endpoint.render(**ids),
        method=endpoint.method,
        params=params,
        json=body,
        tool=endpoint.name,
    )


def list_params(
    limit: Optional[int] = None,
    start_key: Optional[str] = None,
    order_direction: Optional[str] = None,
    **filters: Any,
) -> Dict[str, Any]:
    """Standard list query: limit, opaque start_key cursor, order, then filters."""
    return {
        "limit": limit,
        "start_key": start_key,
        "order_direction": order_direction,
        **filters,
    }


_ROWS = (
    # Organizations
    Endpoint("list_organizations", "GET", "/v1/organizations"),
    Endpoint("get_my_organization", "GET", "/v1/organizations/me"),
    Endpoint("get_organization", "GET", "/v1/organizations/{id}"),
    Endpoint("create_organization", "POST", "/v1/organizations"),
    Endpoint("update_organization", "POST", "/v1/organizations/{id}"),
    Endpoint("delete_organization", "DELETE", "/v1/organizations/{id}"),
    Endpoint("list_organization_users", "GET", "/v1/organizations/{id}/users"),
    Endpoint(
        "update_organization_user", "POST", "/v1/organizations/{id}/users/{user_id}"
    ),
    Endpoint(
        "delete_organization_user", "DELETE", "/v1/organizations/{id}/users/{user_id}"
    ),
    Endpoint(
        "list_organization_components", "GET", "/v1/organizations/{id}/components"
    ),
    # Projects
    Endpoint("list_projects", "GET", "/v1/projects"),
    Endpoint("get_project", "GET", "/v1/projects/{id}"),
    Endpoint("create_project", "POST", "/v1/projects"),
    Endpoint("update_project", "POST", "/v1/projects/{id}"),
    Endpoint("delete_project", "DELETE", "/v1/projects/{id}"),
    Endpoint("get_project_counters", "GET", "/v1/projects/{id}/counters"),
    Endpoint(
        "get_project_component_counters",
        "GET",
        "/v1/projects/{id}/components/{component_id}/counters",
    ),
    Endpoint("list_project_domains", "GET", "/v1/projects/{id}/domains"),
    Endpoint("get_project_domain", "GET", "/v1/projects/{id}/domains/{name}"),
    Endpoint("create_project_domain", "POST", "/v1/projects/{id}/domains"),
    Endpoint("update_project_domain", "POST", "/v1/projects/{id}/domains/{name}"),
    Endpoint("delete_project_domain", "DELETE", "/v1/projects/{id}/domains/{name}"),
    Endpoint("list_project_proxy_settings", "GET", "/v1/projects/{id}/proxy-settings"),
    Endpoint(
        "create_project_proxy_settings", "POST", "/v1/projects/{id}/proxy-settings"
    ),
    Endpoint(
        "update_project_proxy_settings",
        "POST",
        "/v1/projects/{id}/proxy-settings/{revision}",
    ),
    Endpoint("list_project_components", "GET", "/v1/projects/{id}/components"),
    Endpoint(
        "get_project_component", "GET", "/v1/projects/{id}/components/{component_id}"
    ),
    Endpoint("create_project_component", "POST", "/v1/projects/{id}/components"),
    Endpoint(
        "update_project_component",
        "POST",
        "/v1/projects/{id}/components/{component_id}",
    ),
    Endpoint(
        "delete_project_component",
        "DELETE",
        "/v1/projects/{id}/components/{component_id}",
    ),
    Endpoint(
        "get_incoming_data_collection_events",
        "GET",
        "/v1/projects/{id}/debug/data-collection/incoming",
    ),
    Endpoint(
        "get_outgoing_data_collection_events",
        "GET",
        "/v1/projects/{id}/debug/data-collection/outgoing/{event_id}",
    ),
    # Components (UUID and org-slug/component-slug addressing)
    Endpoint("list_public_components", "GET", "/v1/components"),
    Endpoint("create_component", "POST", "/v1/components"),
    Endpoint("get_component_by_uuid", "GET", "/v1/components/{id}"),
    Endpoint(
        "get_component_by_slug", "GET", "/v1/components/{org_slug}/{component_slug}"
    ),
    Endpoint("update_component_by_uuid", "PUT", "/v1/components/{id}"),
    Endpoint(
        "update_component_by_slug",
        "PUT",
        "/v1/components/{org_slug}/{component_slug}",
    ),
    Endpoint("delete_component_by_uuid", "DELETE", "/v1/components/{id}"),
    Endpoint(
        "delete_component_by_slug",
        "DELETE",
        "/v1/components/{org_slug}/{component_slug}",
    ),
    Endpoint(
        "create_component_version_by_uuid", "POST", "/v1/components/{id}/versions"
    ),
    Endpoint(
        "create_component_version_by_slug",
        "POST",
        "/v1/components/{org_slug}/{component_slug}/versions",
    ),
    Endpoint(
        "update_component_version_by_slug",
        "PUT",
        "/v1/components/{org_slug}/{component_slug}/versions/{version_id}",
    ),
    # Users
    Endpoint("get_me", "GET", "/v1/users/me"),
    Endpoint("get_user", "GET", "/v1/users/{id}"),
    Endpoint("update_user", "POST", "/v1/users/{id}"),
    Endpoint("list_invitations", "GET", "/v1/invitations"),
    Endpoint("get_invitation", "GET", "/v1/invitations/{id}"),
    Endpoint("create_invitation", "POST", "/v1/invitations"),
    Endpoint("delete_invitation", "DELETE", "/v1/invitations/{id}"),
    Endpoint("list_api_tokens", "GET", "/v1/api_tokens"),
    Endpoint("get_api_token", "GET", "/v1/api_tokens/{id}"),
    Endpoint("create_api_token", "POST", "/v1/api_tokens"),
    Endpoint("delete_api_token", "DELETE", "/v1/api_tokens/{id}"),
    Endpoint("get_upload_presigned_url", "GET", "/v1/upload/presign"),
)

ENDPOINTS: Dict[str, Endpoint] = {row.name: row for row in _ROWS}

__all__ = ["Endpoint", "ENDPOINTS", "execute", "list_params"]
