"""Endpoint catalog: one typed callable per Edgee API operation."""

from .organizations import (
    create_organization,
    delete_organization,
    delete_organization_user,
    get_my_organization,
    get_organization,
    list_organization_users,
    list_organizations,
    update_organization,
    update_organization_user,
)
from .projects import (
    create_project,
    create_project_component,
    create_project_domain,
    create_project_proxy_settings,
    delete_project,
    delete_project_component,
    delete_project_domain,
    get_incoming_data_collection_events,
    get_outgoing_data_collection_events,
    get_project,
    get_project_component,
    get_project_component_counters,
    get_project_counters,
    get_project_domain,
    list_project_components,
    list_project_domains,
    list_project_proxy_settings,
    list_projects,
    update_project,
    update_project_component,
    update_project_domain,
    update_project_proxy_settings,
)
from .components import (
    create_component,
    create_component_version_by_slug,
    create_component_version_by_uuid,
    delete_component_by_slug,
    delete_component_by_uuid,
    get_component_by_slug,
    get_component_by_uuid,
    list_organization_components,
    list_public_components,
    update_component_by_slug,
    update_component_by_uuid,
    update_component_version_by_slug,
)
from .users import (
    create_api_token,
    create_invitation,
    delete_api_token,
    delete_invitation,
    get_api_token,
    get_invitation,
    get_me,
    get_upload_presigned_url,
    get_user,
    list_api_tokens,
    list_invitations,
    update_user,
)

__all__ = [
    "list_organizations",
    "get_my_organization",
    "get_organization",
    "create_organization",
    "update_organization",
    "delete_organization",
    "list_organization_users",
    "update_organization_user",
    "delete_organization_user",
    "list_projects",
    "get_project",
    "create_project",
    "update_project",
    "delete_project",
    "get_project_counters",
    "get_project_component_counters",
    "list_project_domains",
    "get_project_domain",
    "create_project_domain",
    "update_project_domain",
    "delete_project_domain",
    "list_project_proxy_settings",
    "create_project_proxy_settings",
    "update_project_proxy_settings",
    "list_project_components",
    "get_project_component",
    "create_project_component",
    "update_project_component",
    "delete_project_component",
    "get_incoming_data_collection_events",
    "get_outgoing_data_collection_events",
    "list_public_components",
    "list_organization_components",
    "get_component_by_uuid",
    "get_component_by_slug",
    "create_component",
    "update_component_by_uuid",
    "update_component_by_slug",
    "delete_component_by_uuid",
    "delete_component_by_slug",
    "create_component_version_by_uuid",
    "create_component_version_by_slug",
    "update_component_version_by_slug",
    "get_me",
    "get_user",
    "update_user",
    "list_invitations",
    "get_invitation",
    "create_invitation",
    "delete_invitation",
    "list_api_tokens",
    "get_api_token",
    "create_api_token",
    "delete_api_token",
    "get_upload_presigned_url",
]
