"""Text rendering for MCP tool responses.

Each formatter takes a parsed API payload and returns plain text. Missing
values render as a placeholder rather than failing, since payloads are never
validated.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from edgee_mcp.client import EdgeeApiError, EdgeeClientError


def _or(value: Any, default: str = "Unknown") -> str:
    if value is None or value == "" or value == [] or value == {}:
        return default
    return str(value)


def _yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def _setting(value: Any) -> str:
    """Optional project setting: the server default applies when unset."""
    if value is None:
        return "Default"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _heading(title: Optional[str], label: str, name: Any) -> List[str]:
    """Detail views start with 'Label: name'; mutation results with a title line."""
    if title:
        return [title, f"Name: {_or(name)}"]
    return [f"{label}: {_or(name)}"]


def _join(lines: Iterable[str]) -> str:
    return "\n".join(line for line in lines if line)


def format_list(
    heading: str,
    payload: Mapping[str, Any],
    item_formatter: Callable[[Dict[str, Any]], str],
) -> str:
    """Render a list envelope, exposing last_key when more pages exist."""
    items = [item for item in payload.get("data") or [] if isinstance(item, dict)]
    if not items:
        body = "No results."
    else:
        body = "\n".join(item_formatter(item) for item in items)

    text = f"{heading}:\n\n{body}"
    if payload.get("has_more") and payload.get("last_key"):
        text += (
            f"\n\nMore results available. Pass start_key="
            f"{payload['last_key']} to fetch the next page."
        )
    return text


def format_deleted(
    result: Optional[Mapping[str, Any]], success_text: str, failure_text: str
) -> str:
    if not result or not result.get("deleted"):
        return failure_text
    return success_text


# --- Organizations ---


def format_organization(org: Mapping[str, Any], title: Optional[str] = None) -> str:
    return _join(
        [
            *_heading(title, "Organization", org.get("name")),
            f"ID: {org.get('id')}",
            f"Slug: {_or(org.get('slug'))}",
            f"Type: {_or(org.get('type'))}",
            f"Current billing plan: {_or(org.get('current_billing_plan'))}",
            f"Created at: {_or(org.get('created_at'))}",
            f"Updated at: {_or(org.get('updated_at'))}",
        ]
    )


def format_organization_item(org: Dict[str, Any]) -> str:
    return _join(
        [
            f"{_or(org.get('name'))}:",
            f"ID: {org.get('id')}",
            f"Slug: {_or(org.get('slug'))}",
            f"Type: {_or(org.get('type'))}",
            f"Current billing plan: {_or(org.get('current_billing_plan'))}",
            f"Created at: {_or(org.get('created_at'))}",
            f"Updated at: {_or(org.get('updated_at'))}",
            "---",
        ]
    )


def format_organization_user(
    user: Mapping[str, Any], title: Optional[str] = None
) -> str:
    head = _heading(title, "User", user.get("name")) if title else [f"{_or(user.get('name'))}:"]
    lines = [
        *head,
        f"ID: {user.get('id')}",
        f"Email: {_or(user.get('email'))}",
        f"Role: {_or(user.get('role'))}",
        f"Created at: {_or(user.get('created_at'))}",
        f"Updated at: {_or(user.get('updated_at'))}",
    ]
    if not title:
        lines.append("---")
    return _join(lines)


# --- Users ---


def format_user(user: Mapping[str, Any], title: Optional[str] = None) -> str:
    roles = user.get("roles") or {}
    roles_text = ""
    if isinstance(roles, dict) and roles:
        formatted = [f"Organization {org_id}: {role}" for org_id, role in roles.items()]
        roles_text = "Roles:\n  " + "\n  ".join(formatted)

    return _join(
        [
            *_heading(title, "User", user.get("name")),
            f"ID: {user.get('id')}",
            f"Email: {_or(user.get('email'))}",
            f"Avatar URL: {_or(user.get('avatar_url'), 'None')}",
            f"Created at: {_or(user.get('created_at'))}",
            f"Updated at: {_or(user.get('updated_at'))}",
            roles_text,
        ]
    )


def format_invitation(inv: Mapping[str, Any], title: Optional[str] = None) -> str:
    lines = [
        title or "",
        f"Email: {_or(inv.get('email'))}",
        f"ID: {inv.get('id')}",
        f"Organization ID: {_or(inv.get('organization_id'))}",
        f"Role: {_or(inv.get('role'))}",
        f"Created at: {_or(inv.get('created_at'))}",
    ]
    if not title:
        lines.append("---")
    return _join(lines)


def format_invitation_item(inv: Dict[str, Any]) -> str:
    return format_invitation(inv)


def format_api_token(token: Mapping[str, Any], title: Optional[str] = None) -> str:
    head = _heading(title, "API Token", token.get("name")) if title else [f"{_or(token.get('name'))}:"]
    lines = [
        *head,
        f"ID: {token.get('id')}",
        f"User ID: {_or(token.get('user_id'))}",
        f"From Browser: {_yes_no(token.get('from_browser'))}",
        f"Last Used At: {_or(token.get('last_used_at'), 'Never')}",
        f"Expires At: {_or(token.get('expires_at'), 'Never')}",
        f"Created at: {_or(token.get('created_at'))}",
        f"Updated at: {_or(token.get('updated_at'))}",
    ]
    if token.get("token"):
        lines.append(f"Token: {token['token']}")
    if not title:
        lines.append("---")
    return _join(lines)


def format_api_token_item(token: Dict[str, Any]) -> str:
    return format_api_token(token)


# --- Projects ---


def format_project_item(project: Dict[str, Any]) -> str:
    return _join(
        [
            f"{_or(project.get('slug'))}:",
            f"ID: {project.get('id')}",
            f"Organization ID: {_or(project.get('organization_id'))}",
            f"Description: {_or(project.get('description'), 'None')}",
            f"External URL: {_or(project.get('external_project_url'), 'None')}",
            f"Created at: {_or(project.get('created_at'))}",
            f"Updated at: {_or(project.get('updated_at'))}",
            "---",
        ]
    )


def format_project(project: Mapping[str, Any], title: Optional[str] = None) -> str:
    override_cache = project.get("override_cache")
    return _join(
        [
            title or f"Project: {_or(project.get('slug'))}",
            f"Slug: {_or(project.get('slug'))}" if title else "",
            f"ID: {project.get('id')}",
            f"Organization ID: {_or(project.get('organization_id'))}",
            f"Description: {_or(project.get('description'), 'None')}",
            f"External URL: {_or(project.get('external_project_url'), 'None')}",
            f"Log Severity: {_or(project.get('log_severity'), 'Default')}",
            f"Force HTTPS: {_setting(project.get('force_https'))}",
            f"Cache Enabled: {_setting(project.get('cache'))}",
            (
                f"Override Cache Rules: {len(override_cache)}"
                if isinstance(override_cache, list)
                else ""
            ),
            f"Cookie Name: {_or(project.get('cookie_name'), 'Default')}",
            f"Cookie Domain: {_or(project.get('cookie_domain'), 'None')}",
            f"Proxy Only: {_setting(project.get('proxy_only'))}",
            f"Inject SDK: {_setting(project.get('inject_sdk'))}",
            f"Created at: {_or(project.get('created_at'))}",
            f"Updated at: {_or(project.get('updated_at'))}",
        ]
    )


def format_project_counters(
    counters: Mapping[str, Any],
    id: str,
    month: Optional[str] = None,
    day: Optional[str] = None,
) -> str:
    return _join(
        [
            f"Project Counters for {id}:",
            f"Request Count: {counters.get('request_count')}",
            f"Event Count: {counters.get('event_count')}",
            f"Month: {month}" if month else "",
            f"Day: {day}" if day else "",
        ]
    )


def format_project_component_counters(
    counters: Mapping[str, Any],
    component_id: str,
    month: Optional[str] = None,
    day: Optional[str] = None,
) -> str:
    return _join(
        [
            f"Component Counters for {component_id}:",
            f"User Count: {counters.get('user_count')}",
            f"Track Count: {counters.get('track_count')}",
            f"Page Count: {counters.get('page_count')}",
            f"Month: {month}" if month else "",
            f"Day: {day}" if day else "",
        ]
    )


def format_domain(domain: Mapping[str, Any], title: Optional[str] = None) -> str:
    return _join(
        [
            title or "",
            f"Domain: {_or(domain.get('name'))}",
            f"Project ID: {domain.get('project_id')}",
            f"DNS Status: {'Valid' if domain.get('dns_status') else 'Invalid'}",
            f"SSL Status: {'Valid' if domain.get('ssl_status') else 'Invalid'}",
            f"Created at: {_or(domain.get('created_at'))}",
            f"Updated at: {_or(domain.get('updated_at'))}",
        ]
    )


def format_domain_item(domain: Dict[str, Any]) -> str:
    return format_domain(domain) + "\n---"


def format_proxy_settings(
    settings: Mapping[str, Any], title: Optional[str] = None
) -> str:
    backends = settings.get("backends") or []
    routes = settings.get("routes") or []
    lines = [
        title or "",
        f"Revision: {settings.get('revision')}" if title else f"Revision {settings.get('revision')}:",
        f"Description: {_or(settings.get('description'), 'None')}",
        f"Active: {_yes_no(settings.get('is_active'))}",
        f"Backends: {len(backends)}",
        f"Routes: {len(routes)}",
    ]
    if title:
        for backend in backends:
            if isinstance(backend, dict):
                lines.append(
                    f"  Backend {_or(backend.get('name'))}: {_or(backend.get('address'))}"
                    + (" (default)" if backend.get("default") else "")
                )
        for route in routes:
            if isinstance(route, dict):
                lines.append(
                    f"  Route {_or(route.get('path'))} -> {_or(route.get('backend_name'))}"
                    f" (rank {_or(route.get('rank'))})"
                )
    else:
        lines.append("---")
    return _join(lines)


def format_proxy_settings_item(settings: Dict[str, Any]) -> str:
    return format_proxy_settings(settings)


def format_project_component(
    component: Mapping[str, Any], title: Optional[str] = None
) -> str:
    settings = component.get("settings")
    return _join(
        [
            title or "",
            f"Component: {_or(component.get('component_slug'))}",
            f"ID: {component.get('id')}",
            f"Component ID: {component.get('component_id')}",
            f"Version: {component.get('component_version')}",
            f"Category: {component.get('category')}",
            f"Subcategory: {component.get('subcategory')}",
            f"Active: {_yes_no(component.get('active'))}",
            f"Settings: {_json(settings) if settings else 'None'}",
        ]
    )


def format_project_component_item(component: Dict[str, Any]) -> str:
    return _join(
        [
            f"{_or(component.get('component_slug'))}:",
            f"ID: {component.get('id')}",
            f"Component ID: {component.get('component_id')}",
            f"Version: {_or(component.get('component_version'))}",
            f"Category: {_or(component.get('category'))}",
            f"Subcategory: {_or(component.get('subcategory'))}",
            f"Active: {_yes_no(component.get('active'))}",
            "---",
        ]
    )


def format_incoming_event(event: Dict[str, Any]) -> str:
    return _join(
        [
            f"Event {event.get('uuid')}:",
            f"Type: {event.get('type')}",
            f"From: {event.get('from')}",
            f"Timestamp: {event.get('timestamp')}",
            f"Data: {_json(event.get('data'))}",
            "---",
        ]
    )


def format_outgoing_event(event: Dict[str, Any]) -> str:
    return _join(
        [
            f"Event {event.get('uuid')}:",
            f"Component: {_or(event.get('component_slug'))} ({event.get('component_id')})",
            f"Request: {_json(event.get('component_request'))}",
            f"Response: {_json(event.get('component_response'))}",
            "---",
        ]
    )


# --- Components ---


def format_component_version(
    version: Mapping[str, Any], title: Optional[str] = None, indent: str = ""
) -> str:
    fields = version.get("dynamic_fields")
    lines = [
        title or "",
        f"Version: {version.get('version')}",
        f"WIT World Version: {_or(version.get('wit_world_version'))}",
        f"WASM URL: {_or(version.get('wasm_url'))}",
        f"Created at: {_or(version.get('created_at'))}",
        f"Changelog: {_or(version.get('changelog'), 'None')}",
        f"Dynamic Fields: {_json(fields) if fields else 'None'}",
    ]
    return ("\n" + indent).join(line for line in lines if line)


def format_component(component: Mapping[str, Any], title: Optional[str] = None) -> str:
    versions = component.get("versions") or {}
    versions_text = ""
    if isinstance(versions, dict) and versions:
        blocks = [
            format_component_version({**data, "version": key}, indent="  ")
            for key, data in versions.items()
            if isinstance(data, dict)
        ]
        versions_text = "Versions:\n  " + "\n  ---\n  ".join(blocks)

    return _join(
        [
            *_heading(title, "Component", component.get("name")),
            f"ID: {component.get('id')}",
            f"Slug: {_or(component.get('slug'))}",
            f"Category: {_or(component.get('category'))}",
            f"Subcategory: {_or(component.get('subcategory'))}",
            f"Description: {_or(component.get('description'), 'None')}",
            f"Latest Version: {_or(component.get('latest_version'), 'None')}",
            f"Repository Link: {_or(component.get('repo_link'), 'None')}",
            f"Documentation Link: {_or(component.get('documentation_link'), 'None')}",
            f"Public: {_yes_no(component.get('is_public'))}",
            f"Archived: {_yes_no(component.get('is_archived'))}",
            f"Created at: {_or(component.get('created_at'))}",
            f"Updated at: {_or(component.get('updated_at'))}",
            versions_text,
        ]
    )


def format_component_item(component: Dict[str, Any]) -> str:
    return _join(
        [
            f"{_or(component.get('name'))}:",
            f"ID: {component.get('id')}",
            f"Slug: {_or(component.get('slug'))}",
            f"Category: {_or(component.get('category'))}",
            f"Subcategory: {_or(component.get('subcategory'))}",
            f"Description: {_or(component.get('description'), 'None')}",
            f"Latest Version: {_or(component.get('latest_version'), 'None')}",
            f"Public: {_yes_no(component.get('is_public'))}",
            f"Archived: {_yes_no(component.get('is_archived'))}",
            f"Created at: {_or(component.get('created_at'))}",
            f"Updated at: {_or(component.get('updated_at'))}",
            "---",
        ]
    )


# --- Errors ---


def format_error(exc: EdgeeClientError) -> str:
    """Human-readable failure: message, then the API's structured error if any."""
    lines = [str(exc)]
    if isinstance(exc, EdgeeApiError):
        if exc.error_type:
            lines.append(f"Type: {exc.error_type}")
        if exc.error_message:
            lines.append(f"Message: {exc.error_message}")
        for param in exc.error_params:
            lines.append(f"  - {param.get('param')}: {param.get('message')}")
    return "\n".join(lines)
