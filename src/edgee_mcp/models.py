from __future__ import annotations

from typing import Any, Dict, List, Literal, NotRequired, Optional, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field

OrderDirection = Literal["ASC", "DESC"]
OrganizationRole = Literal["admin", "editor", "member"]
InvitationRole = Literal["admin", "member"]
LogSeverity = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
ComponentCategory = Literal["data_collection", "consent_management"]
ComponentSubcategory = Literal[
    "analytics", "warehouse", "attribution", "conversion api", "consent_mapping"
]
PublicComponentCategory = Literal["data_collection"]
PublicComponentSubcategory = Literal[
    "analytics", "warehouse", "attribution", "conversion api"
]
SettingValue = Union[str, bool, int, float]

ErrorType = Literal[
    "invalid_request_error",
    "not_found_error",
    "creation_error",
    "update_error",
    "deletion_error",
    "forbidden_error",
    "authentication_error",
    "conflict_error",
]


# --- Response shapes (trusted, never validated at runtime) ---


class ErrorParam(TypedDict):
    param: str
    message: str


class ErrorDetail(TypedDict):
    type: ErrorType
    message: str
    params: NotRequired[List[ErrorParam]]


class ErrorResponse(TypedDict):
    error: ErrorDetail


class ListResponse(TypedDict):
    object: str
    url: str
    has_more: bool
    last_key: str


class DeletedResponse(TypedDict):
    object: str
    id: str
    deleted: bool


class UploadPresign(TypedDict):
    upload_url: str


class Organization(TypedDict):
    object: str
    id: str
    name: str
    slug: str
    avatar_url: str
    type: Literal["perso", "pro"]
    current_billing_plan: str
    created_at: str
    updated_at: str


class OrganizationList(ListResponse):
    data: List[Organization]


class OrganizationUser(TypedDict):
    object: str
    id: str
    email: str
    name: str
    avatar_url: str
    role: OrganizationRole
    created_at: str
    updated_at: str


class OrganizationUserList(ListResponse):
    data: List[OrganizationUser]


class Project(TypedDict):
    object: str
    id: str
    organization_id: str
    slug: str
    description: NotRequired[str]
    avatar_url: NotRequired[str]
    created_at: str
    updated_at: str
    external_project_url: NotRequired[str]
    log_severity: NotRequired[LogSeverity]
    edgee_behind_proxy_cache: NotRequired[bool]
    force_https: NotRequired[bool]
    cache: NotRequired[bool]
    override_cache: NotRequired[List[Dict[str, Any]]]
    cookie_name: NotRequired[str]
    cookie_domain: NotRequired[str]
    proxy_only: NotRequired[bool]
    inject_sdk: NotRequired[bool]
    enforce_no_store_policy: NotRequired[bool]
    trusted_ips: NotRequired[List[str]]
    password_protection: NotRequired[bool]
    blocked_ips: NotRequired[List[str]]
    cookie_whitelist: NotRequired[List[str]]
    forwarded_headers: NotRequired[List[Dict[str, str]]]


class ProjectList(ListResponse):
    data: List[Project]


class ProjectCounters(TypedDict):
    object: str
    request_count: int
    event_count: int
    month: NotRequired[str]
    day: NotRequired[str]
    project_id: str


class ProjectComponentCounters(TypedDict):
    object: str
    user_count: int
    track_count: int
    page_count: int
    month: NotRequired[str]
    day: NotRequired[str]
    project_id: str
    component_id: str


class Domain(TypedDict):
    object: str
    name: str
    project_id: str
    dns_status: bool
    ssl_status: bool
    created_at: str
    updated_at: str


class DomainList(ListResponse):
    data: List[Domain]


class ProxySettings(TypedDict):
    object: str
    revision: int
    description: str
    is_active: bool
    backends: List[Dict[str, Any]]
    routes: List[Dict[str, Any]]


class ProxySettingsList(ListResponse):
    data: List[ProxySettings]


class ProjectComponent(TypedDict):
    object: str
    id: str
    component_id: str
    component_slug: str
    component_version: str
    category: str
    subcategory: str
    active: bool
    settings: NotRequired[Dict[str, Any]]


class ProjectComponentList(ListResponse):
    data: List[ProjectComponent]


# "from" is a keyword, hence the functional form.
IncomingDataCollectionEvent = TypedDict(
    "IncomingDataCollectionEvent",
    {
        "object": str,
        "uuid": str,
        "timestamp": str,
        "type": Literal["page", "track", "user"],
        "from": Literal["edge", "client", "third"],
        "data": Dict[str, Any],
        "context": Dict[str, Any],
    },
)


class IncomingDataCollectionEventList(ListResponse):
    data: List[IncomingDataCollectionEvent]


class OutgoingDataCollectionEvent(TypedDict):
    object: str
    uuid: str
    component_id: str
    component_slug: str
    component_request: Dict[str, Any]
    component_response: Dict[str, Any]


class OutgoingDataCollectionEventList(ListResponse):
    data: List[OutgoingDataCollectionEvent]


class ComponentVersion(TypedDict):
    object: str
    version: str
    wit_world_version: str
    wasm_url: str
    dynamic_fields: List[Dict[str, Any]]
    changelog: NotRequired[str]
    created_at: str


class Component(TypedDict):
    object: str
    id: str
    name: str
    slug: str
    avatar_url: NotRequired[str]
    category: str
    subcategory: str
    description: NotRequired[str]
    latest_version: NotRequired[str]
    versions: Dict[str, ComponentVersion]
    repo_link: NotRequired[str]
    documentation_link: NotRequired[str]
    created_at: str
    updated_at: str
    is_public: bool
    is_archived: bool


class ComponentList(ListResponse):
    data: List[Component]


class UserWithRoles(TypedDict):
    object: str
    id: str
    email: str
    name: str
    avatar_url: NotRequired[str]
    created_at: str
    updated_at: str
    roles: Dict[str, Literal["admin", "member"]]


class Invitation(TypedDict):
    object: str
    id: str
    organization_id: str
    role: InvitationRole
    email: str
    created_at: str


class InvitationList(ListResponse):
    data: List[Invitation]


class ApiToken(TypedDict):
    object: str
    id: str
    user_id: str
    name: str
    from_browser: bool
    last_used_at: NotRequired[str]
    expires_at: NotRequired[str]
    created_at: str
    updated_at: str
    token: NotRequired[str]


class ApiTokenList(ListResponse):
    data: List[ApiToken]


# --- Input Models (request bodies) ---


class _Input(BaseModel):
    model_config = ConfigDict(extra="forbid")


class OrganizationCreateInput(_Input):
    name: str
    slug: str


class OrganizationUpdateInput(_Input):
    id: str
    name: Optional[str] = None
    slug: Optional[str] = None


class OrganizationUserUpdateInput(_Input):
    role: OrganizationRole


class KeyValueConditions(_Input):
    present: Optional[List[str]] = None
    absent: Optional[List[str]] = None
    values: Optional[Dict[str, SettingValue]] = None


class CacheRuleConditions(_Input):
    request_cookies: Optional[KeyValueConditions] = None
    request_headers: Optional[KeyValueConditions] = None
    request_query_params: Optional[KeyValueConditions] = None
    request_methods: Optional[List[str]] = None
    response_status: Optional[List[int]] = None
    response_headers: Optional[KeyValueConditions] = None


class CacheRule(_Input):
    path: str
    regex: Optional[bool] = None
    ttl: Optional[int] = None
    swr: Optional[int] = None
    pass_: Optional[bool] = Field(default=None, alias="pass")
    rank: Optional[int] = None
    conditions: Optional[CacheRuleConditions] = None

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ForwardedHeader(_Input):
    name: str
    value: str


class ProjectCreateInput(_Input):
    organization_id: str
    slug: str
    description: Optional[str] = None
    external_project_url: Optional[str] = None


class ProjectUpdateInput(_Input):
    id: str
    slug: Optional[str] = None
    description: Optional[str] = None
    external_project_url: Optional[str] = None
    log_severity: Optional[LogSeverity] = None
    edgee_behind_proxy_cache: Optional[bool] = None
    force_https: Optional[bool] = None
    cache: Optional[bool] = None
    override_cache: Optional[List[CacheRule]] = None
    cookie_name: Optional[str] = None
    cookie_domain: Optional[str] = None
    proxy_only: Optional[bool] = None
    inject_sdk: Optional[bool] = None
    enforce_no_store_policy: Optional[bool] = None
    trusted_ips: Optional[List[str]] = None
    password_protection: Optional[bool] = None
    blocked_ips: Optional[List[str]] = None
    cookie_whitelist: Optional[List[str]] = None
    forwarded_headers: Optional[List[ForwardedHeader]] = None


class DomainCreateInput(_Input):
    name: str


class DomainUpdateInput(_Input):
    dns_status: Optional[bool] = None
    ssl_status: Optional[bool] = None


class ProxySettingsBackend(_Input):
    name: str
    address: str
    enable_ssl: Optional[bool] = None
    check_certificate: Optional[str] = None
    ca_certificate: Optional[str] = None
    sni_hostname: Optional[str] = None
    default: Optional[bool] = None
    override_host: Optional[str] = None


class ProxySettingsRoute(_Input):
    path: str
    regex: Optional[bool] = None
    backend_name: str
    rank: str
    continent: Optional[List[str]] = None
    region: Optional[List[str]] = None
    country: Optional[List[str]] = None


class ProxySettingsCreateInput(_Input):
    description: str
    backends: List[ProxySettingsBackend]
    routes: Optional[List[ProxySettingsRoute]] = None


class ProxySettingsUpdateInput(_Input):
    description: Optional[str] = None
    is_active: Optional[bool] = None


class ProjectComponentCreateInput(_Input):
    component_id: str
    component_slug: str
    component_version: str
    category: str
    subcategory: str
    active: Optional[bool] = None
    settings: Optional[Dict[str, SettingValue]] = None


class ProjectComponentUpdateInput(_Input):
    component_version: Optional[str] = None
    active: Optional[bool] = None
    settings: Optional[Dict[str, SettingValue]] = None


class ConfigurationField(_Input):
    name: str
    title: str
    type: Literal["string", "bool", "number"]
    required: bool
    description: Optional[str] = None


class ComponentCreateInput(_Input):
    organization_id: str
    name: str
    slug: str
    category: ComponentCategory
    subcategory: ComponentSubcategory
    documentation_link: Optional[str] = None
    repo_link: Optional[str] = None
    description: Optional[str] = None
    avatar_url: Optional[str] = None
    public: Optional[bool] = None


class ComponentUpdateInput(_Input):
    documentation_link: Optional[str] = None
    repo_link: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_archived: Optional[bool] = None
    public: Optional[bool] = None
    avatar_url: Optional[str] = None


class ComponentVersionCreateInput(_Input):
    version: str
    wit_version: str
    wasm_url: str
    dynamic_fields: Optional[List[ConfigurationField]] = None
    changelog: Optional[str] = None


class ComponentVersionUpdateInput(_Input):
    changelog: Optional[str] = None


class InvitationCreateInput(_Input):
    organization_id: str
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    role: InvitationRole


class ApiTokenCreateInput(_Input):
    name: str
    expires_at: Optional[str] = None


class UserUpdateInput(_Input):
    avatar_url: Optional[str] = None
    terms_version: Optional[str] = None
    privacy_version: Optional[str] = None
