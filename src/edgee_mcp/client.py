import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import httpx
from pydantic import BaseModel

from .config import EDGEE_API_BASE, USER_AGENT, TOKEN_ENV, env_token_provider
from .models import ErrorResponse
from .observability import log_event

TokenProvider = Callable[[], Optional[str]]


class EdgeeClientError(Exception):
    """Base error for client failures."""


class EdgeeConfigurationError(EdgeeClientError):
    """Raised before any network I/O when no bearer token is available."""


class EdgeeApiError(EdgeeClientError):
    """
    A failed API call.

    status is 0 when the failure happened before an HTTP response existed
    (DNS, refused connection, timeout, unparseable success body).
    """

    def __init__(
        self,
        message: str,
        status: int,
        error_response: Optional[ErrorResponse] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.error_response = error_response

    @property
    def error_type(self) -> Optional[str]:
        error = (self.error_response or {}).get("error")
        return error.get("type") if isinstance(error, dict) else None

    @property
    def error_message(self) -> Optional[str]:
        error = (self.error_response or {}).get("error")
        return error.get("message") if isinstance(error, dict) else None

    @property
    def error_params(self) -> List[Dict[str, str]]:
        error = (self.error_response or {}).get("error")
        params = error.get("params") if isinstance(error, dict) else None
        return [p for p in params if isinstance(p, dict)] if isinstance(params, list) else []


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """Flatten params in insertion order, dropping None-valued entries."""
    if not params:
        return []
    return [(key, _query_value(value)) for key, value in params.items() if value is not None]


def _encode_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


class EdgeeClient:
    """
    Shared HTTP client for the Edgee JSON API.
    - Injects the bearer token from a provider on every request
    - Returns parsed JSON payloads verbatim (no shape validation)
    - Normalizes every failure into EdgeeConfigurationError or EdgeeApiError
    - No retries; tools own presentation
    """

    def __init__(
        self,
        *,
        token_provider: Optional[TokenProvider] = None,
        token: Optional[str] = None,
        base_url: str = EDGEE_API_BASE,
        user_agent: str = USER_AGENT,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        if token_provider is not None and token is not None:
            raise ValueError("Pass either token or token_provider, not both.")
        if token is not None:
            fixed = token

            def token_provider():
                return fixed

        self.token_provider: TokenProvider = token_provider or env_token_provider()
        self.base_url = (base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("base_url must be provided.")
        self.log = logger or logging.getLogger("edgee_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            headers={
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "EdgeeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _bearer_token(self) -> str:
        token = (self.token_provider() or "").strip()
        if not token:
            raise EdgeeConfigurationError(f"{TOKEN_ENV} environment variable is required")
        return token

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        tool: Optional[str] = None,
    ) -> Any:
        """
        Perform one authenticated round trip.
        - Raises EdgeeConfigurationError when no token is available (no I/O)
        - Raises EdgeeApiError(status) on non-2xx responses
        - Raises EdgeeApiError(status=0) on send, transport or JSON parse failures
        - Returns the parsed JSON body on success
        """
        method = method.upper()
        headers = {"Authorization": f"Bearer {self._bearer_token()}"}
        query = encode_query(params)
        url = f"{self.base_url}{path}"

        kwargs: Dict[str, Any] = {"headers": headers}
        if query:
            kwargs["params"] = query
        if json is not None:
            kwargs["json"] = _encode_body(json)

        start = time.perf_counter()
        try:
            resp = await self.http.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as exc:
            # Anything raised before a response exists is a status 0 failure.
            raise self._failure(
                EdgeeApiError(str(exc) or "Unknown error", 0),
                tool=tool,
                method=method,
                path=path,
                start=start,
                error_type=type(exc).__name__,
            ) from exc

        if not resp.is_success:
            raise self._failure(
                self._to_api_error(resp),
                tool=tool,
                method=method,
                path=path,
                start=start,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise self._failure(
                EdgeeApiError(str(exc) or "Unknown error", 0),
                tool=tool,
                method=method,
                path=path,
                start=start,
                error_type=type(exc).__name__,
            ) from exc

        log_event(
            "api_call",
            logger=self.log,
            level=logging.DEBUG,
            tool=tool,
            method=method,
            endpoint=path,
            status=resp.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
        return data

    def _to_api_error(self, resp: httpx.Response) -> EdgeeApiError:
        error_response: Optional[ErrorResponse] = None
        try:
            parsed = resp.json()
            if isinstance(parsed, dict):
                error_response = parsed  # type: ignore[assignment]
        except ValueError:
            # Malformed error bodies degrade to an absent payload.
            error_response = None

        return EdgeeApiError(
            f"HTTP error! status: {resp.status_code}",
            resp.status_code,
            error_response,
        )

    def _failure(
        self,
        err: EdgeeApiError,
        *,
        tool: Optional[str],
        method: str,
        path: str,
        start: float,
        error_type: Optional[str] = None,
    ) -> EdgeeApiError:
        log_event(
            "api_call_failed",
            logger=self.log,
            level=logging.WARNING,
            tool=tool,
            method=method,
            endpoint=path,
            status=err.status,
            duration_ms=int((time.perf_counter() - start) * 1000),
            error_type=error_type or err.error_type or "http_error",
            error=err.message,
        )
        return err

    async def get(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.request(path, method="GET", params=params, tool=tool)

    async def post(self, path: str, *, json: Any, tool: Optional[str] = None) -> Any:
        return await self.request(path, method="POST", json=json, tool=tool)

    async def put(self, path: str, *, json: Any, tool: Optional[str] = None) -> Any:
        return await self.request(path, method="PUT", json=json, tool=tool)

    async def delete(self, path: str, *, tool: Optional[str] = None) -> Any:
        return await self.request(path, method="DELETE", tool=tool)
