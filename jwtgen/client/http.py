import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from jwtgen.client.models import ServerInfo
from jwtgen.config import Settings
from jwtgen.errors import CoordinatorError, InvalidUrlError, RequestFailedError

log = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass
class JsonResponse(Generic[T]):
    status_code: int
    headers: httpx.Headers
    body: str
    value: T | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not None


def build_http_client(
    settings: Settings, transport: httpx.BaseTransport | None = None
) -> httpx.Client:
    """
    Client used for every coordinator call. Server certificates are not
    validated unless VERIFY_TLS is set.
    """
    return httpx.Client(
        verify=settings.VERIFY_TLS,
        timeout=settings.HTTP_TIMEOUT,
        headers={"Accept-Encoding": "identity"},
        transport=transport,
    )


def bearer_headers(token: str, settings: Settings) -> dict[str, str]:
    return {settings.INTERNAL_BEARER_HEADER: token}


def parse_url(raw: str) -> httpx.URL:
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidUrlError(raw) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidUrlError(raw)
    return url


def coordinator_endpoint(coordinator_url: str, path: str) -> httpx.URL:
    return parse_url(coordinator_url).copy_with(path=path)


def send(client: httpx.Client, request: httpx.Request) -> httpx.Response:
    log.info(f"{request.method} {request.url}")
    try:
        return client.send(request)
    except httpx.HTTPError as e:
        log.error(f"Request to {request.url} failed: {e}")
        raise RequestFailedError(f"request to {request.url} failed: {e}") from e


def execute_json(client: httpx.Client, request: httpx.Request, model: type[T]) -> JsonResponse[T]:
    response = send(client, request)
    value: T | None = None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type.lower():
        try:
            value = model.model_validate_json(response.content)
        except ValidationError as e:
            log.warning(f"Response from {request.url} is not a valid {model.__name__}: {e}")
    log.info(f"status={response.status_code} has_value={value is not None}")
    return JsonResponse(
        status_code=response.status_code,
        headers=response.headers,
        body=response.text,
        value=value,
    )


def fetch_environment(client: httpx.Client, coordinator_url: str) -> str:
    """
    Read the coordinator's environment name from /v1/info.
    """
    request = client.build_request("GET", coordinator_endpoint(coordinator_url, "/v1/info"))
    response = execute_json(client, request, ServerInfo)
    if response.status_code != httpx.codes.OK or response.value is None:
        raise CoordinatorError(
            f"could not read environment from {coordinator_url} (status {response.status_code})"
        )
    return response.value.environment
