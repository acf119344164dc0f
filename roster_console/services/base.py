"""Async HTTP client for the backend's paginated collection endpoints."""

import logging
from enum import Enum
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from roster_console.config import get_settings
from roster_console.errors import NotFoundFailure, TransportFailure, ValidationFailure
from roster_console.schemas.page import PageResponse
from roster_console.utils.pagination import PageResult

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Server-assigned fields never sent in a payload
READ_ONLY_FIELDS = {"id", "created_at"}


def _error_message(response: httpx.Response) -> str | None:
    """Pull a human readable message out of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("message")
    if isinstance(message, str) and message:
        return message
    detail = body.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    return None


def raise_for_failure(response: httpx.Response) -> None:
    """Translate a non-2xx response into the matching ConsoleError."""
    if response.is_success:
        return
    message = _error_message(response)
    if response.status_code == 404:
        raise NotFoundFailure(message, response.status_code)
    if message:
        raise ValidationFailure(message, response.status_code)
    raise TransportFailure(None, response.status_code)


def dump_payload(payload: BaseModel | dict) -> dict:
    """Serialize a request payload under the backend's field names."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(
            mode="json",
            by_alias=True,
            exclude=READ_ONLY_FIELDS,
            exclude_none=True,
        )
    return dict(payload)


class CollectionService(Generic[T]):
    """
    Client for one REST collection (``/students``, ``/orders``).

    A fresh ``httpx.AsyncClient`` is opened per request. GET requests are
    retried on transport errors; writes are sent once.
    """

    resource: str = ""
    entity_model: type[BaseModel] = BaseModel

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
        retry_attempts: int | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.transport = transport
        self.timeout = settings.http_timeout if timeout is None else timeout
        self.retry_attempts = settings.http_retry_attempts if retry_attempts is None else retry_attempts
        self.retry_wait_min = settings.http_retry_wait_min
        self.retry_wait_max = settings.http_retry_wait_max

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.resource}"

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            return await client.request(method, url, **kwargs)

    async def _request(
        self,
        method: str,
        path: str = "",
        *,
        params: dict | None = None,
        json: dict | None = None,
    ) -> Any:
        """
        Make a request against the collection and decode the JSON body.

        Args:
            method: HTTP method
            path: Path below the collection URL, e.g. "/42"
            params: Query parameters
            json: Request body

        Returns:
            Decoded JSON body, or None for an empty response

        Raises:
            TransportFailure: Backend unreachable or unstructured error
            ValidationFailure: Backend rejected the request with a message
            NotFoundFailure: Referenced entity does not exist
        """
        url = f"{self.url}{path}"
        attempts = self.retry_attempts if method == "GET" else 1
        logger.debug(f"{method} {url} params={params}")

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(max(attempts, 1)),
                wait=wait_exponential(multiplier=1, min=self.retry_wait_min, max=self.retry_wait_max),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    response = await self._send(method, url, params=params, json=json)
        except httpx.TransportError as e:
            raise TransportFailure(None) from e

        raise_for_failure(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportFailure("Malformed response from server", response.status_code) from e

    def _parse(self, data: Any) -> T:
        return self.entity_model.model_validate(data)

    async def fetch_page(self, query: dict) -> PageResult[T]:
        """
        Fetch one page of the collection.

        Args:
            query: Collection query with page, size, sort and filters

        Returns:
            The page exactly as the server reports it
        """
        params = {
            key: value.value if isinstance(value, Enum) else value
            for key, value in query.items()
            if value is not None
        }
        data = await self._request("GET", params=params)
        page = PageResponse[self.entity_model].model_validate(data)
        return page.to_result()

    async def get(self, entity_id: int) -> T:
        data = await self._request("GET", f"/{entity_id}")
        return self._parse(data)

    async def create(self, payload: BaseModel | dict) -> T:
        data = await self._request("POST", json=dump_payload(payload))
        return self._parse(data)

    async def update(self, entity_id: int, payload: BaseModel | dict) -> T:
        data = await self._request("PUT", f"/{entity_id}", json=dump_payload(payload))
        return self._parse(data)

    async def delete(self, entity_id: int) -> None:
        await self._request("DELETE", f"/{entity_id}")
