"""HTTP wrappers around one REST resource."""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Base class for client-side failures."""


class TransportError(ClientError):
    """Network failure, unexpected status or unparseable body."""


class NotFoundError(ClientError):
    """The server has no row at the requested identity."""


class ValidationError(ClientError):
    """The server rejected the field map."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        details = "; ".join(
            f"{field}: {', '.join(messages)}" for field, messages in errors.items()
        )
        super().__init__(details or "Validation failed")


class ResourceClient:
    """List/get/create/update/delete against ``{api_prefix}/{resource}``."""

    def __init__(
        self,
        base_url: str,
        resource: str,
        api_prefix: str = "/api",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.resource = resource
        self.path = f"{api_prefix}/{resource}"
        self.transport = transport

    async def list(self) -> List[Dict[str, Any]]:
        return await self._request("GET", self.path)

    async def get(self, identity: int) -> Dict[str, Any]:
        return await self._request("GET", f"{self.path}/{identity}")

    async def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self.path, json=fields)

    async def update(self, identity: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"{self.path}/{identity}", json=fields)

    async def delete(self, identity: int) -> None:
        await self._request("DELETE", f"{self.path}/{identity}")

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        try:
            async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport) as client:
                response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError(f"{path} not found")
        if response.status_code == httpx.codes.BAD_REQUEST:
            raise ValidationError(self._field_errors(response))
        if response.is_error:
            raise TransportError(f"{method} {path} returned {response.status_code}")

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{method} {path} returned invalid JSON") from e

    @staticmethod
    def _field_errors(response: httpx.Response) -> Dict[str, List[str]]:
        try:
            body = response.json()
        except ValueError:
            return {}
        if isinstance(body, dict) and isinstance(body.get("errors"), dict):
            return body["errors"]
        return {}
