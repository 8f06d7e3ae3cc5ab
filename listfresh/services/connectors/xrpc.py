import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from listfresh.config import Settings
from listfresh.services.connectors.base import ActorIdentity, ListGateway, ListPage, RecordValue, XrpcError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_http_client(settings: Settings, *, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    return httpx.Client(
        base_url=settings.atproto_service_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        transport=transport,
    )


class XrpcListGateway(ListGateway):
    """XRPC queries against a public AppView over HTTP."""

    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings, *, transport: httpx.BaseTransport | None = None) -> "XrpcListGateway":
        return cls(build_http_client(settings, transport=transport))

    def _query(self, method: str, params: dict[str, Any], model: type[ModelT]) -> ModelT:
        logger.debug("XRPC %s %s", method, params)
        try:
            response = self.client.get(f"/xrpc/{method}", params=params)
        except httpx.HTTPError as exc:
            raise XrpcError(None, "TransportError", str(exc)) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code != 200:
            error = "UpstreamError"
            message = response.reason_phrase
            if isinstance(payload, dict):
                error = str(payload.get("error") or error)
                message = str(payload.get("message") or message)
            raise XrpcError(response.status_code, error, message)

        if not isinstance(payload, dict):
            raise XrpcError(response.status_code, "InvalidResponse", f"{method} returned a non-object body")
        try:
            return model.model_validate(payload)
        except PydanticValidationError as exc:
            raise XrpcError(response.status_code, "InvalidResponse", f"{method} payload failed validation") from exc

    def resolve_handle(self, handle: str) -> ActorIdentity:
        return self._query("app.bsky.actor.getProfile", {"actor": handle}, ActorIdentity)

    def get_list(self, list_uri: str, limit: int = 1) -> ListPage:
        return self._query("app.bsky.graph.getList", {"list": list_uri, "limit": limit}, ListPage)

    def get_record(self, repo: str, collection: str, rkey: str) -> RecordValue:
        params = {"repo": repo, "collection": collection, "rkey": rkey}
        return self._query("com.atproto.repo.getRecord", params, RecordValue)

    def close(self) -> None:
        self.client.close()
