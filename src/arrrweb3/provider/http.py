"""
HTTP JSON-RPC transport for the Pirate daemon.

Uses httpx's async client: one POST per call, no session kept between
calls. Responses are unpacked into the ``result`` value or one of the
errors in :mod:`arrrweb3.errors`.
"""

from __future__ import annotations

import itertools
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlsplit, urlunsplit

import httpx

from ..errors import DecodeError, HttpStatusError, NetworkError, RpcError

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "1.0"
DEFAULT_TIMEOUT_SEC = 30.0


@dataclass(frozen=True)
class EndpointConfig:
    url: str
    username: Optional[str] = None
    password: Optional[str] = None
    timeout_sec: float = DEFAULT_TIMEOUT_SEC

    def auth(self) -> Optional[httpx.BasicAuth]:
        """Explicit credentials, falling back to userinfo embedded in the URL."""
        if self.username is not None or self.password is not None:
            return httpx.BasicAuth(self.username or "", self.password or "")
        url = httpx.URL(self.url)
        if url.username or url.password:
            return httpx.BasicAuth(url.username, url.password)
        return None

    def redacted_url(self) -> str:
        """The endpoint URL with any embedded credentials stripped."""
        parts = urlsplit(self.url)
        if "@" not in parts.netloc:
            return self.url
        netloc = parts.netloc.rsplit("@", 1)[1]
        return urlunsplit(parts._replace(netloc=netloc))


class HttpProvider:
    """Sends JSON-RPC requests to a single daemon endpoint."""

    def __init__(
        self,
        endpoint: Union[str, EndpointConfig],
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if isinstance(endpoint, str):
            endpoint = EndpointConfig(url=endpoint)
        self.config = endpoint
        self._transport = transport
        self._ids = itertools.count(1)

    def build_request(self, method: str, params: Optional[List[Any]] = None) -> Dict[str, Any]:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": next(self._ids),
            "method": method,
            "params": list(params) if params is not None else [],
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout_sec,
            auth=self.config.auth(),
            transport=self._transport,
        )

    async def raw_call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Make a JSON-RPC call.

        Args:
            method: RPC method name (e.g., "getblockcount")
            params: Ordered RPC parameters (default: [])

        Returns:
            Result field from the RPC response

        Raises:
            NetworkError: If the daemon cannot be reached
            HttpStatusError: If the daemon answers with a non-2xx status
            DecodeError: If the body is not a well-formed JSON-RPC response
            RpcError: If the daemon reports an error
        """
        payload = self.build_request(method, params)

        try:
            target = self.config.redacted_url()
            client = self._client()
        except (httpx.InvalidURL, ValueError) as exc:
            raise NetworkError(f"Invalid endpoint URL: {exc}") from exc

        logger.debug(
            "rpc -> %s id=%s method=%s params=%d",
            target, payload["id"], method, len(payload["params"]),
        )

        try:
            async with client:
                response = await client.post(self.config.url, json=payload)
        except httpx.InvalidURL as exc:
            raise NetworkError(f"Invalid endpoint URL: {exc}") from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"Request to {target} failed: {exc}") from exc

        logger.debug("rpc <- id=%s status=%d", payload["id"], response.status_code)

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.text)

        return _unpack_response(response.text)


def _unpack_response(body: str) -> Any:
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise DecodeError(f"Invalid JSON response: {exc}", body=body) from exc

    if not isinstance(data, dict):
        raise DecodeError("JSON-RPC response must be an object", body=body)

    error = data.get("error")
    if error is not None:
        if data.get("result") is not None:
            raise DecodeError("JSON-RPC response carries both result and error", body=body)
        if isinstance(error, dict):
            raise RpcError(error.get("code"), str(error.get("message", "")), data=error.get("data"))
        raise RpcError(None, str(error), data=error)

    if "result" not in data:
        raise DecodeError("JSON-RPC response carries neither result nor error", body=body)

    return data["result"]
