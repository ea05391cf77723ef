"""Thin async JSON client for the managed document-store backend.

Wraps ``httpx.AsyncClient`` and converts every transport failure into a
domain RemoteError, so no httpx exception ever escapes this module.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from storefront.domain.exceptions import RemoteError, RemoteTimeoutError

logger = structlog.get_logger(__name__)

MISSING = (404,)


def segment(value: str) -> str:
    """Escape an ID for use as one URL path segment."""
    return quote(str(value), safe="")


class BackendClient:

    def __init__(
        self,
        base_url: str,
        timeout: float,
        api_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if api_token:
            headers["Authorization"] = f"Bearer {api_token}"
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> BackendClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # --- Verbs ----------------------------------------------------------------

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        missing: tuple[int, ...] = MISSING,
    ) -> Any | None:
        """GET a JSON body; None when the status is one of *missing*."""
        response = await self._send("GET", path, params=params)
        if response.status_code in missing:
            return None
        self._raise_for_status(response)
        return self._json(response)

    async def post(self, path: str, payload: dict[str, Any]) -> Any:
        response = await self._send("POST", path, json=payload)
        self._raise_for_status(response)
        return self._json(response)

    async def put(self, path: str, payload: dict[str, Any]) -> bool:
        """PUT a document; False when it does not exist."""
        response = await self._send("PUT", path, json=payload)
        if response.status_code in MISSING:
            return False
        self._raise_for_status(response)
        return True

    async def delete(self, path: str) -> bool:
        """DELETE a document; False when it did not exist."""
        response = await self._send("DELETE", path)
        if response.status_code in MISSING:
            return False
        self._raise_for_status(response)
        return True

    # --- Internal helpers -----------------------------------------------------

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise RemoteTimeoutError(f"{method} {path} timed out") from exc
        except httpx.HTTPError as exc:
            raise RemoteError(f"{method} {path} failed: {exc}") from exc
        logger.debug(
            "backend_response", method=method, path=path, status=response.status_code
        )
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        request = response.request
        raise RemoteError(
            f"{request.method} {request.url.path} returned HTTP {response.status_code}"
        )

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteError(
                f"{response.request.method} {response.request.url.path} "
                "returned a non-JSON body"
            ) from exc
