"""Shared async HTTP client for outbound API calls (email delivery)."""

from typing import Any

import httpx

USER_AGENT = "churchinkomoka-api/1.0"


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient with a configurable timeout.

    Created in the app lifespan and closed on shutdown; providers receive it
    by constructor so tests can hand them an httpx.MockTransport instead.
    """

    def __init__(
        self, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"User-Agent": USER_AGENT},
        )

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._client.post(url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
