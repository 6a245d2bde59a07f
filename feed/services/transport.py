"""HTTP transport for provider calls."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from feed.errors import ProviderError, TransportError


TransportFn = Callable[[str, Dict[str, Any]], Awaitable[Dict[str, Any]]]


class HttpTransport:
    """Thin ``httpx.AsyncClient`` wrapper returning decoded JSON payloads.

    - 네트워크 오류/타임아웃 → ``TransportError``
    - HTTP 4xx/5xx, JSON이 아닌 응답 → ``ProviderError``
    재시도는 하지 않는다.
    """

    def __init__(self, timeout_s: float = 5.0, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_s, follow_redirects=True)

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __call__(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = await self._client.get(url, params=params)
        except httpx.TimeoutException as exc:
            raise TransportError("뉴스 API 타임아웃") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"뉴스 API 호출 오류: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if resp.status_code >= 400:
            raise ProviderError(_error_text(payload) or f"HTTP {resp.status_code}")
        if not isinstance(payload, dict):
            raise ProviderError("뉴스 API 응답이 JSON 객체가 아닙니다.")
        return payload


def _error_text(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    error = payload.get("error")
    if not message and isinstance(error, dict):
        message = error.get("message")
    elif not message and isinstance(error, str):
        message = error
    return str(message) if message else None
