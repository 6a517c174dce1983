from __future__ import annotations
import time
from typing import Any, Dict
import httpx

from .types import ProviderRequest, ProviderResponse

ANTHROPIC_VERSION = "2023-06-01"


def _json_or_none(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        return None


class AnthropicProvider:
    """Client handle for the Anthropic Messages API.

    Holds only the credential and endpoint, so one instance is shared by all
    concurrent requests. ``chat`` never raises for upstream or transport
    failures; they come back as ``ProviderResponse(ok=False, ...)``.
    """

    def __init__(self, api_key: str | None, base_url: str = "https://api.anthropic.com", timeout: float = 60.0) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def chat(self, req: ProviderRequest) -> ProviderResponse:
        if not self.enabled:
            return ProviderResponse(False, None, 0, {}, error="Anthropic disabled: missing ANTHROPIC_API_KEY")
        t0 = time.perf_counter()
        url = f"{self.base_url}/v1/messages"
        payload: Dict[str, Any] = {
            "model": req.model,
            "system": req.system,
            "messages": req.messages,
            "max_tokens": req.max_tokens,
            "temperature": req.temperature,
        }
        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                r = await client.post(url, json=payload, headers=headers)
                latency_ms = int((time.perf_counter() - t0) * 1000)
                if not r.is_success:
                    return ProviderResponse(
                        False, None, latency_ms, {"status": r.status_code},
                        error=r.text or f"HTTP {r.status_code}",
                        error_payload=_json_or_none(r),
                    )
                data = r.json()
                if not isinstance(data, dict):
                    return ProviderResponse(False, None, latency_ms, {"status": r.status_code}, error="unexpected response body")
                meta = {
                    "id": data.get("id"),
                    "model": data.get("model"),
                    "stop_reason": data.get("stop_reason"),
                    "usage": data.get("usage"),
                }
                return ProviderResponse(True, data.get("content"), latency_ms, meta)
            except (httpx.HTTPError, ValueError) as e:
                latency_ms = int((time.perf_counter() - t0) * 1000)
                return ProviderResponse(False, None, latency_ms, {}, error=str(e) or type(e).__name__)
