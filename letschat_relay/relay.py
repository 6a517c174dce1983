"""
Completion relay: validate a conversation payload, call the provider with
the fixed model policy, and map the provider result onto the HTTP envelope.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, Tuple

from pydantic import BaseModel

from .providers.types import ProviderRequest, ProviderResponse
from .schemas import SchemaValidator

logger = logging.getLogger(__name__)

# Relay policy; callers cannot override any of these.
MODEL = "claude-3-haiku-20240307"
MAX_TOKENS = 450
TEMPERATURE = 0.7

VALIDATION_ERROR = "Request body must contain 'system' and 'messages' properties."
FALLBACK_ERROR = "There was a problem on the server"


class ChatProvider(Protocol):
    async def chat(self, req: ProviderRequest) -> ProviderResponse: ...


class CompletionResult(BaseModel):
    success: bool
    data: Any = None
    error: Any = None

    def body(self) -> Dict[str, Any]:
        """JSON body carrying only the fields that were set (``data`` or ``error``)."""
        return self.model_dump(exclude_unset=True)


def build_request(body: Dict[str, Any]) -> ProviderRequest:
    return ProviderRequest(
        model=MODEL,
        system=body["system"],
        messages=body["messages"],
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
    )


def to_envelope(resp: ProviderResponse) -> Tuple[int, CompletionResult]:
    """Map a provider result to ``(status, envelope)``.

    Every provider failure is reported as 400, whatever its cause. The
    upstream error body is passed through when there is one, otherwise the
    fixed fallback message is used.
    """
    if resp.ok:
        return 200, CompletionResult(success=True, data=resp.content)
    error = resp.error_payload if resp.error_payload else FALLBACK_ERROR
    return 400, CompletionResult(success=False, error=error)


class CompletionRelay:
    def __init__(self, provider: ChatProvider, validator: Optional[SchemaValidator] = None) -> None:
        self.provider = provider
        self.validator = validator or SchemaValidator()

    def validate(self, body: Any) -> list[str]:
        return self.validator.validate("letschat", body)

    async def relay(self, body: Any) -> Tuple[int, CompletionResult]:
        errors = self.validate(body)
        if errors:
            logger.debug("Rejected /letschat payload: %s", "; ".join(errors))
            return 400, CompletionResult(success=False, error=VALIDATION_ERROR)

        resp = await self.provider.chat(build_request(body))
        if not resp.ok:
            logger.error(
                "Error in /letschat route: %s (status=%s, latency_ms=%s)",
                resp.error,
                resp.provider_meta.get("status"),
                resp.latency_ms,
            )
        else:
            logger.info(
                "Completion relayed: model=%s stop_reason=%s latency_ms=%s",
                resp.provider_meta.get("model"),
                resp.provider_meta.get("stop_reason"),
                resp.latency_ms,
            )
        return to_envelope(resp)
