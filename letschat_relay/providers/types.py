from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from datetime import datetime, timezone


@dataclass
class ProviderRequest:
    model: str
    system: Any
    messages: Any  # [{role, content}], forwarded as received
    max_tokens: int
    temperature: float


@dataclass
class ProviderResponse:
    ok: bool
    content: Any
    latency_ms: int
    provider_meta: Dict[str, Any]
    error: Optional[str] = None
    # structured error body returned by the upstream API, when it sent one
    error_payload: Any = None
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
