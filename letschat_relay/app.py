from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from . import __version__
from .providers.anthropic import AnthropicProvider
from .relay import FALLBACK_ERROR, ChatProvider, CompletionRelay, CompletionResult
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_relay(request: Request) -> CompletionRelay:
    return request.app.state.relay


def create_app(settings: Optional[Settings] = None, provider: Optional[ChatProvider] = None) -> FastAPI:
    """Build the relay application.

    The provider handle is created once here (or injected by the caller) and
    shared by every request.
    """
    settings = settings or get_settings()
    if provider is None:
        if not settings.anthropic_api_key:
            logger.warning("ANTHROPIC_API_KEY is not set; every /letschat call will fail")
        provider = AnthropicProvider(settings.anthropic_api_key, base_url=settings.anthropic_base_url)

    app = FastAPI(title="letschat relay", version=__version__)

    # Any origin may call the relay directly from a browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.relay = CompletionRelay(provider)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello World."

    @app.post("/letschat")
    async def letschat(body: Any = Body(None), relay: CompletionRelay = Depends(get_relay)):
        try:
            status, result = await relay.relay(body)
        except Exception:
            logger.exception("Error in /letschat route")
            status, result = 400, CompletionResult(success=False, error=FALLBACK_ERROR)
        return JSONResponse(status_code=status, content=result.body())

    return app


app = create_app()
