"""Shared outbound HTTP client.

One ``httpx.AsyncClient`` is created when the application starts and reused
by every chat invocation; its configuration is never changed afterwards.
Handlers receive it through the ``get_http_client`` dependency so tests can
substitute a client backed by ``httpx.MockTransport``.
"""
import logging
from typing import Optional

import httpx
from fastapi import Request

from promptdesk.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def create_http_client(config: Optional[Settings] = None) -> httpx.AsyncClient:
    """Create the process-wide HTTP client."""
    config = config or default_settings
    client = httpx.AsyncClient(
        timeout=config.HTTP_TIMEOUT,
        follow_redirects=config.HTTP_FOLLOW_REDIRECTS
    )
    logger.info(
        f"Shared HTTP client created: timeout={config.HTTP_TIMEOUT}s, "
        f"follow_redirects={config.HTTP_FOLLOW_REDIRECTS}"
    )
    return client


def get_http_client(request: Request) -> httpx.AsyncClient:
    """FastAPI dependency returning the shared HTTP client from app state."""
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        raise RuntimeError("Shared HTTP client not initialized; application startup has not run")
    return client
