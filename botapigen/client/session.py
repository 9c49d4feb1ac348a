from __future__ import annotations

import httpx

from botapigen.config import GeneratorConfig


def create_session(config: GeneratorConfig | None = None) -> httpx.AsyncClient:
    """HTTP client for the reference site, with the timeouts of *config*."""
    config = config or GeneratorConfig()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout, connect=config.connect_timeout),
        follow_redirects=True,
    )
