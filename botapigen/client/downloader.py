from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

from botapigen.config import GeneratorConfig
from botapigen.exceptions import DownloadError

from .session import create_session

logger = logging.getLogger(__name__)


async def download_reference(
    url: str | None = None,
    *,
    config: GeneratorConfig | None = None,
    session: httpx.AsyncClient | None = None,
) -> str:
    """Fetch the reference page and return the inner markup of its content block.

    Args:
        url: Page address. Defaults to ``config.base_url``.
        config: Selector and timeouts. Defaults to ``GeneratorConfig()``.
        session: Client to reuse. When omitted a client is created and
            closed here.

    Raises:
        DownloadError: Transport error, non-2xx status, or no element
            matching ``config.content_selector``.

    Example::

        html = await download_reference()
        Path("api.html").write_text(html, encoding="utf-8")
    """
    config = config or GeneratorConfig()
    url = url or config.base_url

    own_session = session is None
    if session is None:
        session = create_session(config)

    try:
        logger.debug("GET %s", url)
        resp = await session.get(url)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise DownloadError(url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise DownloadError(url, str(exc) or type(exc).__name__) from exc
    finally:
        if own_session:
            await session.aclose()

    soup = BeautifulSoup(resp.text, "html.parser")
    content = soup.select_one(config.content_selector)
    if content is None:
        raise DownloadError(url, f"no element matches {config.content_selector!r}")

    html = content.decode_contents()
    logger.info("Downloaded %s (%d chars of content)", url, len(html))
    return html
