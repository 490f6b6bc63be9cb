"""
docs.py - Upstream documentation fetcher

Retrieves the guidelines README over HTTP. No caching, no retries.
Every failure (transport error, timeout, non-2xx status) is logged and
reported as None so callers can render a fixed message instead.
"""

from __future__ import annotations

from enum import Enum

import httpx

from ui_guidelines.foundation.config.logging import get_logger
from ui_guidelines.foundation.config.settings import get_setting

logger = get_logger("ui_guidelines.docs")

DEFAULT_DOCS_URL = "https://raw.githubusercontent.com/raunofreiberg/interfaces/main/README.md"
DEFAULT_TIMEOUT = 60.0
PREVIEW_LIMIT = 2000

DOCS_HEADING = "## Latest Documentation from GitHub"
TRUNCATION_NOTICE = "...\n(truncated - use format: 'full' for complete content)"
FETCH_FAILED_MESSAGE = "Failed to fetch latest documentation from GitHub repository."


class DocFormat(str, Enum):
    FULL = "full"
    PREVIEW = "preview"


class DocFetcher:
    """Fetches a UTF-8 text document from a fixed URL."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            url: Document URL (defaults to the `docs.url` setting)
            timeout: Request timeout in seconds (defaults to `docs.timeout`)
            transport: Optional httpx transport, used by tests to stub the network
        """
        self.url = url or get_setting("docs.url", DEFAULT_DOCS_URL)
        if timeout is None:
            timeout = get_setting("docs.timeout", DEFAULT_TIMEOUT)
        self.timeout = float(timeout)
        self._transport = transport

    async def fetch(self) -> str | None:
        """Return the trimmed document text, or None if it is unavailable."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Documentation fetch failed", url=self.url, error=str(e))
            return None

        logger.debug("Documentation fetched", url=self.url, chars=len(response.text))
        return response.text.strip()


def render_docs(
    document: str | None,
    fmt: DocFormat | str = DocFormat.PREVIEW,
    limit: int = PREVIEW_LIMIT,
) -> str:
    """Render a fetched document as a fenced markdown block."""
    if document is None:
        return FETCH_FAILED_MESSAGE

    if DocFormat(fmt) is DocFormat.PREVIEW:
        body = document[:limit]
        if len(document) > limit:
            body += TRUNCATION_NOTICE
    else:
        body = document

    return f"{DOCS_HEADING}\n\n```markdown\n{body}\n```"


__all__ = [
    "DOCS_HEADING",
    "DocFetcher",
    "DocFormat",
    "FETCH_FAILED_MESSAGE",
    "PREVIEW_LIMIT",
    "TRUNCATION_NOTICE",
    "render_docs",
]
