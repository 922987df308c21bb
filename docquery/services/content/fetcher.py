"""HTTP retrieval of source documents."""

from __future__ import annotations

from typing import Optional

import httpx
from loguru import logger

from docquery.services.content.models import FetchFailure

REQUEST_TIMEOUT = 20.0


class HttpDocumentFetcher:
    """Fetch a document body by URL; any failure surfaces as FetchFailure."""

    def __init__(
        self,
        user_agent: str,
        timeout_s: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.user_agent = user_agent
        self.timeout_s = timeout_s
        self._transport = transport

    async def fetch(self, source_id: str) -> str:
        logger.info("fetching {}", source_id)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            ) as client:
                response = await client.get(source_id)
        except httpx.RequestError as exc:
            logger.warning("fetch of {} failed: {}", source_id, exc)
            raise FetchFailure(source_id, cause=exc) from exc

        if not response.is_success:
            logger.warning("fetch of {} returned {}", source_id, response.status_code)
            raise FetchFailure(source_id, status=response.status_code)
        return response.text
