# app/domain/repositories/catalog_repo.py

from __future__ import annotations
from typing import List, Optional
import logging
import time

import httpx
from pydantic import ValidationError

from app.domain.errors import FetchError
from app.domain.models.product import Product, ProductsResponse

logger = logging.getLogger(__name__)


class CatalogRepo:
    """
    Product repository backed by the remote catalog API.
    One GET per call, no retry, no caching: every request sees fresh data.
    """

    def __init__(self, url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self._transport = transport

    async def fetch_products(self) -> List[Product]:
        start = time.perf_counter()
        logger.debug("catalog fetch url=%s", self.url)

        try:
            # the client context closes the connection and the response body on every path
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self.url)
                body = response.content
        except httpx.HTTPError as e:
            logger.error("catalog fetch failed url=%s err=%r", self.url, e)
            raise FetchError(str(e) or e.__class__.__name__, reason="transport") from e

        # any status is decoded; only an undecodable body fails the request
        if response.is_error:
            logger.warning("catalog upstream status=%s url=%s", response.status_code, self.url)

        try:
            payload = ProductsResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error("catalog payload malformed url=%s err=%s", self.url, e)
            raise FetchError(str(e), reason="payload") from e

        logger.debug(
            "catalog fetch done url=%s count=%s time_ms=%.1f",
            self.url, len(payload.products), (time.perf_counter() - start) * 1000.0,
        )
        return list(payload.products)
