# sdk/catalog.py
import logging
from typing import Any, List, Optional

import httpx
import requests
from pydantic import ValidationError

from storefront.models import Product

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """The product list could not be fetched or understood."""


def _parse_products(payload: Any) -> List[Product]:
    if not isinstance(payload, list):
        raise CatalogError(f"expected a JSON array of products, got {type(payload).__name__}")
    try:
        return [Product.model_validate(p) for p in payload]
    except ValidationError as e:
        raise CatalogError(f"malformed product record: {e}") from e


class CatalogClient:
    def __init__(self, base_url: str = "https://fakestoreapi.com", timeout: float = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # anything with a requests-style .get() works here (tests pass a TestClient)
        self.session = session if session is not None else requests.Session()

    @property
    def products_url(self) -> str:
        return f"{self.base_url}/products"

    def fetch_products(self) -> List[Product]:
        logger.debug("GET %s", self.products_url)
        try:
            r = self.session.get(self.products_url, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except (requests.exceptions.RequestException, httpx.HTTPError) as e:
            raise CatalogError(f"request to {self.products_url} failed: {e}") from e
        except ValueError as e:
            # requests and httpx both raise a ValueError subclass on bad JSON
            raise CatalogError(f"response from {self.products_url} is not JSON") from e
        products = _parse_products(payload)
        logger.info("fetched %d products", len(products))
        return products

    async def fetch_products_async(self, client: Optional[httpx.AsyncClient] = None) -> List[Product]:
        if client is None:
            async with httpx.AsyncClient(timeout=self.timeout) as owned:
                return await self.fetch_products_async(owned)

        logger.debug("GET %s (async)", self.products_url)
        try:
            r = await client.get(self.products_url, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except httpx.HTTPError as e:
            raise CatalogError(f"request to {self.products_url} failed: {e}") from e
        except ValueError as e:
            raise CatalogError(f"response from {self.products_url} is not JSON") from e
        products = _parse_products(payload)
        logger.info("fetched %d products", len(products))
        return products

    def close(self):
        self.session.close()
