# storefront/query.py
import logging
from enum import Enum
from typing import List, Optional

from sdk.catalog import CatalogClient, CatalogError
from storefront.models import Product

logger = logging.getLogger(__name__)


class QueryStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"


class ProductQuery:
    """
    One product-list request and its observable state.

    Starts out loading. The first fetch() settles it into success or error;
    later calls return the settled state without touching the network.
    """

    def __init__(self, client: CatalogClient):
        self.client = client
        self.status = QueryStatus.LOADING
        self.data: Optional[List[Product]] = None
        self.error: Optional[CatalogError] = None

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status is QueryStatus.ERROR

    @property
    def is_success(self) -> bool:
        return self.status is QueryStatus.SUCCESS

    def _settle(self, data: Optional[List[Product]], error: Optional[CatalogError]):
        if error is not None:
            logger.warning("product fetch failed: %s", error)
            self.status, self.error = QueryStatus.ERROR, error
        else:
            self.status, self.data = QueryStatus.SUCCESS, data

    def fetch(self) -> "ProductQuery":
        if not self.is_loading:
            return self
        try:
            data = self.client.fetch_products()
        except CatalogError as e:
            self._settle(None, e)
        else:
            self._settle(data, None)
        return self

    async def fetch_async(self, http_client=None) -> "ProductQuery":
        if not self.is_loading:
            return self
        try:
            data = await self.client.fetch_products_async(http_client)
        except CatalogError as e:
            self._settle(None, e)
        else:
            self._settle(data, None)
        return self
