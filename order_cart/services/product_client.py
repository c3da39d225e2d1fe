# order_cart/services/product_client.py
from decimal import Decimal
from typing import Protocol
from urllib.parse import quote

import requests
from requests import RequestException

from order_cart.domain.cart import Product
from order_cart.domain.errors import CatalogUnavailable, ProductLookupTimeout
from order_cart.utils.logging import get_logger
from order_cart.utils.retry import http_retry
from order_cart.utils.settings import PRODUCT_LOOKUP_TIMEOUT, PRODUCT_SERVICE_URL

logger = get_logger(__name__)


class ProductLookup(Protocol):
    def get_product(self, product_id: str) -> Product | None:
        """Current catalog record, or None when the product does not exist."""


class ProductClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else PRODUCT_LOOKUP_TIMEOUT

    @http_retry()
    def _fetch(self, product_id: str) -> requests.Response:
        url = f"{self.base_url}/products/{quote(product_id, safe='')}"
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            return resp
        resp.raise_for_status()
        return resp

    def get_product(self, product_id: str) -> Product | None:
        try:
            resp = self._fetch(product_id)
        except requests.Timeout as e:
            logger.warning(f"Catalog timeout for product {product_id}")
            raise ProductLookupTimeout(product_id) from e
        except RequestException as e:
            logger.error(f"Catalog request failed for product {product_id}: {e}")
            raise CatalogUnavailable(f"Catalog unavailable: {e}") from e

        if resp.status_code == 404:
            return None

        pdata = resp.json()
        return Product(
            id=str(pdata["id"]),
            name=pdata["name"],
            price=Decimal(str(pdata["price"])),
            description=pdata.get("description") or "",
            image_url=pdata.get("imageUrl"),
        )
