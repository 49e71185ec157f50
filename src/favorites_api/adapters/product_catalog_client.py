"""External product catalog client."""

import logging
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx

from favorites_api.domain.errors import (
    CatalogFailure,
    CatalogUnavailableError,
    ProductNotFoundError,
)
from favorites_api.domain.favorites import ProductInfo

_NOT_FOUND_STATUSES = {404, 410}
_HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")

_logger = logging.getLogger(__name__)


class ProductCatalogClient(Protocol):
    """Interface for product catalog lookups."""

    async def fetch_product(self, product_id: str) -> ProductInfo:
        """Return product details or raise a not-found/unavailable error."""


@dataclass
class HttpxProductCatalogClient(ProductCatalogClient):
    """HTTPX-backed catalog client tolerant of inconsistent not-found signals."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 5.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 5.0
    ) -> "HttpxProductCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_product(self, product_id: str) -> ProductInfo:
        """Fetch a product, retrying once with the alternate path form.

        The catalog sometimes answers a missing product with an HTML page under
        a 2xx status, and is sensitive to the trailing slash. The canonical
        form is tried first; an HTML or 404 answer triggers a single retry
        without the trailing slash before the product is declared missing.
        """
        response = await self._get(self._product_url(product_id, trailing=True))
        if _looks_missing(response):
            _logger.debug(
                "Catalog lookup for %s looked missing (status=%s), retrying",
                product_id,
                response.status_code,
            )
            response = await self._get(self._product_url(product_id, trailing=False))
        return _parse_product(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _product_url(self, product_id: str, *, trailing: bool) -> str:
        url = f"{self.base_url.rstrip('/')}/{quote(product_id, safe='')}"
        return f"{url}/" if trailing else url

    async def _get(self, url: str) -> httpx.Response:
        try:
            return await self.http_client.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            _logger.warning("Catalog request timed out: %s", url)
            raise CatalogUnavailableError(
                CatalogFailure.TIMEOUT, f"no answer within {self.timeout_seconds}s"
            ) from exc
        except httpx.ConnectError as exc:
            _logger.warning("Catalog unreachable: %s (%s)", url, exc)
            raise CatalogUnavailableError(CatalogFailure.UNREACHABLE) from exc
        except httpx.TransportError as exc:
            _logger.warning("Catalog transport error: %s (%s)", url, exc)
            raise CatalogUnavailableError(
                CatalogFailure.TRANSPORT, type(exc).__name__
            ) from exc
        except httpx.RequestError as exc:
            # Corrupt content-encoding bodies and similar request-level failures.
            _logger.warning("Catalog request failed: %s (%s)", url, exc)
            raise CatalogUnavailableError(
                CatalogFailure.TRANSPORT, type(exc).__name__
            ) from exc


def _is_html(response: httpx.Response) -> bool:
    content_type = response.headers.get("content-type", "").lower()
    return any(kind in content_type for kind in _HTML_CONTENT_TYPES)


def _looks_missing(response: httpx.Response) -> bool:
    return _is_html(response) or response.status_code in _NOT_FOUND_STATUSES


def _parse_product(response: httpx.Response) -> ProductInfo:
    """Classify a final catalog response into a product or an error."""
    if _looks_missing(response):
        raise ProductNotFoundError
    if not response.is_success:
        raise CatalogUnavailableError(
            CatalogFailure.UPSTREAM_ERROR, f"HTTP {response.status_code}"
        )
    try:
        payload = response.json()
    except ValueError as exc:
        raise ProductNotFoundError from exc
    if not isinstance(payload, dict) or payload.get("id") is None:
        raise ProductNotFoundError
    try:
        return _to_product(payload)
    except (TypeError, ValueError) as exc:
        raise ProductNotFoundError from exc


def _to_product(payload: dict[str, object]) -> ProductInfo:
    review_score = payload.get("reviewScore")
    return ProductInfo(
        id=str(payload["id"]),
        title=str(payload.get("title") or ""),
        price=float(payload.get("price") or 0),
        image=str(payload.get("image") or ""),
        review_score=float(review_score) if review_score is not None else None,
    )
