from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from .models import CreateProductArgs, Product, ProductListResponse, ProductResponse

if TYPE_CHECKING:
    from .client import _BaseClient


@dataclass(frozen=True)
class ListProductsOptions:
    """Optional filters for ProductsService.list()."""
    country: str = ""  # e.g. "US" or "CA"

    def to_params(self) -> Dict[str, str]:
        # Empty filters are left out entirely rather than sent blank.
        params: Dict[str, str] = {}
        if self.country.strip():
            params["country"] = self.country.strip()
        return params


class ProductsService:
    """Client for the `/products` endpoints."""

    def __init__(self, client: "_BaseClient") -> None:
        self._client = client

    def list(self, options: Optional[ListProductsOptions] = None) -> List[Product]:
        params = options.to_params() if options is not None else {}
        payload = self._client._request(
            "GET", "products",
            operation="products list",
            envelope=ProductListResponse,
            params=params,
        )
        return payload.products

    def retrieve(self, product_id: str) -> Product:
        product_id = product_id.strip()
        payload = self._client._request(
            "GET", f"products/{product_id}",
            operation="single product",
            envelope=ProductResponse,
        )
        return payload.product

    def create(self, args: CreateProductArgs) -> Product:
        payload = self._client._request(
            "POST", "products",
            operation="create product response",
            envelope=ProductResponse,
            expected=(200, 201),
            json=args.to_payload(),
        )
        return payload.product
