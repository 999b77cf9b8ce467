from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, List

from .errors import ClientValidationError
from .models import Order, OrderArgs, OrderListResponse, OrderResponse

if TYPE_CHECKING:
    from .client import _BaseClient

logger = logging.getLogger(__name__)


class OrdersService:
    """Client for the `/orders` endpoints."""

    def __init__(self, client: "_BaseClient") -> None:
        self._client = client

    def list(self) -> List[Order]:
        """Fetch orders. Only the first page the API returns is read."""
        payload = self._client._request(
            "GET", "orders",
            operation="orders list",
            envelope=OrderListResponse,
        )
        return payload.orders

    def retrieve(self, order_id: str) -> Order:
        order_id = order_id.strip()
        payload = self._client._request(
            "GET", f"orders/{order_id}",
            operation="single order",
            envelope=OrderResponse,
        )
        return payload.order

    def create(self, args: OrderArgs) -> Order:
        """
        Place a new order. Raises ClientValidationError without touching the
        network when payment.funding_source_id is empty.
        """
        if not args.payment.funding_source_id.strip():
            raise ClientValidationError(
                "the 'payment.funding_source_id' field is required but was empty",
                field="payment.funding_source_id",
            )

        body = args.to_payload()
        logger.debug("create order request: %s", json.dumps(body))
        payload = self._client._request(
            "POST", "orders",
            operation="create order response",
            envelope=OrderResponse,
            expected=(200, 201),
            json=body,
        )
        return payload.order
