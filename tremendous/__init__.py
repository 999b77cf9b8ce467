import logging
from typing import Optional

import requests

from .client import _BaseClient, PRODUCTION_URL, TESTFLIGHT_URL, VERSION
from .campaigns import CampaignsService
from .errors import (
    ClientValidationError,
    DecodeError,
    TransportError,
    TremendousAPIError,
    UnexpectedStatusError,
)
from .models import (
    Campaign,
    CreateProduct,
    CreateProductArgs,
    Order,
    OrderArgs,
    OrderDelivery,
    OrderDenomination,
    OrderPaymentArg,
    OrderRecipient,
    Payment,
    Product,
    Reward,
    RewardArg,
)
from .orders import OrdersService
from .products import ListProductsOptions, ProductsService

__version__ = VERSION

logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API class = base client + one handle per resource
class TremendousAPI(_BaseClient):
    """Unified client: client.campaigns, client.orders, client.products."""
    def __init__(self, api_key: str, *, production: bool = False, session: Optional[requests.Session] = None, timeout: Optional[float] = None, pool_connections: int = 10, pool_maxsize: int = 10,):
        super().__init__(
            api_key,
            production=production,
            session=session,
            timeout=timeout,
            pool_connections=pool_connections,
            pool_maxsize=pool_maxsize,
        )
        self.campaigns = CampaignsService(self)
        self.orders = OrdersService(self)
        self.products = ProductsService(self)


__all__ = [
    "TremendousAPI",
    "TESTFLIGHT_URL",
    "PRODUCTION_URL",
    "CampaignsService",
    "OrdersService",
    "ProductsService",
    "ListProductsOptions",
    "Campaign",
    "Order",
    "OrderArgs",
    "OrderDelivery",
    "OrderDenomination",
    "OrderPaymentArg",
    "OrderRecipient",
    "Payment",
    "Reward",
    "RewardArg",
    "Product",
    "CreateProduct",
    "CreateProductArgs",
    "TremendousAPIError",
    "TransportError",
    "UnexpectedStatusError",
    "DecodeError",
    "ClientValidationError",
]
