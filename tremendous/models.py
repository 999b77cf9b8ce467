"""Pydantic models mirroring the Tremendous API JSON shapes.

Response models are decode-only; the *Args models are request bodies.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, get_origin

from pydantic import BaseModel, Field, model_serializer, model_validator


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, dict, tuple)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


class TremendousModel(BaseModel):
    """Shared base: fields listed in omit_if_empty are dropped from the payload
    when they hold a zero value. Everything else is always sent, None as null."""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def null_as_default(cls, data: Any) -> Any:
        # JSON null decodes to the field default; a null list becomes [].
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name, field in cls.model_fields.items():
            if name not in cleaned or cleaned[name] is not None:
                continue
            if not field.is_required():
                del cleaned[name]
            elif get_origin(field.annotation) is list:
                cleaned[name] = []
        return cleaned

    @model_serializer(mode="wrap")
    def drop_empty_fields(self, handler: Any) -> Dict[str, Any]:
        data = handler(self)
        if not self.omit_if_empty:
            return data
        return {
            key: value
            for key, value in data.items()
            if not (key in self.omit_if_empty and _is_empty(value))
        }

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


# --- Campaigns ---

class Campaign(TremendousModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


# --- Orders ---

class Payment(TremendousModel):
    """Payment used to fund an order."""
    funding_source_id: Optional[str] = None
    amount: Optional[float] = None
    currency_code: Optional[str] = None
    object: Optional[str] = None


class OrderDenomination(TremendousModel):
    """Monetary value of a reward."""
    denomination: float = 0.0
    currency_code: str = ""


class OrderDelivery(TremendousModel):
    method: str = ""  # EMAIL, LINK or PHONE
    status: str = ""
    link: str = ""


class OrderRecipient(TremendousModel):
    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"email", "name"})

    email: Optional[str] = None
    name: Optional[str] = None


class Reward(TremendousModel):
    """A single payout belonging to an order."""
    id: str = ""
    order_id: Optional[str] = None
    created_at: Optional[datetime] = None
    value: OrderDenomination = Field(default_factory=OrderDenomination)
    delivery: OrderDelivery = Field(default_factory=OrderDelivery)
    recipient: OrderRecipient = Field(default_factory=OrderRecipient)


class Order(TremendousModel):
    id: str = ""
    external_id: Optional[str] = None
    created_at: Optional[datetime] = None
    message: Optional[str] = None
    status: Optional[str] = None
    payment: Payment = Field(default_factory=Payment)
    rewards: List[Reward] = Field(default_factory=list)


class OrderPaymentArg(TremendousModel):
    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"funding_source_id"})

    funding_source_id: str = ""


class RewardArg(TremendousModel):
    """Reward half of an order creation request.

    campaign_id and products are always sent; None goes out as null."""
    campaign_id: Optional[str] = None
    delivery: OrderDelivery = Field(default_factory=OrderDelivery)
    products: Optional[List[str]] = None
    recipient: OrderRecipient = Field(default_factory=OrderRecipient)
    value: OrderDenomination = Field(default_factory=OrderDenomination)


class OrderArgs(TremendousModel):
    """
    Body of POST /orders.

        campaign_id:  sent as null when absent
        external_id:  sent as null when absent
        payment:      funding_source_id must be non-empty
        reward:       recipient, value, delivery and optional product ids

    Example:
        OrderArgs(
            payment=OrderPaymentArg(funding_source_id="BALANCE"),
            reward=RewardArg(
                campaign_id="CAMP1",
                recipient=OrderRecipient(name="Jane", email="jane@example.com"),
                value=OrderDenomination(denomination=5.0, currency_code="USD"),
                delivery=OrderDelivery(method="EMAIL"),
            ),
        )
    """
    campaign_id: Optional[str] = None
    external_id: Optional[str] = None
    payment: OrderPaymentArg = Field(default_factory=OrderPaymentArg)
    reward: RewardArg = Field(default_factory=RewardArg)


# --- Products ---

class Product(TremendousModel):
    id: Optional[str] = None
    name: Optional[str] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    object: Optional[str] = None


class CreateProduct(TremendousModel):
    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"name", "brand", "description", "price", "currency"})

    name: Optional[str] = None
    brand: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None


class CreateProductArgs(TremendousModel):
    product: CreateProduct


# --- Response envelopes ---

class CampaignListResponse(TremendousModel):
    campaigns: List[Campaign]


class CampaignResponse(TremendousModel):
    campaign: Campaign


class OrderListResponse(TremendousModel):
    orders: List[Order]


class OrderResponse(TremendousModel):
    order: Order


class ProductListResponse(TremendousModel):
    products: List[Product]


class ProductResponse(TremendousModel):
    product: Product
