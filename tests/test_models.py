from datetime import datetime, timezone

from tremendous import (
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
from tremendous.models import CampaignListResponse, OrderListResponse


def test_nullable_identifiers_always_sent():
    payload = OrderArgs().to_payload()
    assert payload["campaign_id"] is None
    assert payload["external_id"] is None
    assert payload["reward"]["campaign_id"] is None
    assert payload["reward"]["products"] is None


def test_empty_optional_fields_are_dropped():
    payload = OrderArgs().to_payload()
    assert payload["payment"] == {}
    assert payload["reward"]["recipient"] == {}


def test_plain_strings_sent_empty_not_null():
    payload = OrderArgs(reward=RewardArg(value=OrderDenomination(denomination=1.0))).to_payload()
    assert payload["reward"]["delivery"] == {"method": "", "status": "", "link": ""}
    assert payload["reward"]["value"] == {"denomination": 1.0, "currency_code": ""}


def test_create_product_drops_zero_values():
    assert CreateProduct(name="Card", price=0).to_payload() == {"name": "Card"}


def test_order_survives_encode_decode():
    order = Order(
        id="ORD1",
        external_id="EXT-1",
        created_at=datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc),
        message="thanks",
        status="EXECUTED",
        payment=Payment(funding_source_id="BALANCE", amount=5.0, currency_code="USD"),
        rewards=[Reward(
            id="RWD1",
            order_id="ORD1",
            created_at=datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc),
            value=OrderDenomination(denomination=5.0, currency_code="USD"),
            delivery=OrderDelivery(method="EMAIL", status="SUCCEEDED"),
            recipient=OrderRecipient(email="jane@example.com"),
        )],
    )
    assert Order.model_validate(order.model_dump(mode="json")) == order


def test_reward_arg_survives_encode_decode():
    arg = RewardArg(campaign_id="C1", products=["P1"], value=OrderDenomination(denomination=2.5, currency_code="EUR"))
    assert RewardArg.model_validate(arg.to_payload()) == arg


def test_unknown_response_fields_ignored():
    order = Order.model_validate({"id": "ORD1", "payment": {"subtotal": 10.0}, "channel": "API"})
    assert order.id == "ORD1"
    assert order.rewards == []


def test_order_args_survive_encode_decode():
    args = OrderArgs(
        campaign_id="C1",
        payment=OrderPaymentArg(funding_source_id="BALANCE"),
        reward=RewardArg(
            recipient=OrderRecipient(name="Jane", email="jane@example.com"),
            value=OrderDenomination(denomination=5.0, currency_code="USD"),
            delivery=OrderDelivery(method="EMAIL"),
        ),
    )
    assert OrderArgs.model_validate(args.to_payload()) == args


def test_create_product_args_survive_encode_decode():
    args = CreateProductArgs(product=CreateProduct(name="Card", brand="Acme", price=10.0, currency="USD"))
    assert CreateProductArgs.model_validate(args.to_payload()) == args
    sparse = CreateProduct(name="Card")
    assert CreateProduct.model_validate(sparse.to_payload()) == sparse


def test_campaign_and_product_survive_encode_decode():
    campaign = Campaign(id="C1", name="Summer", status="active")
    assert Campaign.model_validate(campaign.model_dump(mode="json")) == campaign
    product = Product(id="P1", name="Card", brand="Acme", price=25.0, currency="USD", object="product")
    assert Product.model_validate(product.model_dump(mode="json")) == product


def test_null_nested_values_decode_to_defaults():
    order = Order.model_validate({
        "id": "O1",
        "payment": None,
        "rewards": [{"id": "R1", "value": None, "delivery": None, "recipient": None}],
    })
    assert order.payment == Payment()
    assert order.rewards[0].delivery == OrderDelivery()
    assert order.rewards[0].value == OrderDenomination()
    assert order.rewards[0].recipient == OrderRecipient()


def test_null_strings_in_delivery_decode_empty():
    delivery = OrderDelivery.model_validate({"method": "LINK", "status": None, "link": None})
    assert delivery == OrderDelivery(method="LINK")


def test_missing_order_id_decodes_to_zero_value():
    assert Order.model_validate({"status": "PENDING"}).id == ""


def test_null_envelope_list_is_empty():
    assert OrderListResponse.model_validate({"orders": None}).orders == []
    assert CampaignListResponse.model_validate_json(b'{"campaigns": null}').campaigns == []
