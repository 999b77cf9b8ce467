# Places a 1.00 USD LINK reward against the first campaign, then reads it back.
# Usage: TREMENDOUS_API_KEY=... python examples/place_order.py
import logging

from dotenv import load_dotenv

from tremendous import (
    OrderArgs,
    OrderDelivery,
    OrderDenomination,
    OrderPaymentArg,
    OrderRecipient,
    RewardArg,
    TremendousAPI,
    TremendousAPIError,
)

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
load_dotenv()

with TremendousAPI.from_env() as api:
    try:
        campaigns = api.campaigns.list()
        if not campaigns:
            raise SystemExit("no campaigns available to order against")

        args = OrderArgs(
            payment=OrderPaymentArg(funding_source_id="BALANCE"),
            reward=RewardArg(
                campaign_id=campaigns[0].id,
                recipient=OrderRecipient(name="Testy McTesterson", email="testy@example.com"),
                value=OrderDenomination(denomination=1.00, currency_code="USD"),
                delivery=OrderDelivery(method="LINK"),
            ),
        )
        order = api.orders.create(args)
        print("Created order:", order)

        print("Retrieved order:", api.orders.retrieve(order.id))
    except TremendousAPIError as exc:
        raise SystemExit(f"order failed: {exc}")
