# Usage: TREMENDOUS_API_KEY=... python examples/list_orders.py
from dotenv import load_dotenv

from tremendous import TremendousAPI, TremendousAPIError

load_dotenv()

with TremendousAPI.from_env() as api:
    try:
        orders = api.orders.list()
    except TremendousAPIError as exc:
        raise SystemExit(f"unable to list orders: {exc}")

    for order in orders:
        print(f"{order.id}\t{order.status or ''}\t{len(order.rewards)} reward(s)")
