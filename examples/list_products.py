# Usage: TREMENDOUS_API_KEY=... python examples/list_products.py [COUNTRY]
import sys

from dotenv import load_dotenv

from tremendous import ListProductsOptions, TremendousAPI, TremendousAPIError

load_dotenv()

country = sys.argv[1] if len(sys.argv) > 1 else ""

with TremendousAPI.from_env() as api:
    try:
        products = api.products.list(ListProductsOptions(country=country))
    except TremendousAPIError as exc:
        raise SystemExit(f"unable to list products: {exc}")

    for product in products:
        print(f"{product.id}\t{product.name or ''}")
