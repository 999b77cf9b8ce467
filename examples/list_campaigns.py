# Usage: TREMENDOUS_API_KEY=... python examples/list_campaigns.py
from dotenv import load_dotenv

from tremendous import TremendousAPI, TremendousAPIError

load_dotenv()

with TremendousAPI.from_env() as api:
    try:
        campaigns = api.campaigns.list()
    except TremendousAPIError as exc:
        raise SystemExit(f"unable to list campaigns: {exc}")

    for campaign in campaigns:
        print(f"{campaign.id}\t{campaign.status or ''}\t{campaign.name or ''}")
