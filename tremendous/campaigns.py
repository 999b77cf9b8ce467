from __future__ import annotations

from typing import TYPE_CHECKING, List

from .models import Campaign, CampaignListResponse, CampaignResponse

if TYPE_CHECKING:
    from .client import _BaseClient


class CampaignsService:
    """Client for the `/campaigns` endpoints (read-only)."""

    def __init__(self, client: "_BaseClient") -> None:
        self._client = client

    def list(self) -> List[Campaign]:
        payload = self._client._request(
            "GET", "campaigns",
            operation="campaigns list",
            envelope=CampaignListResponse,
        )
        return payload.campaigns

    def retrieve(self, campaign_id: str) -> Campaign:
        campaign_id = campaign_id.strip()
        payload = self._client._request(
            "GET", f"campaigns/{campaign_id}",
            operation="single campaign",
            envelope=CampaignResponse,
        )
        return payload.campaign
