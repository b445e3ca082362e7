from typing import Any

from core.client import ApiClient
from utils import api_path, get_endpoint, query_params


class MarketingApi:
    """Marketing API: Promoted Listings campaigns, their ads, and item promotions."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.base_path = get_endpoint("marketing")

    async def get_campaigns(
        self,
        campaign_status: str | None = None,
        marketplace_id: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.client.get(
            api_path(self.base_path, "ad_campaign"),
            query_params(campaign_status=campaign_status, marketplace_id=marketplace_id, limit=limit, offset=offset),
        )

    async def get_campaign(self, campaign_id: str) -> Any:
        return await self.client.get(api_path(self.base_path, "ad_campaign", campaign_id))

    async def pause_campaign(self, campaign_id: str) -> Any:
        return await self.client.post(api_path(self.base_path, "ad_campaign", campaign_id, "pause"))

    async def resume_campaign(self, campaign_id: str) -> Any:
        return await self.client.post(api_path(self.base_path, "ad_campaign", campaign_id, "resume"))

    async def get_ads(
        self,
        campaign_id: str,
        ad_group_ids: str | None = None,
        ad_status: str | None = None,
        listing_ids: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.client.get(
            api_path(self.base_path, "ad_campaign", campaign_id, "ad"),
            query_params(
                ad_group_ids=ad_group_ids,
                ad_status=ad_status,
                listing_ids=listing_ids,
                limit=limit,
                offset=offset,
            ),
        )

    async def get_promotions(
        self,
        marketplace_id: str | None = None,
        promotion_status: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.client.get(
            api_path(self.base_path, "promotion"),
            query_params(marketplace_id=marketplace_id, promotion_status=promotion_status, limit=limit, offset=offset),
        )
