from typing import Any

from core.client import ApiClient
from utils import api_path, get_endpoint, query_params


class NegotiationApi:
    """Negotiation API: seller-initiated offers to watchers of a listing.

    eBay selects the marketplace from the X-EBAY-C-MARKETPLACE-ID header here,
    not from a query parameter.
    """

    def __init__(self, client: ApiClient):
        self.client = client
        self.base_path = get_endpoint("negotiation")

    async def find_eligible_items(
        self,
        marketplace_id: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.client.get(
            api_path(self.base_path, "find_eligible_items"),
            query_params(limit=limit, offset=offset),
            headers={"X-EBAY-C-MARKETPLACE-ID": marketplace_id},
        )

    async def send_offer_to_interested_buyers(self, marketplace_id: str, offer_data: dict[str, Any]) -> Any:
        return await self.client.post(
            api_path(self.base_path, "send_offer_to_interested_buyers"),
            offer_data,
            headers={"X-EBAY-C-MARKETPLACE-ID": marketplace_id},
        )
