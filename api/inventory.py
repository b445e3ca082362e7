from typing import Any

from core.client import ApiClient
from utils import api_path, get_endpoint, query_params


class InventoryApi:
    """Inventory API: inventory items (keyed by SKU) and the offers that list them."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.base_path = get_endpoint("inventory")

    async def get_inventory_items(self, limit: int | None = None, offset: int | None = None) -> Any:
        return await self.client.get(
            api_path(self.base_path, "inventory_item"),
            query_params(limit=limit, offset=offset),
        )

    async def get_inventory_item(self, sku: str) -> Any:
        return await self.client.get(api_path(self.base_path, "inventory_item", sku))

    async def create_or_replace_inventory_item(self, sku: str, inventory_item: dict[str, Any]) -> Any:
        """PUT the full inventory item record for `sku`, creating it if it does not exist."""
        return await self.client.put(api_path(self.base_path, "inventory_item", sku), inventory_item)

    async def delete_inventory_item(self, sku: str) -> Any:
        return await self.client.delete(api_path(self.base_path, "inventory_item", sku))

    async def get_offers(
        self,
        sku: str | None = None,
        marketplace_id: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.client.get(
            api_path(self.base_path, "offer"),
            query_params(sku=sku, marketplace_id=marketplace_id, limit=limit, offset=offset),
        )

    async def get_offer(self, offer_id: str) -> Any:
        return await self.client.get(api_path(self.base_path, "offer", offer_id))

    async def create_offer(self, offer: dict[str, Any]) -> Any:
        return await self.client.post(api_path(self.base_path, "offer"), offer)

    async def publish_offer(self, offer_id: str) -> Any:
        """Publish an offer, turning it into a live listing. Returns the listing id."""
        return await self.client.post(api_path(self.base_path, "offer", offer_id, "publish"))

    async def withdraw_offer(self, offer_id: str) -> Any:
        return await self.client.post(api_path(self.base_path, "offer", offer_id, "withdraw"))
