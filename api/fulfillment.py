from typing import Any

from core.client import ApiClient
from utils import api_path, get_endpoint, query_params


class FulfillmentApi:
    """Fulfillment API: orders and their shipping fulfillments."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.base_path = get_endpoint("fulfillment")

    async def get_orders(
        self,
        filter: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        order_ids: str | None = None,
    ) -> Any:
        """Search orders.

        Args:
            filter: eBay filter expression, e.g. ``orderfulfillmentstatus:{NOT_STARTED|IN_PROGRESS}``.
            limit: Page size (eBay caps this at 200).
            offset: Number of orders to skip.
            order_ids: Comma-separated order ids; eBay ignores `filter` when this is set.
        """
        return await self.client.get(
            api_path(self.base_path, "order"),
            query_params(filter=filter, limit=limit, offset=offset, orderIds=order_ids),
        )

    async def get_order(self, order_id: str) -> Any:
        return await self.client.get(api_path(self.base_path, "order", order_id))

    async def get_shipping_fulfillments(self, order_id: str) -> Any:
        return await self.client.get(api_path(self.base_path, "order", order_id, "shipping_fulfillment"))

    async def create_shipping_fulfillment(self, order_id: str, fulfillment: dict[str, Any]) -> Any:
        return await self.client.post(
            api_path(self.base_path, "order", order_id, "shipping_fulfillment"),
            fulfillment,
        )
