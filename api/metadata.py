from typing import Any

from core.client import ApiClient
from utils import api_path, get_endpoint, query_params


class MetadataApi:
    """Metadata API: per-marketplace listing policies."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.base_path = get_endpoint("metadata")

    async def get_category_policies(self, marketplace_id: str, filter: str | None = None) -> Any:
        return await self.client.get(
            api_path(self.base_path, "marketplace", marketplace_id, "get_category_policies"),
            query_params(filter=filter),
        )

    async def get_item_condition_policies(self, marketplace_id: str, filter: str | None = None) -> Any:
        return await self.client.get(
            api_path(self.base_path, "marketplace", marketplace_id, "get_item_condition_policies"),
            query_params(filter=filter),
        )

    async def get_return_policies(self, marketplace_id: str, filter: str | None = None) -> Any:
        return await self.client.get(
            api_path(self.base_path, "marketplace", marketplace_id, "get_return_policies"),
            query_params(filter=filter),
        )

    async def get_hazardous_materials_labels(self, marketplace_id: str) -> Any:
        return await self.client.get(
            api_path(self.base_path, "marketplace", marketplace_id, "get_hazardous_materials_labels")
        )
