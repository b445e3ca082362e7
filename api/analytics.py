from typing import Any

from core.client import ApiClient
from utils import api_path, get_endpoint, query_params


class AnalyticsApi:
    """Analytics API: listing traffic, seller standards and customer service metrics."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.base_path = get_endpoint("analytics")

    async def get_traffic_report(self, dimension: str, filter: str, metric: str, sort: str | None = None) -> Any:
        return await self.client.get(
            api_path(self.base_path, "traffic_report"),
            query_params(dimension=dimension, filter=filter, metric=metric, sort=sort),
        )

    async def find_seller_standards_profiles(self) -> Any:
        return await self.client.get(api_path(self.base_path, "seller_standards_profile"))

    async def get_seller_standards_profile(self, program: str, cycle: str) -> Any:
        return await self.client.get(api_path(self.base_path, "seller_standards_profile", program, cycle))

    async def get_customer_service_metric(
        self,
        customer_service_metric_type: str,
        evaluation_type: str,
        evaluation_marketplace_id: str,
    ) -> Any:
        return await self.client.get(
            api_path(self.base_path, "customer_service_metric", customer_service_metric_type, evaluation_type),
            query_params(evaluation_marketplace_id=evaluation_marketplace_id),
        )
