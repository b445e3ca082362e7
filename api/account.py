from typing import Any

from core.client import ApiClient
from utils import api_path, get_endpoint, query_params


class AccountApi:
    """Account API: seller business policies and privileges."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.base_path = get_endpoint("account")

    async def get_custom_policies(self, policy_types: str | None = None) -> Any:
        """Retrieve custom policies, optionally restricted to a comma-delimited list of policy types."""
        return await self.client.get(
            api_path(self.base_path, "custom_policy"),
            query_params(policy_types=policy_types),
        )

    async def get_custom_policy(self, custom_policy_id: str) -> Any:
        return await self.client.get(api_path(self.base_path, "custom_policy", custom_policy_id))

    async def get_fulfillment_policies(self, marketplace_id: str | None = None) -> Any:
        return await self.client.get(
            api_path(self.base_path, "fulfillment_policy"),
            query_params(marketplace_id=marketplace_id),
        )

    async def get_payment_policies(self, marketplace_id: str | None = None) -> Any:
        return await self.client.get(
            api_path(self.base_path, "payment_policy"),
            query_params(marketplace_id=marketplace_id),
        )

    async def get_return_policies(self, marketplace_id: str | None = None) -> Any:
        return await self.client.get(
            api_path(self.base_path, "return_policy"),
            query_params(marketplace_id=marketplace_id),
        )

    async def get_privileges(self) -> Any:
        return await self.client.get(api_path(self.base_path, "privilege"))
