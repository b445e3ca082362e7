"""Per-resource-group wrappers around the eBay Sell REST APIs."""
from core.client import ApiClient
from core.config import get_config

from api.account import AccountApi
from api.analytics import AnalyticsApi
from api.feedback import FeedbackApi
from api.fulfillment import FulfillmentApi
from api.inventory import InventoryApi
from api.marketing import MarketingApi
from api.metadata import MetadataApi
from api.negotiation import NegotiationApi
from api.status import ApiStatusFeed


class SellerApi:
    """Facade holding one wrapper per resource group, all sharing one ApiClient."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.account = AccountApi(client)
        self.inventory = InventoryApi(client)
        self.fulfillment = FulfillmentApi(client)
        self.marketing = MarketingApi(client)
        self.analytics = AnalyticsApi(client)
        self.metadata = MetadataApi(client)
        self.feedback = FeedbackApi(client)
        self.negotiation = NegotiationApi(client)
        self.status_feed = ApiStatusFeed(client.http, get_config().get("api_status_feed_url", ""))

    @classmethod
    def from_config(cls) -> "SellerApi":
        return cls(ApiClient.from_config())

    def is_authenticated(self) -> bool:
        return self.client.is_authenticated()

    async def aclose(self) -> None:
        await self.client.aclose()


__all__ = [
    "SellerApi",
    "AccountApi",
    "AnalyticsApi",
    "FeedbackApi",
    "FulfillmentApi",
    "InventoryApi",
    "MarketingApi",
    "MetadataApi",
    "NegotiationApi",
    "ApiStatusFeed",
]
