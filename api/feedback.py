from typing import Any

from core.client import ApiClient
from utils import api_path, get_endpoint, query_params


class FeedbackApi:
    """Feedback API: feedback left for and by the seller."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.base_path = get_endpoint("feedback")

    async def get_awaiting_feedback(
        self,
        filter: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.client.get(
            api_path(self.base_path, "awaiting_feedback"),
            query_params(filter=filter, limit=limit, offset=offset),
        )

    async def get_feedback(self, transaction_id: str) -> Any:
        return await self.client.get(api_path(self.base_path, "feedback"), query_params(transaction_id=transaction_id))

    async def get_feedback_rating_summary(self) -> Any:
        return await self.client.get(api_path(self.base_path, "feedback_rating_summary"))

    async def leave_feedback_for_buyer(self, feedback_data: dict[str, Any]) -> Any:
        return await self.client.post(api_path(self.base_path, "feedback"), feedback_data)

    async def respond_to_feedback(self, feedback_id: str, response_text: str) -> Any:
        return await self.client.post(
            api_path(self.base_path, "respond_to_feedback"),
            {"feedbackId": feedback_id, "responseText": response_text},
        )
