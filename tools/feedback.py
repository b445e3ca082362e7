from typing import Any


def get_tools(api) -> dict[str, Any]:
    return {
        "get_awaiting_feedback": {
            "func": api.feedback.get_awaiting_feedback,
            "title": "Get awaiting feedback",
            "description": "List order line items for which the seller has not yet left feedback.",
        },
        "get_feedback": {
            "func": api.feedback.get_feedback,
            "title": "Get feedback",
            "description": "Get the feedback recorded for a transaction.",
        },
        "get_feedback_rating_summary": {
            "func": api.feedback.get_feedback_rating_summary,
            "title": "Get feedback rating summary",
            "description": "Get the seller's feedback rating summary.",
        },
        "leave_feedback_for_buyer": {
            "func": api.feedback.leave_feedback_for_buyer,
            "title": "Leave feedback for buyer",
            "description": "Leave feedback for a buyer. feedback_data is the eBay LeaveFeedbackRequest JSON.",
        },
        "respond_to_feedback": {
            "func": api.feedback.respond_to_feedback,
            "title": "Respond to feedback",
            "description": "Post a public reply to feedback the seller received.",
        },
    }
