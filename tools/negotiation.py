from typing import Any


def get_tools(api) -> dict[str, Any]:
    return {
        "find_eligible_items": {
            "func": api.negotiation.find_eligible_items,
            "title": "Find items eligible for offers",
            "description": "List the seller's listings with interested buyers that can receive a seller-initiated offer.",
        },
        "send_offer_to_interested_buyers": {
            "func": api.negotiation.send_offer_to_interested_buyers,
            "title": "Send offer to interested buyers",
            "description": "Send a discount offer to buyers watching a listing. offer_data is the eBay CreateOffersRequest JSON.",
        },
    }
