from typing import Any


def get_tools(api) -> dict[str, Any]:
    return {
        "get_campaigns": {
            "func": api.marketing.get_campaigns,
            "title": "Get campaigns",
            "description": "Get Promoted Listings campaigns, optionally filtered by status (RUNNING, PAUSED, ENDED) and marketplace.",
        },
        "get_campaign": {
            "func": api.marketing.get_campaign,
            "title": "Get campaign",
            "description": "Get one campaign by its id.",
        },
        "pause_campaign": {
            "func": api.marketing.pause_campaign,
            "title": "Pause campaign",
            "description": "Pause a running campaign.",
        },
        "resume_campaign": {
            "func": api.marketing.resume_campaign,
            "title": "Resume campaign",
            "description": "Resume a paused campaign.",
        },
        "get_ads": {
            "func": api.marketing.get_ads,
            "title": "Get ads",
            "description": "Get the ads of a campaign, optionally filtered by ad group, status or listing ids.",
        },
        "get_promotions": {
            "func": api.marketing.get_promotions,
            "title": "Get promotions",
            "description": "Get the seller's item promotions for a marketplace.",
        },
    }
