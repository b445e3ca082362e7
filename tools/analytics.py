from typing import Any


def get_tools(api) -> dict[str, Any]:
    return {
        "get_traffic_report": {
            "func": api.analytics.get_traffic_report,
            "title": "Get traffic report",
            "description": "Get listing traffic metrics. dimension is DAY or LISTING; metric is a comma-separated list such as CLICK_THROUGH_RATE,LISTING_IMPRESSION_TOTAL; filter must include marketplace_ids and date_range.",
        },
        "find_seller_standards_profiles": {
            "func": api.analytics.find_seller_standards_profiles,
            "title": "Find seller standards profiles",
            "description": "Get all seller standards profiles for the seller.",
        },
        "get_seller_standards_profile": {
            "func": api.analytics.get_seller_standards_profile,
            "title": "Get seller standards profile",
            "description": "Get one seller standards profile. program is e.g. PROGRAM_US; cycle is CURRENT or PROJECTED.",
        },
        "get_customer_service_metric": {
            "func": api.analytics.get_customer_service_metric,
            "title": "Get customer service metric",
            "description": "Get a customer service metric (ITEM_NOT_AS_DESCRIBED or ITEM_NOT_RECEIVED) for an evaluation type (CURRENT or PROJECTED) and marketplace.",
        },
    }
