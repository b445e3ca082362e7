from typing import Any


def get_tools(api) -> dict[str, Any]:
    return {
        "get_custom_policies": {
            "func": api.account.get_custom_policies,
            "title": "Get custom policies",
            "description": "Retrieve custom policies defined for the seller account. policy_types is a comma-delimited list (e.g. PRODUCT_COMPLIANCE,TAKE_BACK).",
        },
        "get_custom_policy": {
            "func": api.account.get_custom_policy,
            "title": "Get custom policy",
            "description": "Retrieve one custom policy by its id.",
        },
        "get_fulfillment_policies": {
            "func": api.account.get_fulfillment_policies,
            "title": "Get fulfillment policies",
            "description": "Get the seller's fulfillment (shipping) policies for a marketplace such as EBAY_US.",
        },
        "get_payment_policies": {
            "func": api.account.get_payment_policies,
            "title": "Get payment policies",
            "description": "Get the seller's payment policies for a marketplace such as EBAY_US.",
        },
        "get_return_policies": {
            "func": api.account.get_return_policies,
            "title": "Get return policies",
            "description": "Get the seller's return policies for a marketplace such as EBAY_US.",
        },
        "get_privileges": {
            "func": api.account.get_privileges,
            "title": "Get seller privileges",
            "description": "Get the seller account's selling limits and registration status.",
        },
    }
