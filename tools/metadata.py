from typing import Any


def get_tools(api) -> dict[str, Any]:
    return {
        "get_category_policies": {
            "func": api.metadata.get_category_policies,
            "title": "Get category policies",
            "description": "Get listing policies for the categories of a marketplace, optionally filtered (e.g. categoryIds:{100|200}).",
        },
        "get_item_condition_policies": {
            "func": api.metadata.get_item_condition_policies,
            "title": "Get item condition policies",
            "description": "Get the item conditions allowed per category in a marketplace.",
        },
        "get_marketplace_return_policies": {
            "func": api.metadata.get_return_policies,
            "title": "Get marketplace return policies",
            "description": "Get the return policy rules eBay enforces per category in a marketplace.",
        },
        "get_hazardous_materials_labels": {
            "func": api.metadata.get_hazardous_materials_labels,
            "title": "Get hazardous materials labels",
            "description": "Get the hazard statements, pictograms and signal words available in a marketplace.",
        },
    }
