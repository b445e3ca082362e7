from typing import Any


def get_tools(api) -> dict[str, Any]:
    return {
        "get_inventory_items": {
            "func": api.inventory.get_inventory_items,
            "title": "List inventory items",
            "description": "Retrieve the seller's inventory items, paged with limit (max 100) and offset.",
        },
        "get_inventory_item": {
            "func": api.inventory.get_inventory_item,
            "title": "Get inventory item",
            "description": "Get one inventory item by its seller-defined SKU.",
        },
        "create_or_replace_inventory_item": {
            "func": api.inventory.create_or_replace_inventory_item,
            "title": "Create or replace inventory item",
            "description": "Create or fully replace the inventory item for a SKU. inventory_item is the eBay InventoryItem JSON (availability, condition, product).",
        },
        "delete_inventory_item": {
            "func": api.inventory.delete_inventory_item,
            "title": "Delete inventory item",
            "description": "Delete the inventory item for a SKU along with its unpublished offers.",
        },
        "get_offers": {
            "func": api.inventory.get_offers,
            "title": "List offers",
            "description": "Get offers for a SKU, optionally restricted to one marketplace.",
        },
        "get_offer": {
            "func": api.inventory.get_offer,
            "title": "Get offer",
            "description": "Get one offer by its id.",
        },
        "create_offer": {
            "func": api.inventory.create_offer,
            "title": "Create offer",
            "description": "Create an unpublished offer for an inventory item. offer holds SKU, marketplace, format, pricing and policy ids.",
        },
        "publish_offer": {
            "func": api.inventory.publish_offer,
            "title": "Publish offer",
            "description": "Publish an offer to create a live listing. Returns the new listing id.",
        },
        "withdraw_offer": {
            "func": api.inventory.withdraw_offer,
            "title": "Withdraw offer",
            "description": "End the listing of a published offer without deleting the offer.",
        },
    }
