from typing import Any


def get_tools(api) -> dict[str, Any]:
    return {
        "get_orders": {
            "func": api.fulfillment.get_orders,
            "title": "Get orders",
            "description": "Retrieve the seller's orders. filter accepts eBay filter syntax, e.g. orderfulfillmentstatus:{NOT_STARTED|IN_PROGRESS}.",
        },
        "get_order": {
            "func": api.fulfillment.get_order,
            "title": "Get order",
            "description": "Get the details of one order by its id.",
        },
        "get_shipping_fulfillments": {
            "func": api.fulfillment.get_shipping_fulfillments,
            "title": "Get shipping fulfillments",
            "description": "List the shipping fulfillments (packages and tracking) recorded for an order.",
        },
        "create_shipping_fulfillment": {
            "func": api.fulfillment.create_shipping_fulfillment,
            "title": "Create shipping fulfillment",
            "description": "Mark line items of an order as shipped. fulfillment holds lineItems, shippingCarrierCode and trackingNumber.",
        },
    }
