import json

import pytest


@pytest.mark.asyncio
async def test_get_orders_without_optional_arguments_sends_no_query(seller_api, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/fulfillment/v1/order", json={"orders": [], "total": 0})

    await seller_api.fulfillment.get_orders()

    request = fake_ebay.api_requests[0]
    assert request.url.query == b""
    assert "limit" not in request.url.params


@pytest.mark.asyncio
async def test_get_orders_maps_arguments_to_query_names(seller_api, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/fulfillment/v1/order", json={"orders": []})

    await seller_api.fulfillment.get_orders(filter="orderfulfillmentstatus:{NOT_STARTED}", limit=10, order_ids="1-2,3-4")

    params = dict(fake_ebay.api_requests[0].url.params)
    assert params == {"filter": "orderfulfillmentstatus:{NOT_STARTED}", "limit": "10", "orderIds": "1-2,3-4"}


@pytest.mark.asyncio
async def test_path_parameters_are_quoted_as_single_segments(seller_api, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/inventory/v1/inventory_item/SKU%201%2FA", json={"sku": "SKU 1/A"})

    result = await seller_api.inventory.get_inventory_item("SKU 1/A")

    assert result == {"sku": "SKU 1/A"}


@pytest.mark.asyncio
async def test_create_or_replace_inventory_item_puts_the_item_body(seller_api, fake_ebay) -> None:
    fake_ebay.route("PUT", "/sell/inventory/v1/inventory_item/ABC-1", status=204)
    item = {"availability": {"shipToLocationAvailability": {"quantity": 3}}, "condition": "NEW"}

    result = await seller_api.inventory.create_or_replace_inventory_item("ABC-1", item)

    request = fake_ebay.api_requests[0]
    assert result is None
    assert request.method == "PUT"
    assert json.loads(request.content) == item


@pytest.mark.asyncio
async def test_publish_offer_posts_without_body(seller_api, fake_ebay) -> None:
    fake_ebay.route("POST", "/sell/inventory/v1/offer/5001/publish", json={"listingId": "110551"})

    assert await seller_api.inventory.publish_offer("5001") == {"listingId": "110551"}
    assert fake_ebay.api_requests[0].content == b""


@pytest.mark.asyncio
async def test_custom_policies_omit_policy_types_when_absent(seller_api, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/account/v1/custom_policy", json={"customPolicies": []})

    await seller_api.account.get_custom_policies()
    await seller_api.account.get_custom_policies(policy_types="PRODUCT_COMPLIANCE")

    first, second = fake_ebay.api_requests
    assert "policy_types" not in first.url.params
    assert second.url.params["policy_types"] == "PRODUCT_COMPLIANCE"


@pytest.mark.asyncio
async def test_customer_service_metric_combines_path_and_query(seller_api, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/analytics/v1/customer_service_metric/ITEM_NOT_RECEIVED/CURRENT", json={"dimensionMetrics": []})

    await seller_api.analytics.get_customer_service_metric("ITEM_NOT_RECEIVED", "CURRENT", "EBAY_US")

    assert dict(fake_ebay.api_requests[0].url.params) == {"evaluation_marketplace_id": "EBAY_US"}


@pytest.mark.asyncio
async def test_metadata_policies_are_scoped_to_marketplace(seller_api, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/metadata/v1/marketplace/EBAY_GB/get_item_condition_policies", json={"itemConditionPolicies": []})

    await seller_api.metadata.get_item_condition_policies("EBAY_GB", filter="categoryIds:{100}")

    assert fake_ebay.api_requests[0].url.params["filter"] == "categoryIds:{100}"


@pytest.mark.asyncio
async def test_negotiation_sends_marketplace_header(seller_api, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/negotiation/v1/find_eligible_items", json={"eligibleItems": []})

    await seller_api.negotiation.find_eligible_items("EBAY_US", limit=5)

    request = fake_ebay.api_requests[0]
    assert request.headers["X-EBAY-C-MARKETPLACE-ID"] == "EBAY_US"
    assert dict(request.url.params) == {"limit": "5"}


@pytest.mark.asyncio
async def test_respond_to_feedback_builds_request_body(seller_api, fake_ebay) -> None:
    fake_ebay.route("POST", "/commerce/feedback/v1/respond_to_feedback", status=204)

    await seller_api.feedback.respond_to_feedback("fb-1", "Thanks for your purchase!")

    assert json.loads(fake_ebay.api_requests[0].content) == {"feedbackId": "fb-1", "responseText": "Thanks for your purchase!"}
