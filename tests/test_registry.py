import pytest

from core.errors import ToolArgumentError, UnknownToolError
from tools.registry import ToolRegistry


@pytest.mark.asyncio
async def test_unknown_tool_fails_before_any_network_call(registry, fake_ebay) -> None:
    with pytest.raises(UnknownToolError) as excinfo:
        await registry.invoke("get_everything", {})

    assert excinfo.value.name == "get_everything"
    assert fake_ebay.requests == []


@pytest.mark.asyncio
async def test_get_orders_end_to_end(registry, fake_ebay) -> None:
    upstream = {
        "href": "https://api.sandbox.ebay.com/sell/fulfillment/v1/order?limit=5&offset=0",
        "total": 1,
        "orders": [{"orderId": "12-34567-89012", "orderFulfillmentStatus": "NOT_STARTED"}],
    }
    fake_ebay.route("GET", "/sell/fulfillment/v1/order", json=upstream)

    result = await registry.invoke("get_orders", {"limit": 5})

    assert result == upstream
    assert fake_ebay.token_calls == 1
    [request] = fake_ebay.api_requests
    assert request.method == "GET"
    assert request.url.path == "/sell/fulfillment/v1/order"
    assert dict(request.url.params) == {"limit": "5"}
    assert request.headers["Authorization"] == "Bearer token-1"


@pytest.mark.asyncio
async def test_omitted_optional_argument_is_absent_from_request(registry, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/inventory/v1/offer", json={"offers": []})

    await registry.invoke("get_offers", {"sku": "ABC-1"})

    assert dict(fake_ebay.api_requests[0].url.params) == {"sku": "ABC-1"}


@pytest.mark.asyncio
async def test_numeric_strings_are_coerced(registry, fake_ebay) -> None:
    fake_ebay.route("GET", "/sell/fulfillment/v1/order", json={"orders": []})

    await registry.invoke("get_orders", {"limit": "7"})

    assert fake_ebay.api_requests[0].url.params["limit"] == "7"


@pytest.mark.asyncio
async def test_missing_required_argument_is_rejected_without_network(registry, fake_ebay) -> None:
    with pytest.raises(ToolArgumentError) as excinfo:
        await registry.invoke("get_order", {})

    assert "order_id" in str(excinfo.value)
    assert fake_ebay.requests == []


@pytest.mark.asyncio
async def test_wrongly_typed_argument_is_rejected(registry, fake_ebay) -> None:
    with pytest.raises(ToolArgumentError):
        await registry.invoke("get_orders", {"limit": "five"})

    assert fake_ebay.requests == []


@pytest.mark.asyncio
async def test_misspelled_argument_name_is_rejected(registry, fake_ebay) -> None:
    with pytest.raises(ToolArgumentError) as excinfo:
        await registry.invoke("get_orders", {"limt": 5})

    assert "limt" in str(excinfo.value)
    assert fake_ebay.requests == []
    assert registry.get("get_orders").input_schema["additionalProperties"] is False


def test_catalog_covers_every_resource_group(registry) -> None:
    names = {tool.name for tool in registry.list_tools()}

    assert {
        "get_custom_policies",
        "get_inventory_items",
        "create_or_replace_inventory_item",
        "publish_offer",
        "get_orders",
        "create_shipping_fulfillment",
        "get_campaigns",
        "get_traffic_report",
        "get_marketplace_return_policies",
        "get_awaiting_feedback",
        "find_eligible_items",
        "get_api_status",
        "get_token_status",
    } <= names
    assert len(names) == len(registry.list_tools())


def test_schemas_follow_wrapper_signatures(registry) -> None:
    get_orders = registry.get("get_orders")
    get_order = registry.get("get_order")
    create_item = registry.get("create_or_replace_inventory_item")

    assert get_orders.input_schema["type"] == "object"
    assert set(get_orders.input_schema["properties"]) == {"filter", "limit", "offset", "order_ids"}
    assert "required" not in get_orders.input_schema
    assert get_order.input_schema["required"] == ["order_id"]
    assert set(create_item.input_schema["required"]) == {"sku", "inventory_item"}
    assert get_orders.title == "Get orders"
    assert get_orders.description


def test_duplicate_tool_names_are_rejected() -> None:
    async def ping() -> str:
        return "pong"

    registry = ToolRegistry()
    registry.register("ping", ping)

    with pytest.raises(ValueError):
        registry.register("ping", ping)


@pytest.mark.asyncio
async def test_token_status_tool_does_not_call_ebay(registry, fake_ebay) -> None:
    status = await registry.invoke("get_token_status")

    assert status == {"authenticated": False, "environment": "sandbox", "expires_in_seconds": 0}
    assert fake_ebay.requests == []
