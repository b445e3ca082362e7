from typing import Any


def get_tools(api) -> dict[str, Any]:
    async def get_token_status() -> dict[str, Any]:
        """Report whether a valid access token is cached, without contacting eBay."""
        return api.client.token_manager.status()

    return {
        "get_token_status": {
            "func": get_token_status,
            "title": "Get token status",
            "description": "Report whether the server holds a valid eBay access token and how long it stays valid.",
        },
        "get_api_status": {
            "func": api.status_feed.get_status,
            "title": "Get eBay API status",
            "description": "Read eBay's public API status feed. status filters on Resolved or Unresolved; api matches API names by substring; limit is capped at 50.",
        },
    }
