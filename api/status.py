"""eBay developer API status feed (public RSS, no authentication)."""
import logging
import re
import xml.etree.ElementTree as ET
from typing import Any

import httpx

logger = logging.getLogger(__name__)

MAX_ITEMS = 50

_TAG_RE = re.compile(r"<[^>]+>")
_SPACE_RE = re.compile(r"\s+")


def _strip_html(text: str) -> str:
    return _SPACE_RE.sub(" ", _TAG_RE.sub(" ", text)).strip()


def _child_text(element: ET.Element, name: str) -> str:
    # feed extensions may be namespaced; match on the local name
    for child in element:
        if child.tag == name or child.tag.endswith("}" + name):
            return (child.text or "").strip()
    return ""


def parse_status_feed(xml_text: str) -> list[dict[str, str]]:
    """Parse RSS items into plain dicts. Raises ValueError if the document has no channel."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ValueError(f"Malformed RSS feed: {e}") from e
    channel = root.find("channel")
    if channel is None:
        raise ValueError("RSS feed missing channel")

    items = []
    for raw in channel.findall("item"):
        title = _child_text(raw, "title")
        summary = _child_text(raw, "summary") or _strip_html(_child_text(raw, "description"))[:300]
        items.append({
            "title": title or "Untitled",
            "summary": summary or title,
            "link": _child_text(raw, "link"),
            "api": _child_text(raw, "api"),
            "site": _child_text(raw, "site"),
            "status": _child_text(raw, "status"),
            "last_updated": _child_text(raw, "lastUpdated"),
        })
    return items


class ApiStatusFeed:
    def __init__(self, http_client: httpx.AsyncClient, feed_url: str, timeout: float = 15.0):
        self.http = http_client
        self.feed_url = feed_url
        self.timeout = timeout

    async def get_status(self, limit: int = 20, status: str | None = None, api: str | None = None) -> dict[str, Any]:
        """Return recent status items, optionally filtered by status (Resolved/Unresolved) and API name.

        Feed failures are reported in an `error` key rather than raised.
        """
        try:
            resp = await self.http.get(
                self.feed_url,
                headers={"Accept": "application/rss+xml, application/xml, text/xml"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            items = parse_status_feed(resp.text)
        except httpx.HTTPStatusError as e:
            logger.warning(f"API status feed returned {e.response.status_code}")
            return {"items": [], "error": f"Feed unavailable (HTTP {e.response.status_code})"}
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Failed to read API status feed: {e}")
            return {"items": [], "error": str(e) or "Failed to fetch API status feed"}

        if status:
            items = [i for i in items if i["status"].lower() == status.lower()]
        if api and api.strip():
            needle = api.strip().lower()
            items = [i for i in items if needle in i["api"].lower()]
        return {"items": items[: max(0, min(limit, MAX_ITEMS))]}
