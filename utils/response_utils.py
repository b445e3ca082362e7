"""Utilities for decoding eBay response bodies.

`robust_parse_text` handles bodies that `response.json()` rejects:
- Normal JSON (json.loads)
- NDJSON (newline-delimited JSON, returns list or single object)
- Text containing a JSON object plus extra data (uses json.JSONDecoder().raw_decode)
- Falls back to returning the original text if parsing fails

`extract_error_message` pulls the human-readable message out of an eBay error body.
"""
from __future__ import annotations

import json
from typing import Any


def robust_parse_text(text: str) -> Any:
    """Try to parse text as JSON. If it fails, try NDJSON (one JSON per line), then raw_decode the first JSON object, else return raw text.

    Returns the parsed Python object (dict/list/primitive), None for a blank body, or the original text string if parsing failed.
    """
    if not text or not text.strip():
        return None

    try:
        return json.loads(text)
    except ValueError:
        pass

    try:
        lines = [ln for ln in text.splitlines() if ln.strip()]
        objs = [json.loads(ln) for ln in lines]
        if objs:
            return objs if len(objs) > 1 else objs[0]
    except ValueError:
        pass

    try:
        decoder = json.JSONDecoder()
        obj, _ = decoder.raw_decode(text.lstrip())
        return obj
    except ValueError:
        pass

    return text


def extract_error_message(body: Any) -> str | None:
    """Return `errors[0].longMessage`, `errors[0].message` or `error_description` from an error body."""
    if not isinstance(body, dict):
        return None
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        first = errors[0]
        message = first.get("longMessage") or first.get("message")
        if message:
            return str(message)
    description = body.get("error_description") or body.get("message")
    return str(description) if description else None
