"""http_utils.py — Add-on response envelopes and markup escaping helpers."""
from __future__ import annotations

import html
import json
from typing import Any, Dict

__all__ = [
    "_empty_response",
    "_escape_html",
    "_event_response",
    "_script_literal",
]


def _event_response(document: str) -> Dict[str, str]:
    """Wrap rendered HTML in the envelope ServiceM8 displays in the popup."""
    return {"eventResponse": document}


def _empty_response() -> Dict[str, Any]:
    return {}


def _escape_html(value: Any) -> str:
    """Escape text for element content and quoted attribute values."""
    return html.escape("" if value is None else str(value), quote=True)


def _script_literal(value: Any) -> str:
    """Encode a value as a JavaScript literal safe inside a <script> block."""
    payload = json.dumps(value, ensure_ascii=False)
    # Prevent accidental </script> termination
    return payload.replace("</", "<\\/")
