"""events.py — Inbound add-on event model.

ServiceM8 invokes the function with::

    {"eventName": "...", "eventArgs": {...}, "auth": {"accessToken": "..."}}

``parse_event`` normalizes that payload into an ``AddonEvent`` so handlers
never touch the raw dict shape.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from config import EVENT_CAR_LIST_GENERATE, EVENT_CAR_LIST_START

__all__ = ["AddonEvent", "EventKind", "parse_event"]


class EventKind(enum.Enum):
    CAR_LIST_START = EVENT_CAR_LIST_START
    CAR_LIST_GENERATE = EVENT_CAR_LIST_GENERATE
    UNKNOWN = ""

    @classmethod
    def from_name(cls, name: Any) -> "EventKind":
        for kind in cls:
            if kind is not cls.UNKNOWN and kind.value == name:
                return kind
        return cls.UNKNOWN


@dataclass(frozen=True)
class AddonEvent:
    kind: EventKind
    name: str
    args: Dict[str, Any] = field(default_factory=dict)
    # Short-lived ServiceM8 token; keep it out of repr so it never reaches logs.
    access_token: str = field(default="", repr=False)

    def arg(self, key: str) -> str:
        """Return an event argument as a string, ``""`` when absent."""
        value = self.args.get(key)
        if value is None:
            return ""
        return str(value)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def parse_event(event: Any) -> AddonEvent:
    """Build an ``AddonEvent`` from the raw Lambda payload.

    Non-mapping payloads and missing sections are tolerated; they resolve to
    an ``UNKNOWN`` event with empty arguments.
    """
    payload = _as_mapping(event)
    raw_name = payload.get("eventName")
    name = raw_name if isinstance(raw_name, str) else ""
    token = _as_mapping(payload.get("auth")).get("accessToken") or ""
    return AddonEvent(
        kind=EventKind.from_name(name),
        name=name,
        args=dict(_as_mapping(payload.get("eventArgs"))),
        access_token=str(token),
    )
