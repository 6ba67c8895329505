"""servicem8_api.py — ServiceM8 REST API calls made on behalf of the add-on.

Authenticates with the temporary access token ServiceM8 issues per event.
Only the note endpoint is used.
"""
from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Optional

from config import NOTE_ENDPOINT, NOTE_POST_TIMEOUT_SECONDS, NOTE_RELATED_OBJECT

__all__ = [
    "NOTE_POSTED",
    "NOTE_REJECTED",
    "NOTE_TRANSPORT_ERROR",
    "NotePostResult",
    "post_note",
]

logger = logging.getLogger(__name__)

NOTE_POSTED = "posted"
NOTE_REJECTED = "rejected"
NOTE_TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class NotePostResult:
    outcome: str
    status_code: Optional[int] = None
    body: str = ""
    error: str = ""

    @property
    def posted(self) -> bool:
        return self.outcome == NOTE_POSTED


def _read_error_body(exc: urllib.error.HTTPError) -> str:
    try:
        raw = exc.read()
    except (OSError, AttributeError):
        return ""
    if not raw:
        return ""
    return raw.decode("utf-8", errors="replace")


def _classify(status_code: int, body: str) -> NotePostResult:
    # ServiceM8 answers 200 for a created note; anything else is a rejection.
    outcome = NOTE_POSTED if status_code == 200 else NOTE_REJECTED
    return NotePostResult(outcome=outcome, status_code=status_code, body=body)


def post_note(
    access_token: str,
    job_uuid: str,
    note: str,
    timeout: float = NOTE_POST_TIMEOUT_SECONDS,
) -> NotePostResult:
    """POST a note against a job.

    Never raises for HTTP or network failures; the outcome is reported in
    the returned ``NotePostResult``.
    """
    form = urllib.parse.urlencode(
        {
            "related_object": NOTE_RELATED_OBJECT,
            "related_object_uuid": job_uuid,
            "note": note,
        }
    ).encode("utf-8")

    req = urllib.request.Request(
        NOTE_ENDPOINT,
        method="POST",
        data=form,
        headers={
            "Accept": "application/json",
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/x-www-form-urlencoded",
        },
    )

    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status_code = resp.status
            body = resp.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as exc:
        body = _read_error_body(exc)
        logger.info("note post rejected: HTTP %s", exc.code)
        return _classify(exc.code, body)
    except (
        urllib.error.URLError,
        http.client.HTTPException,
        TimeoutError,
        OSError,
    ) as exc:
        reason = getattr(exc, "reason", None) or exc
        logger.warning("note post transport failure: %s", reason)
        return NotePostResult(outcome=NOTE_TRANSPORT_ERROR, error=str(reason))

    logger.info("note post completed: HTTP %s", status_code)
    return _classify(status_code, body)
