"""handlers.py — Event handlers for the Car List add-on.

``car_list_start`` fires when the user clicks the "Car List" button on the
Job Card. ``car_list_generate`` is never declared in the manifest; the popup
invokes it through the client SDK when the user clicks Save.
"""
from __future__ import annotations

from typing import Dict

from client_script import render_client_script
from events import AddonEvent
from http_utils import _escape_html, _event_response
from page_shell import wrap_response
from servicem8_api import NOTE_TRANSPORT_ERROR, NotePostResult, post_note

__all__ = [
    "build_note",
    "handle_car_list_generate",
    "handle_car_list_start",
    "render_generate_result",
    "render_start_form",
]


_FORM_MARKUP = (
    '<div id="loading" class="loading"></div>'
    '<div id="input" style="display:none;">'
    '<input type="hidden" id="job_uuid" name="job_uuid" value="{job_uuid}" />'
    '<label for="makes_select">Make</label><select id="makes_select"></select><br />'
    '<label for="models_select">Model</label><select id="models_select"></select><br />'
    '<button id="button_save">Save</button><br />'
    '<p id="saving" style="display:none;">Saving...</p>'
    "</div>"
)

_POSTED_LINE = "<p>Note has been posted to the Job Diary</p>"
_FAILED_LINE = "<p>Unable to post Note to Job Diary: <pre>{detail}</pre></p>"


def build_note(make: str, model: str) -> str:
    return f"Make: {make}  Model: {model}"


# ---------------------------------------------------------------------------
# car_list_start
# ---------------------------------------------------------------------------


def render_start_form(job_uuid: str) -> str:
    """Return the complete popup document for picking a make and model.

    The job UUID rides along in a hidden field so the Save click can hand it
    back to ``car_list_generate``.
    """
    body_html = _FORM_MARKUP.format(job_uuid=_escape_html(job_uuid))
    return wrap_response(body_html, render_client_script())


def handle_car_list_start(event: AddonEvent) -> Dict[str, str]:
    return _event_response(render_start_form(event.arg("jobUUID")))


# ---------------------------------------------------------------------------
# car_list_generate
# ---------------------------------------------------------------------------


def render_generate_result(note: str, result: NotePostResult) -> str:
    if result.posted:
        status_line = _POSTED_LINE
    elif result.outcome == NOTE_TRANSPORT_ERROR:
        status_line = _FAILED_LINE.format(detail=_escape_html(result.error))
    else:
        status_line = _FAILED_LINE.format(detail=_escape_html(result.body))
    return f"<h1>{_escape_html(note)}</h1>{status_line}"


def handle_car_list_generate(event: AddonEvent) -> Dict[str, str]:
    note = build_note(event.arg("make"), event.arg("model"))
    result = post_note(event.access_token, event.arg("job_uuid"), note)
    return _event_response(render_generate_result(note, result))
