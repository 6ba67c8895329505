"""Dispatcher tests for the Car List add-on Lambda.

Run from this directory:
    python3 -m pytest -v
"""

from __future__ import annotations

import http.client
import io
import logging
import os
import sys
import urllib.error
from unittest.mock import MagicMock, patch

sys.path.insert(0, os.path.dirname(__file__))

import lambda_function as mod  # noqa: E402


def _event(name, args=None, token="tok-123"):
    return {
        "eventName": name,
        "eventArgs": args or {},
        "auth": {"accessToken": token},
    }


def _fake_response(status=200, body=b"{}"):
    resp = MagicMock()
    resp.__enter__ = MagicMock(return_value=resp)
    resp.__exit__ = MagicMock(return_value=False)
    resp.status = status
    resp.read.return_value = body
    return resp


def test_start_embeds_job_uuid_in_hidden_field():
    result = mod.lambda_handler(_event("car_list_start", {"jobUUID": "J-1"}), None)

    html = result["eventResponse"]
    assert '<input type="hidden" id="job_uuid" name="job_uuid" value="J-1" />' in html
    assert '<select id="makes_select">' in html
    assert '<select id="models_select">' in html
    assert "SMClient.init()" in html


def test_start_without_job_uuid_passes_empty_value():
    result = mod.lambda_handler({"eventName": "car_list_start"}, None)

    assert 'id="job_uuid" name="job_uuid" value=""' in result["eventResponse"]


@patch("urllib.request.urlopen")
def test_generate_success_reports_posted_note(mock_urlopen):
    mock_urlopen.return_value = _fake_response(200)
    event = _event("car_list_generate", {"make": "Abarth", "model": "500", "job_uuid": "J-1"})

    result = mod.lambda_handler(event, None)

    html = result["eventResponse"]
    assert "<h1>Make: Abarth  Model: 500</h1>" in html
    assert "Note has been posted to the Job Diary" in html
    mock_urlopen.assert_called_once()


@patch("urllib.request.urlopen")
def test_generate_404_reports_response_body(mock_urlopen):
    mock_urlopen.side_effect = urllib.error.HTTPError(
        "https://api.servicem8.com/api_1.0/Note.json",
        404,
        "Not Found",
        {},
        io.BytesIO(b"not found"),
    )
    event = _event("car_list_generate", {"make": "Abarth", "model": "500", "job_uuid": "J-1"})

    result = mod.lambda_handler(event, None)

    html = result["eventResponse"]
    assert "Make: Abarth  Model: 500" in html
    assert "Unable to post Note to Job Diary: <pre>not found</pre>" in html
    assert "has been posted" not in html


@patch("urllib.request.urlopen")
def test_failed_post_is_logged_once(mock_urlopen, caplog):
    mock_urlopen.side_effect = urllib.error.HTTPError(
        "https://api.servicem8.com/api_1.0/Note.json", 403, "Forbidden", {}, io.BytesIO(b"no")
    )
    event = _event("car_list_generate", {"make": "Abarth", "model": "500", "job_uuid": "J-1"})

    with caplog.at_level(logging.INFO):
        mod.lambda_handler(event, None)

    failures = [r for r in caplog.records if "403" in r.getMessage()]
    assert len(failures) == 1
    assert failures[0].name == "servicem8_api"
    assert not [r for r in caplog.records if r.name == "handlers"]


@patch("urllib.request.urlopen")
def test_generate_malformed_http_reply_reports_failure(mock_urlopen):
    mock_urlopen.side_effect = http.client.BadStatusLine("garbage")
    event = _event("car_list_generate", {"make": "Abarth", "model": "500", "job_uuid": "J-1"})

    result = mod.lambda_handler(event, None)

    html = result["eventResponse"]
    assert "<h1>Make: Abarth  Model: 500</h1>" in html
    assert "Unable to post Note to Job Diary: <pre>garbage</pre>" in html


@patch("urllib.request.urlopen")
def test_generate_truncated_reply_reports_failure(mock_urlopen):
    resp = _fake_response(200)
    resp.read.side_effect = http.client.IncompleteRead(b"par")
    mock_urlopen.return_value = resp
    event = _event("car_list_generate", {"make": "Abarth", "model": "500", "job_uuid": "J-1"})

    result = mod.lambda_handler(event, None)

    assert "Unable to post Note to Job Diary" in result["eventResponse"]
    assert "has been posted" not in result["eventResponse"]


@patch("urllib.request.urlopen")
def test_unknown_event_returns_empty_result(mock_urlopen):
    assert mod.lambda_handler(_event("car_list_delete"), None) == {}
    mock_urlopen.assert_not_called()


def test_missing_or_malformed_event_returns_empty_result():
    assert mod.lambda_handler({}, None) == {}
    assert mod.lambda_handler({"eventName": None}, None) == {}
    assert mod.lambda_handler(None, None) == {}
