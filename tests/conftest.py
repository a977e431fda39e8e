"""Shared fixtures for the Juremy push tests."""

import json
from unittest.mock import Mock

import pytest
import requests

from juremy_push.preferences import PreferenceStore
from juremy_push.translation.lookup import JuremyLookup

BASE_URL = "https://juremy.test"
SETUP_ROUTE_URL = BASE_URL + "/api/app-push/v1/setup-route"
PUSH_URL = BASE_URL + "/api/app-push/v1/push"

ROUTE_BODY = {"routing": {"header_name": "X-Route", "header_value": "device-1"}}


def make_response(status_code=200, body=None):
    """Build a real requests.Response with the given status and JSON body."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def session():
    """Mock session whose GET returns a valid route and POST succeeds."""
    mock_session = Mock(spec=requests.Session)
    mock_session.get.return_value = make_response(200, ROUTE_BODY)
    mock_session.post.return_value = make_response(200)
    return mock_session


@pytest.fixture
def preferences(tmp_path):
    return PreferenceStore(tmp_path / "preferences.json")


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def lookup(preferences, session, sleeps):
    return JuremyLookup(
        preferences=preferences,
        base_url=BASE_URL,
        app_token="  test-token \n",
        session=session,
        sleep=sleeps.append,
        rand=lambda: 0.0,
    )


def pushed_bodies(session):
    """Decode the JSON bodies of all POSTs made on the mock session."""
    return [json.loads(call.kwargs["data"].decode("utf-8")) for call in session.post.call_args_list]
