import pytest
import requests

from juremy_push.errors import (
    AppTokenError,
    AppTokenNotFoundError,
    CallerError,
    ConnectionTimeoutError,
    DeviceProblemError,
    RoutingResponseParseError,
    RoutingSetupError,
    ServerError,
)
from juremy_push.models.push import PushRequest
from juremy_push.translation.clients.juremy_client import JuremyClient, PushOutcome

from tests.conftest import BASE_URL, PUSH_URL, SETUP_ROUTE_URL, make_response


@pytest.fixture
def client(session):
    return JuremyClient(
        app_token_provider=lambda: "test-token",
        base_url=BASE_URL + "/",
        user_agent="JuremySearchPush/test",
        timeout=3,
        session=session,
    )


def test_push_sets_up_route_then_posts(client, session):
    assert client.push(PushRequest.ping()) == PushOutcome.DELIVERED

    session.get.assert_called_once()
    assert session.get.call_args.args[0] == SETUP_ROUTE_URL
    get_headers = session.get.call_args.kwargs["headers"]
    assert get_headers["X-Juremy-App-Token"] == "test-token"
    assert get_headers["User-Agent"] == "JuremySearchPush/test"

    assert session.post.call_args.args[0] == PUSH_URL
    post_headers = session.post.call_args.kwargs["headers"]
    assert post_headers["X-Route"] == "device-1"
    assert post_headers["X-Juremy-App-Token"] == "test-token"
    assert post_headers["Content-Type"] == "application/json"
    assert session.post.call_args.kwargs["timeout"] == 3


def test_route_is_set_up_once(client, session):
    client.push(PushRequest.ping())
    client.push(PushRequest.ping())
    assert session.get.call_count == 1
    assert session.post.call_count == 2


def test_misdirected_push_resets_route(client, session):
    session.post.return_value = make_response(421)

    assert client.push(PushRequest.ping()) == PushOutcome.MISDIRECTED
    assert not client.did_setup_route

    session.post.return_value = make_response(200)
    client.push(PushRequest.ping())
    assert session.get.call_count == 2


@pytest.mark.parametrize("status, error_cls", [
    (401, AppTokenError),
    (421, RoutingSetupError),
    (504, ConnectionTimeoutError),
])
def test_setup_route_errors(client, session, status, error_cls):
    session.get.return_value = make_response(status)
    with pytest.raises(error_cls):
        client.setup_route_if_needed()
    assert not client.did_setup_route


def test_setup_route_unknown_status_propagates(client, session):
    session.get.return_value = make_response(502)
    with pytest.raises(requests.exceptions.HTTPError):
        client.setup_route_if_needed()


def test_setup_route_bad_body(client, session):
    session.get.return_value = make_response(200, "<html>oops</html>")
    with pytest.raises(RoutingResponseParseError):
        client.setup_route_if_needed()
    assert not client.did_setup_route


@pytest.mark.parametrize("status, error_cls", [
    (400, CallerError),
    (401, AppTokenError),
    (403, DeviceProblemError),
    (500, ServerError),
    (504, ConnectionTimeoutError),
])
def test_push_errors(client, session, status, error_cls):
    session.post.return_value = make_response(status)
    with pytest.raises(error_cls):
        client.push(PushRequest.ping())


def test_push_unknown_status_propagates(client, session):
    session.post.return_value = make_response(418)
    with pytest.raises(requests.exceptions.HTTPError):
        client.push(PushRequest.ping())


def test_transport_errors_propagate(client, session):
    session.post.side_effect = requests.exceptions.ConnectionError("down")
    with pytest.raises(requests.exceptions.ConnectionError):
        client.push(PushRequest.ping())


def test_missing_token_stops_before_request(session):
    def no_token():
        raise AppTokenNotFoundError()

    client = JuremyClient(app_token_provider=no_token, base_url=BASE_URL, session=session)
    with pytest.raises(AppTokenNotFoundError):
        client.push(PushRequest.ping())
    session.get.assert_not_called()


def test_context_manager_closes_session(session):
    with JuremyClient(app_token_provider=lambda: "t", base_url=BASE_URL, session=session):
        pass
    session.close.assert_called_once()
