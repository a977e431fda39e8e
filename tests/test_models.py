import json

import pytest

from juremy_push.errors import RoutingResponseParseError
from juremy_push.models.push import PushRequest, RouteResponse, Search


def test_search_request_keeps_null_connected():
    request = PushRequest(search=Search(src_lang="eng", dst_lang="hun", q="hello"))
    assert json.loads(request.to_json()) == {
        "search": {"src_lang": "eng", "dst_lang": "hun", "q": "hello"},
        "connected": None,
    }


def test_ping_request():
    assert PushRequest.ping().to_dict() == {"search": None, "connected": True}


def test_route_response_parses_routing_header():
    route = RouteResponse.from_json('{"routing": {"header_name": "X-Route", "header_value": "abc"}}')
    assert route.routing.header_name == "X-Route"
    assert route.routing.header_value == "abc"


@pytest.mark.parametrize("body", [
    "not json",
    "{}",
    '{"routing": null}',
    '{"routing": {"header_name": "X-Route"}}',
    '{"routing": {"header_name": "", "header_value": "abc"}}',
    "[]",
])
def test_route_response_rejects_bad_bodies(body):
    with pytest.raises(RoutingResponseParseError):
        RouteResponse.from_json(body)
