"""Wire models for the Juremy push API."""

from .push import Search, PushRequest, RoutingHeaders, RouteResponse

__all__ = [
    "Search",
    "PushRequest",
    "RoutingHeaders",
    "RouteResponse",
]
