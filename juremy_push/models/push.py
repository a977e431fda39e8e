"""Data models for push requests and route responses."""

import json
import logging
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

from ..errors import RoutingResponseParseError

logger = logging.getLogger(__name__)


@dataclass
class Search:
    """A search to show in the Juremy interface."""

    src_lang: str  # ISO 639-3
    dst_lang: str  # ISO 639-3
    q: str


@dataclass
class PushRequest:
    """Body of a push: either a search, or a connectivity ping."""

    search: Optional[Search] = None
    connected: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        # Unset fields are sent as null
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def ping(cls) -> "PushRequest":
        return cls(connected=True)


@dataclass
class RoutingHeaders:
    """Header that routes pushes to the listening Juremy client."""

    header_name: str
    header_value: str


@dataclass
class RouteResponse:
    """Response of the setup-route endpoint."""

    routing: RoutingHeaders

    @classmethod
    def from_json(cls, text: str) -> "RouteResponse":
        """
        Parse a setup-route response body.

        Raises:
            RoutingResponseParseError: if the body is not JSON or lacks the routing header
        """
        try:
            data = json.loads(text)
            routing = data["routing"]
            logger.debug("routing.header_name: %s", routing.get("header_name"))
            logger.debug("routing.header_value: %s", routing.get("header_value"))
            name = routing["header_name"]
            value = routing["header_value"]
            if not isinstance(name, str) or not isinstance(value, str) or not name:
                raise ValueError(f"Invalid routing header: {routing!r}")
        except (ValueError, KeyError, TypeError, AttributeError):
            logger.exception("Error parsing routing response")
            raise RoutingResponseParseError() from None
        return cls(routing=RoutingHeaders(header_name=name, header_value=value))
