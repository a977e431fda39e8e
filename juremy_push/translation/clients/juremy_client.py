"""HTTP client for the Juremy app-push API."""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

import requests

from ... import __version__
from ...config import config
from ...errors import (
    AppTokenError,
    CallerError,
    ConnectionTimeoutError,
    DeviceProblemError,
    RoutingSetupError,
    ServerError,
)
from ...models.push import PushRequest, RouteResponse

logger = logging.getLogger(__name__)


class PushOutcome(str, Enum):
    """Result of a single push attempt."""
    DELIVERED = "delivered"
    MISDIRECTED = "misdirected"  # 421, route needs setting up again


class JuremyClient:
    """Client for the Juremy app-push API."""

    V1_PATH = "/api/app-push/v1"
    PUSH_PATH = "/push"
    SETUP_ROUTE_PATH = "/setup-route"

    APP_TOKEN_HEADER = "X-Juremy-App-Token"

    SETUP_ROUTE_ERRORS = {
        401: AppTokenError,
        421: RoutingSetupError,
        504: ConnectionTimeoutError,
    }

    PUSH_ERRORS = {
        400: CallerError,
        401: AppTokenError,
        403: DeviceProblemError,
        500: ServerError,
        504: ConnectionTimeoutError,
    }

    def __init__(
        self,
        app_token_provider: Callable[[], str],
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Juremy client.

        Args:
            app_token_provider: Callable returning the current app token
            base_url: Server URL. If not provided, uses JUREMY_BASE_URL from environment.
            user_agent: User-Agent header value
            timeout: Request timeout in seconds
            session: Optional requests session (mainly for tests)
        """
        self.base_path = (base_url or config.base_url).rstrip("/") + self.V1_PATH
        self.app_token_provider = app_token_provider
        self.user_agent = user_agent or f"JuremySearchPush/{__version__}"
        self.timeout = timeout or config.timeout
        self.session = session or requests.Session()

        self.did_setup_route = False
        self.route_header_name: Optional[str] = None
        self.route_header_value: Optional[str] = None

    def _base_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            self.APP_TOKEN_HEADER: self.app_token_provider(),
        }

    def reset_route(self) -> None:
        """Forget the current route so the next push sets it up again."""
        self.did_setup_route = False

    def setup_route_if_needed(self) -> None:
        """
        Obtain the routing header from the server, unless already done.

        Raises:
            AppTokenError: on 401
            RoutingSetupError: on 421, the Juremy client is probably not listening
            ConnectionTimeoutError: on 504
            RoutingResponseParseError: if the response body is unusable
        """
        if self.did_setup_route:
            return

        headers = self._base_headers()
        response = self.session.get(
            self.base_path + self.SETUP_ROUTE_PATH,
            headers=headers,
            timeout=self.timeout,
        )
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError:
            error_cls = self.SETUP_ROUTE_ERRORS.get(response.status_code)
            if error_cls:
                raise error_cls() from None
            raise

        route = RouteResponse.from_json(response.text)
        self.route_header_name = route.routing.header_name
        self.route_header_value = route.routing.header_value
        self.did_setup_route = True

    def push(self, request: PushRequest) -> PushOutcome:
        """
        Send a push request, setting up the route first if needed.

        Returns:
            DELIVERED on success, MISDIRECTED on 421 (the route is reset)

        Raises:
            JuremyError subclasses for the known error statuses. Other HTTP
            and transport errors propagate unchanged.
        """
        self.setup_route_if_needed()
        headers = self._base_headers()
        headers[self.route_header_name] = self.route_header_value
        headers["Content-Type"] = "application/json"

        response = self.session.post(
            self.base_path + self.PUSH_PATH,
            data=request.to_json().encode("utf-8"),
            headers=headers,
            timeout=self.timeout,
        )
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError:
            if response.status_code == 421:
                # Either the route expired or the client was briefly not
                # listening (e.g. right after a previous push).
                self.reset_route()
                return PushOutcome.MISDIRECTED
            error_cls = self.PUSH_ERRORS.get(response.status_code)
            if error_cls:
                raise error_cls() from None
            raise
        return PushOutcome.DELIVERED

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "JuremyClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
