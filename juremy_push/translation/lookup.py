"""Juremy search push lookup."""

import logging
import random
import threading
import time
from typing import Callable, Optional

import requests

from ..config import config
from ..errors import AppTokenNotFoundError, NoSuccessAfterRetriesError
from ..languages import language_to_3char
from ..messages import get_message
from ..models.push import PushRequest, Search
from ..preferences import PreferenceStore
from .base import BaseTranslator
from .clients.juremy_client import JuremyClient, PushOutcome

logger = logging.getLogger(__name__)


class JuremyLookup(BaseTranslator):
    """
    Lookup that pushes the current segment to the Juremy search interface.

    It never returns a translation to the host, the search results show up in
    the separately opened Juremy interface instead. Results are not cached,
    since every lookup has to push (the user's filters may have changed).

    Strategy:
    1. Take a new sequence number, superseding any lookup still retrying
    2. Push the search
    3. On 421 (route lost or client briefly not listening), back off and retry
    4. Give up after a few retries
    """

    ALLOW_JUREMY_TRANSLATE = "allow_juremy_translate"
    JUREMY_APP_TOKEN = "juremy.app.token"

    def __init__(
        self,
        preferences: Optional[PreferenceStore] = None,
        base_url: Optional[str] = None,
        app_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        rand: Callable[[], float] = random.random,
    ):
        """
        Initialize the lookup.

        Args:
            preferences: Preference store (uses the configured file if not provided)
            base_url: Juremy server URL (uses JUREMY_BASE_URL if not provided)
            app_token: Fallback token used when no credential is stored
                (uses JUREMY_APP_TOKEN if not provided)
            session: Optional requests session for the API client
            sleep: Sleep function, takes seconds
            rand: Random source in [0, 1) for backoff jitter
        """
        super().__init__(preferences)
        self.temporary_app_token = app_token or config.app_token or None
        self.client = JuremyClient(
            app_token_provider=self.get_app_token,
            base_url=base_url,
            session=session,
        )
        self.max_text_length = config.max_text_length
        self.max_backoff = config.max_backoff
        self.backoff_base_ms = config.backoff_base_ms
        self._sleep = sleep
        self._rand = rand

        # Not the actual backoff time, but a counter that determines it.
        # Cleared after a successful push.
        self.backoff = 0
        self.current_sequence = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return get_message("MT_ENGINE_JUREMY")

    @property
    def preference_name(self) -> str:
        return self.ALLOW_JUREMY_TRANSLATE

    @property
    def is_configurable(self) -> bool:
        return True

    def get_app_token(self) -> str:
        """Return the stored app token, or the fallback token."""
        app_token = self.get_credential(self.JUREMY_APP_TOKEN)
        if not app_token:
            if not self.temporary_app_token:
                raise AppTokenNotFoundError()
            app_token = self.temporary_app_token
        # Copy-paste safety
        return app_token.strip()

    def configure(self, token: str, temporary: bool = False) -> None:
        """Store the app token, then verify it by setting up a route and pinging."""
        self.set_credential(self.JUREMY_APP_TOKEN, token.strip(), temporary)
        self.setup_route_and_ping()

    def setup_route_and_ping(self) -> None:
        """Set up a fresh route and send a connectivity ping."""
        self.client.reset_route()
        self.client.setup_route_if_needed()
        self._send(PushRequest.ping())

    def translate(self, source_lang: str, target_lang: str, text: str) -> None:
        """
        Push a search to Juremy.

        Args:
            source_lang: Source language tag (e.g. "en", "en-GB")
            target_lang: Target language tag
            text: Source segment

        Returns:
            Always None, Juremy does not serve results to the host
        """
        sequence = self._start_new_search()
        logger.debug("new search: %d", sequence)

        while True:
            if not self._wait_backoff_can_continue():
                raise NoSuccessAfterRetriesError()
            # Checked after the backoff, the other way round leaves a bigger race window
            if not self._is_current(sequence):
                logger.debug("no longer the active search: %d", sequence)
                return None

            request = PushRequest(
                search=Search(
                    src_lang=language_to_3char(source_lang),
                    dst_lang=language_to_3char(target_lang),
                    q=self.limit_text(text),
                )
            )
            if self._send(request) == PushOutcome.DELIVERED:
                return None

    def limit_text(self, text: str) -> str:
        if len(text) > self.max_text_length:
            return text[:self.max_text_length]
        return text

    def _send(self, request: PushRequest) -> PushOutcome:
        outcome = self.client.push(request)
        if outcome == PushOutcome.DELIVERED:
            self.backoff = 0
        else:
            self.backoff += 1
        return outcome

    def _start_new_search(self) -> int:
        with self._lock:
            # Benign race with a previous search still retrying
            self.backoff = 0
            self.current_sequence += 1
            return self.current_sequence

    def _is_current(self, sequence: int) -> bool:
        with self._lock:
            return self.current_sequence == sequence

    def _wait_backoff_can_continue(self) -> bool:
        if self.backoff == 0:
            return True
        if self.backoff >= self.max_backoff:
            self.backoff = 0
            return False
        wait_ms = (2 ** (self.backoff + self._rand())) * self.backoff_base_ms
        logger.warning("backoff: %.0f ms", wait_ms)
        self._sleep(wait_ms / 1000.0)
        return True

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "JuremyLookup":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
