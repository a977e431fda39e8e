"""Errors raised by the Juremy push client."""

from typing import Optional

from .messages import get_message


class JuremyError(Exception):
    """Base error carrying a user-facing message from the catalog."""

    message_key = ""

    def __init__(self, detail: Optional[str] = None):
        message = get_message(self.message_key)
        if detail:
            message += detail
        super().__init__(message)
        self.detail = detail

    @property
    def message(self) -> str:
        return str(self)


class AppTokenNotFoundError(JuremyError):
    message_key = "JUREMY_APP_TOKEN_NOTFOUND"


class AppTokenError(JuremyError):
    message_key = "JUREMY_APP_TOKEN_ERROR"


class RoutingSetupError(JuremyError):
    message_key = "JUREMY_ROUTING_SETUP_ERROR"


class RoutingResponseParseError(JuremyError):
    message_key = "JUREMY_ROUTING_RESPONSE_PARSE_ERROR"


class ConnectionTimeoutError(JuremyError):
    message_key = "JUREMY_CONNECTION_ERROR"


class CallerError(JuremyError):
    message_key = "JUREMY_CALLER_ERROR"


class DeviceProblemError(JuremyError):
    message_key = "JUREMY_DEVICE_PROBLEM"


class ServerError(JuremyError):
    message_key = "JUREMY_SERVER_ERROR"


class NoSuccessAfterRetriesError(JuremyError):
    message_key = "JUREMY_NO_SUCCESS_AFTER_RETRIES"


class LanguageNotSupportedError(JuremyError):
    message_key = "JUREMY_LANGUAGE_NOT_SUPPORTED"


class PreferencesError(JuremyError):
    message_key = "JUREMY_PREFERENCES_ERROR"
