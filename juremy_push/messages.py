"""User-facing messages, keyed like the host's resource bundle."""

MESSAGES = {
    "MT_ENGINE_JUREMY": "Juremy Search Push",
    "MT_ENGINE_JUREMY_APP_TOKEN_LABEL": "Juremy app token:",
    "JUREMY_APP_TOKEN_NOTFOUND": (
        "Juremy app token not found. Configure it with 'juremy-push configure'."
    ),
    "JUREMY_APP_TOKEN_ERROR": (
        "The Juremy app token was rejected. Check that it is copied correctly and still valid."
    ),
    "JUREMY_ROUTING_SETUP_ERROR": (
        "Could not set up routing to your Juremy client. Make sure Juremy is open and listening."
    ),
    "JUREMY_ROUTING_RESPONSE_PARSE_ERROR": "Unexpected routing response from the Juremy server.",
    "JUREMY_CONNECTION_ERROR": "The Juremy server timed out reaching your Juremy client.",
    "JUREMY_CALLER_ERROR": "The Juremy server rejected the request as malformed.",
    "JUREMY_DEVICE_PROBLEM": "The Juremy server refused this device.",
    "JUREMY_SERVER_ERROR": "The Juremy server encountered an internal error.",
    "JUREMY_NO_SUCCESS_AFTER_RETRIES": "Could not deliver the search to Juremy after several retries.",
    "JUREMY_LANGUAGE_NOT_SUPPORTED": "Language not supported by Juremy: ",
    "JUREMY_PREFERENCES_ERROR": "Could not read the preferences file: ",
}


def get_message(key: str) -> str:
    """Look up a message, falling back to the key itself."""
    return MESSAGES.get(key, key)
