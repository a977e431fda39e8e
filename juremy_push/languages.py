"""Language code conversion for the Juremy API."""

import re
from typing import Dict

from .errors import LanguageNotSupportedError

# The 24 official EU languages, two-letter code -> ISO 639-3
SUPPORTED_LANGUAGES: Dict[str, str] = {
    "hu": "hun",
    "en": "eng",
    "de": "deu",
    "fr": "fra",
    "es": "spa",
    "it": "ita",
    "nl": "nld",
    "pl": "pol",
    "pt": "por",
    "ro": "ron",
    "sk": "slk",
    "sl": "slv",
    "fi": "fin",
    "sv": "swe",
    "cs": "ces",
    "da": "dan",
    "et": "est",
    "lv": "lav",
    "lt": "lit",
    "mt": "mlt",
    "bg": "bul",
    "hr": "hrv",
    "el": "ell",
    "ga": "gle",
}


def language_code(language: str) -> str:
    """Return the language part of a tag such as 'en-GB' or 'pt_BR'."""
    return re.split(r"[-_]", language.strip(), maxsplit=1)[0]


def language_to_3char(language: str) -> str:
    """
    Convert a language tag to the three-letter code Juremy expects.

    Args:
        language: Language tag, e.g. "en", "EN", "en-GB"

    Returns:
        ISO 639-3 code, e.g. "eng"

    Raises:
        LanguageNotSupportedError: if the language is not one of the EU languages
    """
    code = language_code(language)
    try:
        return SUPPORTED_LANGUAGES[code.lower()]
    except KeyError:
        raise LanguageNotSupportedError(code) from None
