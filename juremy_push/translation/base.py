"""Base class for machine translation lookups plugged into a host."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..preferences import PreferenceStore

logger = logging.getLogger(__name__)


class BaseTranslator(ABC):
    """
    Common behaviour of a machine translation lookup.

    Owns the enable/disable preference and credential access; subclasses
    implement the actual lookup in ``translate``.
    """

    def __init__(self, preferences: Optional[PreferenceStore] = None):
        self.preferences = preferences or PreferenceStore()

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the translator."""

    @property
    @abstractmethod
    def preference_name(self) -> str:
        """Preference key holding the enabled flag."""

    @property
    def is_configurable(self) -> bool:
        return False

    @property
    def enabled(self) -> bool:
        return bool(self.preferences.get_preference(self.preference_name, False))

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.preferences.set_preference(self.preference_name, bool(value))

    def get_translation(self, source_lang: str, target_lang: str, text: str) -> Optional[str]:
        """Run the lookup if this translator is enabled and the text is not blank."""
        if not self.enabled:
            logger.debug("%s is disabled, skipping lookup", self.name)
            return None
        if not text or not text.strip():
            return None
        return self.translate(source_lang, target_lang, text)

    @abstractmethod
    def translate(self, source_lang: str, target_lang: str, text: str) -> Optional[str]:
        """Perform the lookup."""

    def get_credential(self, credential_id: str) -> Optional[str]:
        return self.preferences.get_credential(credential_id)

    def set_credential(self, credential_id: str, value: str, temporary: bool = False) -> None:
        self.preferences.set_credential(credential_id, value, temporary)

    def is_credential_stored_temporarily(self, credential_id: str) -> bool:
        return self.preferences.is_credential_stored_temporarily(credential_id)
