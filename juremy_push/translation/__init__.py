"""Machine translation lookups."""

from .base import BaseTranslator
from .lookup import JuremyLookup

__all__ = ["BaseTranslator", "JuremyLookup"]
