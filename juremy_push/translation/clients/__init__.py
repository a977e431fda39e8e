"""Juremy API clients."""

from .juremy_client import JuremyClient, PushOutcome

__all__ = ["JuremyClient", "PushOutcome"]
