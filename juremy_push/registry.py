"""Registry of machine translation lookups available to a host."""

from typing import List, Type

from .translation.base import BaseTranslator

_translators: List[Type[BaseTranslator]] = []


def register_machine_translator(cls: Type[BaseTranslator]) -> None:
    if cls not in _translators:
        _translators.append(cls)


def unregister_machine_translator(cls: Type[BaseTranslator]) -> None:
    if cls in _translators:
        _translators.remove(cls)


def machine_translators() -> List[Type[BaseTranslator]]:
    """Registered translator classes, in registration order."""
    return list(_translators)


def load_plugins() -> None:
    """Register the translators shipped with this package."""
    from .translation.lookup import JuremyLookup

    register_machine_translator(JuremyLookup)


def unload_plugins() -> None:
    pass


def get_translator(name: str, **kwargs) -> BaseTranslator:
    """
    Instantiate a registered translator by class name or display name.

    Raises:
        KeyError: if no registered translator matches
    """
    wanted = name.lower()
    for cls in _translators:
        if cls.__name__.lower() == wanted:
            return cls(**kwargs)
    for cls in _translators:
        translator = cls(**kwargs)
        if translator.name.lower() == wanted:
            return translator
        close = getattr(translator, "close", None)
        if close:
            close()
    raise KeyError(f"No machine translator named '{name}'")
