# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.

    Dependencies are keyed by type (repository interfaces, use cases) or by
    name (collections). Singletons are stored once; factories build a new
    instance on every get().
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register an already built instance shared by all callers"""
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a factory called on every get()"""
        self._factories[key] = factory

    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency

        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        raise ValueError(f"No dependency registered for {_describe(key)}")

    def is_registered(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories


def _describe(key: Hashable) -> str:
    return getattr(key, "__name__", repr(key))
