"""Signals and a registry of shared game services."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List


class ServiceError(LookupError):
    """Raised when a service is registered twice or is missing."""


class Signal:
    """A list of handlers that are all called when the signal is emitted."""

    def __init__(self) -> None:
        self._handlers: List[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        """Connect a handler; connecting the same handler again does nothing."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Disconnect a handler if it is connected."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        """Call every connected handler with the given arguments."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)


class ServiceLocator:
    """Stores and provides services, keyed usually by their class."""

    def __init__(self) -> None:
        self._services: Dict[Hashable, Any] = {}

    def register(self, key: Hashable, service: Any) -> None:
        """Register a service under a key; a key can be registered once."""
        if key in self._services:
            raise ServiceError(f"Service '{_key_name(key)}' was already registered.")
        self._services[key] = service

    def get(self, key: Hashable) -> Any:
        """Return the service registered under the key."""
        try:
            return self._services[key]
        except KeyError:
            raise ServiceError(f"Service '{_key_name(key)}' wasn't registered") from None

    def clear(self) -> None:
        """Forget every registered service."""
        self._services.clear()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._services


def _key_name(key: Hashable) -> str:
    return getattr(key, "__name__", None) or repr(key)