# Standard library imports
import logging
from typing import Any, Dict, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseContainer:
    """
    Minimal singleton registry keyed by type.

    Providers register fully built instances; controllers look them up with
    get(). There are no factories or scopes: every dependency lives for the
    lifetime of the container.
    """

    def __init__(self) -> None:
        self._singletons: Dict[type, Any] = {}

    def register_singleton(self, interface: Type[T], instance: T) -> None:
        if interface in self._singletons:
            logger.debug(f"Replacing registration for {interface.__name__}")
        self._singletons[interface] = instance

    def get(self, interface: Type[T]) -> T:
        try:
            return self._singletons[interface]
        except KeyError:
            raise ValueError(f"No registration for {interface.__name__}") from None

    def has(self, interface: type) -> bool:
        return interface in self._singletons
