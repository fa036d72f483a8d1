"""Strategy Registry - Registry pattern for runtime-selected variant factories.

This module replaces conditional branching on a type string with a mapping
from discriminator to constructor. Adding a variant is a registration call,
not an edit to a branching function.

Registries are plain objects: the process entry point builds them, registers
variants during setup, and hands them to consumers as parameters.
"""

import threading
from types import MappingProxyType
from typing import Callable, Dict, Generic, Mapping, Tuple, TypeVar

from patternkit.domain.registry.exceptions import (
    DuplicateDiscriminatorError,
    UnknownDiscriminatorError,
)
from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")
C = TypeVar("C", bound=type)


def normalize_discriminator(discriminator: str) -> str:
    """Normalize a discriminator; applied identically on register and create."""
    if not isinstance(discriminator, str):
        raise TypeError(
            f"Discriminator must be a string, got {type(discriminator).__name__}"
        )
    return discriminator.lower()


class StrategyRegistry(Generic[T]):
    """
    Registry mapping case-insensitive discriminators to variant constructors.

    Mutations are serialized by a lock and published copy-on-write: a writer
    builds a new mapping and swaps it in with a single assignment. Readers
    take one reference to the current mapping, so they never see a partial
    update and never need the lock.
    """

    def __init__(self, name: str = "strategy"):
        """
        Initialize registry.

        Args:
            name: Capability this registry selects, used in errors and logs
        """
        self.name = name
        self._constructors: Mapping[str, Callable[[], T]] = MappingProxyType({})
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, discriminator: str, constructor: Callable[[], T]) -> None:
        """
        Register a zero-argument constructor for a variant.

        Args:
            discriminator: Key used to select the variant (case-insensitive)
            constructor: Callable returning a new variant instance

        Raises:
            DuplicateDiscriminatorError: If the normalized discriminator is taken
            TypeError: If discriminator is not a string or constructor not callable
        """
        key = normalize_discriminator(discriminator)
        if not callable(constructor):
            raise TypeError(f"Constructor for '{discriminator}' must be callable")

        with self._lock:
            if key in self._constructors:
                raise DuplicateDiscriminatorError(discriminator, self.name)
            updated: Dict[str, Callable[[], T]] = dict(self._constructors)
            updated[key] = constructor
            self._constructors = MappingProxyType(updated)

        self.logger.info(f"Registered {self.name} variant: {key}")

    def variant(self, discriminator: str) -> Callable[[C], C]:
        """
        Class decorator registering the class itself as the constructor.

        Example:
            @senders.variant("email")
            class EmailSender(NotificationSender): ...
        """
        def decorator(cls: C) -> C:
            self.register(discriminator, cls)
            return cls
        return decorator

    def create(self, discriminator: str) -> T:
        """
        Create a new instance of the variant bound to a discriminator.

        Args:
            discriminator: Key of the variant (case-insensitive)

        Returns:
            Newly constructed variant instance

        Raises:
            UnknownDiscriminatorError: If nothing is registered under the key
        """
        key = normalize_discriminator(discriminator)
        constructors = self._constructors
        constructor = constructors.get(key)
        if constructor is None:
            raise UnknownDiscriminatorError(discriminator, constructors.keys(), self.name)

        instance = constructor()
        self.logger.debug(f"Created {self.name} variant: {key}")
        return instance

    def is_registered(self, discriminator: str) -> bool:
        """Check if a discriminator is registered."""
        return normalize_discriminator(discriminator) in self._constructors

    def discriminators(self) -> Tuple[str, ...]:
        """Get registered discriminators in sorted order."""
        return tuple(sorted(self._constructors))

    def __contains__(self, discriminator: object) -> bool:
        return isinstance(discriminator, str) and self.is_registered(discriminator)

    def __len__(self) -> int:
        return len(self._constructors)

    def __repr__(self) -> str:
        return f"StrategyRegistry(name='{self.name}', variants={list(self.discriminators())})"
