"""Registry exceptions - raised when selecting a variant by discriminator."""
from typing import Iterable, List

from patternkit.domain.base.exceptions import DomainException


class RegistryError(DomainException):
    """Base exception for strategy registry errors."""
    pass


class DuplicateDiscriminatorError(RegistryError, ValueError):
    """Raised when a discriminator is registered twice."""

    def __init__(self, discriminator: str, registry_name: str = "strategy"):
        super().__init__(
            f"{registry_name.capitalize()} discriminator '{discriminator}' is already registered"
        )
        self.discriminator = discriminator
        self.registry_name = registry_name


class UnknownDiscriminatorError(RegistryError, LookupError):
    """
    Raised when no variant is registered for a discriminator.

    Carries the discriminator exactly as the caller passed it and the sorted
    list of valid discriminators, so callers can print an actionable message.
    """

    def __init__(self, requested: str, valid: Iterable[str], registry_name: str = "strategy"):
        self.requested = requested
        self.valid: List[str] = sorted(valid)
        self.registry_name = registry_name
        available = ", ".join(self.valid) if self.valid else "none"
        super().__init__(
            f"Unknown {registry_name} discriminator '{requested}'. "
            f"Valid discriminators: {available}"
        )
