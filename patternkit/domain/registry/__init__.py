"""Registry domain errors."""

from .exceptions import (
    DuplicateDiscriminatorError,
    RegistryError,
    UnknownDiscriminatorError,
)

__all__ = [
    'RegistryError',
    'DuplicateDiscriminatorError',
    'UnknownDiscriminatorError',
]
