"""Domain base package - shared entities and exceptions."""

from .entity import Entity, ValueObject, utc_now
from .exceptions import (
    ConfigurationError,
    DomainException,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    'Entity',
    'ValueObject',
    'utc_now',
    'DomainException',
    'ValidationError',
    'ResourceNotFoundError',
    'ConfigurationError',
]
