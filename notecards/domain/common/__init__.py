"""
Domain common module.

Base classes shared by every bounded context:
- ValueObject: immutable objects defined by their attributes
- Entity / EntityId: objects with identity and a persisted lifecycle
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, InvariantViolationError, ValidationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "InvariantViolationError",
    "ValidationError",
    "ValueObject",
]
