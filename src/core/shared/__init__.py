"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Validação explícita (ValidationResult)
- Interfaces (Ports): UnitOfWork, PasswordHasher, Clock
- Paginação
"""

from .exceptions import (
    DomainException,
    ValidationError,
    FieldValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
)
from .interfaces import UnitOfWork, PasswordHasher, Clock, SystemClock
from .validation import ValidationResult, FieldError

__all__ = [
    "DomainException",
    "ValidationError",
    "FieldValidationError",
    "EntityNotFoundError",
    "BusinessRuleViolationError",
    "UnitOfWork",
    "PasswordHasher",
    "Clock",
    "SystemClock",
    "ValidationResult",
    "FieldError",
]
