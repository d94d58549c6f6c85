"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to a
rejected, not-found, or server-fault outcome.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class MissingFieldError(ValidationError):
    """A required item field (code, name, price) is empty or zero."""


class MalformedCodeError(ValidationError):
    """A product code does not match the XXXX-XXXX-XXXX-XXXX pattern."""


class DuplicateCodeError(ValidationError):
    """A product code is already taken (case-insensitive)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InternalInconsistencyError(DomainException):
    """The store failed an operation on a key it had just verified."""
