"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Note that hitting the per-line quantity cap is *not* an error: adding to a
full line succeeds and reports ``quantity_capped`` on the returned update.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantity(ValidationError):
    """A line quantity fell outside the allowed range."""


class InvalidPromotion(ValidationError):
    """A promotion code is not in the registry."""


class EmptyCartError(ValidationError):
    """Checkout was attempted on a cart with no lines."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class LineNotFoundError(EntityNotFoundError):
    """The cart has no line for the requested product."""


class StorageError(DomainException):
    """Persisted session data could not be read back."""
