"""Domain error taxonomy.

Adapters map these to user-facing failures: ``ValidationError`` is a
bad request, ``ConflictError`` a refused create, ``NotFoundError`` a missing
record.
"""


class BillingLogError(Exception):
    """Base class for expected billings log failures."""


class ValidationError(BillingLogError):
    """Raised when a date, month, count or budget value is malformed."""


class ConflictError(BillingLogError):
    """Raised when a day record already exists for the requested date."""


class NotFoundError(BillingLogError):
    """Raised when a lookup by id finds nothing."""


__all__ = [
    "BillingLogError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
]
