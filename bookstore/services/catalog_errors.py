# /bookstore/services/catalog_errors.py

"""
Error taxonomy of the catalog service.

These exceptions never leave `catalog_service` as exceptions for write
operations: they are converted into the error half of a `(result, error)`
pair, and `str(error)` is the message the caller sees.
"""

GENERIC_FAILURE_MESSAGE = "Error: unexpected storage failure"
CONSTRAINT_FAILURE_MESSAGE = "Error: the operation violates a uniqueness or reference constraint"


class CatalogError(Exception):
    """Base class for every expected catalog failure."""


class ValidationError(CatalogError):
    """A required field is missing or empty, or a value is too long."""


class NotFoundError(CatalogError):
    """An update or delete targeted an identity that does not exist."""


class ConstraintError(CatalogError):
    """A uniqueness or referential-integrity rule was violated."""


class UnexpectedError(CatalogError):
    """Any other failure. The message is generic; details only go to the log."""

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message)
