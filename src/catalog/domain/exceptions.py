"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and translate them into
user-facing errors. Anything that is not a DomainException is unexpected
and propagates untouched.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidProductError(ValidationError):
    """A product could not be created or changed without breaking its rules."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: object) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")
