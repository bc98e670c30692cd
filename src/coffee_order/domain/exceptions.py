"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
application and CLI layers can catch them uniformly and show a notice.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidOperationError(DomainException):
    """An operation would break an order invariant (e.g. negative quantity)."""


class NoHandlerAvailableError(DomainException):
    """The environment offers nothing able to compose a mail message."""
