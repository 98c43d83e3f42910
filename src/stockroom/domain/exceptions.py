"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and map them to
user-facing messages and status codes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Missing or malformed input; the caller can fix it and retry."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class GenerationError(DomainException):
    """An identifier or code could not be minted.

    Only raised when the operating system's random source is unavailable.
    """
