"""Domain-level exceptions.

All errors the configurator can raise are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Compatibility problems in a configuration are NOT exceptions: they are
reported as errors/warnings on ``ConfigurationValidation``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Invalid catalog data or an invalid value object."""


class EntityNotFoundError(DomainException):
    """A requested catalog option does not exist."""


class PersistenceError(DomainException):
    """The configuration store could not be read or written."""
