"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownOperationError(DomainException):
    """Operation is not one of the known account operations"""

    pass


class InvalidOperationDataError(DomainException):
    """Operation payload does not match what the operation expects"""

    pass
