"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class PolicyValidationError(DomainException):
    """A frequency policy breaks one of its constraints"""

    pass


class InvalidCustomValueError(PolicyValidationError):
    """custom_value is missing or out of range for the frequency kind"""

    pass


class UnsupportedFrequencyError(PolicyValidationError):
    """Frequency kind is not accepted by the record context"""

    pass


class InvalidPolicyError(DomainException):
    """Policy cannot be used to generate occurrences"""

    pass
