"""Exception hierarchy for the agmd package."""


class AGMDError(Exception):
    """Base exception for all agmd errors."""
    pass


class DomainError(AGMDError, ValueError):
    """Raised when an input violates a physical precondition of a correlation."""
    pass


class ConfigurationError(AGMDError):
    """Raised for configuration loading/validation errors."""
    pass
