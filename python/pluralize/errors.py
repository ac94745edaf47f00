"""
Exceptions raised by the pluralize package.
"""


class PluralizeError(Exception):
    """Base class for pluralize errors."""

    pass


class RuleError(PluralizeError):
    """Raised when a custom rule pattern cannot be compiled."""

    pass


class ConfigError(PluralizeError):
    """Raised when a rules file cannot be read or has the wrong shape."""

    pass
