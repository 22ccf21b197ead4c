"""
Exception types raised by the swing probability pipeline.
"""


class SwingModelError(Exception):
    """Base class for pipeline failures that must abort the run."""


class ConfigurationError(SwingModelError):
    """Raised when a configured setting cannot be applied to the data.

    Examples: an imputation column with no observed values, or an unknown
    model family name.
    """


class SchemaMismatchError(SwingModelError):
    """Raised when table columns do not match what a stage expects."""

    def __init__(self, message: str, missing=None, unexpected=None):
        super().__init__(message)
        self.missing = list(missing or [])
        self.unexpected = list(unexpected or [])
