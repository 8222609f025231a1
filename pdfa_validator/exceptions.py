"""Custom exceptions for pdfa-validator."""


class PdfaValidatorError(Exception):
    """Base exception for all pdfa-validator errors."""

    pass


class ConfigurationError(PdfaValidatorError):
    """Raised when configuration is invalid or the JVM cannot be started."""

    pass


class IoFailure(PdfaValidatorError):
    """Raised when the input PDF cannot be opened or read."""

    def __init__(self, path: str, cause: Exception = None):
        super().__init__(f"IO error when opening {path}")
        self.path = path
        self.cause = cause


class EngineFailure(PdfaValidatorError):
    """Raised when the validation engine returns nothing or throws."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause

