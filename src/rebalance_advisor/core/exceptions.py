"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class InvalidPortfolioError(AppError):
    """Raised when a portfolio cannot be analyzed (e.g. zero total value)."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_PORTFOLIO")


class UnsupportedFileError(AppError):
    """Raised when an uploaded holdings file has an unsupported format."""

    def __init__(self, filename: str):
        super().__init__(
            f"Unsupported file format: {filename}. Please upload CSV or Excel files only.",
            code="UNSUPPORTED_FILE",
        )


class ImportFailedError(AppError):
    """Raised when no row of an uploaded holdings file could be imported."""

    def __init__(self, errors: list[str], warnings: Optional[list[str]] = None):
        self.errors = list(errors)
        self.warnings = list(warnings or [])
        super().__init__(
            self.errors[0] if self.errors else "No valid assets found in file.",
            code="IMPORT_FAILED",
        )
