"""
Exception types for brewcraft-common.

All exceptions inherit from BrewCraftError for easy catching
of any library-related errors. The calculation engine itself never
raises; these cover conversion helpers, validation and storage.
"""


class BrewCraftError(Exception):
    """Base exception for all BrewCraft errors."""

    pass


class UnitConversionError(BrewCraftError):
    """Raised when a unit conversion fails."""

    pass


class MatchingError(BrewCraftError):
    """Raised when ingredient or style matching fails."""

    pass


class ValidationError(BrewCraftError):
    """Raised when data validation fails."""

    pass


class ConfigurationError(BrewCraftError):
    """Raised when configuration is invalid or missing."""

    pass


class StorageError(BrewCraftError):
    """Raised when a recipe or ingredient store cannot be read or written."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(BrewCraftError):
    """Raised when a requested recipe or ingredient is not found."""

    pass
