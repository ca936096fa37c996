"""Error taxonomy for food catalog operations."""


class FoodCatalogError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FoodCatalogError):
    """Raised when a payload is missing fields or has malformed values."""

    status_code = 400

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


class NotFoundError(FoodCatalogError):
    """Raised when no record matches the requested id or name."""

    status_code = 404


class StorageUnavailableError(FoodCatalogError):
    """Raised when the storage backend fails or times out."""

    status_code = 500
