"""Error kinds raised by the catalog storage layer.

Each error carries the HTTP status the API layer answers with, so route
handlers can translate them without a lookup table.
"""


class CatalogError(Exception):
    status_code = 500


class ValidationError(CatalogError):
    """A required field (name, category, image) is missing or empty."""
    status_code = 400


class StorageFailure(CatalogError):
    """Writing an image or the item document failed."""
    status_code = 500


class DecodeFailure(CatalogError):
    """The item document exists but cannot be parsed."""
    status_code = 500


class EmptyOrMissingStore(CatalogError):
    """No item document has been written yet."""
    status_code = 404


class IndexOutOfRange(CatalogError):
    status_code = 404


class ForbiddenPath(CatalogError):
    """Requested image path escapes the image root."""
    status_code = 400


class InvalidSuffix(CatalogError):
    """Requested image path is not a .jpg/.jpeg file."""
    status_code = 400
