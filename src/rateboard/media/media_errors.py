"""Domain-specific exceptions for media uploads."""


class UploadError(Exception):
    """Base class for upload-related errors."""


class UnsupportedMediaError(UploadError):
    """Raised when Content-Type is not allowed."""


class PayloadTooLargeError(UploadError):
    """Raised when uploaded file exceeds configured limits."""


class EmptyUploadError(UploadError):
    """Raised when an uploaded file carries no bytes."""


class TooManyFilesError(UploadError):
    """Raised when a request carries more files than the endpoint accepts."""


class UploadReadError(UploadError):
    """Raised when streaming the upload fails."""
