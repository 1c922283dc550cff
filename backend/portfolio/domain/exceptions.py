class DomainError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    kind = "DomainError"

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    status_code = 400
    kind = "ValidationError"


class InvariantViolation(ValidationError):
    kind = "InvariantViolation"


class NotFoundError(DomainError):
    status_code = 404
    kind = "NotFound"


class ConflictError(DomainError):
    status_code = 409
    kind = "Conflict"


class AssetStoreError(Exception):
    """Raised by the remote image host client. Never surfaced to HTTP callers."""
