"""Custom exceptions for configuration stores."""


class StoreError(Exception):
    """Base exception for all store errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DocumentNotFoundError(StoreError):
    """Raised when no document exists at the requested location."""

    def __init__(self, message: str = "Document not found"):
        super().__init__(message)


class StoreReadError(StoreError):
    """Raised when a document exists but cannot be read."""

    pass


class StoreWriteError(StoreError):
    """Raised when a document cannot be written."""

    pass


class WriteConflictError(StoreWriteError):
    """Raised when a save would overwrite a document changed by someone else."""

    def __init__(self, message: str, status_code: int | None = None, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class InvalidDocumentError(StoreError):
    """Raised when stored content is not a valid configuration document."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class StoreConnectionError(StoreError):
    """Raised when a network-backed store cannot be reached."""

    pass


class StoreAPIError(StoreError):
    """Raised when a network-backed store returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)
