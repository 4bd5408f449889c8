"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StateStoreError(ApplicationError):
    """Raised when the backing store cannot be read or a commit fails. Pending writes are discarded."""
