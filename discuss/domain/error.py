"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Request data failed domain validation."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StorageError(DomainError):
    """Raised when the backing store rejects a write."""

    pass


class LookupUnavailableError(DomainError):
    """Raised when the storage subsystem cannot serve a lookup at all."""

    pass


class DeadlineExceededError(DomainError):
    """Raised when a request could not be completed before its deadline."""

    pass
