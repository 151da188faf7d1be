"""Exception hierarchy for Finora."""


class FinoraError(Exception):
    """Base exception for all Finora errors."""


class ValidationError(FinoraError):
    """Raised when input fails validation before a record is created."""


class StorageError(FinoraError):
    """Base exception for storage engine errors."""


class EntityNotFoundError(StorageError):
    """Raised when a referenced record does not exist."""


class IdentityAlreadyAssignedError(StorageError):
    """Raised when a record that already has an identity is given another one."""
