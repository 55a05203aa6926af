"""Domain exception classes for business logic errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource cannot be found."""

    pass


class ValidationError(DomainError):
    """Raised when data validation fails."""

    pass


class CheckpointNotFoundError(ResourceNotFoundError):
    """Raised when a checkpoint id does not exist."""

    def __init__(self, message: str = "Checkpoint not found"):
        super().__init__(message)


class EmbeddingDimensionError(ValidationError):
    """Raised when a query vector and a stored embedding differ in length."""

    def __init__(self, checkpoint_id: int, expected: int, actual: int):
        self.checkpoint_id = checkpoint_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Checkpoint {checkpoint_id} has a {actual}-dimensional embedding; query embedding has {expected} dimensions"
        )
