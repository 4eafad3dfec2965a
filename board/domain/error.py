"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires a signed-in user."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidReferenceError(DomainError):
    """Raised when an entity points at a missing or foreign parent."""

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when a write collides with an existing unique value."""

    pass
