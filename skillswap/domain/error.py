"""Domain layer errors.

Each error maps to one user-facing condition; the interface layer turns
them into HTTP statuses.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input detected before any mutation."""

    pass


class ConflictError(DomainError):
    """The operation would duplicate an existing record."""

    pass


class InvalidStateError(DomainError):
    """The operation is not legal in the entity's current state."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a principal lacks standing for an operation on an existing record."""

    def __init__(
        self,
        resource: str,
        resource_id: str,
        user_id: str,
        action: str = "modify",
        message: str | None = None,
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            message
            or f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthenticationError(DomainError):
    """Credentials did not match a known principal."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AccountLockedError(DomainError):
    """Raised when an admin account is temporarily locked after failed logins."""

    def __init__(self, message: str = "Account temporarily locked due to too many failed login attempts"):
        super().__init__(message)
