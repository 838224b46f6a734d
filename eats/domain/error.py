"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyExistsError(DomainError):
    """Raised when a uniqueness rule would be violated."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class AuthenticationError(DomainError):
    """Raised when a request cannot be bound to an account.

    Covers a missing or malformed Authorization header, a token the
    identity provider did not sign, and a valid token with no account
    behind it. Callers are not told which one happened.
    """

    def __init__(self, reason: str = "unauthenticated"):
        self.reason = reason
        super().__init__(reason)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ValidationError(DomainError):
    """Domain validation error."""

    pass
