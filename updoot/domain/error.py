"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires a logged-in user and there is none."""

    def __init__(self) -> None:
        super().__init__("not authenticated")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: int, user_id: int):
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VoteConflictError(DomainError):
    """Raised when a vote transaction was rolled back.

    Covers constraint violations, deadlocks, lost connections and failed
    commits. The vote did not take effect and may be retried.
    """

    def __init__(self, post_id: int, user_id: int, reason: str):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__(
            f"Vote by user {user_id} on post {post_id} was not recorded: {reason}"
        )


class BatchFetchError(DomainError):
    """Raised to every caller of a loader batch whose bulk query failed."""

    def __init__(self, loader: str, key_count: int, reason: str):
        self.loader = loader
        self.key_count = key_count
        super().__init__(f"{loader} failed to fetch {key_count} keys: {reason}")


class UserAlreadyExistsError(DomainError):
    """Raised when a username or email is already registered."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field.capitalize()} already taken")


class InvalidCredentialsError(DomainError):
    """Raised when a login attempt fails."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)
