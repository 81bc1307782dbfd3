"""Domain layer errors.

Every error carries an `ErrorCode` so the calling layer can map it to a
transport status deterministically. The domain itself never does that
mapping.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes exposed to clients."""

    USER_NOT_FOUND = "USER.001"
    DUPLICATE_EMAIL = "USER.002"
    WRONG_PASSWORD = "USER.003"
    OAUTH_ACCOUNT_MISMATCH = "OAUTH.001"
    OAUTH_DUPLICATE_ACCOUNT = "OAUTH.002"
    VALIDATION_FAIL = "VALIDATION.001"
    REQUIRED_PARAMETER = "VALIDATION.002"


class DomainError(Exception):
    """Base domain error."""

    code: ErrorCode

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserNotFoundError(DomainError):
    """Raised when a user cannot be found by id or email."""

    code = ErrorCode.USER_NOT_FOUND

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class DuplicateEmailError(DomainError):
    """Raised when registering an email that is already in use."""

    code = ErrorCode.DUPLICATE_EMAIL

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class WrongPasswordError(DomainError):
    """Raised when a password does not match the stored hash."""

    code = ErrorCode.WRONG_PASSWORD

    def __init__(self):
        super().__init__("Password does not match")


class AccountMismatchError(DomainError):
    """Raised when a user tries to link an account on behalf of someone else."""

    code = ErrorCode.OAUTH_ACCOUNT_MISMATCH

    def __init__(self, acting_user_id: str, requested_user_id: str):
        self.acting_user_id = acting_user_id
        self.requested_user_id = requested_user_id
        super().__init__(
            f"User {acting_user_id} cannot link an account for user {requested_user_id}"
        )


class DuplicateExternalAccountError(DomainError):
    """Raised when a GitHub account is already linked to another user."""

    code = ErrorCode.OAUTH_DUPLICATE_ACCOUNT

    def __init__(self, github_id: int):
        self.github_id = github_id
        super().__init__(f"GitHub account {github_id} is already linked to another user")


class ValidationFailedError(DomainError):
    """Raised when a request value fails domain validation."""

    code = ErrorCode.VALIDATION_FAIL

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for {field}: {value!r}")
