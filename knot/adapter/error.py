"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class PasswordHashError(AdapterError):
    """Password could not be hashed."""

    pass
