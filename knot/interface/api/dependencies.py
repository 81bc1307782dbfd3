"""Request dependencies shared by routes."""

from uuid import UUID

from fastapi import Header, HTTPException, status

ACTING_USER_HEADER = "X-User-Id"


def get_acting_user_id(
    x_user_id: str | None = Header(default=None, alias=ACTING_USER_HEADER),
) -> UUID:
    """Resolve the acting user from the gateway-provided header.

    The upstream gateway authenticates the caller and forwards their user ID;
    this service trusts the header as-is.

    Raises:
        HTTPException: 401 if the header is missing or not a UUID
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid acting user",
        )
