"""Credential verification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, Field

from knot.application.usecase.auth import (
    VerifyCredentialsRequest,
    VerifyCredentialsResponse,
    VerifyCredentialsUseCase,
)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class VerifyCredentialsAPIRequest(BaseModel):
    """API request for verifying credentials."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


@router.post("/credentials", response_model=VerifyCredentialsResponse)
async def verify_credentials(
    request: VerifyCredentialsAPIRequest,
    verify_credentials_use_case: FromDishka[VerifyCredentialsUseCase],
) -> VerifyCredentialsResponse:
    """Verify an email/password pair and return the user ID.

    Called by the auth gateway; no token or session is created here.

    Example:
        POST /auth/credentials

        Request:
        {"email": "alice@example.com", "password": "correct horse"}

        Response:
        {"user_id": "0192f0c1-7d2e-7a51-9b0e-3c6f1f9e2a10"}

    Errors:
        404 USER.001 if the email is unknown, 401 USER.003 on a wrong password.
    """
    return await verify_credentials_use_case.execute(
        VerifyCredentialsRequest(email=request.email, password=request.password)
    )
