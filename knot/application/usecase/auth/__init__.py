"""Auth use cases."""

from .verify_credentials import (
    VerifyCredentialsRequest,
    VerifyCredentialsResponse,
    VerifyCredentialsUseCase,
)

__all__ = [
    "VerifyCredentialsRequest",
    "VerifyCredentialsResponse",
    "VerifyCredentialsUseCase",
]
