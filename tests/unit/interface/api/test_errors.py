"""Unit tests for the domain error to HTTP status mapping."""

import pytest

from knot.domain.error import (
    AccountMismatchError,
    DuplicateEmailError,
    DuplicateExternalAccountError,
    ErrorCode,
    UserNotFoundError,
    ValidationFailedError,
    WrongPasswordError,
)
from knot.interface.api.errors import ERROR_STATUS


def test_every_code_has_a_status():
    assert set(ERROR_STATUS) == set(ErrorCode)


@pytest.mark.parametrize(
    "error, status_code",
    [
        (UserNotFoundError("x"), 404),
        (DuplicateEmailError("a@example.com"), 409),
        (WrongPasswordError(), 401),
        (AccountMismatchError("a", "b"), 403),
        (DuplicateExternalAccountError(1), 409),
        (ValidationFailedError("position", "astronaut"), 400),
    ],
)
def test_status_by_error(error, status_code):
    assert ERROR_STATUS[error.code] == status_code
