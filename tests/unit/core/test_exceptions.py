"""Tests for the application error taxonomy."""

import pytest

from profilehub.core.exceptions import (
    AppError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    MissingCredentialsError,
    NotFoundError,
    StoreError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_cls, status_code",
    [
        (ValidationError, 400),
        (MissingCredentialsError, 400),
        (DuplicateUsernameError, 400),
        (InvalidCredentialsError, 400),
        (NotFoundError, 404),
        (StoreError, 500),
    ],
)
def test_status_codes(error_cls, status_code):
    assert error_cls.status_code == status_code
    assert issubclass(error_cls, AppError)


def test_missing_credentials_is_a_validation_error():
    assert issubclass(MissingCredentialsError, ValidationError)


def test_default_and_custom_messages():
    assert NotFoundError().message == "User not found"
    assert NotFoundError("User not found or deleted").message == "User not found or deleted"
    assert str(DuplicateUsernameError()) == "Username already exists"


def test_details_default_to_empty():
    assert StoreError().details == {}
    assert StoreError(details={"reason": "OperationalError"}).details == {"reason": "OperationalError"}


def test_store_error_message():
    assert StoreError().message == "Database query error"
