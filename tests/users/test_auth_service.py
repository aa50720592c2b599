from __future__ import annotations

import pytest

from daily_attendance.core.constants import MSG_ALREADY_MARKED, MSG_MARKED
from daily_attendance.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)

ANN = dict(name="Ann", email="a@x.com", phone="555", department="Eng", pin="1234")


def test_register_returns_identity_and_hashes_pin(auth_service, users_repo):
    registered = auth_service.register(**ANN)

    assert registered.email == "a@x.com"
    stored = users_repo.stored(registered.user_id)
    assert stored.pin_hash != "1234"
    assert "1234" not in stored.pin_hash


@pytest.mark.parametrize("field", ["name", "email", "phone", "department", "pin"])
@pytest.mark.parametrize("value", [None, "", "   "])
def test_register_missing_field_raises(auth_service, users_repo, field, value):
    payload = dict(ANN, **{field: value})

    with pytest.raises(ValidationError):
        auth_service.register(**payload)
    assert len(users_repo) == 0


def test_register_duplicate_email_keeps_single_user(auth_service, users_repo):
    auth_service.register(**ANN)

    with pytest.raises(DuplicateEmailError):
        auth_service.register(**dict(ANN, name="Other", pin="9999"))
    assert len(users_repo) == 1


def test_email_uniqueness_is_case_sensitive(auth_service, users_repo):
    auth_service.register(**ANN)
    auth_service.register(**dict(ANN, email="A@x.com"))

    assert len(users_repo) == 2


def test_register_stringifies_numeric_phone(auth_service, users_repo):
    registered = auth_service.register(**dict(ANN, phone=5551234))

    assert users_repo.stored(registered.user_id).phone == "5551234"


@pytest.mark.parametrize("email,pin", [(None, "1234"), ("a@x.com", ""), ("", "")])
def test_login_missing_credentials(auth_service, email, pin):
    with pytest.raises(ValidationError):
        auth_service.login(email=email, pin=pin)


def test_login_unknown_email(auth_service):
    with pytest.raises(NotFoundError):
        auth_service.login(email="nobody@x.com", pin="1234")


def test_login_wrong_pin_creates_no_record(auth_service, attendance_repo):
    auth_service.register(**ANN)

    with pytest.raises(InvalidCredentialsError):
        auth_service.login(email="a@x.com", pin="0000")
    assert attendance_repo.records == []


def test_login_with_corrupt_hash_is_rejected(auth_service, make_user):
    make_user()

    with pytest.raises(InvalidCredentialsError):
        auth_service.login(email="a@x.com", pin="1234")


def test_repeated_logins_mark_once(auth_service, attendance_repo):
    auth_service.register(**ANN)

    first = auth_service.login(email="a@x.com", pin="1234")
    second = auth_service.login(email="a@x.com", pin="1234")
    third = auth_service.login(email="a@x.com", pin="1234")

    assert first.created is True
    assert first.message == MSG_MARKED
    assert second.message == third.message == MSG_ALREADY_MARKED
    assert len(attendance_repo.records) == 1


@pytest.mark.parametrize("pin", [0, 0.0, False, True])
def test_register_rejects_falsy_or_boolean_pin(auth_service, users_repo, pin):
    with pytest.raises(ValidationError):
        auth_service.register(**dict(ANN, pin=pin))
    assert len(users_repo) == 0


def test_numeric_pin_is_accepted_and_matches_string_login(auth_service):
    auth_service.register(**dict(ANN, pin=1234))

    assert auth_service.login(email="a@x.com", pin="1234").created is True
