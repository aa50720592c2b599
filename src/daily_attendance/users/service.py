from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from ..attendance.service import AttendanceRecorder
from ..common.validators import require_present
from ..core.constants import (
    MSG_ALREADY_MARKED,
    MSG_EMAIL_TAKEN,
    MSG_LOGIN_MISSING,
    MSG_MARKED,
    MSG_REGISTER_MISSING,
    MSG_USER_NOT_FOUND,
    MSG_WRONG_PIN,
)
from ..core.exceptions import DuplicateEmailError, InvalidCredentialsError, NotFoundError
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredUser:
    """Non-sensitive identity echo returned after registration."""

    user_id: int
    email: str


@dataclass(frozen=True)
class LoginResult:
    created: bool
    message: str


class AuthService:
    """Use case: register users and log them in.

    There is no session or token: every login re-validates the PIN and marks
    the day's attendance as a side effect.
    """

    def __init__(self, users: UserRepository, recorder: AttendanceRecorder):
        self._users = users
        self._recorder = recorder

    def register(self, *, name: Any, email: Any, phone: Any, department: Any, pin: Any) -> RegisteredUser:
        name = require_present(name, MSG_REGISTER_MISSING)
        email = require_present(email, MSG_REGISTER_MISSING)
        phone = require_present(phone, MSG_REGISTER_MISSING)
        department = require_present(department, MSG_REGISTER_MISSING)
        pin = require_present(pin, MSG_REGISTER_MISSING)

        if self._users.get_by_email(email):
            raise DuplicateEmailError(MSG_EMAIL_TAKEN)

        user_id = self._users.create_user(
            name=name,
            email=email,
            phone=phone,
            department=department,
            pin_hash=generate_password_hash(pin),
        )
        logger.info("Registered user %s", user_id)
        return RegisteredUser(user_id=user_id, email=email)

    def login(self, *, email: Any, pin: Any) -> LoginResult:
        email = require_present(email, MSG_LOGIN_MISSING)
        pin = require_present(pin, MSG_LOGIN_MISSING)

        user = self._users.get_by_email(email)
        if not user:
            raise NotFoundError(MSG_USER_NOT_FOUND)

        try:
            ok = check_password_hash(user.pin_hash, pin)
        except ValueError:
            # e.g. corrupted or unsupported hash values
            ok = False

        if not ok:
            logger.info("Rejected PIN for user %s", user.user_id)
            raise InvalidCredentialsError(MSG_WRONG_PIN)

        result = self._recorder.mark_attendance(user.user_id)
        return LoginResult(
            created=result.created,
            message=MSG_MARKED if result.created else MSG_ALREADY_MARKED,
        )
