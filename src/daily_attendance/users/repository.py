from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Credential store interface.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        name: str,
        email: str,
        phone: str,
        department: str,
        pin_hash: str,
    ) -> int:
        """Insert a user and return its id.

        Raises DuplicateEmailError if the email is already stored.
        """
        raise NotImplementedError
