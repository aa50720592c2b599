from __future__ import annotations

from typing import Optional

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.constants import MSG_EMAIL_TAKEN
from ..core.exceptions import DuplicateEmailError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository

_USER_COLUMNS = "user_id, name, email, phone, department, pin_hash, created_at"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        name=row["name"],
        email=row["email"],
        phone=row["phone"],
        department=row["department"],
        pin_hash=row["pin_hash"],
        created_at=row.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(
        self,
        *,
        name: str,
        email: str,
        phone: str,
        department: str,
        pin_hash: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO users(name, email, phone, department, pin_hash)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (name, email, phone, department, pin_hash),
                )
            except IntegrityError as exc:
                if exc.errno == errorcode.ER_DUP_ENTRY:
                    raise DuplicateEmailError(MSG_EMAIL_TAKEN) from exc
                raise
            return int(cur.lastrowid)
