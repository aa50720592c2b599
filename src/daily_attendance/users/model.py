from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: a registered user.

    Note: Plain data object (no DB access code). ``pin_hash`` is never echoed
    back to clients.
    """

    user_id: int
    name: str
    email: str
    phone: str
    department: str
    pin_hash: str
    created_at: Optional[datetime] = None
