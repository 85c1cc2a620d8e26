from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class AdminUser:
    """Domain entity: a back-office account (Admin or ShopAdmin).

    Plain data object, no database access.
    """

    admin_id: int
    name: str
    email: str
    password_hash: str
    role: Role
