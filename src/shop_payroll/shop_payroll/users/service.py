from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .repository import AdminRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    admin_id: int
    name: str
    email: str
    role: Role

    def to_dict(self) -> dict:
        return {"id": self.admin_id, "name": self.name, "email": self.email, "role": self.role.value}


class AuthService:
    """Use case: authenticate an Admin/ShopAdmin account (login)."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def authenticate(self, email: str, password: str) -> SessionUser:
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid credentials")

        admin = self._admins.get_by_email(email.strip().lower())
        if not admin:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(admin.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Failed login for %s", admin.email)
            raise AuthenticationError("Invalid credentials")

        return SessionUser(admin_id=admin.admin_id, name=admin.name, email=admin.email, role=admin.role)

    def get_session_user(self, admin_id: int) -> SessionUser:
        admin = self._admins.get_by_id(admin_id)
        if not admin:
            raise AuthenticationError("Not authorized, user not found")
        return SessionUser(admin_id=admin.admin_id, name=admin.name, email=admin.email, role=admin.role)


class AdminAccountService:
    """Use case: manage back-office accounts (Admin only)."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def create_account(
        self,
        *,
        current_role: Role,
        name: str,
        email: str,
        password: str,
        role: Role = Role.SHOP_ADMIN,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin only route")

        return self.register(name=name, email=email, password=password, role=role)

    def register(self, *, name: str, email: str, password: str, role: Role) -> int:
        """Create an account without a role check (bootstrap / seed scripts)."""

        name = require_non_empty(name, "name")
        email = require_non_empty(email, "email").lower()
        require_min_length(password, "password", MIN_PASSWORD_LENGTH)

        if self._admins.get_by_email(email):
            raise ValidationError("Admin with this email already exists")

        admin_id = self._admins.create(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
        )
        logger.info("Created %s account %s (id=%s)", role.value, email, admin_id)
        return admin_id
