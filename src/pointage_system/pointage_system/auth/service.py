from __future__ import annotations

import hmac
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    username: str


class AuthService:
    """Use case: authenticate the administrator (single fixed account)."""

    def __init__(self, username: str, password: str):
        self._username = username
        self._password_hash = generate_password_hash(password)

    def authenticate(self, username: str, password: str) -> SessionUser:
        username = username or ""
        ok_user = hmac.compare_digest(username.encode("utf-8"), self._username.encode("utf-8"))
        ok_password = check_password_hash(self._password_hash, password or "")
        if not (ok_user and ok_password):
            raise AuthenticationError("Identifiants invalides.")
        return SessionUser(username=username)
