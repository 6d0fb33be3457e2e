"""Session login for the show admin UI."""

import logging
import secrets

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from quickshow.config import settings

logger = logging.getLogger(__name__)

SESSION_KEY = "quickshow_admin"


def credentials_match(username: str, password: str) -> bool:
    """Constant-time comparison against the configured admin credentials."""
    return secrets.compare_digest(
        username.encode(), settings.admin_username.encode()
    ) & secrets.compare_digest(password.encode(), settings.admin_password.encode())


class AdminAuth(AuthenticationBackend):
    """Single shared admin account taken from settings."""

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username") or "")
        if not credentials_match(username, str(form.get("password") or "")):
            logger.warning(f"Rejected admin login for {username!r}")
            return False
        request.session.update({SESSION_KEY: username})
        return True

    async def logout(self, request: Request) -> bool:
        request.session.pop(SESSION_KEY, None)
        return True

    async def authenticate(self, request: Request) -> bool:
        return SESSION_KEY in request.session
