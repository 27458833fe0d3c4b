# -*- coding: utf-8 -*-
"""
Session context.

Holds the bearer credential for the logged-in user. Token acquisition
(login screen, SSO, ...) happens elsewhere; controllers and the API client
receive a SessionContext explicitly instead of reading a global.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from services.exceptions import SessionRequiredException
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionContext:
    """
    Bearer credential provider.

    Usage:
        session = SessionContext(token=user["token"], username=user["username"])
        api = SurveyorApiClient(session)
    """

    def __init__(self, token: Optional[str] = None, username: str = "",
                 role: str = "", expires_in: Optional[int] = None):
        self.username = username
        self.role = role
        self._token: Optional[str] = None
        self._expires_at: Optional[datetime] = None
        if token:
            self.set_token(token, expires_in)

    @classmethod
    def from_user(cls, user: Dict[str, Any]) -> "SessionContext":
        """Build a session from the auth payload ({username, role, token, ...})."""
        return cls(
            token=user.get("token"),
            username=user.get("username", ""),
            role=user.get("role", ""),
        )

    @property
    def token(self) -> Optional[str]:
        """Current token, or None if absent or expired."""
        if not self._token:
            return None
        if self._expires_at and datetime.now() >= self._expires_at:
            logger.warning(f"Session token for '{self.username}' has expired")
            return None
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def set_token(self, token: str, expires_in: Optional[int] = None):
        """Set token from external source (login, refresh)."""
        self._token = token
        self._expires_at = datetime.now() + timedelta(seconds=expires_in) if expires_in else None
        logger.debug("Session token updated")

    def clear(self):
        """Forget the credential (logout)."""
        self._token = None
        self._expires_at = None

    def require_token(self) -> str:
        """Return the token or raise SessionRequiredException."""
        token = self.token
        if not token:
            raise SessionRequiredException()
        return token

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.require_token()}"}
