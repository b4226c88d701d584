from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import AuthenticationError
from .credentials import CredentialVerifier
from .model import Session
from .session_store import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, verifier: CredentialVerifier):
        self._verifier = verifier

    def authenticate(self, username: str, password: str) -> Session:
        username = str(username or "").strip()
        identity = self._verifier.verify(username, str(password or ""))
        if identity is None:
            logger.warning("login rejected for %r", username)
            raise AuthenticationError("Invalid username or password. Please try again.")

        return Session(username=username, role=identity.role, class_number=identity.class_number)


class SessionService:
    """Holds at most one active session in the given store."""

    def __init__(self, auth: AuthService):
        self._auth = auth

    def login(self, store: SessionStore, username: str, password: str) -> Session:
        s = self._auth.authenticate(username, password)
        store.save(s.to_dict())
        logger.info("login %s as %s", s.username, s.role.value)
        return s

    def current(self, store: SessionStore) -> Optional[Session]:
        data = store.load()
        if not data:
            return None
        try:
            return Session.from_dict(data)
        except (KeyError, ValueError):
            logger.warning("discarding malformed stored session")
            store.clear()
            return None

    def logout(self, store: SessionStore) -> None:
        s = self.current(store)
        store.clear()
        if s:
            logger.info("logout %s", s.username)
