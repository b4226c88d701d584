from __future__ import annotations

from typing import Any, Optional, Protocol

from flask import session as flask_session

from ..core.constants import SESSION_KEY


class SessionStore(Protocol):
    def load(self) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def save(self, data: dict[str, Any]) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class FlaskSessionStore(SessionStore):
    """Keeps the identity in the signed Flask session cookie.

    Only usable inside a request context.
    """

    def __init__(self, key: str = SESSION_KEY):
        self._key = key

    def load(self) -> Optional[dict[str, Any]]:
        return flask_session.get(self._key)

    def save(self, data: dict[str, Any]) -> None:
        flask_session[self._key] = data

    def clear(self) -> None:
        flask_session.pop(self._key, None)
