"""Session token storage for a single client instance."""

import logging

logger = logging.getLogger(__name__)


class SessionCredentialStore:
    """Holds the current session token of one client.

    An empty string means unauthenticated. The token is opaque here: its
    format is not checked and expiry is only noticed when a later call fails.
    Nothing is persisted.
    """

    def __init__(self, token: str = ""):
        self._token = token

    def set(self, token: str) -> None:
        """Replace the stored token."""
        self._token = token
        logger.debug("Session token updated (***)")

    def get(self) -> str:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    def __repr__(self) -> str:
        state = "set" if self._token else "empty"
        return f"{type(self).__name__}(token={state})"
