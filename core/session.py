"""Per-visit session identity."""

from __future__ import annotations

import logging

from world_model.types import Session

logger = logging.getLogger("learnos.session")


class SessionIdentity:
    """Lazily allocates one session and keeps it for the lifetime of the shell."""

    def __init__(self) -> None:
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = Session.create()
            logger.info("Session started: %s", self._session.id)
        return self._session

    @property
    def session_id(self) -> str:
        return self.session.id
