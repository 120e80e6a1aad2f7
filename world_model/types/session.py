"""Visitor session model."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict


class Session(BaseModel):
    """Opaque per-visit identifier correlating events and suggestion requests."""

    model_config = ConfigDict(frozen=True)

    id: str

    @classmethod
    def create(cls) -> Session:
        """Allocate a fresh 128-bit random session token."""
        return cls(id=uuid.uuid4().hex)
