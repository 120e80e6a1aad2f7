"""Launchable app descriptor models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppDescriptor(BaseModel):
    """One launch target shown in the dock."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str
    icon: str
    hint: str | None = None


class SuggestionResponse(BaseModel):
    """Body of ``GET /suggest/{session_id}``.

    Unknown top-level fields are ignored. ``suggestions`` is optional; its
    absence means "no update".
    """

    suggestions: list[AppDescriptor] | None = None

    @field_validator("suggestions")
    @classmethod
    def _unique_ids(cls, value: list[AppDescriptor] | None) -> list[AppDescriptor] | None:
        if value is None:
            return value
        seen: set[str] = set()
        for app in value:
            if app.id in seen:
                raise ValueError(f"duplicate app id in suggestions: {app.id}")
            seen.add(app.id)
        return value


DEFAULT_SUGGESTIONS: tuple[AppDescriptor, ...] = (
    AppDescriptor(
        id="NumberPlay",
        title="Number Play",
        icon="Calculator",
        hint="Try making the same total in many ways",
    ),
    AppDescriptor(
        id="PatternGarden",
        title="Pattern Garden",
        icon="Grid",
        hint="Paint symmetry and repetition",
    ),
    AppDescriptor(
        id="Forces",
        title="Forces Sandbox",
        icon="Orbit",
        hint="Find equilibrium",
    ),
)
