"""Base sandbox interface and trigger evaluation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar

from world_model.types import EventDraft, EventType

SendFn = Callable[[EventDraft], None]
StateT = TypeVar("StateT")


class BaseSandbox(ABC, Generic[StateT]):
    """Interactive widget with private state and an event trigger.

    State is an immutable value. Every transition to a different value runs
    ``_derive_event(previous, current)``; a non-``None`` payload is sent as an
    event of ``event_type``. ``mount`` runs the same step once with no
    previous state.
    """

    app_name: ClassVar[str]
    title: ClassVar[str]
    event_type: ClassVar[EventType]

    def __init__(self, send: SendFn) -> None:
        self.send = send
        self.state: StateT = self._initial_state()

    def mount(self) -> None:
        """Observe the initial state, as a freshly shown widget does."""
        self._observe(None, self.state)

    def _transition(self, new_state: StateT) -> None:
        if new_state == self.state:
            return
        previous, self.state = self.state, new_state
        self._observe(previous, new_state)

    def _observe(self, previous: StateT | None, current: StateT) -> None:
        payload = self._derive_event(previous, current)
        if payload is not None:
            self.send(EventDraft(app=self.app_name, type=self.event_type, payload=payload))

    @abstractmethod
    def _initial_state(self) -> StateT:
        """Starting state of a fresh widget."""

    @abstractmethod
    def _derive_event(self, previous: StateT | None, current: StateT) -> dict[str, Any] | None:
        """Return the event payload this transition triggers, if any."""

    @abstractmethod
    def render(self) -> list[str]:
        """Terminal rendition of the widget body."""

    def commands(self) -> dict[str, str]:
        """Input commands understood by ``handle``, with help text."""
        return {}

    def handle(self, command: str, argument: str) -> None:
        """Apply one text command from the terminal shell."""
        raise ValueError(f"Unknown command for {self.title}: {command}")
