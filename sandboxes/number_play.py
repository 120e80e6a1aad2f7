"""Number Play: add two numbers and look for patterns."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from sandboxes.base_sandbox import BaseSandbox
from world_model.types import EventType

PLACEHOLDER = "—"

Number = int | float


def parse_number(text: str) -> Number | None:
    """Parse user text from a numeric input.

    Blank, unparsable or non-finite text gives ``None``.
    """
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return _normalize(value)


def _normalize(value: Number) -> Number:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class NumberPlayState:
    a: str = ""
    b: str = ""


class NumberPlay(BaseSandbox[NumberPlayState]):
    """Two inputs and their sum; reports every pair where both are filled in."""

    app_name = "NumberPlay"
    title = "Number Play"
    event_type = EventType.ACTION

    def _initial_state(self) -> NumberPlayState:
        return NumberPlayState()

    def set_a(self, value: str) -> None:
        self._transition(NumberPlayState(a=value, b=self.state.b))

    def set_b(self, value: str) -> None:
        self._transition(NumberPlayState(a=self.state.a, b=value))

    @property
    def total(self) -> Number | None:
        a = parse_number(self.state.a)
        b = parse_number(self.state.b)
        if a is None or b is None:
            return None
        return _normalize(a + b)

    @property
    def display(self) -> str:
        total = self.total
        return PLACEHOLDER if total is None else str(total)

    def _derive_event(
        self, previous: NumberPlayState | None, current: NumberPlayState
    ) -> dict[str, Any] | None:
        if not (current.a and current.b):
            return None
        return {
            "operation": "add",
            "values": [parse_number(current.a), parse_number(current.b)],
        }

    def render(self) -> list[str]:
        return [
            "Play with numbers. What patterns do you notice?",
            f"  a: [{self.state.a:>6}]  +  b: [{self.state.b:>6}]",
            f"  = {self.display}",
            "Try different pairs that make the same total.",
        ]

    def commands(self) -> dict[str, str]:
        return {"a <value>": "set the first number", "b <value>": "set the second number"}

    def handle(self, command: str, argument: str) -> None:
        if command == "a":
            self.set_a(argument)
        elif command == "b":
            self.set_b(argument)
        else:
            super().handle(command, argument)
