"""Forces: balance a scale by adjusting two weights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sandboxes.base_sandbox import BaseSandbox
from world_model.types import EventType

MIN_WEIGHT = 1
MAX_WEIGHT = 10


def clamp_weight(value: int) -> int:
    return max(MIN_WEIGHT, min(MAX_WEIGHT, int(value)))


@dataclass(frozen=True)
class ScaleState:
    left: int = MIN_WEIGHT
    right: int = MIN_WEIGHT

    @property
    def balanced(self) -> bool:
        return self.left == self.right


class Forces(BaseSandbox[ScaleState]):
    """Two weights on a scale; reports each time the scale comes into balance."""

    app_name = "Sandboxes/Forces"
    title = "Forces Sandbox"
    event_type = EventType.MILESTONE

    def _initial_state(self) -> ScaleState:
        return ScaleState()

    def set_left(self, value: int) -> None:
        self._transition(ScaleState(left=clamp_weight(value), right=self.state.right))

    def set_right(self, value: int) -> None:
        self._transition(ScaleState(left=self.state.left, right=clamp_weight(value)))

    @property
    def status(self) -> str:
        return "Balanced" if self.state.balanced else "Tilting"

    def _derive_event(
        self, previous: ScaleState | None, current: ScaleState
    ) -> dict[str, Any] | None:
        # Fires on the observation of balance, not on every balanced weight pair.
        if not current.balanced:
            return None
        if previous is not None and previous.balanced:
            return None
        return {"built": "bridge"}

    def render(self) -> list[str]:
        def bar(weight: int) -> str:
            return "=" * weight + " " * (MAX_WEIGHT - weight)

        return [
            "Balance the scale by adjusting weights.",
            f"  {self.state.left:>2} [{bar(self.state.left)}]  {self.status}  "
            f"[{bar(self.state.right)}] {self.state.right:<2}",
        ]

    def commands(self) -> dict[str, str]:
        return {
            f"left <{MIN_WEIGHT}-{MAX_WEIGHT}>": "set the left weight",
            f"right <{MIN_WEIGHT}-{MAX_WEIGHT}>": "set the right weight",
        }

    def handle(self, command: str, argument: str) -> None:
        if command not in {"left", "right"}:
            super().handle(command, argument)
            return
        try:
            weight = int(argument)
        except ValueError as exc:
            raise ValueError(f"Weight must be a whole number, got {argument!r}") from exc
        if command == "left":
            self.set_left(weight)
        else:
            self.set_right(weight)
