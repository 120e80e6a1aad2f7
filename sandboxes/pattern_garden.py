"""Pattern Garden: paint cells on a small grid."""

from __future__ import annotations

from typing import Any

from sandboxes.base_sandbox import BaseSandbox
from world_model.types import EventType

GRID_SIDE = 5
CELL_COUNT = GRID_SIDE * GRID_SIDE
DISCOVERY_THRESHOLD = 8

GardenState = tuple[bool, ...]


class PatternGarden(BaseSandbox[GardenState]):
    """5x5 grid of toggles; reports once enough cells are painted."""

    app_name = "PatternGarden"
    title = "Pattern Garden"
    event_type = EventType.DISCOVERY

    def _initial_state(self) -> GardenState:
        return (False,) * CELL_COUNT

    @property
    def active(self) -> int:
        return sum(self.state)

    def toggle(self, index: int) -> None:
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"cell {index} is outside the {GRID_SIDE}x{GRID_SIDE} grid")
        cells = list(self.state)
        cells[index] = not cells[index]
        self._transition(tuple(cells))

    def _derive_event(
        self, previous: GardenState | None, current: GardenState
    ) -> dict[str, Any] | None:
        active = sum(current)
        if active >= DISCOVERY_THRESHOLD:
            return {"active": active}
        return None

    def render(self) -> list[str]:
        lines = ["Click to paint a pattern. Can you create symmetry?"]
        for row in range(GRID_SIDE):
            cells = self.state[row * GRID_SIDE : (row + 1) * GRID_SIDE]
            lines.append("  " + " ".join("#" if on else "." for on in cells))
        return lines

    def commands(self) -> dict[str, str]:
        return {"toggle <0-24>": "paint or clear one cell"}

    def handle(self, command: str, argument: str) -> None:
        if command != "toggle":
            super().handle(command, argument)
            return
        try:
            index = int(argument)
        except ValueError as exc:
            raise ValueError(f"Cell must be a number, got {argument!r}") from exc
        self.toggle(index)
