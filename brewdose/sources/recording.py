from __future__ import annotations

from dataclasses import dataclass, field

from brewdose.sources.base import IngredientSource


@dataclass(frozen=True)
class IngredientCall:
    name: str
    args: tuple[int, ...]


@dataclass
class RecordingSource(IngredientSource):
    """In-memory source that records every call in order and dispenses nothing."""
    calls: list[IngredientCall] = field(default_factory=list)

    def _record(self, name: str, *args: int) -> None:
        self.calls.append(IngredientCall(name=name, args=args))

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call.name == name)

    def clear(self) -> None:
        self.calls.clear()

    # ---- IngredientSource ----
    def set_cup_size(self, grams: int) -> None:
        self._record("set_cup_size", grams)

    def add_water(self, grams: int, temperature: int) -> None:
        self._record("add_water", grams, temperature)

    def add_sugar(self, grams: int) -> None:
        self._record("add_sugar", grams)

    def add_coffee(self, grams: int) -> None:
        self._record("add_coffee", grams)

    def add_milk(self, grams: int) -> None:
        self._record("add_milk", grams)

    def add_milk_foam(self, grams: int) -> None:
        self._record("add_milk_foam", grams)

    def add_chocolate(self, grams: int) -> None:
        self._record("add_chocolate", grams)

    def add_cream(self, grams: int) -> None:
        self._record("add_cream", grams)
