from __future__ import annotations

from abc import ABC, abstractmethod


class IngredientSource(ABC):
    """
    Capability the coffee machine doses ingredients through.

    Every operation is a fire-and-forget command. Quantities are in grams,
    temperatures in Celsius. Handling a failed dispense is up to the
    implementation.
    """

    @abstractmethod
    def set_cup_size(self, grams: int) -> None: ...

    @abstractmethod
    def add_water(self, grams: int, temperature: int) -> None: ...

    @abstractmethod
    def add_sugar(self, grams: int) -> None: ...

    @abstractmethod
    def add_coffee(self, grams: int) -> None: ...

    @abstractmethod
    def add_milk(self, grams: int) -> None: ...

    @abstractmethod
    def add_milk_foam(self, grams: int) -> None: ...

    @abstractmethod
    def add_chocolate(self, grams: int) -> None: ...

    @abstractmethod
    def add_cream(self, grams: int) -> None: ...
