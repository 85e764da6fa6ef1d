"""
Recipe table for the coffee machine.

Each recipe allocates fractions of the total cup weight to ingredient roles
for one drink and cup size. Recipes are compiled-in constants; the
``RecipeCatalog`` gives read-only lookups over them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from brewdose.domain.cups import CupSize, DrinkType, Ingredient


@dataclass(frozen=True)
class Portion:
    """
    A fraction of the cup weight given to one ingredient.

    Attributes:
        ingredient: The ingredient role.
        numerator: Fraction numerator, may be 0 for water that only sets
            the temperature.
        denominator: Fraction denominator.
    """
    ingredient: Ingredient
    numerator: int
    denominator: int

    def grams(self, total_grams: int) -> int:
        """Scale to a cup weight, truncating like integer division."""
        return total_grams * self.numerator // self.denominator


@dataclass(frozen=True)
class Recipe:
    """
    Dosing recipe for one drink in one cup size.

    Attributes:
        drink: The drink type.
        cup_size: The cup size this allocation applies to.
        portions: Portions in the order they are dosed.
        water_temperature: Water temperature in Celsius, required when the
            recipe doses water.
    """
    drink: DrinkType
    cup_size: CupSize
    portions: tuple[Portion, ...]
    water_temperature: Optional[int] = None

    def __post_init__(self) -> None:
        has_water = any(p.ingredient is Ingredient.WATER for p in self.portions)
        if has_water and self.water_temperature is None:
            raise ValueError(f"{self.drink.value} recipe doses water without a temperature")

    @property
    def ingredients(self) -> frozenset[Ingredient]:
        return frozenset(p.ingredient for p in self.portions)


def _portions(*items: tuple[Ingredient, int, int]) -> tuple[Portion, ...]:
    return tuple(Portion(ingredient, num, den) for ingredient, num, den in items)


# Portions shared by both cup sizes, keyed by drink.
_SIZE_INDEPENDENT: dict[DrinkType, tuple[tuple[Portion, ...], Optional[int]]] = {
    DrinkType.CAPPUCCINO: (
        _portions(
            (Ingredient.WATER, 0, 1),
            (Ingredient.MILK, 1, 3),
            (Ingredient.COFFEE, 1, 3),
            (Ingredient.MILK_FOAM, 1, 3),
        ),
        80,
    ),
    DrinkType.LATTE: (
        _portions(
            (Ingredient.WATER, 0, 1),
            (Ingredient.MILK, 1, 4),
            (Ingredient.COFFEE, 1, 2),
            (Ingredient.MILK_FOAM, 1, 4),
        ),
        90,
    ),
    # The last quarter of the cup stays empty.
    DrinkType.MAROCHINO: (
        _portions(
            (Ingredient.CHOCOLATE, 1, 4),
            (Ingredient.COFFEE, 1, 4),
            (Ingredient.MILK_FOAM, 1, 4),
        ),
        None,
    ),
}

# Americano changes its coffee to water ratio with the cup size.
_AMERICANO_TEMPERATURE = 60
_AMERICANO: dict[CupSize, tuple[Portion, ...]] = {
    CupSize.SMALL: _portions((Ingredient.COFFEE, 1, 3), (Ingredient.WATER, 2, 3)),
    CupSize.BIG: _portions((Ingredient.COFFEE, 1, 4), (Ingredient.WATER, 3, 4)),
}


def _build_recipes() -> dict[tuple[DrinkType, CupSize], Recipe]:
    """Build the full recipe table for every drink and cup size."""
    recipes: dict[tuple[DrinkType, CupSize], Recipe] = {}
    for size, portions in _AMERICANO.items():
        recipes[(DrinkType.AMERICANO, size)] = Recipe(
            drink=DrinkType.AMERICANO,
            cup_size=size,
            portions=portions,
            water_temperature=_AMERICANO_TEMPERATURE,
        )
    for drink, (portions, temperature) in _SIZE_INDEPENDENT.items():
        for size in CupSize:
            recipes[(drink, size)] = Recipe(
                drink=drink,
                cup_size=size,
                portions=portions,
                water_temperature=temperature,
            )
    return recipes


RECIPES: dict[tuple[DrinkType, CupSize], Recipe] = _build_recipes()


def _drink_from_name(name: str) -> Optional[DrinkType]:
    try:
        return DrinkType(name.lower().strip())
    except (AttributeError, ValueError):
        return None


class RecipeCatalog:
    """
    Read-only catalog of the compiled-in recipes.

    Provides lookup by drink type or drink name together with a cup size.
    """

    def __init__(self) -> None:
        self._recipes: dict[tuple[DrinkType, CupSize], Recipe] = dict(RECIPES)

    def get(self, drink: DrinkType, cup_size: CupSize) -> Optional[Recipe]:
        """
        Look up the recipe for a drink and cup size.

        Args:
            drink: The drink type.
            cup_size: The cup size.

        Returns:
            The ``Recipe`` if one exists, otherwise ``None``.
        """
        return self._recipes.get((drink, cup_size))

    def get_by_name(self, name: str, cup_size: CupSize) -> Optional[Recipe]:
        """
        Look up a recipe by drink name (e.g. ``"latte"``).

        Returns:
            The ``Recipe`` if found, otherwise ``None``.
        """
        drink = _drink_from_name(name)
        if drink is None:
            return None
        return self.get(drink, cup_size)

    def list_drink(self, drink: DrinkType) -> list[Recipe]:
        """Return the recipes of one drink, small cup first."""
        return [r for r in self.all() if r.drink == drink]

    def all(self) -> list[Recipe]:
        """Return all recipes sorted by drink, then cup size."""
        drinks = list(DrinkType)
        sizes = list(CupSize)
        return sorted(
            self._recipes.values(),
            key=lambda r: (drinks.index(r.drink), sizes.index(r.cup_size)),
        )

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, item: tuple[DrinkType, CupSize] | str) -> bool:
        if isinstance(item, tuple):
            return item in self._recipes
        drink = _drink_from_name(item)
        return drink is not None and any(r.drink == drink for r in self._recipes.values())
