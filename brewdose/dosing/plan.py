"""
Dose planning: turns a recipe into concrete dosing commands.

``plan_doses`` is pure; ``apply_dose`` issues one dose against an
``IngredientSource``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from brewdose.domain.cups import Ingredient
from brewdose.domain.recipes import Recipe
from brewdose.sources.base import IngredientSource


@dataclass(frozen=True)
class Dose:
    """
    One dosing command.

    Attributes:
        ingredient: The ingredient role (``CUP`` sets the cup size).
        grams: Quantity in grams.
        temperature: Water temperature in Celsius, ``None`` for everything
            but water.
    """
    ingredient: Ingredient
    grams: int
    temperature: Optional[int] = None


def plan_doses(recipe: Recipe, sugar: int = 0) -> list[Dose]:
    """
    Scale a recipe to its cup and list the doses in dispensing order.

    The cup size comes first. Each portion is truncated on its own, so
    rounding loss is never carried over to the next portion.

    Args:
        recipe: The recipe to scale.
        sugar: Extra sugar in grams, dosed last when positive.

    Returns:
        The ordered list of ``Dose`` objects.
    """
    if isinstance(sugar, bool) or not isinstance(sugar, int):
        raise ValueError(f"sugar must be whole grams, got {sugar!r}")
    if sugar < 0:
        raise ValueError(f"sugar must not be negative, got {sugar}")

    total = recipe.cup_size.grams
    doses = [Dose(Ingredient.CUP, total)]
    for portion in recipe.portions:
        temperature = recipe.water_temperature if portion.ingredient is Ingredient.WATER else None
        doses.append(Dose(portion.ingredient, portion.grams(total), temperature))
    if sugar:
        doses.append(Dose(Ingredient.SUGAR, sugar))
    return doses


def apply_dose(source: IngredientSource, dose: Dose) -> None:
    """Issue a single dose against an ingredient source."""
    ingredient = dose.ingredient
    if ingredient is Ingredient.CUP:
        source.set_cup_size(dose.grams)
    elif ingredient is Ingredient.WATER:
        source.add_water(dose.grams, dose.temperature or 0)
    elif ingredient is Ingredient.SUGAR:
        source.add_sugar(dose.grams)
    elif ingredient is Ingredient.COFFEE:
        source.add_coffee(dose.grams)
    elif ingredient is Ingredient.MILK:
        source.add_milk(dose.grams)
    elif ingredient is Ingredient.MILK_FOAM:
        source.add_milk_foam(dose.grams)
    elif ingredient is Ingredient.CHOCOLATE:
        source.add_chocolate(dose.grams)
    elif ingredient is Ingredient.CREAM:
        source.add_cream(dose.grams)
    else:
        raise ValueError(f"Unknown ingredient: {ingredient!r}")
