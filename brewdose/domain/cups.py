"""
Cup sizes, drink types and ingredient roles.

These enums are the vocabulary shared by the recipe table, the dose planner
and the ingredient sources.
"""
from __future__ import annotations

from enum import Enum


class CupSize(str, Enum):
    """The two cup sizes the machine serves."""
    SMALL = "small"
    BIG = "big"

    @property
    def grams(self) -> int:
        return CUP_GRAMS[self]


class DrinkType(str, Enum):
    """Drinks with a compiled-in recipe."""
    AMERICANO = "americano"
    CAPPUCCINO = "cappuccino"
    LATTE = "latte"
    MAROCHINO = "marochino"


class Ingredient(str, Enum):
    """
    Ingredient roles, one per ``IngredientSource`` operation.

    ``CUP`` stands for ``set_cup_size``; it is dosed first for every drink.
    """
    CUP = "cup"
    WATER = "water"
    SUGAR = "sugar"
    COFFEE = "coffee"
    MILK = "milk"
    MILK_FOAM = "milk_foam"
    CHOCOLATE = "chocolate"
    CREAM = "cream"

    @property
    def code(self) -> int:
        return INGREDIENT_CODES[self]


# Total cup weight in grams.
CUP_GRAMS: dict[CupSize, int] = {
    CupSize.SMALL: 100,
    CupSize.BIG: 140,
}

# One-byte codes used in dose frames.
INGREDIENT_CODES: dict[Ingredient, int] = {
    Ingredient.CUP: 0x01,
    Ingredient.WATER: 0x02,
    Ingredient.SUGAR: 0x03,
    Ingredient.COFFEE: 0x04,
    Ingredient.MILK: 0x05,
    Ingredient.MILK_FOAM: 0x06,
    Ingredient.CHOCOLATE: 0x07,
    Ingredient.CREAM: 0x08,
}

# Reverse mapping: code -> ingredient.
INGREDIENTS_BY_CODE: dict[int, Ingredient] = {v: k for k, v in INGREDIENT_CODES.items()}


def cup_size_grams(cup_size: CupSize | str) -> int:
    """
    Return the total weight of a cup in grams.

    Args:
        cup_size: A ``CupSize`` or its string value (``"small"``, ``"big"``).

    Returns:
        100 for a small cup, 140 for a big one.
    """
    return CupSize(cup_size).grams
