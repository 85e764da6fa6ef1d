"""
Core domain models of the brewdose library: cup sizes, drink types,
ingredient roles and the recipe catalog.
"""
from brewdose.domain.cups import CupSize, DrinkType, Ingredient, cup_size_grams
from brewdose.domain.recipes import RECIPES, Portion, Recipe, RecipeCatalog

__all__ = [
    "CupSize",
    "DrinkType",
    "Ingredient",
    "cup_size_grams",
    "RECIPES",
    "Portion",
    "Recipe",
    "RecipeCatalog",
]
