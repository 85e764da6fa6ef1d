from brewdose.domain import CupSize, DrinkType, Ingredient, RecipeCatalog
from brewdose.dosing import Dose
from brewdose.machine import CoffeeMachine
from brewdose.sources import HttpIngredientSource, IngredientSource, RecordingSource
from brewdose.config import DispenserSettings
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "CoffeeMachine",
    "CupSize",
    "DrinkType",
    "Ingredient",
    "RecipeCatalog",
    "Dose",
    "IngredientSource",
    "HttpIngredientSource",
    "RecordingSource",
    "DispenserSettings",
]

try:
    __version__ = version("brewdose")
except PackageNotFoundError:
    __version__ = "0.0.0"
