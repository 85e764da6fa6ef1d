"""
Ingredient sources the coffee machine can dose through.

- ``IngredientSource``: the abstract capability.
- ``RecordingSource``: keeps every call in memory.
- ``HttpIngredientSource``: forwards doses to a networked dispenser.
"""
from brewdose.sources.base import IngredientSource
from brewdose.sources.http import HttpIngredientSource
from brewdose.sources.recording import IngredientCall, RecordingSource

__all__ = ["IngredientSource", "HttpIngredientSource", "IngredientCall", "RecordingSource"]
