"""
The coffee machine: resolves a drink and cup size into a sequence of
dosing calls against an ingredient source.
"""
from __future__ import annotations

import logging
from typing import Optional

from brewdose.domain.cups import CupSize, DrinkType
from brewdose.domain.recipes import RecipeCatalog
from brewdose.dosing.plan import Dose, apply_dose, plan_doses
from brewdose.logging import DEFAULT_RING_SIZE, create_logger, log_drink_event
from brewdose.sources.base import IngredientSource


class CoffeeMachine:
    """
    Makes drinks from the compiled-in recipes.

    Each make call is independent: it sets the cup size once, then doses every
    portion of the recipe in order. Nothing is kept between drinks.
    """

    def __init__(
        self,
        source: IngredientSource,
        catalog: Optional[RecipeCatalog] = None,
        logger: Optional[logging.Logger] = None,
        ring_size: int = DEFAULT_RING_SIZE,
    ) -> None:
        self.source = source
        self.catalog = catalog or RecipeCatalog()
        self.logger = logger or create_logger("brewdose.machine", ring_size)

    def plan(self, drink: DrinkType | str, cup_size: CupSize | str, sugar: int = 0) -> list[Dose]:
        """
        List the doses a drink would take, without touching the source.

        Args:
            drink: The drink type or its name.
            cup_size: The cup size or its name.
            sugar: Extra sugar in grams.

        Returns:
            The ordered list of ``Dose`` objects.
        """
        drink = DrinkType(drink)
        cup_size = CupSize(cup_size)
        recipe = self.catalog.get(drink, cup_size)
        if recipe is None:
            raise ValueError(f"No recipe for {drink.value} in a {cup_size.value} cup")
        return plan_doses(recipe, sugar=sugar)

    def make(self, drink: DrinkType | str, cup_size: CupSize | str, sugar: int = 0) -> None:
        doses = self.plan(drink, cup_size, sugar=sugar)
        details = {
            "drink": DrinkType(drink).value,
            "cup_size": CupSize(cup_size).value,
            "grams": doses[0].grams,
            "sugar": sugar,
        }
        log_drink_event(self.logger, "drink_started", **details)
        for dose in doses:
            apply_dose(self.source, dose)
        log_drink_event(self.logger, "drink_finished", **details, doses=len(doses))

    def make_americano(self, cup_size: CupSize | str, sugar: int = 0) -> None:
        self.make(DrinkType.AMERICANO, cup_size, sugar=sugar)

    def make_cappuccino(self, cup_size: CupSize | str, sugar: int = 0) -> None:
        self.make(DrinkType.CAPPUCCINO, cup_size, sugar=sugar)

    def make_latte(self, cup_size: CupSize | str, sugar: int = 0) -> None:
        self.make(DrinkType.LATTE, cup_size, sugar=sugar)

    def make_marochino(self, cup_size: CupSize | str, sugar: int = 0) -> None:
        self.make(DrinkType.MAROCHINO, cup_size, sugar=sugar)
