"""Tests for dose planning and dispatch."""
from unittest.mock import MagicMock

import pytest

from brewdose.domain.cups import CupSize, DrinkType, Ingredient
from brewdose.domain.recipes import RecipeCatalog
from brewdose.dosing import Dose, apply_dose, plan_doses
from brewdose.sources.base import IngredientSource


def _recipe(drink, size):
    return RecipeCatalog().get(drink, size)


def test_plan_small_americano():
    doses = plan_doses(_recipe(DrinkType.AMERICANO, CupSize.SMALL))
    assert doses == [
        Dose(Ingredient.CUP, 100),
        Dose(Ingredient.COFFEE, 33),
        Dose(Ingredient.WATER, 66, 60),
    ]


def test_plan_keeps_zero_water_for_temperature():
    doses = plan_doses(_recipe(DrinkType.CAPPUCCINO, CupSize.BIG))
    assert doses[1] == Dose(Ingredient.WATER, 0, 80)


def test_plan_does_not_redistribute_rounding_loss():
    doses = plan_doses(_recipe(DrinkType.AMERICANO, CupSize.SMALL))
    # 33 + 66 leaves 1 g of the 100 g cup unfilled
    assert sum(d.grams for d in doses[1:]) == 99


def test_plan_with_sugar():
    doses = plan_doses(_recipe(DrinkType.LATTE, CupSize.SMALL), sugar=7)
    assert doses[-1] == Dose(Ingredient.SUGAR, 7)


def test_plan_negative_sugar():
    with pytest.raises(ValueError):
        plan_doses(_recipe(DrinkType.LATTE, CupSize.SMALL), sugar=-3)


@pytest.mark.parametrize("sugar", [True, 1.5])
def test_plan_rejects_non_integer_sugar(sugar):
    with pytest.raises(ValueError):
        plan_doses(_recipe(DrinkType.LATTE, CupSize.SMALL), sugar=sugar)


@pytest.mark.parametrize(
    "dose,method,args",
    [
        (Dose(Ingredient.CUP, 100), "set_cup_size", (100,)),
        (Dose(Ingredient.WATER, 66, 60), "add_water", (66, 60)),
        (Dose(Ingredient.SUGAR, 5), "add_sugar", (5,)),
        (Dose(Ingredient.COFFEE, 33), "add_coffee", (33,)),
        (Dose(Ingredient.MILK, 25), "add_milk", (25,)),
        (Dose(Ingredient.MILK_FOAM, 25), "add_milk_foam", (25,)),
        (Dose(Ingredient.CHOCOLATE, 35), "add_chocolate", (35,)),
        (Dose(Ingredient.CREAM, 10), "add_cream", (10,)),
    ],
)
def test_apply_dose_dispatch(dose, method, args):
    source = MagicMock(spec=IngredientSource)
    apply_dose(source, dose)

    getattr(source, method).assert_called_once_with(*args)
    assert len(source.mock_calls) == 1
