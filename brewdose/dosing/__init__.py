from brewdose.dosing.plan import Dose, apply_dose, plan_doses

__all__ = ["Dose", "apply_dose", "plan_doses"]
