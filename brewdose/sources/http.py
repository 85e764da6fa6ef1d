from __future__ import annotations

from typing import Optional

import requests

from brewdose.config import DispenserSettings
from brewdose.domain.cups import Ingredient
from brewdose.models import CommandRequest, CommandResponse
from brewdose.parsing.commands import build_dose_command
from brewdose.sources.base import IngredientSource


class HttpIngredientSource(IngredientSource):
    """Forwards every dose to a networked dispenser as a hex dose frame."""

    def __init__(
        self,
        host: str = "127.0.0.1",
        port: int = 10290,
        scheme: str = "http",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = f"{scheme}://{host}:{port}"
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: DispenserSettings) -> "HttpIngredientSource":
        return cls(
            host=settings.dispenser_host,
            port=settings.dispenser_port,
            scheme=settings.dispenser_scheme,
            timeout=settings.dispenser_timeout,
        )

    # ---- helpers ----
    def _post(self, path: str, body: dict) -> requests.Response:
        try:
            return self.session.post(
                url=f"{self.base_url}{path}",
                headers={"Content-Type": "application/json"},
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ConnectionError(
                f"Could not reach dispenser at {self.base_url}. Original error: {exc}"
            ) from exc

    def _send(self, ingredient: Ingredient, grams: int, temperature: int = 0) -> CommandResponse:
        command = build_dose_command(ingredient, grams, temperature)
        resp = self._post("/command", CommandRequest(command=command).model_dump())
        if resp.status_code not in (200, 201):
            raise ValueError(f"Dispenser rejected {ingredient.value} dose: {resp.status_code} {resp.text}")
        result = CommandResponse.model_validate(resp.json()) if resp.content else CommandResponse()
        if not result.accepted:
            raise ValueError(f"Dispenser rejected {ingredient.value} dose: {result.detail}")
        return result

    def health(self) -> str:
        try:
            resp = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        except requests.RequestException as exc:
            raise ConnectionError(
                f"Could not reach dispenser at {self.base_url}. Original error: {exc}"
            ) from exc
        if resp.status_code not in (200, 201):
            raise ValueError(f"Dispenser health check failed: {resp.status_code} {resp.text}")
        return resp.text

    # ---- IngredientSource ----
    def set_cup_size(self, grams: int) -> None:
        self._send(Ingredient.CUP, grams)

    def add_water(self, grams: int, temperature: int) -> None:
        self._send(Ingredient.WATER, grams, temperature)

    def add_sugar(self, grams: int) -> None:
        self._send(Ingredient.SUGAR, grams)

    def add_coffee(self, grams: int) -> None:
        self._send(Ingredient.COFFEE, grams)

    def add_milk(self, grams: int) -> None:
        self._send(Ingredient.MILK, grams)

    def add_milk_foam(self, grams: int) -> None:
        self._send(Ingredient.MILK_FOAM, grams)

    def add_chocolate(self, grams: int) -> None:
        self._send(Ingredient.CHOCOLATE, grams)

    def add_cream(self, grams: int) -> None:
        self._send(Ingredient.CREAM, grams)
