from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CommandRequest(BaseModel):
    command: str


class CommandResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    accepted: bool = True
    detail: Optional[str] = None
