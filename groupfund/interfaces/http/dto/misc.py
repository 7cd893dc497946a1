from __future__ import annotations

from pydantic import BaseModel


class HealthDTO(BaseModel):
    ok: bool = True
    database: str = "ok"
    dialect: str | None = None
