"""Registry card models: list queries and list responses."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RegistryName(str, Enum):
    """Registries a card can be listed from, keyed by their CLI name."""

    DATA = "data"
    MODEL = "model"
    RUN = "run"
    PIPELINE = "pipeline"
    AUDIT = "audit"

    @property
    def table_name(self) -> str:
        return f"OPSML_{self.name}_REGISTRY"


class ListQuery(BaseModel):
    """Body of ``POST /opsml/cards/list``."""

    table_name: str
    name: Optional[str] = None
    team: Optional[str] = None
    version: Optional[str] = None
    uid: Optional[str] = None
    limit: Optional[int] = None
    tags: dict[str, str] = Field(default_factory=dict)
    max_date: Optional[str] = None


class Card(BaseModel):
    """Single registry record."""

    name: str
    team: str
    date: str
    user_email: str
    version: str
    uid: str
    tags: dict[str, str] = Field(default_factory=dict)


class ListCardResponse(BaseModel):
    cards: list[Card]
