from __future__ import annotations

from dataclasses import asdict, dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class GameSystem:
    id: str
    name: str
    description: str
    image: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


class GameSystemPayload(BaseModel):
    """Request body for creating or updating a game system."""
    model_config = ConfigDict(strict=True)

    name: str = Field(min_length=1)
    description: str
    image: str = ""
