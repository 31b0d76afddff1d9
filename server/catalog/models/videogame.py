from __future__ import annotations

from dataclasses import asdict, dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class VideoGame:
    id: str
    name: str
    developer: str
    gamesystem: str  # game system name, free text
    genre: str
    year: int
    image: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


class VideoGamePayload(BaseModel):
    """Request body for creating or updating a video game.

    Strict: ``year`` must be a JSON integer, not a bool, float or string.
    """
    model_config = ConfigDict(strict=True)

    name: str = Field(min_length=1)
    developer: str
    gamesystem: str
    genre: str
    year: int
    image: str = ""
