"""Pydantic models for the bulk zone metadata endpoint."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ZoneQuery(BaseModel):
    """One entry of the bulk request body: ``{"name": "zonea"}``."""

    name: str


class ZoneRecord(BaseModel):
    """One zone as returned by the Turf API.

    Upstream keys not modelled here are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., min_length=1)
    takeover_points: int = Field(..., ge=0, alias="takeoverPoints")
    points_per_hour: int = Field(default=0, ge=0, alias="pointsPerHour")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped

    @property
    def key(self) -> str:
        return self.name.lower()


def build_query(names: Sequence[str]) -> list[dict]:
    """Serialise zone names into the JSON-ready bulk request body."""
    return [ZoneQuery(name=name).model_dump() for name in names]
