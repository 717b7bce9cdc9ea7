"""Pydantic models for scenarios read from config files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from sim.entities import Plane


class PlaneModel(BaseModel):
    """
    One plane as written in YAML/JSON. Use model_validate(dict) to parse;
    to_plane() gives the simulator entity.
    """

    id: int
    arrival_time: int = Field(ge=0)
    fuel_level: int
    size: int = Field(gt=0, description="Contiguous airspace cells needed")
    landing_time: int = Field(ge=0)
    emergency: bool = False

    def to_plane(self) -> Plane:
        return Plane(
            id=self.id,
            arrival_time=self.arrival_time,
            fuel_level=self.fuel_level,
            size=self.size,
            landing_time=self.landing_time,
            emergency=self.emergency,
        )


class ScenarioModel(BaseModel):
    name: str = Field(min_length=1)
    planes: list[PlaneModel] = Field(min_length=1)

    @model_validator(mode="after")
    def require_unique_ids(self) -> "ScenarioModel":
        ids = [p.id for p in self.planes]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"scenario {self.name!r} has duplicate plane ids {dupes}")
        return self

    def to_planes(self) -> list[Plane]:
        return [p.to_plane() for p in self.planes]


def parse_scenarios(raw: list[dict[str, Any]] | None) -> list[tuple[str, list[Plane]]]:
    """Validate a `scenarios:` config list into (name, planes) pairs."""
    out: list[tuple[str, list[Plane]]] = []
    for item in raw or []:
        model = ScenarioModel.model_validate(item)
        out.append((model.name, model.to_planes()))
    return out


def scenario_json_schema() -> dict[str, Any]:
    return ScenarioModel.model_json_schema()
