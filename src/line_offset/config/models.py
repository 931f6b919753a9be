import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from line_offset.domain.units import DEFAULT_UNITS, Units

# ----------------- GEOJSON INPUT ---------------------

Coordinate = Annotated[float, Field(allow_inf_nan=False)]
Position = tuple[Coordinate, Coordinate]  # 2D only; altitude is rejected


class LineStringModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    type: Literal["LineString"]
    coordinates: list[Position]


class FeatureModel(BaseModel):
    # foreign members (bbox, crs, ...) are allowed by GeoJSON and ignored here
    model_config = ConfigDict(extra="ignore")
    type: Literal["Feature"]
    geometry: LineStringModel
    properties: dict | None = None
    id: str | int | None = None


class FeatureCollectionModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    type: Literal["FeatureCollection"]
    features: list[FeatureModel]


GeometryInput = Annotated[
    LineStringModel | FeatureModel | FeatureCollectionModel,
    Field(discriminator="type"),
]

geometry_adapter = TypeAdapter(GeometryInput)

# ----------------- JOB CONFIG ---------------------


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class OffsetModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    offset: Annotated[float, Field(allow_inf_nan=False, strict=True)]
    units: Units = DEFAULT_UNITS


class JobModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "line-offset"
    run_id: str = "local"
    input: str = "-"  # "-" => stdin
    output: str = "-"  # "-" => stdout
    offset: OffsetModel
    log: LogModel = LogModel()
    indent: int | None = None

    @field_validator("input", "output")
    @classmethod
    def _expand(cls, v: str) -> str:
        return v if v == "-" else os.path.expanduser(v)
