"""
Pydantic models for service workers.

Two shapes share the workers collection:

* ``WorkerCreate`` is the short form (picture and name) used by
  ``POST /addWorker``.
* ``WorkerDetailedCreate`` adds the work category, the worker's
  location and an hourly rate; it is used by ``POST /addWorkerToList``
  and is the shape matched by the category lookup.

Every field is required and strictly typed: strings must be JSON
strings and ``costPerHour`` must be a JSON integer that fits in 64
bits.  Coordinates must be finite numbers.  Values are not otherwise
range-checked.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator

# BSON stores integers as at most 64-bit signed values.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Coordinates(BaseModel):
    """Geographic position in decimal degrees."""

    latitude: StrictFloat | StrictInt = Field(..., examples=[52.52])
    longitude: StrictFloat | StrictInt = Field(..., examples=[13.405])

    model_config = {
        "allow_inf_nan": False,
    }

    @field_validator("latitude", "longitude")
    @classmethod
    def as_float(cls, value: float | int) -> float:
        try:
            return float(value)
        except OverflowError:
            raise ValueError("Coordinate is out of range") from None

    def to_document(self) -> Dict[str, float]:
        return {"latitude": float(self.latitude), "longitude": float(self.longitude)}


class WorkerCreate(BaseModel):
    """Schema for adding a worker in its short form."""

    img_url: StrictStr = Field(..., alias="imgUrl", examples=["https://example.com/jo.png"])
    name_of_worker: StrictStr = Field(..., alias="nameOfWorker", examples=["Jo"])

    model_config = {
        "populate_by_name": True,
    }

    def to_document(self) -> Dict[str, Any]:
        return {"imgUrl": self.img_url, "nameOfWorker": self.name_of_worker}


class WorkerDetailedCreate(BaseModel):
    """Schema for adding a worker with category, location and rate."""

    name: StrictStr = Field(..., examples=["Jo"])
    work_name: StrictStr = Field(..., alias="workName", examples=["plumbing"])
    img_url: StrictStr = Field(..., alias="imgUrl", examples=["https://example.com/jo.png"])
    coordinates_of_worker: Coordinates = Field(..., alias="coordinatesOfWorker")
    cost_per_hour: StrictInt = Field(
        ..., alias="costPerHour", ge=INT64_MIN, le=INT64_MAX, examples=[50]
    )

    model_config = {
        "populate_by_name": True,
    }

    def to_document(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "workName": self.work_name,
            "imgUrl": self.img_url,
            "coordinatesOfWorker": self.coordinates_of_worker.to_document(),
            "costPerHour": self.cost_per_hour,
        }
