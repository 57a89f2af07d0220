"""
Pydantic model for user records.

Users are stored in their own collection but no endpoint reads or
writes them yet.  The schema documents the stored shape: the user's
name, location, postal address and the workers they booked most
recently (newest last).
"""

from typing import List

from pydantic import BaseModel, Field, StrictStr

from .worker import Coordinates, WorkerCreate


class User(BaseModel):
    name_of_user: StrictStr = Field(..., alias="nameOfUser")
    coordinates_of_user: Coordinates = Field(..., alias="coordinatesOfUser")
    # Wire name is spelled "adress" in stored documents.
    address: StrictStr = Field(..., alias="adress")
    recent_booked_worker: List[WorkerCreate] = Field(default_factory=list, alias="recentBookedWorker")

    model_config = {
        "populate_by_name": True,
    }
