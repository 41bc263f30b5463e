from typing import List
from pydantic import BaseModel, ConfigDict, Field, model_validator

class ProblemHeader(BaseModel):
    """
    First line of a problem instance: D I S V F.
    """
    duration: int = Field(..., ge=1, description="Simulation length in seconds")
    intersection_count: int = Field(..., ge=1, description="Number of intersections")
    street_count: int = Field(..., ge=1, description="Number of streets")
    car_count: int = Field(..., ge=0, description="Number of cars")
    bonus_per_car: int = Field(..., ge=0, description="Points for each car finishing in time")

    model_config = ConfigDict(frozen=True)

class StreetRecord(BaseModel):
    """
    One street line: B E name L.
    """
    start: int = Field(..., ge=0, description="Intersection at the start of the street")
    end: int = Field(..., ge=0, description="Intersection at the end of the street")
    name: str = Field(..., min_length=1, description="Unique street name")
    length: int = Field(..., ge=1, description="Seconds needed to drive the street")

    model_config = ConfigDict(frozen=True)

class CarRecord(BaseModel):
    """
    One car line: P name_1 ... name_P.
    """
    path_length: int = Field(..., ge=1, description="Number of streets on the route")
    street_names: List[str] = Field(..., description="Route in driving order")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_path_length(self) -> "CarRecord":
        if len(self.street_names) != self.path_length:
            raise ValueError(
                f"route declares {self.path_length} streets but lists {len(self.street_names)}"
            )
        return self
