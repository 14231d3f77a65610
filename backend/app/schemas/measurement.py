from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MeasurementUpsert(BaseModel):
    """Body of PUT /clients/{id}/measurements/{date}; the date comes from the path."""

    weight: float = Field(gt=0, lt=1000)                               # kg
    body_fat: Optional[float] = Field(default=None, gt=0, le=100)      # %
    muscle_mass: Optional[float] = Field(default=None, gt=0, lt=1000)  # kg
    notes: Optional[str] = None


class MeasurementRead(BaseModel):
    client_id: int
    date: date
    weight: float
    body_fat: Optional[float] = None
    muscle_mass: Optional[float] = None
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
