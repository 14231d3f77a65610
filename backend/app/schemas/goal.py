from datetime import date, datetime
from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict, Field

GoalStatus = Literal["active", "achieved"]


class GoalBase(BaseModel):
    title: str
    target_value: Optional[float] = Field(default=None, gt=-100000, lt=100000)
    unit: Optional[str] = None        # e.g. "kg", "%"
    goal_type: Optional[str] = None   # "weight" classifies regardless of unit/title
    deadline: Optional[date] = None
    status: GoalStatus = "active"


class GoalCreate(GoalBase):
    """Schema for a coach creating a goal for one of their clients."""

    coach_id: int


class GoalUpdate(BaseModel):
    """Partial update; coach_id identifies the editing coach and is not written."""

    coach_id: int
    title: Optional[str] = None
    target_value: Optional[float] = Field(default=None, gt=-100000, lt=100000)
    unit: Optional[str] = None
    goal_type: Optional[str] = None
    deadline: Optional[date] = None
    status: Optional[GoalStatus] = None

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")


class GoalRead(GoalBase):
    id: int
    client_id: int
    coach_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
