from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientBase(BaseModel):
    coach_id: int
    name: str
    email: Optional[str] = None
    # Profile cache; kept in sync with measurements once any exist
    current_weight: Optional[float] = Field(default=None, gt=0, lt=1000)
    target_weight: Optional[float] = Field(default=None, gt=0, lt=1000)


class ClientCreate(ClientBase):
    pass


class ClientRead(ClientBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
