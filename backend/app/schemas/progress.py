from enum import Enum
from typing import Optional

from pydantic import BaseModel

from app.schemas.goal import GoalRead


class GoalProgress(BaseModel):
    """Completion of a weight goal, with the values the progress bar shows."""

    percent: int      # 0..100
    initial: float    # earliest measurement (or fallback)
    current: float    # latest measurement (or fallback)
    target: float


class DisplayWeights(BaseModel):
    # None renders as "N/A"
    current_weight: Optional[float] = None
    target_weight: Optional[float] = None


class TrendDirection(str, Enum):
    up = "up"
    down = "down"
    stable = "stable"


class WeightTrend(BaseModel):
    value: float          # absolute change in kg
    direction: TrendDirection
    percentage: float     # absolute change relative to the previous weigh-in


class ProgressCard(BaseModel):
    """Quick-progress card for a client's dashboard."""

    client_id: int
    goal: Optional[GoalRead] = None
    progress: Optional[GoalProgress] = None
    weights: DisplayWeights
    trend: Optional[WeightTrend] = None


class GoalWithProgress(GoalRead):
    # None when the goal is not a weight goal or has no numeric target
    progress: Optional[GoalProgress] = None
