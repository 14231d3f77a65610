from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db import get_db
from app.models.client_goal import ClientGoal
from app.models.measurement import Measurement
from app.schemas.goal import GoalRead
from app.schemas.progress import ProgressCard
from app.api.clients import get_client_or_404
from app.core.progress import (
    compute_goal_progress,
    resolve_display_weights,
    select_weight_goal,
    weight_trend,
)

router = APIRouter(prefix="/clients", tags=["progress"])


@router.get("/{client_id}/progress", response_model=ProgressCard)
def get_progress_card(client_id: int, db: Session = Depends(get_db)):
    """
    Quick-progress card: the client's weight goal, its completion, the
    weights to display and the latest weigh-in trend.

    Goal and progress are null when the client has no weight goal.
    """
    client = get_client_or_404(db, client_id)
    # Newest id first so equal created_at values resolve to the latest goal
    goals = (
        db.query(ClientGoal)
        .filter(ClientGoal.client_id == client_id)
        .order_by(ClientGoal.id.desc())
        .all()
    )
    measurements = db.query(Measurement).filter(Measurement.client_id == client_id).all()

    goal = select_weight_goal(goals)
    progress = compute_goal_progress(goal, measurements, cached_weight=client.current_weight)
    weights = resolve_display_weights(goal, progress, measurements, client)

    return ProgressCard(
        client_id=client_id,
        goal=GoalRead.model_validate(goal) if goal is not None else None,
        progress=progress,
        weights=weights,
        trend=weight_trend(measurements),
    )
