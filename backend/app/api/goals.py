from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db import get_db
from app.models.client import Client
from app.models.client_goal import ClientGoal
from app.models.measurement import Measurement
from app.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from app.schemas.progress import GoalWithProgress
from app.api.clients import get_client_or_404
from app.core.logging import setup_logger
from app.core.progress import compute_goal_progress

logger = setup_logger(__name__)

router = APIRouter(tags=["goals"])


def _get_owned_goal(db: Session, goal_id: int, coach_id: int) -> ClientGoal:
    goal = db.query(ClientGoal).filter(ClientGoal.id == goal_id).first()
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    if goal.coach_id != coach_id:
        logger.warning("Coach %s refused access to goal %s", coach_id, goal_id)
        raise HTTPException(status_code=403, detail="Not authorized for this goal")
    return goal


def goal_with_progress(goal: ClientGoal, measurements: list[Measurement], client: Client) -> GoalWithProgress:
    progress = compute_goal_progress(goal, measurements, cached_weight=client.current_weight)
    return GoalWithProgress(
        **GoalRead.model_validate(goal).model_dump(),
        progress=progress,
    )


@router.get("/clients/{client_id}/goals", response_model=list[GoalWithProgress])
def list_client_goals(client_id: int, db: Session = Depends(get_db)):
    client = get_client_or_404(db, client_id)
    goals = (
        db.query(ClientGoal)
        .filter(ClientGoal.client_id == client_id)
        .order_by(ClientGoal.created_at.desc(), ClientGoal.id.desc())
        .all()
    )
    measurements = db.query(Measurement).filter(Measurement.client_id == client_id).all()
    return [goal_with_progress(g, measurements, client) for g in goals]


@router.post("/clients/{client_id}/goals", response_model=GoalRead)
def create_client_goal(
    client_id: int,
    payload: GoalCreate,
    db: Session = Depends(get_db),
):
    client = get_client_or_404(db, client_id)
    if client.coach_id != payload.coach_id:
        logger.warning("Coach %s refused goal creation for client %s", payload.coach_id, client_id)
        raise HTTPException(status_code=403, detail="Not authorized for this client")

    goal = ClientGoal(client_id=client_id, **payload.model_dump())
    db.add(goal)
    db.commit()
    db.refresh(goal)
    logger.info("Created goal %s for client %s", goal.id, client_id)
    return goal


@router.put("/goals/{goal_id}", response_model=GoalRead)
def update_client_goal(goal_id: int, payload: GoalUpdate, db: Session = Depends(get_db)):
    goal = _get_owned_goal(db, goal_id, payload.coach_id)

    update_data = payload.model_dump(exclude_unset=True)
    update_data.pop("coach_id", None)
    if "title" in update_data and not update_data["title"]:
        raise HTTPException(status_code=422, detail="title must not be empty")
    if "status" in update_data and update_data["status"] is None:
        raise HTTPException(status_code=422, detail="status must not be null")

    for key, value in update_data.items():
        setattr(goal, key, value)

    db.commit()
    db.refresh(goal)
    logger.info("Updated goal %s", goal_id)
    return goal


@router.delete("/goals/{goal_id}")
def delete_client_goal(
    goal_id: int,
    coach_id: int = Query(...),
    db: Session = Depends(get_db),
):
    goal = _get_owned_goal(db, goal_id, coach_id)
    db.delete(goal)
    db.commit()
    logger.info("Deleted goal %s", goal_id)
    return {"deleted": True, "id": goal_id}
