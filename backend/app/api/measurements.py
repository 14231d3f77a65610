from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db import get_db
from app.models.client import Client
from app.models.measurement import Measurement
from app.schemas.measurement import MeasurementRead, MeasurementUpsert
from app.schemas.progress import WeightTrend
from app.api.clients import get_client_or_404
from app.core.config import settings
from app.core.logging import setup_logger
from app.core.progress import weight_trend

logger = setup_logger(__name__)

router = APIRouter(prefix="/clients/{client_id}/measurements", tags=["measurements"])


def refresh_weight_cache(db: Session, client: Client) -> None:
    """Overwrite the client's cached current_weight with the latest weigh-in.

    Left untouched when no measurements remain.
    """
    latest = (
        db.query(Measurement)
        .filter(Measurement.client_id == client.id)
        .order_by(Measurement.date.desc())
        .first()
    )
    if latest is not None:
        client.current_weight = latest.weight


@router.get("/", response_model=list[MeasurementRead])
def list_measurements(
    client_id: int,
    limit: Optional[int] = Query(None, gt=0),
    db: Session = Depends(get_db),
):
    get_client_or_404(db, client_id)
    query = (
        db.query(Measurement)
        .filter(Measurement.client_id == client_id)
        .order_by(Measurement.date.desc())   # most recent first
    )
    limit = limit or settings.measurement_list_limit
    if limit:
        query = query.limit(limit)
    return query.all()


@router.get("/trend", response_model=Optional[WeightTrend])
def get_weight_trend(client_id: int, db: Session = Depends(get_db)):
    get_client_or_404(db, client_id)
    rows = db.query(Measurement).filter(Measurement.client_id == client_id).all()
    return weight_trend(rows)


@router.put("/{day}", response_model=MeasurementRead)
def upsert_measurement(
    client_id: int,
    day: date,
    payload: MeasurementUpsert,
    db: Session = Depends(get_db),
):
    client = get_client_or_404(db, client_id)

    row = (
        db.query(Measurement)
        .filter(Measurement.client_id == client_id, Measurement.date == day)
        .first()
    )
    if not row:
        row = Measurement(client_id=client_id, date=day, **payload.model_dump())
        db.add(row)
    else:
        # Only overwrite the fields that were sent; omitted ones are kept
        for key, value in payload.model_dump(exclude_unset=True).items():
            setattr(row, key, value)
    db.flush()

    refresh_weight_cache(db, client)
    db.commit()
    db.refresh(row)
    logger.info("Saved measurement for client %s on %s", client_id, day)
    return row


@router.delete("/{day}")
def delete_measurement(client_id: int, day: date, db: Session = Depends(get_db)):
    client = get_client_or_404(db, client_id)
    row = (
        db.query(Measurement)
        .filter(Measurement.client_id == client_id, Measurement.date == day)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Measurement not found")

    db.delete(row)
    db.flush()
    refresh_weight_cache(db, client)
    db.commit()
    logger.info("Deleted measurement for client %s on %s", client_id, day)
    return {"deleted": True, "client_id": client_id, "date": day.isoformat()}
