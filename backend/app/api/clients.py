from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db import get_db
from app.models.client import Client
from app.schemas.client import ClientCreate, ClientRead
from app.core.logging import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/clients", tags=["clients"])


def get_client_or_404(db: Session, client_id: int) -> Client:
    client = db.query(Client).filter(Client.id == client_id).first()
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return client


@router.post("/", response_model=ClientRead)
def create_client(payload: ClientCreate, db: Session = Depends(get_db)):
    client = Client(**payload.model_dump())
    db.add(client)
    db.commit()
    db.refresh(client)
    logger.info("Created client %s for coach %s", client.id, client.coach_id)
    return client


@router.get("/", response_model=list[ClientRead])
def list_clients(
    coach_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
):
    query = db.query(Client)
    if coach_id is not None:
        query = query.filter(Client.coach_id == coach_id)
    # Newest first
    return query.order_by(Client.created_at.desc(), Client.id.desc()).all()


@router.get("/{client_id}", response_model=ClientRead)
def get_client(client_id: int, db: Session = Depends(get_db)):
    return get_client_or_404(db, client_id)
