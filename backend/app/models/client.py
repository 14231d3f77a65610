from sqlalchemy import Column, Integer, String, DateTime, Numeric
from sqlalchemy.sql import func
from app.db import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)

    # Owning coach; goals can only be edited by this coach
    coach_id = Column(Integer, nullable=False, index=True)

    name = Column(String, nullable=False)
    email = Column(String, nullable=True)

    # Denormalized cache of the latest measurement's weight.
    # Refreshed on every measurement write/delete, never the source of truth
    # when measurement history exists.
    current_weight = Column(Numeric(5, 2), nullable=True)
    target_weight = Column(Numeric(5, 2), nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
