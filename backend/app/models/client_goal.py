from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.sql import func
from app.db import Base


class ClientGoal(Base):
    __tablename__ = "client_goals"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    coach_id = Column(Integer, nullable=False)

    title = Column(String, nullable=False)
    target_value = Column(Numeric(7, 2), nullable=True)
    unit = Column(String(20), nullable=True)          # e.g. "kg", "%"
    goal_type = Column(String(20), nullable=True)     # "weight" is authoritative

    # Advisory only, not used by progress math
    deadline = Column(Date, nullable=True)

    status = Column(
        String(20),
        nullable=False,
        server_default="active",   # active, achieved
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
