from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey, UniqueConstraint
from app.db import Base


class Measurement(Base):
    __tablename__ = "measurements"
    # One measurement per client per day; writes upsert on this key
    __table_args__ = (UniqueConstraint("client_id", "date", name="uq_measurements_client_date"),)

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)

    date = Column(Date, nullable=False)

    weight = Column(Numeric(5, 2), nullable=False)       # kg
    body_fat = Column(Numeric(4, 1), nullable=True)      # %
    muscle_mass = Column(Numeric(5, 2), nullable=True)   # kg
    notes = Column(String, nullable=True)
