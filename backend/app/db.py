from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings

# SQLAlchemy Base class for models to inherit
Base = declarative_base()

# SQLite in-memory databases need a single shared connection across threads
_connect_args = {}
if settings.database_url.startswith("sqlite"):
    from sqlalchemy.pool import StaticPool

    _connect_args = {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}

# Create SQLAlchemy engine (connects to Postgres)
engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,   # helps avoid stale connections
    **_connect_args,
)

# Factory that creates DB sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Dependency we will use in FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
