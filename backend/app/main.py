from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.clients import router as clients_router
from app.api.measurements import router as measurements_router
from app.api.goals import router as goals_router
from app.api.progress import router as progress_router
from app.db import Base, engine
from app.models.client import Client  # noqa: F401  (import ensures table is registered)
from app.models.measurement import Measurement  # noqa: F401
from app.models.client_goal import ClientGoal  # noqa: F401


app = FastAPI(title="Axend")

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (clients, measurements, goals) on startup
Base.metadata.create_all(bind=engine)

app.include_router(clients_router)
app.include_router(measurements_router)
app.include_router(goals_router)
app.include_router(progress_router)


@app.get("/")
def root():
    return {"message": "Axend backend is running"}
