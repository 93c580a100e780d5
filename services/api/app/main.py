"""FormVoice API service entrypoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from services.api.app.db.init_db import init_db
from services.api.app.log_config import configure_logging
from services.api.app.routers.activity import router as activity_router
from services.api.app.routers.command import router as command_router
from services.api.app.routers.form import router as form_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    configure_logging()
    init_db()
    yield


app = FastAPI(title="FormVoice API", lifespan=_lifespan)

app.include_router(form_router)
app.include_router(command_router)
app.include_router(activity_router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
