import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import InterfaceError, OperationalError
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings
from core.database import Base, SessionLocal, engine

from worker.router import worker_router
from assignment.router import assignment_router
from summary.router import summary_router
from worker import service as worker_service
import models_bootstrap

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(engine)
    if settings.SEED_DEFAULT_WORKERS:
        with SessionLocal() as db:
            worker_service.seed_default_workers(db)
    yield


openapi_tags = [
    {
        "name": "Workers",
        "description": "Worker roster",
    },
    {
        "name": "Shifts",
        "description": "Daily shift assignments",
    },
    {
        "name": "Summary",
        "description": "Monthly shift counts and pay",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(title="Shift Roster", openapi_tags=openapi_tags, lifespan=lifespan)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
async def store_unavailable(request: Request, exc: Exception):
    logger.error("store unavailable on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "store unavailable"})


app.include_router(worker_router, prefix="/api")
app.include_router(assignment_router, prefix="/api")
app.include_router(summary_router, prefix="/api")


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}


# front-end shell; mounted last so it never shadows the API
static_dir = Path(__file__).resolve().parent / settings.STATIC_DIR
if static_dir.is_dir():
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
