import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import CORS_ORIGINS, ENABLE_BACKGROUND_TASKS, SEED_ON_STARTUP, STORAGE_BACKEND
from app.database import init_models
from app.exceptions import InvalidVoteError, ZoneNotFoundError
from app.logging_config import setup_logging
from app.routes.stats import router as stats_router
from app.routes.votes import router as votes_router
from app.routes.zones import router as zones_router
from app.services import seed_default_zones
from app.storage import storage_session
from app.tasks import create_background_tasks

# Initialize logging before anything else
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables, seed zones and run the periodic jobs while the app is up."""
    logger.info(f"Zone voting backend starting up (storage: {STORAGE_BACKEND})")

    if STORAGE_BACKEND != "memory":
        await init_models()
    if SEED_ON_STARTUP:
        async with storage_session() as storage:
            await seed_default_zones(storage)

    tasks = create_background_tasks() if ENABLE_BACKGROUND_TASKS else []
    for task in tasks:
        await task.start()

    logger.info("API docs available at http://localhost:8000/docs")
    yield

    logger.info("Zone voting backend shutting down")
    for task in tasks:
        await task.stop()


app = FastAPI(title="Zone Comfort Voting", version="0.1.0", lifespan=lifespan)
logger.info("FastAPI app created")

# Include routers
app.include_router(zones_router)
app.include_router(votes_router)
app.include_router(stats_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=["x-session-id"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Schema violations are client errors: 400 with the field details."""
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(InvalidVoteError)
async def invalid_vote_handler(request: Request, exc: InvalidVoteError):
    return JSONResponse(
        status_code=400,
        content={"message": str(exc), "errors": jsonable_encoder(exc.errors)},
    )


@app.exception_handler(ZoneNotFoundError)
async def zone_not_found_handler(request: Request, exc: ZoneNotFoundError):
    return JSONResponse(status_code=404, content={"message": "Zone not found"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log the full trace server side; the client only gets a generic message."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}
