"""Application entry point for the Diet Planner API.

Defines the FastAPI app, request logging, exception handlers and the API
routers. The `lifespan` handler creates and seeds the DB on startup.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.diet_plans import router as diet_plans_router
from api.recipes import router as recipes_router
from api.recommendations import router as recommendations_router
from api.statistics import router as statistics_router
from core.error_handlers import register_exception_handlers
from core.exceptions import InfrastructureError
from core.logger import get_logger
from database import init_db
from database.deps import get_db_read

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the database before serving requests."""
    init_db()
    yield


app = FastAPI(title="Diet Planner API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Return basic health status and database connectivity.

    Raises:
        InfrastructureError: If the database cannot be reached.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check failed")
        raise InfrastructureError("health_check")
    return {"status": "healthy", "database": "connected"}


app.include_router(recipes_router)
app.include_router(diet_plans_router)
app.include_router(recommendations_router)
app.include_router(statistics_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
