"""FastAPI application for the golf scoring API."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from database.db_manager import DatabaseManager

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the in-memory store on startup."""
    app.state.db_manager = DatabaseManager()
    logger.info("scoring store ready")
    yield
    logger.info("scoring store closed: %s", app.state.db_manager.summary())


def create_app() -> FastAPI:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())

    app = FastAPI(
        title="Golf Scoreboard API",
        version="1.0.0",
        lifespan=lifespan,
    )

    origins = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import courses, players, results, rounds, settings
    app.include_router(courses.router, prefix="/api/courses", tags=["courses"])
    app.include_router(players.router, prefix="/api/players", tags=["players"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(results.router, prefix="/api/rounds", tags=["results"])
    app.include_router(settings.router, prefix="/api/settings", tags=["settings"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok", **app.state.db_manager.summary()}

    return app


app = create_app()
