# ───────────────────────────────────────────────────────────────
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# ─── Local imports ─────────────────────────────────────────────
from src.gradebook.config import settings
from src.gradebook.db.seed import seed_store
from src.gradebook.db.store import Store
from src.gradebook.gql.schema import create_graphql_router
from src.gradebook.routers import analytics_router
from src.gradebook.utils.pubsub import EventBus
from src.gradebook.utils.time import utc_now

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(store: Optional[Store] = None, bus: Optional[EventBus] = None, seed: Optional[bool] = None) -> FastAPI:
    """
    Build the application around an explicit store and event bus.

    When no store is given a fresh one is created from DATABASE_URL and, if
    SEED_DATA is on (or `seed` is True), loaded with the demo dataset.
    """
    if store is None:
        store = Store(settings.DATABASE_URL)
        if seed is None:
            seed = settings.SEED_DATA
    if seed:
        logger.info("Seeding store with demo data...")
        seed_store(store)
    bus = bus or EventBus()

    # ─── FastAPI app ───────────────────────────────────────────
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="GraphQL API for the teacher assignment dashboard",
        version="1.0.0",
    )
    app.state.store = store
    app.state.bus = bus

    # ─── Middlewares ───────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ─── Routers ───────────────────────────────────────────────
    app.include_router(create_graphql_router(store, bus), prefix=settings.GRAPHQL_PATH)
    app.include_router(analytics_router.router, prefix="/api/analytics")

    # ─── Simple endpoints ──────────────────────────────────────
    @app.get("/")
    async def root():
        return {
            "message": "Welcome to the Assignment Dashboard API",
            "graphql_url": settings.GRAPHQL_PATH,
        }

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "timestamp": utc_now().isoformat()}

    logger.info(f"{settings.PROJECT_NAME} ready, GraphQL at {settings.GRAPHQL_PATH}")
    return app


app = create_app()
