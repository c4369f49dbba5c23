import os
import logging
from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

PROJECT_NAME = os.getenv("PROJECT_NAME", "Assignment Dashboard")

# "sqlite://" keeps the whole store in memory for the life of the process
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

SEED_DATA = os.getenv("SEED_DATA", "true").strip().lower() in ("1", "true", "yes", "on")

GRAPHQL_PATH = os.getenv("GRAPHQL_PATH", "/api/graphql")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

if not DATABASE_URL.startswith("sqlite"):
    logger.warning(f"DATABASE_URL {DATABASE_URL} is not SQLite; the store expects an in-memory database")
