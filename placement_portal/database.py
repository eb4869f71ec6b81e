"""
Database Connection and Session Management
Async queries go through `databases`; the sync engine is used for schema creation
"""

from databases import Database
from sqlalchemy import create_engine, MetaData
from sqlalchemy.orm import declarative_base
from placement_portal.config import settings
from placement_portal.logging_config import get_logger

logger = get_logger(__name__)

# Database URL
DATABASE_URL = settings.DATABASE_URL

# Pool sizing only applies to server backends; sqlite connections take no pool options
if DATABASE_URL.startswith("sqlite"):
    db_options = {}
elif "supabase.com" in DATABASE_URL or "pooler.supabase.com" in DATABASE_URL:
    db_options = {"min_size": 1, "max_size": 5, "statement_cache_size": 0}
else:
    db_options = {"min_size": 1, "max_size": 10}

# Create database instance for async queries
database = Database(DATABASE_URL, **db_options)

# Create SQLAlchemy engine for table creation and scripts
engine = create_engine(
    DATABASE_URL.replace("postgresql://", "postgresql+psycopg2://")
    if "postgresql://" in DATABASE_URL else DATABASE_URL
)

# Metadata for models
metadata = MetaData()

# Base class for models
Base = declarative_base(metadata=metadata)


def create_tables():
    """Create every table known to the models (idempotent)"""
    import placement_portal.models  # noqa: F401  registers the tables on Base

    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


async def connect_db():
    """Connect to database on startup"""
    await database.connect()
    logger.info("Database connected")


async def disconnect_db():
    """Disconnect from database on shutdown"""
    await database.disconnect()
    logger.info("Database disconnected")
