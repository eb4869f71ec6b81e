"""
Create all tables from the SQLAlchemy models
Use alembic for managed databases; this is for local SQLite setups
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from placement_portal.config import settings
from placement_portal.database import create_tables
from placement_portal.logging_config import configure_logging


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    create_tables()
