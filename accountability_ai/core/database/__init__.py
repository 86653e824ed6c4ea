"""
Centralized database layer for Accountability AI.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Data access layer, one repository per entity
- session.py: Global engine and session factory management
- utils.py: Engine and session factory helpers
"""

from .base import Base, utc_now
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "utc_now",
]
