"""
Database infrastructure: async engine lifecycle and per-request sessions.
"""

from .connection import Base, close_database, db_manager, init_database
from .session import get_db_session, initialize_sessions, session_manager

__all__ = [
    "Base",
    "db_manager",
    "init_database",
    "close_database",
    "session_manager",
    "initialize_sessions",
    "get_db_session",
]
