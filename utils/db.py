# utils/db.py
"""
Storage Engine Management

Version: 1.0.0
Features:
- Singleton engine with thread-safe double-checked locking
- SQLite by default, pooled connections for server databases
- Health check utilities
- Query execution helpers
"""

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
import logging
import threading
from typing import Tuple, Optional, Dict, Any, List
from contextlib import contextmanager

from .config import config

logger = logging.getLogger(__name__)

# ==================== SINGLETON ENGINE ====================

_engine = None
_engine_lock = threading.Lock()


def get_db_engine() -> Engine:
    """
    Get SQLAlchemy engine for the key/value store (singleton pattern)

    Thread-safe implementation using double-checked locking.

    Returns:
        SQLAlchemy Engine instance
    """
    global _engine

    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = _create_engine()

    return _engine


def _create_engine() -> Engine:
    """Create new engine with configured settings"""
    storage = config.get_storage_config()

    logger.info(f"🔌 Creating storage engine: {storage.url.split('@')[-1]}")

    if storage.is_sqlite:
        # Streamlit reruns the script on worker threads
        engine = create_engine(
            storage.url,
            connect_args={"check_same_thread": False},
            echo=False
        )
    else:
        engine = create_engine(
            storage.url,
            pool_size=storage.pool_size,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=storage.pool_recycle,
            pool_pre_ping=True,
            echo=False
        )

    logger.info("✅ Storage engine created")

    return engine


# ==================== CONNECTION MANAGEMENT ====================

def check_db_connection(engine: Engine = None) -> Tuple[bool, Optional[str]]:
    """
    Check if the storage backend is reachable

    Returns:
        Tuple of (is_connected: bool, error_message: str or None)
    """
    try:
        engine = engine or get_db_engine()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True, None
    except OperationalError as e:
        error_msg = "Cannot open local storage. Saved preferences are unavailable."
        logger.error(f"❌ Storage connection failed: {e}")
        return False, error_msg
    except Exception as e:
        error_msg = f"Storage error: {str(e)}"
        logger.error(f"❌ Storage error: {e}")
        return False, error_msg


def reset_db_engine():
    """
    Reset the engine (force new connection)

    Call this after persistent connection errors or
    when the storage URL changed.
    """
    global _engine

    with _engine_lock:
        if _engine is not None:
            try:
                _engine.dispose()
                logger.info("🔄 Storage engine disposed")
            except Exception as e:
                logger.error(f"Error disposing engine: {e}")
            _engine = None

    logger.info("🔄 Storage engine reset - will reconnect on next query")


# ==================== CONTEXT MANAGERS ====================

@contextmanager
def get_transaction(engine: Engine = None):
    """
    Context manager for transactions

    Usage:
        with get_transaction() as conn:
            conn.execute(text("DELETE ..."))
            conn.execute(text("INSERT ..."))
            # Auto-commit on success, auto-rollback on exception
    """
    engine = engine or get_db_engine()
    conn = engine.connect()
    trans = conn.begin()
    try:
        yield conn
        trans.commit()
    except Exception:
        trans.rollback()
        raise
    finally:
        conn.close()


# ==================== QUERY HELPERS ====================

def execute_query(query: str, params: Dict = None, engine: Engine = None) -> List[Dict]:
    """
    Execute SELECT query and return results as list of dicts
    """
    engine = engine or get_db_engine()

    with engine.connect() as conn:
        result = conn.execute(text(query), params or {})
        return [dict(row._mapping) for row in result]


def execute_update(query: str, params: Dict = None, engine: Engine = None) -> int:
    """
    Execute INSERT/UPDATE/DELETE query

    Returns:
        Number of affected rows
    """
    engine = engine or get_db_engine()

    with engine.connect() as conn:
        result = conn.execute(text(query), params or {})
        conn.commit()
        return result.rowcount


# ==================== EXPORTS ====================

__all__ = [
    'get_db_engine',
    'check_db_connection',
    'reset_db_engine',
    'get_transaction',
    'execute_query',
    'execute_update',
]
