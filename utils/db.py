# utils/db.py
"""
Database Access for the dashboard (Postgres)

Version: 1.0.0
Features:
- One pooled SQLAlchemy engine per process, created lazily
- Connection health check and manual engine reset
- Query helpers returning dicts or DataFrames
- fetch_all_rows(): full-table reads in fixed-size LIMIT/OFFSET pages
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote_plus

import pandas as pd
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import QueuePool

from .config import config

logger = logging.getLogger(__name__)

# Tables fetch_all_rows() may read
ALLOWED_TABLES = {
    "clients",
    "opportunities",
    "appointments",
    "website_revision_logs",
}


class DataLoadError(Exception):
    """Raised when rows cannot be fetched from the backend."""


# ==================== ENGINE ====================

_engine = None
_engine_lock = threading.Lock()


def get_db_engine():
    """Shared engine; created on first use under a lock."""
    global _engine

    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = _create_engine()

    return _engine


def _create_engine():
    db_config = config.get_db_config()
    pool_size = config.get_app_setting("DB_POOL_SIZE", 5)
    pool_recycle = config.get_app_setting("DB_POOL_RECYCLE", 1800)

    user = db_config["user"]
    host = db_config["host"]
    port = db_config["port"]
    database = db_config["database"]
    password = quote_plus(str(db_config["password"]))

    logger.info(f"🔌 Creating database engine: postgresql+psycopg2://{user}:***@{host}:{port}/{database}")

    engine = create_engine(
        f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{database}",
        poolclass=QueuePool,
        pool_size=pool_size,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=pool_recycle,
        pool_pre_ping=True,
        connect_args={"sslmode": db_config.get("sslmode", "require")},
    )

    logger.info(f"✅ Database engine created (pool_size={pool_size}, recycle={pool_recycle}s)")
    return engine


def check_db_connection() -> Tuple[bool, Optional[str]]:
    """(True, None) when SELECT 1 succeeds, else (False, message for the UI)."""
    try:
        with get_db_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return True, None
    except OperationalError as e:
        logger.error(f"❌ Database connection failed: {e}")
        return False, "Cannot connect to database. Please check your network connection."
    except Exception as e:
        logger.error(f"❌ Database error: {e}")
        return False, f"Database error: {e}"


def reset_db_engine():
    """Dispose the engine; the next query reconnects."""
    global _engine

    with _engine_lock:
        if _engine is not None:
            try:
                _engine.dispose()
            except Exception as e:
                logger.error(f"Error disposing engine: {e}")
            _engine = None

    logger.info("🔄 Database engine reset")


def get_connection_pool_status() -> Dict[str, Any]:
    if _engine is None:
        return {"status": "not_initialized"}

    try:
        pool = _engine.pool
        return {
            "status": "active",
            "pool_size": pool.size(),
            "checked_in": pool.checkedin(),
            "checked_out": pool.checkedout(),
            "overflow": pool.overflow(),
        }
    except Exception as e:
        return {"status": "error", "error": str(e)}


# ==================== QUERY HELPERS ====================

def execute_query(query: str, params: Dict = None) -> List[Dict]:
    """Run a SELECT and return rows as dicts."""
    with get_db_engine().connect() as conn:
        result = conn.execute(text(query), params or {})
        return [dict(row._mapping) for row in result]


def execute_query_df(query: str, params: Dict = None) -> pd.DataFrame:
    """Run a SELECT and return a DataFrame."""
    return pd.read_sql(text(query), get_db_engine(), params=params or {})


def fetch_all_rows(
    table: str,
    columns: str = "*",
    where: str = None,
    params: Dict = None,
    order_by: str = "id",
    page_size: int = None,
) -> pd.DataFrame:
    """
    Read every row of a table, one page at a time.

    Pages are requested with LIMIT/OFFSET until a page comes back
    empty or shorter than the page size.

    Args:
        table: Table name (must be in ALLOWED_TABLES)
        columns: Column list for the SELECT clause
        where: Optional trusted WHERE fragment (no user input)
        params: Bind parameters for the WHERE fragment
        order_by: Stable ordering column for paging
        page_size: Rows per page (defaults to FETCH_PAGE_SIZE)

    Returns:
        DataFrame with all rows (empty frame when the table is empty)

    Raises:
        DataLoadError: when a page cannot be read
    """
    if table not in ALLOWED_TABLES:
        raise ValueError(f"Table not allowed: {table}")

    if page_size is None:
        page_size = config.get_app_setting("FETCH_PAGE_SIZE", 1000)

    where_clause = f"WHERE {where}" if where else ""
    query = f"""
        SELECT {columns}
        FROM {table}
        {where_clause}
        ORDER BY {order_by}
        LIMIT :_limit OFFSET :_offset
    """

    rows: List[Dict] = []
    offset = 0

    while True:
        page_params = dict(params or {})
        page_params.update({"_limit": page_size, "_offset": offset})

        try:
            page = execute_query(query, page_params)
        except Exception as e:
            logger.error(f"Failed to fetch {table} (offset={offset}): {e}")
            raise DataLoadError(f"Failed to fetch {table}: {e}") from e

        if not page:
            break

        rows.extend(page)

        if len(page) < page_size:
            break
        offset += page_size

    logger.info(f"📥 Loaded {len(rows):,} rows from {table}")
    return pd.DataFrame(rows)


__all__ = [
    'ALLOWED_TABLES',
    'DataLoadError',
    'get_db_engine',
    'check_db_connection',
    'reset_db_engine',
    'get_connection_pool_status',
    'execute_query',
    'execute_query_df',
    'fetch_all_rows',
]
