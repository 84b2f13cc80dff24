# utils/__init__.py
"""
Shared Utilities Package for the Client Ops Dashboard

This package contains common utilities shared across all pages:
- auth: Authentication and session management
- config: Configuration management (local + Streamlit Cloud)
- db: Database connection management with pooling and paged reads
- common: Date range, durations, data table, Excel export

Usage:
    # Import specific modules
    from utils.auth import AuthManager
    from utils.db import fetch_all_rows, DataLoadError
    from utils.config import config

    # Or import commonly used items directly
    from utils import AuthManager, fetch_all_rows, config
"""

# Authentication
from .auth import (
    AuthManager,
    SessionUser,
)

# Configuration
from .config import (
    config,
    Config,
    is_running_on_streamlit_cloud,
)

# Database
from .db import (
    DataLoadError,
    get_db_engine,
    check_db_connection,
    reset_db_engine,
    execute_query,
    execute_query_df,
    fetch_all_rows,
    get_connection_pool_status,
)

__all__ = [
    # Auth
    'AuthManager',
    'SessionUser',

    # Config
    'config',
    'Config',
    'is_running_on_streamlit_cloud',

    # Database
    'DataLoadError',
    'get_db_engine',
    'check_db_connection',
    'reset_db_engine',
    'execute_query',
    'execute_query_df',
    'fetch_all_rows',
    'get_connection_pool_status',
]

__version__ = '1.0.0'
