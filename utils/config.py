# utils/config.py
"""
Centralized Configuration Management

Version: 1.0.0
Features:
- Support both local (.env) and Streamlit Cloud (secrets.toml)
- Singleton pattern for efficiency
- Type-safe getters with defaults
- Team rosters (CSM / setter / closer / VA) configurable per environment
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field

# Initialize logger
logger = logging.getLogger(__name__)


# ==================== DEFAULT ROSTERS ====================

DEFAULT_CSM_NAMES = [
    "Ben Zazueta",
    "Ryan Grant",
    "Fabio Maldonado",
    "Nicolas Vasquez",
]

DEFAULT_SETTER_NAMES = ["Javier Ulloa", "Juan Parada", "Agustin Nufio"]

DEFAULT_CLOSER_NAMES = [
    "Jonathan Buitron",
    "Dale Kelley",
    "Daniel Infante",
    "Jay Rojas",
]

# Closer whose appointments never count towards a setter's shows
DEFAULT_EXCLUDED_SHOW_CLOSERS = ["Melo Moore"]

DEFAULT_EXCLUDED_VA_NAMES = ["Yennifer", "No match"]


def is_running_on_streamlit_cloud() -> bool:
    """Detect if running on Streamlit Cloud"""
    try:
        import streamlit as st
        return hasattr(st, 'secrets') and len(st.secrets) > 0
    except Exception:
        return False


def parse_name_list(raw: Optional[str], default: List[str]) -> List[str]:
    """Parse a comma separated list of names, falling back to default."""
    if raw is None:
        return list(default)
    # secrets.toml may hold a real list
    parts = raw if isinstance(raw, (list, tuple)) else str(raw).split(",")
    names = [str(part).strip() for part in parts]
    return [name for name in names if name]


@dataclass
class DatabaseConfig:
    """Database configuration container"""
    host: str
    port: int
    user: str
    password: str
    database: str
    sslmode: str = "require"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'host': self.host,
            'port': self.port,
            'user': self.user,
            'password': self.password,
            'database': self.database,
            'sslmode': self.sslmode,
        }


@dataclass
class RosterConfig:
    """Names used as grouping dimensions on the stats pages"""
    csm_names: List[str] = field(default_factory=lambda: list(DEFAULT_CSM_NAMES))
    setter_names: List[str] = field(default_factory=lambda: list(DEFAULT_SETTER_NAMES))
    closer_names: List[str] = field(default_factory=lambda: list(DEFAULT_CLOSER_NAMES))
    excluded_show_closers: List[str] = field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_SHOW_CLOSERS)
    )
    excluded_va_names: List[str] = field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_VA_NAMES)
    )


class Config:
    """
    Centralized configuration management

    Usage:
        from utils.config import config

        # Get database config
        db_config = config.get_db_config()

        # Get rosters
        csm_names = config.get_roster("csm_names")

        # Get app settings
        timeout = config.get_app_setting("SESSION_TIMEOUT_HOURS", 8)
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.is_cloud = is_running_on_streamlit_cloud()
        self._load_config()
        self._initialized = True

    def _load_config(self):
        """Load configuration based on environment"""
        if self.is_cloud:
            self._load_cloud_config()
        else:
            self._load_local_config()

        self._load_app_config()
        self._log_config_status()

    def _load_cloud_config(self):
        """Load configuration from Streamlit Cloud secrets"""
        import streamlit as st

        # Database
        db_secrets = st.secrets.get("DB_CONFIG", {})
        self._db_config = DatabaseConfig(
            host=db_secrets.get("host", ""),
            port=int(db_secrets.get("port", 5432)),
            user=db_secrets.get("user", ""),
            password=db_secrets.get("password", ""),
            database=db_secrets.get("database", "postgres"),
            sslmode=db_secrets.get("sslmode", "require"),
        )

        # Rosters
        roster_secrets = st.secrets.get("ROSTERS", {})
        self._roster_config = RosterConfig(
            csm_names=parse_name_list(roster_secrets.get("CSM_NAMES"), DEFAULT_CSM_NAMES),
            setter_names=parse_name_list(roster_secrets.get("SETTER_NAMES"), DEFAULT_SETTER_NAMES),
            closer_names=parse_name_list(roster_secrets.get("CLOSER_NAMES"), DEFAULT_CLOSER_NAMES),
            excluded_show_closers=parse_name_list(
                roster_secrets.get("EXCLUDED_SHOW_CLOSERS"), DEFAULT_EXCLUDED_SHOW_CLOSERS
            ),
            excluded_va_names=parse_name_list(
                roster_secrets.get("EXCLUDED_VA_NAMES"), DEFAULT_EXCLUDED_VA_NAMES
            ),
        )

        logger.info("☁️ Running in STREAMLIT CLOUD")

    def _load_local_config(self):
        """Load configuration from local .env file"""
        # Find and load .env file
        env_paths = [
            Path.cwd() / ".env",
            Path(__file__).parent.parent / ".env",
        ]

        for env_path in env_paths:
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded .env from: {env_path}")
                break

        # Database
        self._db_config = DatabaseConfig(
            host=os.getenv("DB_HOST", ""),
            port=int(os.getenv("DB_PORT", "5432")),
            user=os.getenv("DB_USER", ""),
            password=os.getenv("DB_PASSWORD", ""),
            database=os.getenv("DB_NAME", "postgres"),
            sslmode=os.getenv("DB_SSLMODE", "require"),
        )

        # Validate required DB config
        if not all([self._db_config.host, self._db_config.user, self._db_config.password]):
            logger.error("Missing required database configuration")
            raise ValueError("Missing required database configuration. Please check .env file.")

        # Rosters
        self._roster_config = RosterConfig(
            csm_names=parse_name_list(os.getenv("CSM_NAMES"), DEFAULT_CSM_NAMES),
            setter_names=parse_name_list(os.getenv("SETTER_NAMES"), DEFAULT_SETTER_NAMES),
            closer_names=parse_name_list(os.getenv("CLOSER_NAMES"), DEFAULT_CLOSER_NAMES),
            excluded_show_closers=parse_name_list(
                os.getenv("EXCLUDED_SHOW_CLOSERS"), DEFAULT_EXCLUDED_SHOW_CLOSERS
            ),
            excluded_va_names=parse_name_list(
                os.getenv("EXCLUDED_VA_NAMES"), DEFAULT_EXCLUDED_VA_NAMES
            ),
        )

        logger.info("💻 Running in LOCAL environment")

    def _load_app_config(self):
        """Load application-specific settings"""
        self._app_config = {
            # Session
            "SESSION_TIMEOUT_HOURS": int(os.getenv("SESSION_TIMEOUT_HOURS", "8")),

            # Database pool
            "DB_POOL_SIZE": int(os.getenv("DB_POOL_SIZE", "5")),
            "DB_POOL_RECYCLE": int(os.getenv("DB_POOL_RECYCLE", "1800")),

            # Data loading
            "FETCH_PAGE_SIZE": int(os.getenv("FETCH_PAGE_SIZE", "1000")),

            # Business logic
            "INACTIVE_DAYS": int(os.getenv("INACTIVE_DAYS", "30")),
            "ACTIVATION_THRESHOLD_MINUTES": int(os.getenv("ACTIVATION_THRESHOLD_MINUTES", "43200")),
        }

    def _log_config_status(self):
        """Log configuration status"""
        logger.info(f"✅ Database: {self._db_config.host}/{self._db_config.database}")
        logger.info(
            f"✅ Rosters: {len(self._roster_config.csm_names)} CSMs, "
            f"{len(self._roster_config.setter_names)} setters, "
            f"{len(self._roster_config.closer_names)} closers"
        )

    # ==================== PUBLIC GETTERS ====================

    def get_db_config(self) -> Dict[str, Any]:
        """Get database configuration as dictionary"""
        return self._db_config.to_dict()

    def get_roster(self, name: str) -> List[str]:
        """Get a copy of a roster list (e.g. 'csm_names')"""
        return list(getattr(self._roster_config, name))

    def get_app_setting(self, key: str, default: Any = None) -> Any:
        """Get application setting with default"""
        return self._app_config.get(key, default)


# ==================== SINGLETON INSTANCE ====================

config = Config()

__all__ = [
    'config',
    'Config',
    'DatabaseConfig',
    'RosterConfig',
    'parse_name_list',
    'is_running_on_streamlit_cloud',
]
