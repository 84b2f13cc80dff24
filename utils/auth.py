# utils/auth.py
"""
Login and Page Guard for the dashboard

Version: 1.0.0
Features:
- Salted SHA256 password check against the users table
- Login by username or e-mail
- Signed-in user kept in session_state until the session timeout
- require_auth() guard called at the top of every page
"""

import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

import streamlit as st
from sqlalchemy import text

from .config import config
from .db import get_db_engine

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "auth_user"

_USER_QUERY = text("""
    SELECT id, username, email, password_hash, password_salt, full_name, role, is_active
    FROM users
    WHERE username = :login OR email = :login
    LIMIT 1
""")

_INVALID_LOGIN = "Invalid username or password"


# ==================== PASSWORD HASHING ====================

def hash_password(password: str, salt: Optional[str] = None) -> Tuple[str, str]:
    """SHA256(password + salt) as hex; a fresh salt is generated when none is given."""
    if not salt:
        salt = secrets.token_hex(32)
    return hashlib.sha256((password + salt).encode()).hexdigest(), salt


def verify_password(password: str, stored_hash: Optional[str], salt: Optional[str]) -> bool:
    if not stored_hash or not salt:
        return False
    pwd_hash, _ = hash_password(password, salt)
    return secrets.compare_digest(pwd_hash, stored_hash)


# ==================== SESSION USER ====================

@dataclass
class SessionUser:
    """The signed-in user as stored in session_state."""
    id: int
    username: str
    email: Optional[str]
    role: str
    full_name: str
    login_time: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def is_expired(self, timeout: timedelta, now: Optional[datetime] = None) -> bool:
        return (now or datetime.now()) - self.login_time > timeout


class AuthManager:
    """
    Authentication against the users table.

    Usage (top of a page):
        auth = AuthManager()
        auth.require_auth()
    """

    def __init__(self):
        self.session_timeout = timedelta(
            hours=config.get_app_setting("SESSION_TIMEOUT_HOURS", 8)
        )

    # ==================== AUTHENTICATION ====================

    def authenticate(self, login: str, password: str) -> Tuple[bool, Dict]:
        """
        Check credentials.

        Returns:
            (True, {"user": SessionUser}) or (False, {"error": message})
        """
        try:
            with get_db_engine().connect() as conn:
                row = conn.execute(_USER_QUERY, {"login": login}).fetchone()
        except Exception as e:
            logger.error(f"Authentication error: {e}")
            return False, {"error": "Authentication failed. Please try again."}

        if not row:
            logger.warning(f"Login attempt for unknown user: {login}")
            return False, {"error": _INVALID_LOGIN}

        user = dict(row._mapping)

        if not user["is_active"]:
            logger.warning(f"Login attempt for inactive user: {login}")
            return False, {"error": "Account is inactive. Please contact administrator."}

        if not verify_password(password, user["password_hash"], user["password_salt"]):
            logger.warning(f"Invalid password for user: {login}")
            return False, {"error": _INVALID_LOGIN}

        self._touch_last_login(user["id"])
        logger.info(f"User {user['username']} authenticated")

        return True, {
            "user": SessionUser(
                id=user["id"],
                username=user["username"],
                email=user["email"],
                role=user["role"] or "viewer",
                full_name=user["full_name"] or user["username"],
                login_time=datetime.now(),
            )
        }

    def _touch_last_login(self, user_id: int):
        try:
            with get_db_engine().connect() as conn:
                conn.execute(text("UPDATE users SET last_login = NOW() WHERE id = :id"), {"id": user_id})
                conn.commit()
        except Exception as e:
            logger.warning(f"Could not update last_login: {e}")

    # ==================== SESSION ====================

    def current_user(self) -> Optional[SessionUser]:
        return st.session_state.get(SESSION_USER_KEY)

    def check_session(self) -> bool:
        """True while a user is signed in and the session has not timed out."""
        user = self.current_user()
        if user is None:
            return False

        if user.is_expired(self.session_timeout):
            logger.info(f"Session expired for user: {user.username}")
            self.logout()
            return False

        return True

    def login(self, user: SessionUser):
        st.session_state[SESSION_USER_KEY] = user
        logger.info(f"User {user.username} logged in")

    def logout(self):
        """Drop the session user and every cached query result."""
        user = st.session_state.pop(SESSION_USER_KEY, None)
        st.cache_data.clear()
        logger.info(f"User {user.username if user else 'Unknown'} logged out")

    def require_auth(self) -> bool:
        """Stop the page unless a user is signed in."""
        if not self.check_session():
            st.warning("⚠️ Please login to access this page")
            st.page_link("app.py", label="Go to login", icon="🔐")
            st.stop()
            return False
        return True

    # ==================== DISPLAY HELPERS ====================

    def get_user_display_name(self) -> str:
        user = self.current_user()
        return user.full_name if user else "User"

    def get_user_role(self) -> str:
        user = self.current_user()
        return user.role if user else "viewer"

    def is_admin(self) -> bool:
        user = self.current_user()
        return bool(user and user.is_admin)


__all__ = [
    'AuthManager',
    'SessionUser',
    'hash_password',
    'verify_password',
]
