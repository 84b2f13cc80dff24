# app.py
"""
Client Ops Dashboard - Main Entry Point

Login form, then a home page linking the four dashboards.

Version: 1.0.0
"""

import logging

import streamlit as st

from utils.auth import AuthManager
from utils.config import config
from utils.db import check_db_connection, get_connection_pool_status, reset_db_engine

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ==================== PAGE CONFIGURATION ====================

APP_NAME = "Client Ops Dashboard"
APP_ICON = "📊"
APP_VERSION = "1.0.0"

st.set_page_config(
    page_title=APP_NAME,
    page_icon=APP_ICON,
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .app-title {
        font-size: 2.25rem;
        font-weight: 700;
        color: #4f46e5;
        margin-bottom: 0.25rem;
    }
    .app-tagline {
        color: #6b7280;
        margin-bottom: 1.5rem;
    }
    .home-banner {
        background: #eef2ff;
        border-left: 6px solid #4f46e5;
        padding: 1.25rem 1.5rem;
        border-radius: 0.5rem;
        margin-bottom: 1.5rem;
    }
</style>
""", unsafe_allow_html=True)

auth = AuthManager()

# (page, label, icon, description)
DASHBOARDS = [
    ("pages/1_👥_Clients.py", "Clients", "👥",
     "Browse, filter and search every client record."),
    ("pages/2_🤝_CSM_Stats.py", "CSM Stats", "🤝",
     "Client onboarding and customer retention per customer success manager."),
    ("pages/3_💼_Sales_Stats.py", "Sales Stats", "💼",
     "Setter and closer performance for booked appointments and opportunities."),
    ("pages/4_🧑‍💻_VA_Stats.py", "VA Stats", "🧑‍💻",
     "Website builds and revision throughput per virtual assistant."),
]


# ==================== LOGIN ====================

def render_login():
    st.markdown(f'<div class="app-title">{APP_ICON} {APP_NAME}</div>', unsafe_allow_html=True)
    st.markdown('<div class="app-tagline">Client success, sales and delivery metrics</div>',
                unsafe_allow_html=True)

    db_ok, db_error = check_db_connection()
    if not db_ok:
        st.error(f"⚠️ {db_error}")
        return

    _, center, _ = st.columns([1, 2, 1])
    with center:
        with st.form("login_form"):
            st.markdown("#### 🔐 Sign in")
            login = st.text_input("Username or e-mail", key="login_username")
            password = st.text_input("Password", type="password", key="login_password")
            submitted = st.form_submit_button("🔑 Login", type="primary", use_container_width=True)

        if not submitted:
            return

        if not login or not password:
            st.warning("Please enter both username and password")
            return

        with st.spinner("Authenticating..."):
            success, result = auth.authenticate(login, password)

        if success:
            auth.login(result["user"])
            st.rerun()
        else:
            st.error(result.get("error", "Authentication failed"))


# ==================== HOME ====================

def render_sidebar():
    with st.sidebar:
        st.markdown(f"### 👤 {auth.get_user_display_name()}")
        st.caption(f"Role: {auth.get_user_role()}")
        st.markdown("---")
        if st.button("🚪 Logout", use_container_width=True):
            auth.logout()
            st.rerun()


def render_admin_panel():
    """Connection pool stats and a manual reconnect, admins only."""
    with st.expander("🔧 System Status (Admin Only)"):
        pool_status = get_connection_pool_status()

        col1, col2, col3, col4 = st.columns(4)
        col1.metric("DB Status", pool_status.get("status", "unknown"))
        col2.metric("Connections Used", pool_status.get("checked_out", 0))
        col3.metric("Available", pool_status.get("checked_in", 0))
        col4.metric("Page Size", config.get_app_setting("FETCH_PAGE_SIZE", 1000))

        if st.button("🔄 Reconnect database", key="reset_engine"):
            reset_db_engine()
            st.cache_data.clear()
            st.rerun()


def render_home():
    render_sidebar()

    st.markdown(
        f'<div class="home-banner"><strong>Welcome, {auth.get_user_display_name()}!</strong> '
        f'Pick a dashboard below or from the sidebar.</div>',
        unsafe_allow_html=True,
    )

    cols = st.columns(2)
    for idx, (page, label, icon, description) in enumerate(DASHBOARDS):
        with cols[idx % 2]:
            with st.container(border=True):
                st.page_link(page, label=label, icon=icon)
                st.caption(description)

    if auth.is_admin():
        st.markdown("---")
        render_admin_panel()

    st.markdown("---")
    st.caption(f"{APP_NAME} v{APP_VERSION}")


def main():
    if auth.check_session():
        render_home()
    else:
        render_login()


if __name__ == "__main__":
    main()
