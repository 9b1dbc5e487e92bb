# config/settings.py
import os

import streamlit as st
from streamlit.errors import StreamlitAPIException

TABLES = {
    "super_admins": "super_admins",
    "admin_members": "admin_members",
}

SESSION_KEYS = {
    "gate_state": "gate_state",
    "gate_user": "gate_user",
    "gate_generation": "gate_generation",
    "active_tab": "active_tab",
    "notices": "notices",
    "cookie_cache": "cookie_cache",
}

# Browser cookie holding the serialized session identity
CURRENT_USER_KEY = "currentUser"
COOKIE_EXPIRY_DAYS = 365

SUPER_ADMIN_TABS = ["user-management", "team-admin-control", "testimonials"]
SUPER_ADMIN_DEFAULT_TAB = "user-management"

TEAM_ADMIN_TABS = ["panchayath", "analytics", "testimonials", "performance", "todo"]
TEAM_ADMIN_DEFAULT_TAB = "panchayath"

DEFAULTS = {
    "UNIFORM_LOGIN_ERRORS": "false",
}


def get_setting(key: str, default=None):
    """
    Environment first, then .streamlit/secrets.toml, then DEFAULTS.
    """
    if key in os.environ:
        return os.environ[key]
    try:
        if key in st.secrets:
            return st.secrets[key]
    except (FileNotFoundError, StreamlitAPIException):
        # no secrets.toml on this machine
        pass
    if default is not None:
        return default
    return DEFAULTS.get(key)


def get_flag(key: str) -> bool:
    value = get_setting(key)
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")
