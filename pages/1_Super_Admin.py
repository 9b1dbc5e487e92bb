# pages/1_Super_Admin.py
import streamlit as st

from db.connection import get_supabase
from utils import notify
from utils.auth import login_super_admin
from utils.errors import AuthError
from utils.logging_utils import get_logger
from utils.session import CredentialGate
from utils.shell import DashboardShell
from views import super_admin

logger = get_logger(__name__)

USERNAME_KEY = "super_admin.username"
PASSWORD_KEY = "super_admin.password"

gate = CredentialGate("super_admin", st.session_state)
shell = DashboardShell("super_admin", super_admin.TABS, super_admin.DEFAULT_TAB, st.session_state)

notify.render(notify.drain(st.session_state))

# -------------------------
# Login
# -------------------------
if not gate.is_authenticated:
    st.title("🛡️ Super Admin Login")
    st.caption("Enter your credentials to access the admin panel")

    with st.form("super_admin_login"):
        username = st.text_input("Username", key=USERNAME_KEY, placeholder="Enter your username")
        password = st.text_input("Password", key=PASSWORD_KEY, type="password", placeholder="Enter your password")
        submitted = st.form_submit_button("Login", use_container_width=True)

    if submitted:
        token = gate.begin()
        try:
            with st.spinner("Logging in..."):
                admin = login_super_admin(get_supabase(), username, password)
        except AuthError as e:
            gate.fail(token)
            notify.render([notify.error_notice(e)])
        except Exception as e:
            logger.exception("Unexpected error during super admin login")
            gate.fail(token)
            notify.render([notify.error_notice(e)])
        else:
            if gate.succeed(token, admin):
                shell.reset()
                notify.push(st.session_state, notify.Notice("Login Successful", f"Welcome, {admin.name}!"))
                st.rerun()

    if st.button("Back to Home", type="tertiary"):
        st.switch_page("pages/0_Home.py")
    st.stop()

# -------------------------
# Dashboard
# -------------------------
admin = gate.user

head, actions = st.columns([4, 1])
with head:
    st.title("Super Admin Panel")
    st.caption(f"Welcome, {admin.name}")
with actions:
    if st.button("Logout", use_container_width=True):
        gate.logout(USERNAME_KEY, PASSWORD_KEY)
        shell.reset()
        notify.push(st.session_state, notify.Notice("Logged Out", "You have been logged out of Super Admin Panel"))
        st.switch_page("pages/0_Home.py")

shell.render_selector()
st.divider()
shell.render_content()
