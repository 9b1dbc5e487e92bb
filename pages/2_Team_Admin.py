# pages/2_Team_Admin.py
import streamlit as st

from config.settings import get_flag
from db.connection import get_supabase
from utils import notify
from utils.auth import login_team_admin
from utils.errors import AuthError, StorageError
from utils.logging_utils import get_logger
from utils.session import CredentialGate, build_session_identity, get_session_holder
from utils.shell import DashboardShell, safe_tab
from views import team_admin

logger = get_logger(__name__)

MOBILE_KEY = "team_admin.mobile"

gate = CredentialGate("team_admin", st.session_state)
shell = DashboardShell("team_admin", team_admin.TABS, team_admin.DEFAULT_TAB, st.session_state)
holder = get_session_holder()

notify.render(notify.drain(st.session_state))

try:
    current_user = holder.load()
except StorageError as e:
    logger.warning("Discarding unreadable session identity: %s", e)
    holder.clear()
    current_user = None

# -------------------------
# Login
# -------------------------
if not gate.is_authenticated:
    st.title("🛡️ Team Admin Login")
    st.caption("Enter your registered mobile number to access the panel")

    with st.form("team_admin_login"):
        mobile = st.text_input("Mobile Number", key=MOBILE_KEY, placeholder="Enter your mobile number")
        submitted = st.form_submit_button("Login", use_container_width=True)

    if submitted:
        token = gate.begin()
        try:
            with st.spinner("Verifying..."):
                member = login_team_admin(get_supabase(), mobile, uniform_errors=get_flag("UNIFORM_LOGIN_ERRORS"))
        except AuthError as e:
            gate.fail(token)
            notify.render([notify.error_notice(e)])
        except Exception as e:
            logger.exception("Unexpected error during team admin login")
            gate.fail(token)
            notify.render([notify.error_notice(e)])
        else:
            if gate.succeed(token, member):
                holder.save(build_session_identity(member))
                shell.reset()
                notify.push(st.session_state, notify.Notice("Login Successful", f"Welcome, {member.name}!"))
                st.rerun()

    if st.button("Back to Home", type="tertiary"):
        st.switch_page("pages/0_Home.py")
    st.stop()

# -------------------------
# Dashboard
# -------------------------
member = gate.user

head, actions = st.columns([4, 1])
with head:
    st.title("Team Admin Panel")
    st.caption(f"Welcome, {member.name}")
with actions:
    if st.button("Logout", use_container_width=True):
        gate.logout(MOBILE_KEY)
        holder.clear()
        shell.reset()
        notify.push(st.session_state, notify.Notice("Logged Out", "You have been logged out of Team Admin Panel"))
        st.switch_page("pages/0_Home.py")

if current_user:
    safe_tab(team_admin.daily_note_card, current_user)

shell.render_selector()
st.divider()
shell.render_content()
