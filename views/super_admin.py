# views/super_admin.py
import streamlit as st

from config.settings import SUPER_ADMIN_DEFAULT_TAB
from db import queries
from utils.shell import TabSpec


# ---------------------------
# TAB: USER MANAGEMENT
# ---------------------------
def admin_team_management():
    st.subheader("User Management")

    role = st.selectbox("Role", ["All", "admin_member", "coordinator", "supervisor", "group_leader", "pro"],
                        key="user_mgmt_role")
    df = queries.fetch_users(None if role == "All" else role)
    if df.empty:
        st.info("No users found.")
        return
    st.dataframe(df, use_container_width=True)


# ---------------------------
# TAB: TEAM ADMIN CONTROL
# ---------------------------
def team_admin_management():
    st.subheader("Team Admin Control")

    df = queries.fetch_admin_members()
    if df.empty:
        st.success("No team admins registered yet.")
        return

    pending = int((~df["is_approved"].fillna(False).astype(bool)).sum())
    c1, c2, c3 = st.columns(3)
    c1.metric("Team Admins", len(df))
    c2.metric("Pending Approval", pending)
    c3.metric("Active", int(df["is_active"].fillna(False).astype(bool).sum()))

    st.dataframe(df, use_container_width=True)

    st.divider()
    members = df.to_dict("records")
    options = [f'{m["name"]} ({m["mobile"]})' for m in members]
    selected = st.selectbox("Select a team admin", options, key="team_admin_select")
    member = members[options.index(selected)]

    colA, colB, colC = st.columns(3)
    with colA:
        if st.button("✅ Approve", use_container_width=True, disabled=bool(member.get("is_approved"))):
            queries.update_admin_member(member["id"], is_approved=True, is_active=True)
            st.success(f"Approved: {member['name']}")
            st.rerun()
    with colB:
        if st.button("▶️ Activate", use_container_width=True, disabled=bool(member.get("is_active"))):
            queries.update_admin_member(member["id"], is_active=True)
            st.success(f"Activated: {member['name']}")
            st.rerun()
    with colC:
        if st.button("⏸️ Deactivate", use_container_width=True, disabled=not member.get("is_active")):
            queries.update_admin_member(member["id"], is_active=False)
            st.warning(f"Deactivated: {member['name']}")
            st.rerun()


# ---------------------------
# TAB: TESTIMONIAL QUESTIONS
# ---------------------------
def testimonial_management_simple():
    st.subheader("Testimonial Questions")

    with st.form("add_question_form", clear_on_submit=True):
        question = st.text_input("New question")
        submitted = st.form_submit_button("Add Question")
    if submitted:
        if not question.strip():
            st.error("Question cannot be empty.")
        else:
            queries.add_testimonial_question(question.strip())
            st.success("Question added.")

    df = queries.fetch_testimonial_questions()
    if df.empty:
        st.info("No testimonial questions yet.")
        return
    st.dataframe(df, use_container_width=True)

    questions = df.to_dict("records")
    options = [q["question"] for q in questions]
    selected = st.selectbox("Select a question", options, key="question_select")
    q = questions[options.index(selected)]
    label = "Deactivate" if q.get("is_active") else "Activate"
    if st.button(label, key="toggle_question"):
        queries.set_testimonial_question_active(q["id"], not q.get("is_active"))
        st.rerun()


TABS = [
    TabSpec("user-management", "👥 User Management", "Manage all system users and roles",
            admin_team_management),
    TabSpec("team-admin-control", "🛡️ Team Admin Control", "Approve, edit, activate/deactivate admins",
            team_admin_management),
    TabSpec("testimonials", "💬 Testimonials", "Manage agent testimonial questions",
            testimonial_management_simple),
]
DEFAULT_TAB = SUPER_ADMIN_DEFAULT_TAB
