# views/team_admin.py
from datetime import date, timedelta

import streamlit as st

from config.settings import TEAM_ADMIN_DEFAULT_TAB
from db import queries, reports
from utils.shell import TabSpec


def panchayath_management():
    st.subheader("Panchayath Management")

    with st.form("new_panchayath_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        name = c1.text_input("Panchayath name *")
        district = c2.text_input("District")
        submitted = st.form_submit_button("Create Panchayath")
    if submitted:
        if not name.strip():
            st.error("Panchayath name is required.")
        else:
            queries.create_panchayath(name.strip(), district.strip())
            st.success(f"Created panchayath {name.strip()}.")

    df = queries.fetch_panchayaths()
    if df.empty:
        st.info("No panchayaths yet.")
        return
    st.dataframe(df, use_container_width=True)


def view_analyze():
    st.subheader("Hierarchy View")

    table = reports.panchayath_hierarchy(queries.fetch_panchayaths(), queries.fetch_agents())
    if table.empty:
        st.info("No panchayaths yet.")
        return
    st.metric("Total Agents", int(table["Total"].sum()))
    st.dataframe(table, use_container_width=True)


def agent_testimonial_analytics():
    st.subheader("Agent Testimonials")

    table = reports.response_counts(queries.fetch_testimonial_questions(), queries.fetch_testimonial_responses())
    if table.empty:
        st.info("No testimonial questions yet.")
        return
    st.bar_chart(table.set_index("Question"))
    st.dataframe(table, use_container_width=True)


def performance_report():
    st.subheader("Performance Report")

    days = st.selectbox("Window", [7, 14, 30], format_func=lambda d: f"Last {d} days", key="perf_window")
    since = date.today() - timedelta(days=days)
    table = reports.performance_summary(
        queries.fetch_panchayaths(),
        queries.fetch_agents(),
        queries.fetch_daily_activities(since),
    )
    if table.empty:
        st.info("No panchayaths yet.")
        return
    st.dataframe(table, use_container_width=True)


def todo_list():
    st.subheader("Todo List")

    with st.form("new_todo_form", clear_on_submit=True):
        title = st.text_input("New task")
        submitted = st.form_submit_button("Add")
    if submitted and title.strip():
        queries.add_todo(title.strip())

    df = queries.fetch_todos()
    if df.empty:
        st.info("Nothing to do.")
        return

    for todo in df.to_dict("records"):
        c1, c2 = st.columns([5, 1])
        if todo.get("is_completed"):
            c1.markdown(f"~~{todo['title']}~~")
        else:
            c1.write(todo["title"])
            if c2.button("Done", key=f"todo_done_{todo['id']}"):
                queries.complete_todo(todo["id"])
                st.rerun()


def daily_note_card(identity):
    """Today's note for the signed-in team admin."""
    with st.container(border=True):
        st.markdown(f"**Daily Note** · {date.today():%d %b %Y}")
        note = queries.fetch_daily_note(identity.id)
        content = st.text_area(
            "What did you work on today?",
            value=(note or {}).get("content", ""),
            key="daily_note_content",
        )
        if st.button("Save Note", key="daily_note_save"):
            queries.save_daily_note(identity.id, content)
            st.success("Note saved.")


TABS = [
    TabSpec("panchayath", "📍 Panchayath", "Create and manage panchayaths",
            panchayath_management, subtitle="പഞ്ചായത്ത് ചേർക്കാൻ"),
    TabSpec("analytics", "📊 Hierarchy View", "View panchayath analytics and hierarchy",
            view_analyze, subtitle="ശ്രേണി കാണാൻ"),
    TabSpec("testimonials", "💬 Testimonials", "View agent testimonials and feedback",
            agent_testimonial_analytics, subtitle="അനുമാന ചോദ്യങ്ങളും ഉത്തരങ്ങളും"),
    TabSpec("performance", "📉 Performance", "View panchayath performance reports",
            performance_report, subtitle="ഏജൻ്റുമാരുടെ പ്രകടന റിപ്പോർട്ടുകൾ"),
    TabSpec("todo", "📝 Todo List", "Manage tasks and to-do items",
            todo_list, subtitle="ചെയ്യേണ്ട കാര്യങ്ങൾ"),
]
DEFAULT_TAB = TEAM_ADMIN_DEFAULT_TAB
