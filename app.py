# app.py
import streamlit as st

st.set_page_config(
    page_title="Panchayath Admin Portal",
    layout="wide"
)

# -------------------------
# Define Pages
# -------------------------
home_page = st.Page("pages/0_Home.py", title="Home", icon="🏠", default=True)
super_admin_page = st.Page("pages/1_Super_Admin.py", title="Super Admin", icon="🛡️")
team_admin_page = st.Page("pages/2_Team_Admin.py", title="Team Admin", icon="🧑‍🤝‍🧑")

# Each admin page runs its own login gate, so every page is always listed.
nav = st.navigation({"": [home_page, super_admin_page, team_admin_page]})
nav.run()
