# pages/0_Home.py
import streamlit as st

from utils import notify

notify.render(notify.drain(st.session_state))

st.title("Panchayath Admin Portal")
st.write("Choose the panel you want to sign in to.")

c1, c2 = st.columns(2)
with c1:
    with st.container(border=True):
        st.subheader("🛡️ Super Admin")
        st.caption("Users, team admin approvals and testimonial questions.")
        st.page_link("pages/1_Super_Admin.py", label="Open Super Admin Panel", icon="➡️")
with c2:
    with st.container(border=True):
        st.subheader("🧑‍🤝‍🧑 Team Admin")
        st.caption("Panchayaths, hierarchy, testimonials, performance and todos.")
        st.page_link("pages/2_Team_Admin.py", label="Open Team Admin Panel", icon="➡️")
