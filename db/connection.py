import streamlit as st
from supabase import create_client, Client

from config.settings import get_setting


@st.cache_resource
def get_supabase() -> Client:
    url = get_setting("SUPABASE_URL")
    key = get_setting("SUPABASE_ANON_KEY")
    return create_client(url, key)


@st.cache_resource
def get_supabase_admin() -> Client:
    """
    Uses Service Role Key to bypass RLS for approval / activation writes.
    Add SUPABASE_SERVICE_ROLE_KEY in Streamlit secrets.
    """
    url = get_setting("SUPABASE_URL")
    key = get_setting("SUPABASE_SERVICE_ROLE_KEY")
    return create_client(url, key)
