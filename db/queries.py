import pandas as pd
from datetime import date

from config.settings import TABLES
from db.connection import get_supabase, get_supabase_admin


# ---------------------------
# Users / admin members (Super Admin)
# ---------------------------
def fetch_users(role=None):
    supabase = get_supabase()
    q = supabase.table("users").select("*").order("created_at", desc=True)
    if role:
        q = q.eq("role", role)
    return pd.DataFrame(q.execute().data or [])


def fetch_admin_members():
    supabase = get_supabase_admin()
    res = (
        supabase.table(TABLES["admin_members"])
        .select("id, name, mobile, is_approved, is_active, created_at")
        .order("created_at", desc=True)
        .execute()
    )
    return pd.DataFrame(res.data or [])


def update_admin_member(member_id, **fields):
    """Approval / activation writes go through the service-role client."""
    supabase = get_supabase_admin()
    supabase.table(TABLES["admin_members"]).update(fields).eq("id", member_id).execute()


# ---------------------------
# Testimonials
# ---------------------------
def fetch_testimonial_questions():
    supabase = get_supabase()
    res = supabase.table("testimonial_questions").select("id, question, is_active, created_at").order("created_at").execute()
    return pd.DataFrame(res.data or [])


def add_testimonial_question(question):
    supabase = get_supabase()
    supabase.table("testimonial_questions").insert({"question": question, "is_active": True}).execute()


def set_testimonial_question_active(question_id, is_active):
    supabase = get_supabase()
    supabase.table("testimonial_questions").update({"is_active": is_active}).eq("id", question_id).execute()


def fetch_testimonial_responses():
    supabase = get_supabase()
    res = supabase.table("testimonial_responses").select("id, question_id, agent_id, response, created_at").execute()
    return pd.DataFrame(res.data or [])


# ---------------------------
# Panchayaths / agents
# ---------------------------
def fetch_panchayaths():
    supabase = get_supabase()
    res = supabase.table("panchayaths").select("id, name, district, created_at").order("name").execute()
    return pd.DataFrame(res.data or [])


def create_panchayath(name, district):
    supabase = get_supabase()
    res = supabase.table("panchayaths").insert({"name": name, "district": district}).execute()
    return (res.data or [None])[0]


def fetch_agents():
    supabase = get_supabase()
    res = supabase.table("agents").select("id, name, role, panchayath_id").execute()
    return pd.DataFrame(res.data or [])


def fetch_daily_activities(since):
    supabase = get_supabase()
    res = (
        supabase.table("daily_activities")
        .select("id, agent_id, activity_date")
        .gte("activity_date", str(since))
        .execute()
    )
    return pd.DataFrame(res.data or [])


# ---------------------------
# Todos / daily notes (Team Admin)
# ---------------------------
def fetch_todos():
    supabase = get_supabase()
    res = supabase.table("todos").select("id, title, is_completed, created_at").order("created_at", desc=True).execute()
    return pd.DataFrame(res.data or [])


def add_todo(title):
    supabase = get_supabase()
    supabase.table("todos").insert({"title": title, "is_completed": False}).execute()


def complete_todo(todo_id):
    supabase = get_supabase()
    supabase.table("todos").update({"is_completed": True}).eq("id", todo_id).execute()


def fetch_daily_note(user_id, note_date=None):
    supabase = get_supabase()
    note_date = str(note_date or date.today())
    res = (
        supabase.table("daily_notes")
        .select("id, content, note_date")
        .eq("user_id", user_id)
        .eq("note_date", note_date)
        .limit(1)
        .execute()
    )
    rows = res.data or []
    return rows[0] if rows else None


def save_daily_note(user_id, content, note_date=None):
    supabase = get_supabase()
    note_date = str(note_date or date.today())
    supabase.table("daily_notes").upsert(
        {"user_id": user_id, "note_date": note_date, "content": content},
        on_conflict="user_id,note_date",
    ).execute()
