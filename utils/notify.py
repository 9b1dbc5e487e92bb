# utils/notify.py
from dataclasses import dataclass
from typing import List, MutableMapping

import streamlit as st

from config.settings import SESSION_KEYS
from utils.errors import AuthError

DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notice:
    title: str
    description: str
    variant: str = DEFAULT

    @property
    def is_destructive(self) -> bool:
        return self.variant == DESTRUCTIVE


def error_notice(error: Exception) -> Notice:
    """
    Builds the destructive notice for a failed login attempt. Anything
    that is not an AuthError gets a generic message; its details go to
    the log only.
    """
    if isinstance(error, AuthError):
        return Notice(error.title, str(error) or "Failed to login", DESTRUCTIVE)
    return Notice("Error", "Failed to login", DESTRUCTIVE)


def push(state: MutableMapping, notice: Notice) -> None:
    # kept in session state so it survives st.rerun()
    queue = list(state.get(SESSION_KEYS["notices"], []))
    queue.append(notice)
    state[SESSION_KEYS["notices"]] = queue


def drain(state: MutableMapping) -> List[Notice]:
    return state.pop(SESSION_KEYS["notices"], None) or []


def render(notices: List[Notice]) -> None:
    for n in notices:
        if n.is_destructive:
            st.error(f"**{n.title}**: {n.description}")
        else:
            st.success(f"**{n.title}**: {n.description}")
