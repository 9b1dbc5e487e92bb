# utils/shell.py
from dataclasses import dataclass
from typing import Callable, List, MutableMapping, Optional

import streamlit as st

from config.settings import SESSION_KEYS
from utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TabSpec:
    name: str
    title: str
    description: str
    render: Callable
    subtitle: Optional[str] = None


def safe_tab(fn, *args):
    """Prevents one tab error from crashing the whole dashboard."""
    try:
        fn(*args)
    except Exception as e:
        logger.exception("Tab %s failed", getattr(fn, "__name__", fn))
        st.error("This tab crashed due to a database/schema mismatch.")
        st.code(str(e))


class DashboardShell:
    """
    A fixed set of tabs with one active at a time. Only the active tab's
    component is rendered. The selection lives in session state and is
    never persisted anywhere else.
    """

    def __init__(self, key: str, tabs: List[TabSpec], default: str, state: MutableMapping):
        names = [t.name for t in tabs]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate tab names in {key}: {names}")
        if default not in names:
            raise ValueError(f"Default tab {default!r} is not one of {names}")
        self.key = key
        self.tabs = {t.name: t for t in tabs}
        self.default = default
        self.state = state

    @property
    def _state_key(self) -> str:
        return f"{self.key}.{SESSION_KEYS['active_tab']}"

    @property
    def names(self) -> List[str]:
        return list(self.tabs)

    @property
    def active(self) -> str:
        return self.state.get(self._state_key, self.default)

    @property
    def active_tab(self) -> TabSpec:
        return self.tabs[self.active]

    def select(self, name: str) -> None:
        if name not in self.tabs:
            raise KeyError(f"Unknown tab {name!r} for {self.key}")
        self.state[self._state_key] = name

    def reset(self) -> None:
        self.state.pop(self._state_key, None)

    def render_selector(self) -> None:
        cols = st.columns(len(self.tabs))
        for col, tab in zip(cols, self.tabs.values()):
            with col:
                st.button(
                    tab.title,
                    key=f"{self.key}.select.{tab.name}",
                    type="primary" if tab.name == self.active else "secondary",
                    use_container_width=True,
                    on_click=self.select,
                    args=(tab.name,),
                )
                if tab.subtitle:
                    st.caption(tab.subtitle)
                st.caption(tab.description)

    def render_content(self) -> None:
        safe_tab(self.active_tab.render)
