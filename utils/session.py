# utils/session.py
"""
Session state for the two dashboards.

``CredentialGate`` keeps one dashboard's login state machine inside a
mutable mapping (``st.session_state`` when running under Streamlit).
``CookieStore`` and ``SessionHolder`` keep the Team Admin session
identity in the browser's own cookies so it survives a reload and is
never shared with another browser.
"""
import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import MutableMapping, Optional

import extra_streamlit_components as stx
import streamlit as st

from config.settings import COOKIE_EXPIRY_DAYS, CURRENT_USER_KEY, SESSION_KEYS, TABLES
from utils.errors import StorageError
from utils.logging_utils import get_logger

logger = get_logger(__name__)


# ----------------------------
# Session identity
# ----------------------------
@dataclass(frozen=True)
class SessionIdentity:
    id: str
    name: str
    mobile_number: str
    role: str
    table: str
    has_admin_access: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "mobile_number": self.mobile_number,
            "role": self.role,
            "table": self.table,
            "hasAdminAccess": self.has_admin_access,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SessionIdentity":
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            mobile_number=data.get("mobile_number"),
            role=data.get("role"),
            table=data.get("table"),
            has_admin_access=bool(data.get("hasAdminAccess")),
        )


def build_session_identity(member) -> SessionIdentity:
    """Normalizes an approved AdminMember into the shared session identity."""
    return SessionIdentity(
        id=member.id,
        name=member.name,
        mobile_number=member.mobile,
        role="admin_member",
        table=TABLES["admin_members"],
        has_admin_access=True,
    )


# ----------------------------
# Per-browser key-value store
# ----------------------------
class CookieStore:
    """
    Browser cookies behind get / set / remove.

    ``manager`` is an ``extra_streamlit_components.CookieManager``. Its
    writes only reach the browser once the component renders, so every
    write is mirrored in ``cache`` (this browser session's state) and
    reads check the mirror first.
    """

    def __init__(self, manager, cache: MutableMapping, expiry_days: int = COOKIE_EXPIRY_DAYS):
        self.manager = manager
        self.cache = cache
        self.expiry_days = expiry_days

    def _cache_key(self, key: str) -> str:
        return f"{SESSION_KEYS['cookie_cache']}.{key}"

    def get(self, key: str):
        cache_key = self._cache_key(key)
        if cache_key in self.cache:
            return self.cache[cache_key]
        return self.manager.get(key)

    def set(self, key: str, value: str) -> None:
        self.cache[self._cache_key(key)] = value
        expires = datetime.now() + timedelta(days=self.expiry_days)
        self.manager.set(key, value, expires_at=expires, key=f"set_{key}")

    def remove(self, key: str) -> None:
        self.cache[self._cache_key(key)] = None
        if self.manager.get(key) is not None:
            self.manager.delete(key, key=f"delete_{key}")


class SessionHolder:
    def __init__(self, store, key: str = CURRENT_USER_KEY):
        self.store = store
        self.key = key

    def load(self) -> Optional[SessionIdentity]:
        raw = self.store.get(self.key)
        if not raw:
            return None
        try:
            # the cookie library hands back JSON values already parsed
            data = raw if isinstance(raw, dict) else json.loads(raw)
            return SessionIdentity.from_dict(data)
        except (json.JSONDecodeError, TypeError, AttributeError) as e:
            raise StorageError(f"Stored {self.key} is not a session identity") from e

    def save(self, identity: SessionIdentity) -> None:
        self.store.set(self.key, json.dumps(identity.to_dict()))
        logger.info("Stored session identity for id=%s", identity.id)

    def clear(self) -> None:
        self.store.remove(self.key)
        logger.info("Cleared stored session identity")


def get_session_holder() -> SessionHolder:
    """One cookie manager per script run, keyed so reruns reuse the component."""
    manager = stx.CookieManager(key="session_cookies")
    return SessionHolder(CookieStore(manager, st.session_state))


# ----------------------------
# Login state machine
# ----------------------------
class GateState(str, Enum):
    LOGGED_OUT = "logged_out"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


class CredentialGate:
    """
    LOGGED_OUT -> AUTHENTICATING -> AUTHENTICATED | LOGGED_OUT.

    Every begin() starts a new attempt generation. succeed() and fail()
    only act for the latest generation, so a result arriving for an
    attempt that has since been resubmitted is dropped.
    """

    def __init__(self, namespace: str, state: MutableMapping):
        self.namespace = namespace
        self.state = state

    def _key(self, name: str) -> str:
        return f"{self.namespace}.{SESSION_KEYS[name]}"

    @property
    def status(self) -> GateState:
        return GateState(self.state.get(self._key("gate_state"), GateState.LOGGED_OUT.value))

    @property
    def generation(self) -> int:
        return self.state.get(self._key("gate_generation"), 0)

    @property
    def user(self):
        return self.state.get(self._key("gate_user"))

    @property
    def is_authenticated(self) -> bool:
        return self.status is GateState.AUTHENTICATED

    def begin(self) -> int:
        token = self.generation + 1
        self.state[self._key("gate_generation")] = token
        self.state[self._key("gate_state")] = GateState.AUTHENTICATING.value
        self.state.pop(self._key("gate_user"), None)
        return token

    def succeed(self, token: int, user) -> bool:
        if token != self.generation or self.status is not GateState.AUTHENTICATING:
            logger.info("%s: dropping result of superseded login attempt %s", self.namespace, token)
            return False
        self.state[self._key("gate_user")] = user
        self.state[self._key("gate_state")] = GateState.AUTHENTICATED.value
        return True

    def fail(self, token: int) -> bool:
        if token != self.generation or self.status is not GateState.AUTHENTICATING:
            return False
        self.state[self._key("gate_state")] = GateState.LOGGED_OUT.value
        return True

    def logout(self, *input_keys: str) -> None:
        self.state[self._key("gate_state")] = GateState.LOGGED_OUT.value
        self.state.pop(self._key("gate_user"), None)
        for k in input_keys:
            self.state.pop(k, None)
