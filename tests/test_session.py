"""Tests for the cookie store, session holder and login state machine."""
import json

import pytest

from config.settings import CURRENT_USER_KEY
from tests.conftest import FakeCookieManager, make_holder
from utils.auth import AdminMember, login_team_admin
from utils.errors import StorageError, Unauthorized
from utils.session import (
    CookieStore,
    CredentialGate,
    GateState,
    SessionIdentity,
    build_session_identity,
)


MEMBER = AdminMember(id="am-1", name="Rahul", mobile="9800000001", is_approved=True, is_active=True)


class TestCookieStore:
    def test_reads_existing_browser_cookie(self):
        store = CookieStore(FakeCookieManager({"k": "v"}), {})
        assert store.get("k") == "v"
        assert store.get("missing") is None

    def test_set_writes_cookie_and_mirror(self):
        manager = FakeCookieManager()
        cache = {}
        store = CookieStore(manager, cache)

        store.set("k", "v")
        assert manager.cookies["k"] == "v"
        assert manager.calls == [("set", "k", "set_k")]
        assert store.get("k") == "v"

    def test_mirror_wins_before_cookie_round_trip(self):
        # the browser has not reported the new cookie back yet
        manager = FakeCookieManager({"k": "old"})
        cache = {}
        store = CookieStore(manager, cache)
        store.set("k", "new")
        manager.cookies["k"] = "old"
        assert store.get("k") == "new"

    def test_remove(self):
        manager = FakeCookieManager({"k": "v"})
        store = CookieStore(manager, {})
        store.remove("k")
        assert "k" not in manager.cookies
        assert store.get("k") is None

    def test_remove_missing_cookie_issues_no_delete(self):
        manager = FakeCookieManager()
        CookieStore(manager, {}).remove("nope")
        assert manager.calls == []


class TestSessionHolder:
    def test_build_identity(self):
        identity = build_session_identity(MEMBER)
        assert identity == SessionIdentity(
            id="am-1",
            name="Rahul",
            mobile_number="9800000001",
            role="admin_member",
            table="admin_members",
            has_admin_access=True,
        )

    def test_save_and_load(self, holder):
        holder.save(build_session_identity(MEMBER))

        raw = json.loads(holder.store.manager.cookies[CURRENT_USER_KEY])
        assert raw == {
            "id": "am-1",
            "name": "Rahul",
            "mobile_number": "9800000001",
            "role": "admin_member",
            "table": "admin_members",
            "hasAdminAccess": True,
        }
        assert holder.load() == build_session_identity(MEMBER)

    def test_survives_a_reload(self, holder):
        holder.save(build_session_identity(MEMBER))
        # a reload starts a new session with the same browser cookies
        reloaded = make_holder(holder.store.manager.cookies)
        assert reloaded.load() == build_session_identity(MEMBER)

    def test_cookie_already_parsed_to_dict(self):
        holder = make_holder({CURRENT_USER_KEY: build_session_identity(MEMBER).to_dict()})
        assert holder.load().id == "am-1"

    def test_clear_removes_identity(self, holder):
        holder.save(build_session_identity(MEMBER))
        holder.clear()
        assert holder.load() is None
        assert CURRENT_USER_KEY not in holder.store.manager.cookies

    @pytest.mark.parametrize("raw", ["not json", "[1, 2]"])
    def test_unreadable_identity(self, raw):
        with pytest.raises(StorageError):
            make_holder({CURRENT_USER_KEY: raw}).load()


class TestCredentialGate:
    def test_starts_logged_out(self):
        gate = CredentialGate("team_admin", {})
        assert gate.status is GateState.LOGGED_OUT
        assert not gate.is_authenticated
        assert gate.user is None

    def test_success_path(self):
        gate = CredentialGate("team_admin", {})
        token = gate.begin()
        assert gate.status is GateState.AUTHENTICATING

        assert gate.succeed(token, MEMBER)
        assert gate.is_authenticated
        assert gate.user is MEMBER

    def test_failure_returns_to_logged_out(self):
        gate = CredentialGate("team_admin", {})
        token = gate.begin()
        assert gate.fail(token)
        assert gate.status is GateState.LOGGED_OUT

    def test_superseded_attempt_is_ignored(self):
        gate = CredentialGate("super_admin", {})
        stale = gate.begin()
        fresh = gate.begin()

        assert not gate.succeed(stale, "stale user")
        assert gate.status is GateState.AUTHENTICATING
        assert not gate.fail(stale)

        assert gate.succeed(fresh, "fresh user")
        assert gate.user == "fresh user"

    def test_result_after_completion_is_ignored(self):
        gate = CredentialGate("super_admin", {})
        token = gate.begin()
        gate.fail(token)
        assert not gate.succeed(token, "late")
        assert gate.status is GateState.LOGGED_OUT

    def test_logout_clears_user_and_inputs(self):
        state = {"super_admin.username": "anitha", "super_admin.password": "s3cret"}
        gate = CredentialGate("super_admin", state)
        gate.succeed(gate.begin(), "user")

        gate.logout("super_admin.username", "super_admin.password")
        assert gate.status is GateState.LOGGED_OUT
        assert gate.user is None
        assert "super_admin.username" not in state
        assert "super_admin.password" not in state

    def test_dashboards_are_independent(self):
        state = {}
        sa = CredentialGate("super_admin", state)
        ta = CredentialGate("team_admin", state)
        sa.succeed(sa.begin(), "user")
        assert sa.is_authenticated
        assert not ta.is_authenticated


class TestTeamAdminFlow:
    """Gate, lookup and holder wired the way the Team Admin page wires them."""

    def _login(self, client, holder, state, mobile):
        gate = CredentialGate("team_admin", state)
        token = gate.begin()
        try:
            member = login_team_admin(client, mobile)
        except Unauthorized:
            gate.fail(token)
            return gate
        if gate.succeed(token, member):
            holder.save(build_session_identity(member))
        return gate

    def test_login_persists_identity(self, client, holder):
        gate = self._login(client, holder, {}, "9800000001")
        assert gate.is_authenticated

        identity = holder.load()
        assert identity.role == "admin_member"
        assert identity.has_admin_access is True

    @pytest.mark.parametrize("mobile", ["9800000002", "9800000003"])
    def test_ineligible_member_persists_nothing(self, client, holder, mobile):
        gate = self._login(client, holder, {}, mobile)
        assert not gate.is_authenticated
        assert holder.load() is None

    def test_logout_removes_identity(self, client, holder):
        gate = self._login(client, holder, {}, "9800000001")
        gate.logout("team_admin.mobile")
        holder.clear()

        assert gate.status is GateState.LOGGED_OUT
        assert holder.load() is None

    def test_two_browsers_keep_their_own_identity(self, client):
        first, second = make_holder(), make_holder()
        first_gate = self._login(client, first, {}, "9800000001")
        second_gate = self._login(client, second, {}, "9800000009")

        assert first.load().id == "am-1"
        assert second.load().id == "am-9"

        second_gate.logout("team_admin.mobile")
        second.clear()
        assert first_gate.is_authenticated
        assert first.load().id == "am-1"
        assert second.load() is None
