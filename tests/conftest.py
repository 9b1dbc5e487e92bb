"""
Shared fixtures.

FakeSupabase mimics the slice of the supabase-py query builder the
dashboards use: table().select().eq().order().limit().execute(), plus
the write verbs the widgets call. FakeCookieManager stands in for one
browser's extra_streamlit_components.CookieManager.
"""
import pytest

from utils.session import CookieStore, SessionHolder


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table_name = table
        self.columns = None
        self.filters = []
        self.row_limit = None

    def select(self, columns="*"):
        self.columns = columns
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def limit(self, n):
        self.row_limit = n
        return self

    def order(self, *args, **kwargs):
        return self

    def gte(self, *args):
        return self

    def insert(self, *args, **kwargs):
        return self

    def update(self, *args, **kwargs):
        return self

    def upsert(self, *args, **kwargs):
        return self

    def execute(self):
        self.client.executed.append(self)
        if self.client.error is not None:
            raise self.client.error
        rows = [
            dict(r) for r in self.client.tables.get(self.table_name, [])
            if all(r.get(c) == v for c, v in self.filters)
        ]
        if self.row_limit is not None:
            rows = rows[:self.row_limit]
        return FakeResponse(rows)


class FakeSupabase:
    def __init__(self, tables=None, error=None):
        self.tables = tables or {}
        self.error = error
        self.executed = []

    def table(self, name):
        return FakeQuery(self, name)


class FakeCookieManager:
    """One browser's cookie jar, with the CookieManager call surface."""

    def __init__(self, cookies=None):
        self.cookies = dict(cookies or {})
        self.calls = []

    def get(self, cookie):
        return self.cookies.get(cookie)

    def set(self, cookie, val, expires_at=None, key="set"):
        self.calls.append(("set", cookie, key))
        self.cookies[cookie] = val

    def delete(self, cookie, key="delete"):
        self.calls.append(("delete", cookie, key))
        del self.cookies[cookie]


def make_holder(cookies=None):
    """A session holder for a fresh browser session."""
    return SessionHolder(CookieStore(FakeCookieManager(cookies), {}))


@pytest.fixture
def super_admins():
    return [
        {"id": "sa-1", "name": "Anitha", "username": "anitha", "password_hash": "s3cret"},
        {"id": "sa-2", "name": "Biju", "username": "biju", "password_hash": "other"},
    ]


@pytest.fixture
def admin_members():
    return [
        {"id": "am-1", "name": "Rahul", "mobile": "9800000001", "is_approved": True, "is_active": True},
        {"id": "am-2", "name": "Sneha", "mobile": "9800000002", "is_approved": False, "is_active": True},
        {"id": "am-3", "name": "Vinod", "mobile": "9800000003", "is_approved": True, "is_active": False},
        {"id": "am-4", "name": "Lekha", "mobile": "9800000004", "is_approved": None, "is_active": None},
        {"id": "am-9", "name": "Meera", "mobile": "9800000009", "is_approved": True, "is_active": True},
    ]


@pytest.fixture
def client(super_admins, admin_members):
    return FakeSupabase({"super_admins": super_admins, "admin_members": admin_members})


@pytest.fixture
def holder():
    return make_holder()
