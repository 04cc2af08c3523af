# =============================================================================
# tests/fakes.py - In-Memory Supabase Stand-In
# =============================================================================
# A fake of the small part of the supabase-py client the services use:
#
#   client.table(name).select(...).eq(...).neq(...).ilike(...)
#         .order(col, desc=...).limit(n).execute().data
#   client.table(name).insert(values) / .update(values) / .delete()
#   client.auth.sign_up / sign_in_with_password / admin.delete_user / admin.sign_out
#   client.storage.from_(bucket).upload / get_public_url / remove
#   client.storage.list_buckets
#
# Every executed call is appended to client.calls, so tests can assert how
# many remote calls an operation made (or that it made none). Failures are
# injected per (target, operation) with client.fail(...).
# =============================================================================

import re
import uuid
from types import SimpleNamespace
from typing import Any

# Embedded relation select, e.g. "venue:venues(name)"
_EMBED = re.compile(r"(\w+):(\w+)\(([\w,\s]+)\)")


class FakeStoreError(Exception):
    """Mimics postgrest/gotrue errors, which carry a ``message`` attribute."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _like_to_regex(pattern: str) -> re.Pattern:
    out = []
    chars = iter(pattern)
    for ch in chars:
        if ch == "\\":
            out.append(re.escape(next(chars, "")))
        elif ch == "%":
            out.append(".*")
        elif ch == "_":
            out.append(".")
        else:
            out.append(re.escape(ch))
    return re.compile("^" + "".join(out) + "$", re.IGNORECASE | re.DOTALL)


class FakeQuery:
    """One chained table request; runs against the fake's rows on execute()."""

    def __init__(self, client: "FakeSupabase", table: str):
        self.client = client
        self.table = table
        self.operation = "select"
        self.columns = "*"
        self.payload: Any = None
        self.filters: list[tuple[str, str, Any]] = []
        self.ordering: tuple[str, bool] | None = None
        self.row_limit: int | None = None

    # Operations
    def select(self, columns: str = "*"):
        self.operation, self.columns = "select", columns
        return self

    def insert(self, values):
        self.operation, self.payload = "insert", values
        return self

    def update(self, values):
        self.operation, self.payload = "update", values
        return self

    def delete(self):
        self.operation = "delete"
        return self

    # Modifiers
    def eq(self, column, value):
        self.filters.append(("eq", column, value))
        return self

    def neq(self, column, value):
        self.filters.append(("neq", column, value))
        return self

    def ilike(self, column, pattern):
        self.filters.append(("ilike", column, pattern))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def _matches(self, row: dict) -> bool:
        for kind, column, value in self.filters:
            current = row.get(column)
            if kind == "eq" and current != value:
                return False
            if kind == "neq" and current == value:
                return False
            if kind == "ilike" and not _like_to_regex(value).match(str(current or "")):
                return False
        return True

    def _embed(self, row: dict) -> dict:
        row = dict(row)
        for alias, table, fields in _EMBED.findall(self.columns):
            target = next(
                (r for r in self.client.tables.get(table, []) if r.get("id") == row.get(f"{alias}_id")),
                None,
            )
            row[alias] = (
                {field.strip(): target.get(field.strip()) for field in fields.split(",")}
                if target else None
            )
        return row

    def execute(self):
        self.client.calls.append((self.table, self.operation, tuple(self.filters)))
        failure = self.client.failures.get((self.table, self.operation))
        if failure is not None:
            raise failure

        rows = self.client.tables.setdefault(self.table, [])

        if self.operation == "insert":
            values = self.payload if isinstance(self.payload, list) else [self.payload]
            inserted = []
            for value in values:
                row = {"id": str(uuid.uuid4()), "created_at": "2025-01-01T00:00:00+00:00", **value}
                rows.append(row)
                inserted.append(dict(row))
            return SimpleNamespace(data=inserted)

        matched = [row for row in rows if self._matches(row)]

        if self.operation == "update":
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(row) for row in matched])

        if self.operation == "delete":
            self.client.tables[self.table] = [row for row in rows if row not in matched]
            return SimpleNamespace(data=[dict(row) for row in matched])

        if self.ordering:
            column, desc = self.ordering
            matched = sorted(matched, key=lambda r: (r.get(column) is None, r.get(column) or ""), reverse=desc)
        if self.row_limit is not None:
            matched = matched[: self.row_limit]
        return SimpleNamespace(data=[self._embed(row) for row in matched])


# =============================================================================
# Auth
# =============================================================================

class FakeAuthAdmin:
    def __init__(self, client: "FakeSupabase"):
        self.client = client

    def delete_user(self, user_id):
        self.client._auth_call("admin.delete_user", user_id)
        self.client.identities.pop(user_id, None)

    def sign_out(self, jwt, scope="global"):
        self.client._auth_call("admin.sign_out", jwt)


class FakeAuth:
    def __init__(self, client: "FakeSupabase"):
        self.client = client
        self.admin = FakeAuthAdmin(client)

    def sign_up(self, credentials):
        self.client._auth_call("sign_up", credentials["email"])
        user_id = str(uuid.uuid4())
        self.client.identities[user_id] = {
            "email": credentials["email"],
            "password": credentials["password"],
            "metadata": credentials.get("options", {}).get("data", {}),
        }
        return SimpleNamespace(user=SimpleNamespace(id=user_id), session=None)

    def sign_in_with_password(self, credentials):
        self.client._auth_call("sign_in_with_password", credentials["email"])
        for user_id, identity in self.client.identities.items():
            if identity["email"] == credentials["email"] and identity["password"] == credentials["password"]:
                return SimpleNamespace(
                    user=SimpleNamespace(id=user_id, email=identity["email"]),
                    session=SimpleNamespace(access_token=f"supabase-token-{user_id}", expires_in=3600),
                )
        raise FakeStoreError("Invalid login credentials")


# =============================================================================
# Storage
# =============================================================================

class FakeBucket:
    def __init__(self, client: "FakeSupabase", name: str):
        self.client = client
        self.name = name

    def upload(self, path, file, file_options=None):
        self.client._storage_call("upload", path)
        self.client.files[(self.name, path)] = file
        return SimpleNamespace(path=path)

    def get_public_url(self, path):
        self.client._storage_call("get_public_url", path)
        return f"https://test-project.supabase.co/storage/v1/object/public/{self.name}/{path}"

    def remove(self, paths):
        self.client._storage_call("remove", paths[0])
        for path in paths:
            self.client.files.pop((self.name, path), None)
        return []


class FakeStorage:
    def __init__(self, client: "FakeSupabase"):
        self.client = client

    def from_(self, bucket):
        return FakeBucket(self.client, bucket)

    def list_buckets(self):
        self.client._storage_call("list_buckets", None)
        return [SimpleNamespace(name="event-images")]


# =============================================================================
# Client
# =============================================================================

class FakeSupabase:
    """
    In-memory supabase.Client stand-in.

    Example:
        client = FakeSupabase({"vendors": [{"id": "v1", "name": "Acme"}]})
        client.fail("vendors", "insert", FakeStoreError("permission denied"))
    """

    def __init__(self, tables: dict[str, list[dict]] | None = None):
        self.tables = {name: [dict(row) for row in rows] for name, rows in (tables or {}).items()}
        self.calls: list[tuple] = []
        self.failures: dict[tuple[str, str], Exception] = {}
        self.identities: dict[str, dict] = {}
        self.files: dict[tuple[str, str], bytes] = {}
        self.auth = FakeAuth(self)
        self.storage = FakeStorage(self)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, target: str, operation: str, error: Exception | None = None) -> None:
        """Make every later (target, operation) call raise."""
        self.failures[(target, operation)] = error or FakeStoreError(f"{operation} on {target} failed")

    def add_identity(self, email: str, password: str, user_id: str | None = None) -> str:
        user_id = user_id or str(uuid.uuid4())
        self.identities[user_id] = {"email": email, "password": password, "metadata": {}}
        return user_id

    def calls_to(self, target: str, operation: str | None = None) -> list[tuple]:
        return [c for c in self.calls if c[0] == target and (operation is None or c[1] == operation)]

    def _auth_call(self, operation: str, argument: Any) -> None:
        self.calls.append(("auth", operation, argument))
        failure = self.failures.get(("auth", operation))
        if failure is not None:
            raise failure

    def _storage_call(self, operation: str, argument: Any) -> None:
        self.calls.append(("storage", operation, argument))
        failure = self.failures.get(("storage", operation))
        if failure is not None:
            raise failure
