"""
Shared pytest fixtures: an in-memory database server behind the Dialect
interface, and a config builder with fast timings.
"""

import threading
import time

import pytest

from dbsizegen.config import GenerationConfig
from dbsizegen.dialects import Dialect


class FakeDbError(Exception):
    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code


class FakeConnection:
    def __init__(self, database):
        self.database = database
        self.closed = False

    def close(self):
        self.closed = True


class FakeServer:
    """Tables hold row counts; every row weighs row_bytes."""

    def __init__(self, row_bytes=100, insert_delay=0.0):
        self.lock = threading.Lock()
        self.databases = {}
        self.row_bytes = row_bytes
        self.insert_delay = insert_delay
        self.unreachable = False
        self.fail_create_database = False
        self.fail_create_table = False
        self.insert_errors = []
        self.size_errors = 0
        self.in_flight = 0
        self.peak_in_flight = 0
        self.connects = 0
        self.refreshes = 0
        self.connections = []

    def size_of(self, database):
        return sum(self.databases.get(database, {}).values()) * self.row_bytes


class FakeDialect(Dialect):
    name = "fake"
    Error = FakeDbError

    def __init__(self, server):
        self.server = server

    def connect(self, cfg, database=None):
        s = self.server
        if s.unreachable:
            raise FakeDbError("connection refused")
        if database is not None and database not in s.databases:
            raise FakeDbError(f"unknown database {database}")
        with s.lock:
            s.connects += 1
            conn = FakeConnection(database)
            s.connections.append(conn)
        return conn

    def ping(self, conn):
        pass

    def connection_alive(self, conn):
        return not conn.closed

    def client_command(self, cfg):
        return "fake"

    def drop_database(self, conn, name):
        self.server.databases.pop(name, None)

    def create_database(self, conn, name):
        if self.server.fail_create_database:
            raise FakeDbError("access denied for user")
        if name in self.server.databases:
            raise FakeDbError("database exists", code="dup_db")
        self.server.databases[name] = {}

    def create_table(self, conn, table):
        if self.server.fail_create_table:
            raise FakeDbError("disk full")
        tables = self.server.databases[conn.database]
        if table in tables:
            raise FakeDbError("table already exists", code="dup_table")
        tables[table] = 0

    def insert_row(self, conn, table, payload):
        s = self.server
        with s.lock:
            s.in_flight += 1
            s.peak_in_flight = max(s.peak_in_flight, s.in_flight)
            error = s.insert_errors.pop(0) if s.insert_errors else None
        try:
            if s.insert_delay:
                time.sleep(s.insert_delay)
            if error is not None:
                raise error
            with s.lock:
                s.databases[conn.database][table] += 1
        finally:
            with s.lock:
                s.in_flight -= 1

    def refresh_statistics(self, conn, tables):
        self.server.refreshes += 1

    def reported_size(self, conn, schema):
        if self.server.size_errors:
            self.server.size_errors -= 1
            raise FakeDbError("lock wait timeout")
        with self.server.lock:
            return self.server.size_of(schema)

    def schema_sizes(self, conn):
        return [(name, self.server.size_of(name)) for name in sorted(self.server.databases)]

    def is_duplicate_database(self, exc):
        return getattr(exc, "code", None) == "dup_db"

    def is_duplicate_table(self, exc):
        return getattr(exc, "code", None) == "dup_table"

    def is_too_many_connections(self, exc):
        return getattr(exc, "code", None) == "too_many"


class CrashingDialect(FakeDialect):
    """insert_row fails with a non-driver exception, killing the worker thread."""

    def insert_row(self, conn, table, payload):
        raise RuntimeError("driver bug")


def too_many_connections():
    return FakeDbError("Too many connections", code="too_many")


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def dialect(server):
    return FakeDialect(server)


@pytest.fixture
def make_config():
    """GenerationConfig with timings small enough for unit tests."""

    def _make(**overrides):
        values = dict(
            size_text="10KB",
            target_bytes=10 * 1024,
            driver="mysql",
            database="sampleData",
            tables=1,
            concurrency=1,
            progress_interval=0.01,
            retry_backoff=0.0,
            max_attempts=100,
            seed=7,
            description_len=16,
        )
        values.update(overrides)
        return GenerationConfig(**values)

    return _make
