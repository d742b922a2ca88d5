"""
Database access for the two supported servers.

Everything the generator needs from a server goes through a Dialect:
connect, create/drop database, create table, insert one row, refresh
statistics, and read the reported footprint. Driver exceptions are NOT
translated here; callers check them with the is_* predicates and wrap them
into dbsizegen.errors at their own boundary.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import psycopg
import pymysql
from psycopg import sql
from psycopg.conninfo import make_conninfo

from dbsizegen.config import GenerationConfig
from dbsizegen.payload import RowPayload

# MySQL server error codes
ER_DB_CREATE_EXISTS = 1007
ER_CON_COUNT_ERROR = 1040
ER_TABLE_EXISTS_ERROR = 1050
ER_TOO_MANY_USER_CONNECTIONS = 1203

PG_TOO_MANY_CONNECTIONS = "53300"

COLUMNS = ("name", "height", "weight", "age", "description")


class Dialect:
    name = ""
    Error: type = Exception

    # -----------------------------
    # Connection
    # -----------------------------
    def connect(self, cfg: GenerationConfig, database: Optional[str] = None):
        raise NotImplementedError

    def ping(self, conn) -> None:
        raise NotImplementedError

    def connection_alive(self, conn) -> bool:
        return True

    def client_command(self, cfg: GenerationConfig) -> str:
        raise NotImplementedError

    # -----------------------------
    # Provision
    # -----------------------------
    def drop_database(self, conn, name: str) -> None:
        raise NotImplementedError

    def create_database(self, conn, name: str) -> None:
        raise NotImplementedError

    def create_table(self, conn, table: str) -> None:
        raise NotImplementedError

    # -----------------------------
    # Mutate
    # -----------------------------
    def insert_row(self, conn, table: str, payload: RowPayload) -> None:
        raise NotImplementedError

    # -----------------------------
    # Observe
    # -----------------------------
    def refresh_statistics(self, conn, tables: Sequence[str]) -> None:
        raise NotImplementedError

    def reported_size(self, conn, schema: str) -> int:
        raise NotImplementedError

    def schema_sizes(self, conn) -> List[Tuple[str, int]]:
        raise NotImplementedError

    # -----------------------------
    # Error classification
    # -----------------------------
    def is_duplicate_database(self, exc: BaseException) -> bool:
        return False

    def is_duplicate_table(self, exc: BaseException) -> bool:
        return False

    def is_too_many_connections(self, exc: BaseException) -> bool:
        return False

    @staticmethod
    def _execute(conn, query, params=None, fetch: bool = False):
        with conn.cursor() as cur:
            cur.execute(query, params)
            if fetch:
                return cur.fetchall()
        return None


# -----------------------------
# MySQL (PyMySQL)
# -----------------------------
def _mysql_ident(name: str) -> str:
    return "`" + name.replace("`", "``") + "`"


def _mysql_code(exc: BaseException) -> Optional[int]:
    if exc.args and isinstance(exc.args[0], int):
        return exc.args[0]
    return None


class MySQLDialect(Dialect):
    name = "mysql"
    Error = pymysql.MySQLError

    def connect_kwargs(self, cfg: GenerationConfig, database: Optional[str]) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "host": cfg.host,
            "port": cfg.port,
            "user": cfg.user,
            "password": cfg.password or "",
            "charset": "utf8mb4",
            "autocommit": True,
        }
        if database:
            params["database"] = database
        if cfg.ssl_ca:
            params["ssl_ca"] = cfg.ssl_ca
        if cfg.ssl_cert:
            params["ssl_cert"] = cfg.ssl_cert
        if cfg.ssl_key:
            params["ssl_key"] = cfg.ssl_key
        if cfg.ssl_mode:
            mode = cfg.ssl_mode.upper()
            if mode == "DISABLED":
                params["ssl_disabled"] = True
            elif mode in ("VERIFY_CA", "VERIFY_IDENTITY"):
                params["ssl_verify_cert"] = True
                params["ssl_verify_identity"] = mode == "VERIFY_IDENTITY"
        return params

    def connect(self, cfg: GenerationConfig, database: Optional[str] = None):
        return pymysql.connect(**self.connect_kwargs(cfg, database))

    def ping(self, conn) -> None:
        conn.ping(reconnect=False)

    def connection_alive(self, conn) -> bool:
        return bool(getattr(conn, "open", False))

    def client_command(self, cfg: GenerationConfig) -> str:
        cmd = ["mysql", "-h", cfg.host, "-P", str(cfg.port)]
        if cfg.user:
            cmd += ["-u", cfg.user]
        if cfg.ssl_mode:
            cmd += [f"--ssl-mode={cfg.ssl_mode}"]
        if cfg.ssl_ca:
            cmd += [f"--ssl-ca={cfg.ssl_ca}"]
        cmd += ["-D", cfg.database]

        prefix = "MYSQL_PWD='***' " if cfg.password else ""
        return prefix + " ".join(cmd)

    def drop_database(self, conn, name: str) -> None:
        self._execute(conn, f"DROP DATABASE IF EXISTS {_mysql_ident(name)}")

    def create_database(self, conn, name: str) -> None:
        self._execute(conn, f"CREATE DATABASE {_mysql_ident(name)}")

    def create_table(self, conn, table: str) -> None:
        self._execute(
            conn,
            f"CREATE TABLE {_mysql_ident(table)} ("
            "id int NOT NULL AUTO_INCREMENT PRIMARY KEY, "
            "name text, height int, weight int, age int, description text)",
        )

    def insert_row(self, conn, table: str, payload: RowPayload) -> None:
        self._execute(
            conn,
            f"INSERT INTO {_mysql_ident(table)} ({', '.join(COLUMNS)}) "
            "VALUES (%s, %s, %s, %s, %s)",
            payload.as_params(),
        )

    def refresh_statistics(self, conn, tables: Sequence[str]) -> None:
        # InnoDB reports stale data_length/index_length until analyzed
        names = ", ".join(_mysql_ident(t) for t in tables)
        self._execute(conn, f"CHECK TABLE {names}", fetch=True)
        self._execute(conn, f"ANALYZE TABLE {names}", fetch=True)

    def reported_size(self, conn, schema: str) -> int:
        rows = self._execute(
            conn,
            "SELECT SUM(data_length + index_length) FROM information_schema.TABLES "
            "WHERE table_schema = %s",
            (schema,),
            fetch=True,
        )
        if not rows or rows[0][0] is None:
            return 0
        return int(rows[0][0])

    def schema_sizes(self, conn) -> List[Tuple[str, int]]:
        rows = self._execute(
            conn,
            "SELECT table_schema, SUM(data_length + index_length) "
            "FROM information_schema.TABLES GROUP BY table_schema ORDER BY table_schema",
            fetch=True,
        )
        return [(str(schema), int(size or 0)) for schema, size in rows or ()]

    def is_duplicate_database(self, exc: BaseException) -> bool:
        return _mysql_code(exc) == ER_DB_CREATE_EXISTS

    def is_duplicate_table(self, exc: BaseException) -> bool:
        return _mysql_code(exc) == ER_TABLE_EXISTS_ERROR

    def is_too_many_connections(self, exc: BaseException) -> bool:
        return _mysql_code(exc) in (ER_CON_COUNT_ERROR, ER_TOO_MANY_USER_CONNECTIONS)


# -----------------------------
# PostgreSQL (psycopg)
# -----------------------------
class PostgresDialect(Dialect):
    name = "postgres"
    Error = psycopg.Error
    maintenance_db = "postgres"

    def build_conninfo(self, cfg: GenerationConfig, database: Optional[str]) -> str:
        parts: Dict[str, Any] = {}
        if cfg.host:
            parts["host"] = cfg.host
        if cfg.port:
            parts["port"] = cfg.port
        if cfg.user:
            parts["user"] = cfg.user
        parts["dbname"] = database or self.maintenance_db
        if cfg.password:
            parts["password"] = cfg.password
        if cfg.ssl_mode:
            parts["sslmode"] = cfg.ssl_mode
        if cfg.ssl_ca:
            parts["sslrootcert"] = cfg.ssl_ca
        if cfg.ssl_cert:
            parts["sslcert"] = cfg.ssl_cert
        if cfg.ssl_key:
            parts["sslkey"] = cfg.ssl_key
        return make_conninfo("", **parts)

    def connect(self, cfg: GenerationConfig, database: Optional[str] = None):
        # CREATE/DROP DATABASE cannot run inside a transaction block
        return psycopg.connect(self.build_conninfo(cfg, database), autocommit=True)

    def ping(self, conn) -> None:
        conn.execute("SELECT 1")

    def connection_alive(self, conn) -> bool:
        return not (conn.closed or conn.broken)

    def client_command(self, cfg: GenerationConfig) -> str:
        cmd = ["psql", "-h", cfg.host, "-p", str(cfg.port)]
        if cfg.user:
            cmd += ["-U", cfg.user]
        cmd += ["-d", cfg.database]

        prefix = ""
        if cfg.password:
            prefix += "PGPASSWORD='***' "
        if cfg.ssl_mode:
            prefix += f"PGSSLMODE='{cfg.ssl_mode}' "
        return prefix + " ".join(cmd)

    def drop_database(self, conn, name: str) -> None:
        self._execute(conn, sql.SQL("DROP DATABASE IF EXISTS {}").format(sql.Identifier(name)))

    def create_database(self, conn, name: str) -> None:
        self._execute(conn, sql.SQL("CREATE DATABASE {}").format(sql.Identifier(name)))

    def create_table(self, conn, table: str) -> None:
        self._execute(
            conn,
            sql.SQL(
                "CREATE TABLE {} ("
                "id bigserial PRIMARY KEY, "
                "name text, height int, weight int, age int, description text)"
            ).format(sql.Identifier(table)),
        )

    def insert_row(self, conn, table: str, payload: RowPayload) -> None:
        self._execute(
            conn,
            sql.SQL("INSERT INTO {} ({}) VALUES (%s, %s, %s, %s, %s)").format(
                sql.Identifier(table),
                sql.SQL(", ").join(sql.Identifier(c) for c in COLUMNS),
            ),
            payload.as_params(),
        )

    def refresh_statistics(self, conn, tables: Sequence[str]) -> None:
        self._execute(
            conn,
            sql.SQL("ANALYZE {}").format(sql.SQL(", ").join(sql.Identifier(t) for t in tables)),
        )

    def reported_size(self, conn, schema: str) -> int:
        # connected to the target database already; count its current schema
        rows = self._execute(
            conn,
            "SELECT COALESCE(SUM(pg_total_relation_size(c.oid)), 0) "
            "FROM pg_class c JOIN pg_namespace n ON n.oid = c.relnamespace "
            "WHERE n.nspname = current_schema() AND c.relkind IN ('r', 'p')",
            fetch=True,
        )
        if not rows or rows[0][0] is None:
            return 0
        return int(rows[0][0])

    def schema_sizes(self, conn) -> List[Tuple[str, int]]:
        rows = self._execute(
            conn,
            "SELECT datname, pg_database_size(datname) FROM pg_database "
            "WHERE NOT datistemplate ORDER BY datname",
            fetch=True,
        )
        return [(str(name), int(size or 0)) for name, size in rows or ()]

    def is_duplicate_database(self, exc: BaseException) -> bool:
        return isinstance(exc, psycopg.errors.DuplicateDatabase)

    def is_duplicate_table(self, exc: BaseException) -> bool:
        return isinstance(exc, psycopg.errors.DuplicateTable)

    def is_too_many_connections(self, exc: BaseException) -> bool:
        if getattr(exc, "sqlstate", None) == PG_TOO_MANY_CONNECTIONS:
            return True
        # connect-time refusals arrive as plain OperationalError without sqlstate
        msg = str(exc).lower()
        return isinstance(exc, psycopg.OperationalError) and (
            "too many clients" in msg
            or "too many connections" in msg
            or "remaining connection slots are reserved" in msg
        )


DIALECTS = {
    MySQLDialect.name: MySQLDialect,
    PostgresDialect.name: PostgresDialect,
}


def get_dialect(name: str) -> Dialect:
    try:
        return DIALECTS[name]()
    except KeyError:
        raise ValueError(f"unknown driver {name!r}; expected one of {sorted(DIALECTS)}") from None
