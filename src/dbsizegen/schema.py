"""
Schema provisioning and size probing.

Both talk to the server through a Dialect and translate driver errors into
ProvisionError / ProbeError.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from dbsizegen.config import GenerationConfig
from dbsizegen.dialects import Dialect
from dbsizegen.errors import ProbeError, ProvisionError

log = logging.getLogger(__name__)


# -----------------------------
# Provisioning
# -----------------------------
def ensure_database(cfg: GenerationConfig, dialect: Dialect) -> None:
    """
    Connect to the server without selecting the target database, optionally
    drop it, then create it. An existing database counts as success.
    """
    try:
        conn = dialect.connect(cfg, None)
    except dialect.Error as e:
        raise ProvisionError(f"cannot connect to {cfg.host}:{cfg.port}: {e}") from e

    try:
        log.info("[setup] pinging the database...")
        dialect.ping(conn)
        log.info("[setup] ping succeeded")

        if cfg.overwrite:
            log.info("[setup] dropping database: %s", cfg.database)
            dialect.drop_database(conn, cfg.database)

        log.info("[setup] creating database: %r...", cfg.database)
        try:
            dialect.create_database(conn, cfg.database)
        except dialect.Error as e:
            if not dialect.is_duplicate_database(e):
                raise
            log.info("[setup] database %r already exists", cfg.database)
        else:
            log.info("[setup] database %r has been created", cfg.database)
    except dialect.Error as e:
        raise ProvisionError(f"failed to prepare database {cfg.database!r}. Reason: {e}") from e
    finally:
        conn.close()


def ensure_tables(cfg: GenerationConfig, dialect: Dialect) -> None:
    try:
        conn = dialect.connect(cfg, cfg.database)
    except dialect.Error as e:
        raise ProvisionError(f"cannot connect to database {cfg.database!r}: {e}") from e

    try:
        for table in cfg.table_names:
            try:
                dialect.create_table(conn, table)
            except dialect.Error as e:
                if not dialect.is_duplicate_table(e):
                    raise ProvisionError(
                        f"failed to create table {table!r}. Reason: {e}"
                    ) from e
                log.info("[setup] table %s already exists", table)
        log.info("[setup] %d table(s) ready in %r", cfg.tables, cfg.database)
    finally:
        conn.close()


def provision(cfg: GenerationConfig, dialect: Dialect) -> None:
    ensure_database(cfg, dialect)
    ensure_tables(cfg, dialect)


# -----------------------------
# Size probe
# -----------------------------
class SizeProbe:
    """
    Reads the footprint the server reports for the target database.

    Every read refreshes table statistics first, which scans the tables, so
    callers poll on a timer and never per insert. Owns one connection, opened
    lazily and dropped after any error.
    """

    def __init__(self, cfg: GenerationConfig, dialect: Dialect):
        self.cfg = cfg
        self.dialect = dialect
        self._conn = None

    def _connection(self):
        if self._conn is None:
            self._conn = self.dialect.connect(self.cfg, self.cfg.database)
        return self._conn

    def _reset(self) -> None:
        conn, self._conn = self._conn, None
        if conn is not None:
            try:
                conn.close()
            except self.dialect.Error:
                log.debug("ignoring error while closing probe connection", exc_info=True)

    def current_size(self) -> int:
        try:
            conn = self._connection()
            self.dialect.refresh_statistics(conn, self.cfg.table_names)
            return self.dialect.reported_size(conn, self.cfg.database)
        except self.dialect.Error as e:
            self._reset()
            raise ProbeError(f"failed to get database size. Reason: {e}") from e

    def schema_sizes(self) -> List[Tuple[str, int]]:
        try:
            return self.dialect.schema_sizes(self._connection())
        except self.dialect.Error as e:
            self._reset()
            raise ProbeError(f"failed to list database sizes. Reason: {e}") from e

    def close(self) -> None:
        self._reset()
