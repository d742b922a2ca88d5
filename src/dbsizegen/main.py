#!/usr/bin/env python3
"""
dbsizegen

Empty or existing DB -> create database/tables -> insert synthetic rows with
N concurrent workers until the server-reported size has grown by --size.

Progress is measured by polling the server's own size accounting (tables are
CHECKed/ANALYZEd before every read), so the run stops within one
--progress-interval of the target, not exactly on it.

psql-compatible flags:
- -h host, -p port, -U user, -d database
(argparse help is remapped to --help / -?)

Usage:
  dbsizegen -h localhost -U root -d sampleData --size 1.5GB --concurrency 8 --tables 4
  dbsizegen --driver postgres -h localhost -U postgres -d sample --size 512MB
"""

from __future__ import annotations

import argparse
import logging
import sys

from dbsizegen.config import DEFAULT_PORTS, config_from_args
from dbsizegen.dialects import get_dialect
from dbsizegen.errors import DbSizeGenError, MalformedSizeError
from dbsizegen.schema import SizeProbe
from dbsizegen.sizes import format_schema_sizes, format_size, format_summary
from dbsizegen.workers import InsertionController

log = logging.getLogger("dbsizegen")


def build_parser() -> argparse.ArgumentParser:
    # argparse default -h conflicts with psql's -h(host).
    ap = argparse.ArgumentParser(
        prog="dbsizegen",
        description="Fill a MySQL or PostgreSQL database with sample rows up to a target size.",
        add_help=False,
    )
    ap.add_argument(
        "--help", "-?", action="help", help="show this help message and exit"
    )

    # Connection
    ap.add_argument(
        "--driver",
        choices=sorted(DEFAULT_PORTS),
        default="mysql",
        help="Database server type.",
    )
    ap.add_argument(
        "-h", "--host", default="localhost", help="database server host."
    )
    ap.add_argument(
        "-p",
        "--port",
        type=int,
        default=None,
        help="database server port (default 3306 for mysql, 5432 for postgres).",
    )
    ap.add_argument(
        "-U", "--user", default="", help="database user name (or USERNAME env)."
    )
    ap.add_argument(
        "--password", default="", help="database password (or PASSWORD env)."
    )
    ap.add_argument(
        "-d",
        "--database",
        default="sampleData",
        help="Name of the database to create and fill.",
    )
    ap.add_argument(
        "--ssl-mode", default=None, help="TLS mode (e.g. REQUIRED/VERIFY_CA, require/verify-full)."
    )
    ap.add_argument("--ssl-ca", default=None, help="CA certificate file.")
    ap.add_argument("--ssl-cert", default=None, help="Client certificate file.")
    ap.add_argument("--ssl-key", default=None, help="Client private key file.")
    ap.add_argument(
        "--print-client",
        action="store_true",
        help="Print equivalent mysql/psql command and exit.",
    )

    # Generation
    ap.add_argument(
        "--size",
        default="128MB",
        help="Amount of data to add, e.g. 512KB, 128MB, 1.5GB.",
    )
    ap.add_argument(
        "--concurrency",
        type=int,
        default=1,
        help="Number of parallel workers inserting rows.",
    )
    ap.add_argument(
        "--tables", type=int, default=1, help="Number of tables to spread rows across."
    )
    ap.add_argument(
        "--overwrite",
        action="store_true",
        help="Drop the database (if it exists) before inserting.",
    )
    ap.add_argument(
        "--description-len",
        type=int,
        default=2048,
        help="Length of the text column written with every row.",
    )
    ap.add_argument("--seed", type=int, default=None, help="Base RNG seed.")
    ap.add_argument(
        "--progress-interval",
        type=float,
        default=2.0,
        help="Seconds between size polls.",
    )

    # Retry / shutdown behavior
    ap.add_argument(
        "--retry-backoff-sec",
        type=float,
        default=5.0,
        help="Sleep before retrying an insert refused with 'too many connections'.",
    )
    ap.add_argument(
        "--max-attempts",
        type=int,
        default=100,
        help="Attempts per row before giving up on 'too many connections'.",
    )
    ap.add_argument(
        "--join-timeout-sec",
        type=float,
        default=0.0,
        help=(
            "If >0, seconds to wait for each worker to stop; a worker still "
            "running fails the run. 0 means wait indefinitely."
        ),
    )
    ap.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        cfg = config_from_args(args)
    except MalformedSizeError as e:
        print(f"invalid --size: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    dialect = get_dialect(cfg.driver)

    if args.print_client:
        print(dialect.client_command(cfg))
        return 0

    log.info(
        "[setup] target: +%s in %r on %s:%d (%s), tables=%d concurrency=%d",
        format_size(cfg.target_bytes),
        cfg.database,
        cfg.host,
        cfg.port,
        cfg.driver,
        cfg.tables,
        cfg.concurrency,
    )

    controller = InsertionController(cfg, dialect)
    try:
        summary = controller.run()
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return 130
    except DbSizeGenError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    log.info("[done] successfully inserted demo data")
    print(format_summary(summary))

    # new probe: the controller's connection is closed after the final read
    probe = SizeProbe(cfg, dialect)
    try:
        print(format_schema_sizes(probe.schema_sizes()))
    except DbSizeGenError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    finally:
        probe.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
