"""Run configuration, frozen once parsed from the command line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from dbsizegen.errors import MalformedSizeError
from dbsizegen.sizes import parse_size

DEFAULT_PORTS = {"mysql": 3306, "postgres": 5432}


@dataclass(frozen=True)
class GenerationConfig:
    size_text: str
    target_bytes: int
    driver: str = "mysql"
    host: str = "localhost"
    port: int = 3306
    user: str = ""
    password: str = ""
    database: str = "sampleData"
    tables: int = 1
    concurrency: int = 1
    overwrite: bool = False
    ssl_mode: Optional[str] = None
    ssl_ca: Optional[str] = None
    ssl_cert: Optional[str] = None
    ssl_key: Optional[str] = None
    progress_interval: float = 2.0
    retry_backoff: float = 5.0
    max_attempts: int = 100
    seed: Optional[int] = None
    description_len: int = 2048
    join_timeout: float = 0.0

    @property
    def table_names(self) -> Tuple[str, ...]:
        return tuple(table_name(i) for i in range(self.tables))


def table_name(index: int) -> str:
    return f"table{index}"


def config_from_args(args, environ: Optional[Mapping[str, str]] = None) -> GenerationConfig:
    """
    Build the immutable config from parsed CLI args.

    The size is parsed first so a bad --size fails before anything touches
    the network. user/password fall back to $USERNAME / $PASSWORD.
    Raises MalformedSizeError or ValueError.
    """
    env = os.environ if environ is None else environ

    target = parse_size(args.size)
    if target <= 0:
        raise MalformedSizeError(f"size must be positive, got {args.size!r}")
    if args.concurrency < 1:
        raise ValueError("--concurrency must be >= 1")
    if args.tables < 1:
        raise ValueError("--tables must be >= 1")
    if args.progress_interval <= 0:
        raise ValueError("--progress-interval must be > 0")
    if args.max_attempts < 1:
        raise ValueError("--max-attempts must be >= 1")

    port = args.port if args.port else DEFAULT_PORTS[args.driver]

    return GenerationConfig(
        size_text=args.size,
        target_bytes=target,
        driver=args.driver,
        host=args.host,
        port=port,
        user=args.user or env.get("USERNAME", ""),
        password=args.password or env.get("PASSWORD", ""),
        database=args.database,
        tables=args.tables,
        concurrency=args.concurrency,
        overwrite=args.overwrite,
        ssl_mode=args.ssl_mode,
        ssl_ca=args.ssl_ca,
        ssl_cert=args.ssl_cert,
        ssl_key=args.ssl_key,
        progress_interval=args.progress_interval,
        retry_backoff=max(0.0, args.retry_backoff_sec),
        max_attempts=args.max_attempts,
        seed=args.seed,
        description_len=max(0, args.description_len),
        join_timeout=max(0.0, args.join_timeout_sec),
    )
