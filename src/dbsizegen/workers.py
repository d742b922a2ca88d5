"""
Size-bounded concurrent insertion.

The coordinator (InsertionController.run, on the calling thread) provisions
the schema, takes a baseline size reading, starts exactly `concurrency`
worker threads and then monitors progress itself. When the reported size has
grown by the target, it sets the shared stop event, joins the workers and
takes the final reading. If every worker dies first, or one is still running
after the join timeout, the run fails with RunAbortedError instead.

Termination is approximate: statistics lag and the polling interval mean
the run can overshoot or undershoot the target by one interval's worth of
inserts.
"""

from __future__ import annotations

import enum
import logging
import threading
import time
from contextlib import contextmanager
from typing import Callable, List, Optional

from dbsizegen.config import GenerationConfig
from dbsizegen.dialects import Dialect
from dbsizegen.errors import (
    InsertError,
    ProbeError,
    ProvisionError,
    RunAbortedError,
    TransientCapacityError,
)
from dbsizegen.payload import PayloadSource, RowPayload
from dbsizegen.schema import SizeProbe, provision
from dbsizegen.sizes import ProgressSnapshot, RunSummary, format_size

log = logging.getLogger(__name__)


class State(enum.Enum):
    IDLE = "idle"
    PROVISIONING = "provisioning"
    RUNNING = "running"
    DRAINING = "draining"
    COMPLETED = "completed"
    FAILED = "failed"


# -----------------------------
# Shared counters
# -----------------------------
class ActivityGauge:
    """In-flight database operations, for peak-concurrency reporting only."""

    def __init__(self):
        self._lock = threading.Lock()
        self.active = 0
        self.peak = 0

    @contextmanager
    def track(self):
        with self._lock:
            self.active += 1
            if self.active > self.peak:
                self.peak = self.active
        try:
            yield
        finally:
            with self._lock:
                self.active -= 1


class RunCounters:
    def __init__(self):
        self._lock = threading.Lock()
        self.inserted = 0
        self.failed = 0
        self.retries = 0

    def add(self, inserted: int = 0, failed: int = 0, retries: int = 0) -> None:
        with self._lock:
            self.inserted += inserted
            self.failed += failed
            self.retries += retries


# -----------------------------
# Worker
# -----------------------------
class Worker:
    def __init__(
        self,
        worker_id: int,
        cfg: GenerationConfig,
        dialect: Dialect,
        stop_evt: threading.Event,
        gauge: ActivityGauge,
        counters: RunCounters,
    ):
        self.worker_id = worker_id
        self.cfg = cfg
        self.dialect = dialect
        self.stop_evt = stop_evt
        self.gauge = gauge
        self.counters = counters
        seed = None if cfg.seed is None else cfg.seed + worker_id
        self.source = PayloadSource(cfg.tables, cfg.description_len, seed=seed)
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
                log.debug("[worker %d] ignoring close error", self.worker_id, exc_info=True)

    def _attempt(self, table: str, payload: RowPayload) -> None:
        try:
            with self.gauge.track():
                self.dialect.insert_row(self._connection(), table, payload)
        except self.dialect.Error as e:
            if self.dialect.is_too_many_connections(e):
                self._reset()
                raise TransientCapacityError(str(e)) from e
            if self._conn is not None and not self.dialect.connection_alive(self._conn):
                self._reset()
            raise InsertError(table, e) from e

    def insert(self, table: str, payload: RowPayload) -> bool:
        """
        Insert one row, retrying the same payload while the server is out of
        connections. Returns False when the row was skipped.
        """
        max_attempts = self.cfg.max_attempts
        for attempt in range(1, max_attempts + 1):
            try:
                self._attempt(table, payload)
            except TransientCapacityError as e:
                if attempt == max_attempts:
                    break
                self.counters.add(retries=1)
                log.warning(
                    "[worker %d] too many connections (attempt %d/%d), retrying in %.1fs: %s",
                    self.worker_id,
                    attempt,
                    max_attempts,
                    self.cfg.retry_backoff,
                    e,
                )
                if self.stop_evt.wait(self.cfg.retry_backoff):
                    break
            except InsertError as e:
                self.counters.add(failed=1)
                log.error("[worker %d] %s", self.worker_id, e)
                return False
            else:
                self.counters.add(inserted=1)
                return True

        self.counters.add(failed=1)
        log.error(
            "[worker %d] giving up on row for table %s after %d attempt(s)",
            self.worker_id,
            table,
            attempt,
        )
        return False

    def run(self) -> None:
        try:
            while not self.stop_evt.is_set():
                self.insert(self.source.pick_table(), self.source.row())
        except Exception as e:
            log.error("[worker %d] ERROR: %s", self.worker_id, e)
            raise
        finally:
            self._reset()


class WorkerPool:
    """Exactly cfg.concurrency persistent workers sharing one stop event."""

    def __init__(self, cfg: GenerationConfig, dialect: Dialect, stop_evt: threading.Event):
        self.cfg = cfg
        self.stop_evt = stop_evt
        self.gauge = ActivityGauge()
        self.counters = RunCounters()
        self.workers = [
            Worker(wid, cfg, dialect, stop_evt, self.gauge, self.counters)
            for wid in range(cfg.concurrency)
        ]
        self.threads: List[threading.Thread] = []

    def start(self) -> None:
        for w in self.workers:
            t = threading.Thread(target=w.run, name=f"worker-{w.worker_id}", daemon=False)
            t.start()
            self.threads.append(t)

    def alive(self) -> bool:
        return any(t.is_alive() for t in self.threads)

    def join(self, timeout: float = 0.0) -> List[str]:
        """Join every worker; returns the names of threads still running."""
        for t in self.threads:
            if timeout and timeout > 0:
                t.join(timeout=timeout)
            else:
                t.join()
        stuck = [t.name for t in self.threads if t.is_alive()]
        for name in stuck:
            log.warning("[warn] %s did not stop within %.1fs", name, timeout)
        return stuck


# -----------------------------
# Progress monitor
# -----------------------------
class ProgressMonitor:
    def __init__(
        self,
        probe: SizeProbe,
        initial_bytes: int,
        target_bytes: int,
        interval: float,
        stop_evt: threading.Event,
        workers_alive: Callable[[], bool] = lambda: True,
        clock: Callable[[], float] = time.time,
    ):
        self.probe = probe
        self.initial_bytes = initial_bytes
        self.target_bytes = target_bytes
        self.interval = interval
        self.stop_evt = stop_evt
        self.workers_alive = workers_alive
        self.clock = clock
        self.previous_bytes = initial_bytes

    def tick(self) -> Optional[ProgressSnapshot]:
        try:
            current = self.probe.current_size()
        except ProbeError as e:
            log.warning("[progress] %s", e)
            return None

        snap = ProgressSnapshot(self.clock(), current, self.initial_bytes, self.target_bytes)
        if current > self.previous_bytes:
            log.info(
                "[progress] %.2f%% data inserted: %s current size: %s",
                snap.percent,
                format_size(snap.inserted_bytes),
                format_size(current),
            )
            self.previous_bytes = current
        return snap

    def run(self) -> bool:
        """Poll until the target is reached (True) or the run is stopped (False)."""
        log.info(
            "[progress] current database size: %s desired amount to inject: %s",
            format_size(self.initial_bytes),
            format_size(self.target_bytes),
        )
        while not self.stop_evt.wait(self.interval):
            snap = self.tick()
            if snap is not None and snap.percent >= 100:
                log.info("[done] target reached")
                return True
            if not self.workers_alive():
                log.warning("[warn] all workers have exited before reaching the target")
                return False
        return False


# -----------------------------
# Controller
# -----------------------------
class InsertionController:
    def __init__(
        self,
        cfg: GenerationConfig,
        dialect: Dialect,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.cfg = cfg
        self.dialect = dialect
        self.clock = clock
        self.state = State.IDLE
        self.pool: Optional[WorkerPool] = None

    def _probe(self, probe: SizeProbe) -> int:
        try:
            return probe.current_size()
        except ProbeError:
            self.state = State.FAILED
            raise

    def run(self) -> RunSummary:
        started = self.clock()

        self.state = State.PROVISIONING
        try:
            provision(self.cfg, self.dialect)
        except ProvisionError:
            self.state = State.FAILED
            raise

        probe = SizeProbe(self.cfg, self.dialect)
        try:
            initial = self._probe(probe)

            stop_evt = threading.Event()
            self.pool = WorkerPool(self.cfg, self.dialect, stop_evt)
            monitor = ProgressMonitor(
                probe,
                initial_bytes=initial,
                target_bytes=self.cfg.target_bytes,
                interval=self.cfg.progress_interval,
                stop_evt=stop_evt,
                workers_alive=self.pool.alive,
            )

            log.info(
                "[setup] generating sample data with %d worker(s)...", self.cfg.concurrency
            )
            self.state = State.RUNNING
            self.pool.start()
            reached = False
            try:
                reached = monitor.run()
            finally:
                self.state = State.DRAINING
                log.info("[done] stopping data insertion...")
                stop_evt.set()
                stuck = self.pool.join(self.cfg.join_timeout)

            if stuck:
                self.state = State.FAILED
                raise RunAbortedError(
                    f"{len(stuck)} worker(s) still inserting after {self.cfg.join_timeout}s; "
                    "final size would be inaccurate"
                )
            if not reached:
                self.state = State.FAILED
                raise RunAbortedError("all workers exited before the target was reached")

            final = self._probe(probe)
        finally:
            probe.close()

        self.state = State.COMPLETED
        counters = self.pool.counters
        return RunSummary(
            elapsed=self.clock() - started,
            initial_bytes=initial,
            final_bytes=final,
            peak_workers=self.pool.gauge.peak,
            rows_inserted=counters.inserted,
            rows_failed=counters.failed,
            retries=counters.retries,
        )
