"""
Unit tests - workers, progress monitor and the insertion controller
"""

import logging
import threading

import pytest

from conftest import CrashingDialect, FakeDbError, FakeServer, FakeDialect, too_many_connections
from dbsizegen import workers
from dbsizegen.errors import ProbeError, ProvisionError, RunAbortedError
from dbsizegen.schema import provision
from dbsizegen.workers import (
    ActivityGauge,
    InsertionController,
    ProgressMonitor,
    RunCounters,
    State,
    Worker,
)


class ScriptedProbe:
    """Returns (or raises) the given readings in order, repeating the last."""

    def __init__(self, readings):
        self.readings = list(readings)
        self.calls = 0
        self.closed = False

    def current_size(self):
        self.calls += 1
        item = self.readings.pop(0) if len(self.readings) > 1 else self.readings[0]
        if isinstance(item, BaseException):
            raise item
        return item

    def schema_sizes(self):
        return []

    def close(self):
        self.closed = True


def make_worker(cfg, dialect, stop_evt=None):
    return Worker(
        0,
        cfg,
        dialect,
        stop_evt or threading.Event(),
        ActivityGauge(),
        RunCounters(),
    )


# -----------------------------
# Worker
# -----------------------------
@pytest.mark.unit
def test_insert_succeeds_after_99_connection_refusals(server, dialect, make_config):
    cfg = make_config()
    provision(cfg, dialect)
    server.insert_errors = [too_many_connections() for _ in range(99)]
    worker = make_worker(cfg, dialect)

    assert worker.insert("table0", worker.source.row()) is True

    assert worker.counters.inserted == 1
    assert worker.counters.retries == 99
    assert worker.counters.failed == 0
    assert server.databases["sampleData"]["table0"] == 1


@pytest.mark.unit
def test_insert_gives_up_after_max_attempts(server, dialect, make_config):
    cfg = make_config()
    provision(cfg, dialect)
    server.insert_errors = [too_many_connections() for _ in range(100)]
    worker = make_worker(cfg, dialect)

    assert worker.insert("table0", worker.source.row()) is False

    assert worker.counters.failed == 1
    assert worker.counters.retries == 99
    assert server.insert_errors == []


@pytest.mark.unit
def test_other_insert_errors_are_skipped_without_retry(server, dialect, make_config, caplog):
    cfg = make_config()
    provision(cfg, dialect)
    server.insert_errors = [FakeDbError("Data too long for column 'name'")]
    worker = make_worker(cfg, dialect)

    with caplog.at_level(logging.ERROR):
        assert worker.insert("table0", worker.source.row()) is False

    assert worker.counters.failed == 1
    assert worker.counters.retries == 0
    assert "table0" in caplog.text
    assert "Data too long" in caplog.text
    # next row goes through on the same worker
    assert worker.insert("table0", worker.source.row()) is True


@pytest.mark.unit
def test_stop_during_backoff_abandons_row(server, dialect, make_config):
    cfg = make_config(retry_backoff=30.0)
    provision(cfg, dialect)
    server.insert_errors = [too_many_connections()]
    stop_evt = threading.Event()
    stop_evt.set()
    worker = make_worker(cfg, dialect, stop_evt)

    assert worker.insert("table0", worker.source.row()) is False
    assert worker.counters.failed == 1


@pytest.mark.unit
def test_refused_connection_is_reopened(server, dialect, make_config):
    cfg = make_config()
    provision(cfg, dialect)
    server.insert_errors = [too_many_connections()]
    worker = make_worker(cfg, dialect)
    connects = server.connects

    assert worker.insert("table0", worker.source.row()) is True
    assert server.connects == connects + 2


@pytest.mark.unit
def test_activity_gauge_peak():
    gauge = ActivityGauge()

    with gauge.track():
        with gauge.track():
            assert gauge.active == 2
        assert gauge.active == 1

    assert gauge.active == 0
    assert gauge.peak == 2


# -----------------------------
# Progress monitor
# -----------------------------
@pytest.mark.unit
def test_monitor_logs_growth_and_stops_at_target(caplog):
    probe = ScriptedProbe([ProbeError("boom"), 50, 50, 120])
    monitor = ProgressMonitor(probe, 0, 100, interval=0.001, stop_evt=threading.Event())

    with caplog.at_level(logging.INFO, logger="dbsizegen.workers"):
        assert monitor.run() is True

    assert probe.calls == 4
    progress_lines = [r for r in caplog.records if "data inserted" in r.getMessage()]
    assert len(progress_lines) == 2
    assert "boom" in caplog.text


@pytest.mark.unit
def test_monitor_percent_is_relative_to_initial_size():
    probe = ScriptedProbe([1000 + 49])
    monitor = ProgressMonitor(probe, 1000, 98, interval=0.001, stop_evt=threading.Event())

    snap = monitor.tick()

    assert snap.inserted_bytes == 49
    assert snap.percent == 50.0


@pytest.mark.unit
def test_monitor_returns_when_workers_are_gone():
    probe = ScriptedProbe([0])
    monitor = ProgressMonitor(
        probe, 0, 100, interval=0.001, stop_evt=threading.Event(), workers_alive=lambda: False
    )

    assert monitor.run() is False


@pytest.mark.unit
def test_monitor_returns_when_stopped():
    stop_evt = threading.Event()
    stop_evt.set()
    probe = ScriptedProbe([0])
    monitor = ProgressMonitor(probe, 0, 100, interval=10.0, stop_evt=stop_evt)

    assert monitor.run() is False
    assert probe.calls == 0


# -----------------------------
# Controller
# -----------------------------
@pytest.mark.unit
def test_run_reaches_target(make_config):
    server = FakeServer(row_bytes=100, insert_delay=0.001)
    cfg = make_config(tables=1, concurrency=4)
    controller = InsertionController(cfg, FakeDialect(server))

    summary = controller.run()

    assert controller.state is State.COMPLETED
    assert list(server.databases["sampleData"]) == ["table0"]
    assert summary.bytes_inserted >= cfg.target_bytes
    assert summary.final_bytes - summary.initial_bytes >= 0
    assert summary.elapsed > 0
    assert summary.rows_inserted == server.databases["sampleData"]["table0"]
    assert not controller.pool.alive()


@pytest.mark.unit
@pytest.mark.parametrize("concurrency", [1, 3, 8])
def test_in_flight_inserts_never_exceed_concurrency(make_config, concurrency):
    server = FakeServer(row_bytes=100, insert_delay=0.002)
    cfg = make_config(tables=4, concurrency=concurrency)
    controller = InsertionController(cfg, FakeDialect(server))

    summary = controller.run()

    assert len(controller.pool.threads) == concurrency
    assert 1 <= server.peak_in_flight <= concurrency
    assert 1 <= summary.peak_workers <= concurrency


@pytest.mark.unit
def test_growth_is_measured_from_baseline(make_config):
    server = FakeServer(row_bytes=100)
    server.databases["sampleData"] = {"table0": 1000}
    cfg = make_config(target_bytes=2000)
    controller = InsertionController(cfg, FakeDialect(server))

    summary = controller.run()

    assert summary.initial_bytes == 100_000
    assert summary.bytes_inserted >= 2000


@pytest.mark.unit
def test_insert_errors_do_not_abort_the_run(make_config):
    server = FakeServer(row_bytes=100)
    server.insert_errors = [FakeDbError("deadlock"), too_many_connections(), FakeDbError("deadlock")]
    cfg = make_config(concurrency=2, target_bytes=1000)
    controller = InsertionController(cfg, FakeDialect(server))

    summary = controller.run()

    assert controller.state is State.COMPLETED
    assert summary.rows_failed == 2
    assert summary.retries == 1


@pytest.mark.unit
def test_provision_failure_starts_no_workers(make_config):
    server = FakeServer()
    server.unreachable = True
    controller = InsertionController(make_config(concurrency=4), FakeDialect(server))

    with pytest.raises(ProvisionError):
        controller.run()

    assert controller.state is State.FAILED
    assert controller.pool is None


@pytest.mark.unit
def test_final_probe_failure_fails_the_run(make_config, monkeypatch):
    probe = ScriptedProbe([0, 10**9, ProbeError("gone away")])
    monkeypatch.setattr(workers, "SizeProbe", lambda cfg, dialect: probe)
    controller = InsertionController(make_config(concurrency=2), FakeDialect(FakeServer()))

    with pytest.raises(ProbeError, match="gone away"):
        controller.run()

    assert controller.state is State.FAILED
    assert not controller.pool.alive()
    assert probe.closed


@pytest.mark.unit
def test_baseline_probe_failure_fails_before_workers(make_config, monkeypatch):
    probe = ScriptedProbe([ProbeError("no stats")])
    monkeypatch.setattr(workers, "SizeProbe", lambda cfg, dialect: probe)
    controller = InsertionController(make_config(), FakeDialect(FakeServer()))

    with pytest.raises(ProbeError):
        controller.run()

    assert controller.state is State.FAILED
    assert controller.pool is None


@pytest.mark.unit
def test_workers_outliving_join_timeout_fail_the_run(make_config):
    """No final reading or summary while a worker may still be inserting"""
    server = FakeServer(row_bytes=100, insert_delay=0.5)
    cfg = make_config(concurrency=2, target_bytes=100, join_timeout=0.05)
    controller = InsertionController(cfg, FakeDialect(server))

    with pytest.raises(RunAbortedError, match="still inserting"):
        controller.run()

    assert controller.state is State.FAILED
    assert controller.pool.alive()
    controller.pool.join()
    assert not controller.pool.alive()


@pytest.mark.unit
@pytest.mark.filterwarnings("ignore::pytest.PytestUnhandledThreadExceptionWarning")
def test_all_workers_crashing_fails_the_run(make_config):
    cfg = make_config(concurrency=3)
    controller = InsertionController(cfg, CrashingDialect(FakeServer()))

    with pytest.raises(RunAbortedError, match="all workers exited"):
        controller.run()

    assert controller.state is State.FAILED
    assert not controller.pool.alive()


@pytest.mark.unit
def test_interrupt_drains_workers(make_config, monkeypatch):
    reader = ScriptedProbe([0, KeyboardInterrupt()])
    monkeypatch.setattr(workers, "SizeProbe", lambda cfg, dialect: reader)
    controller = InsertionController(make_config(concurrency=2), FakeDialect(FakeServer()))

    with pytest.raises(KeyboardInterrupt):
        controller.run()

    assert controller.state is State.DRAINING
    assert not controller.pool.alive()
    assert reader.closed
