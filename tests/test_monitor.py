import threading
import time

from dining.errors import Interrupted
from dining.forks import ForkSet
from dining.monitor import WaitForMonitor, build_wait_for_graph, find_deadlock


def wait_until(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


def test_graph_edges_point_from_waiter_to_holder():
    snapshot = {"held": {0: 0, 1: 1}, "waiting": {0: 1, 2: 1}}
    graph = build_wait_for_graph(snapshot)

    assert set(graph.edges) == {(0, 1), (2, 1)}
    assert graph.edges[0, 1]["fork"] == 1
    assert find_deadlock(graph) is None


def test_waiting_on_a_free_fork_adds_no_edge():
    graph = build_wait_for_graph({"held": {}, "waiting": {3: 0}})
    assert list(graph.nodes) == [3]
    assert graph.number_of_edges() == 0


def test_cycle_is_reported():
    snapshot = {"held": {0: 0, 1: 1, 2: 2}, "waiting": {0: 1, 1: 2, 2: 0}}
    cycle = find_deadlock(build_wait_for_graph(snapshot))
    assert sorted(cycle) == [0, 1, 2]


def test_monitor_detects_a_real_deadlock():
    forks = ForkSet(2)
    forks.acquire(0, holder=0)
    forks.acquire(1, holder=1)
    cancel = threading.Event()
    interrupted = []

    def reach_for(holder, index):
        try:
            forks.acquire(index, holder=holder, cancel=cancel)
        except Interrupted:
            interrupted.append(holder)

    threads = [
        threading.Thread(target=reach_for, args=(0, 1)),
        threading.Thread(target=reach_for, args=(1, 0)),
    ]
    for thread in threads:
        thread.start()
    assert wait_until(lambda: len(forks.snapshot()["waiting"]) == 2)

    monitor = WaitForMonitor(forks, 10, threading.Event())
    cycle = monitor.check()

    assert sorted(cycle) == [0, 1]
    assert monitor.deadlocks == [cycle]
    assert monitor.snapshots_taken == 1

    cancel.set()
    for thread in threads:
        thread.join(timeout=2)
    assert sorted(interrupted) == [0, 1]
    forks.release(0)
    forks.release(1)
    assert forks.all_free()


def test_monitor_thread_stops_with_stop_signal():
    stop_signal = threading.Event()
    monitor = WaitForMonitor(ForkSet(3), 0.01, stop_signal)
    monitor.start()
    assert wait_until(lambda: monitor.snapshots_taken > 0)

    stop_signal.set()
    monitor.join(timeout=2)
    assert not monitor.is_alive()
    assert monitor.deadlocks == []
