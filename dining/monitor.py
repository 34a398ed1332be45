import logging
import threading

import networkx as nx

logger = logging.getLogger(__name__)


def build_wait_for_graph(snapshot):
    """
    Builds the wait-for graph of a fork snapshot.

    Args:
        snapshot (dict): ForkSet.snapshot() output, with "held" mapping fork ids
            to holders and "waiting" mapping philosophers to the fork they wait on.

    Returns:
        networkx.DiGraph: an edge waiter -> holder for every blocked philosopher.
    """
    graph = nx.DiGraph()
    graph.add_nodes_from(snapshot["held"].values())
    for waiter, fork_id in snapshot["waiting"].items():
        graph.add_node(waiter)
        holder = snapshot["held"].get(fork_id)
        if holder is not None and holder != waiter:
            graph.add_edge(waiter, holder, fork=fork_id)
    return graph


def find_deadlock(graph):
    """Returns the philosophers forming a wait cycle, or None."""
    try:
        edges = nx.find_cycle(graph)
    except nx.NetworkXNoCycle:
        return None
    return [waiter for waiter, _ in edges]


class WaitForMonitor(threading.Thread):
    """Periodically snapshots the forks and checks the wait-for graph for cycles."""

    def __init__(self, forks, interval, stop_signal):
        super().__init__(name="Wait-For-Monitor")
        self.forks = forks
        self.interval = interval
        self.stop_signal = stop_signal
        self.snapshots_taken = 0
        self.last_graph = nx.DiGraph()
        self.deadlocks = []

    def run(self):
        logger.info(f"Monitoring started. Will take snapshots every {self.interval} seconds.")
        while not self.stop_signal.wait(self.interval):
            self.check()
        logger.info(f"Monitoring stopped after {self.snapshots_taken} snapshots.")

    def check(self):
        snapshot = self.forks.snapshot()
        self.snapshots_taken += 1
        graph = build_wait_for_graph(snapshot)
        self.last_graph = graph
        logger.debug(f"Snapshot {self.snapshots_taken}: {snapshot}")

        cycle = find_deadlock(graph)
        if cycle:
            logger.error(
                f"!!! DEADLOCK DETECTED !!! Wait cycle: {' -> '.join(map(str, cycle + cycle[:1]))}"
            )
            self.deadlocks.append(cycle)
        return cycle
