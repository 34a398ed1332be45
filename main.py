import argparse
import dataclasses
import logging
import socket
import sys

from dining.config import load_config
from dining.errors import ConfigurationError
from dining.monitor import find_deadlock
from dining.report import format_report
from dining.table import DiningTable
from dining.utils import setup_logging
from dining.visualization import visualize_wait_for_graph


def build_parser():
    p = argparse.ArgumentParser(description="Dining Philosophers simulation with deadlock avoidance")
    p.add_argument("config", help="key=value input file, e.g. input_philosophers.txt")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--snapshot-interval", type=float, default=None,
                   help="seconds between wait-for graph snapshots")
    p.add_argument("--graph-out", default=None,
                   help="save the last wait-for graph snapshot to this image file")
    return p


def main(argv=None):
    """Main function to set up and run the simulation."""
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))
    logger = logging.getLogger(__name__)

    try:
        hostname = socket.gethostname()
    except OSError:
        hostname = "unknown"
    logger.info(f"Running on host {hostname}")

    try:
        config = load_config(args.config)
        if args.snapshot_interval is not None:
            config = dataclasses.replace(config, snapshot_interval=args.snapshot_interval).validate()
        if args.graph_out and config.snapshot_interval is None:
            raise ConfigurationError("--graph-out needs a snapshot interval")
        table = DiningTable(config)
        stats = table.run()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    except OSError as e:
        logger.error(f"Could not read {args.config}: {e}")
        return 1

    print(format_report(config, stats))

    if args.graph_out:
        graph = table.monitor.last_graph
        visualize_wait_for_graph(graph, cycle=find_deadlock(graph), path=args.graph_out)
        logger.info(f"Wait-for graph saved to {args.graph_out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
