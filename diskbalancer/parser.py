"""Command line arguments parser."""

import argparse
import logging

log_values = [i.lower() for i in logging._nameToLevel.keys()]

parser = argparse.ArgumentParser(
    prog="diskbalancer-plan",
    description="Creates a plan that describes how much data should be moved "
    "between disks.",
    epilog="Plan command creates a set of steps that represent a planned data move. "
    "A plan file can be executed on a data node, which will balance the data.",
)
parser.add_argument(
    "-p",
    "--plan",
    dest="node",
    metavar="NODE",
    help="IP address, hostname or UUID of the node to create a plan for.",
)
parser.add_argument(
    "-u",
    "--uri",
    dest="cluster_uri",
    help="Path to the JSON or YAML cluster snapshot. Default from CLUSTER_URI.",
)
parser.add_argument(
    "-o",
    "--out",
    dest="output",
    help="Output directory. The generated plan will be written to a file in this "
    "directory.",
)
parser.add_argument(
    "-b",
    "--bandwidth",
    type=int,
    default=0,
    help="Maximum bandwidth to be used while copying.",
)
parser.add_argument(
    "-t",
    "--thresholdPercentage",
    dest="threshold",
    type=float,
    help="Percentage skew that we tolerate before diskbalancer starts working.",
)
parser.add_argument(
    "-m",
    "--maxerror",
    dest="max_error",
    type=int,
    default=0,
    help="Max errors to tolerate between 2 disks.",
)
parser.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    help="Run plan command in verbose mode.",
)
parser.add_argument(
    "-l",
    "--loglevel",
    default="warning",
    choices=log_values,
    help=f"Provide logging level. Valid values: {log_values}. \
        Example --loglevel debug, default=warning",
)
