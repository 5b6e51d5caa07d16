"""Disk balancer plan script."""

from typing import Any

from diskbalancer.config import get_settings
from diskbalancer.core import PlanCommand, parse_options
from diskbalancer.exceptions import (
    AbortProcedureError,
    ArtifactWriteError,
    ConnectivityError,
    InvalidArgumentError,
    InvalidClusterError,
    NodeNotFoundError,
    ParseError,
)
from diskbalancer.logger import create_logger
from diskbalancer.node_client import NodeClient
from diskbalancer.parser import parser
from diskbalancer.planner import load_planner


def main(options: dict[str, Any], log_level: str | int) -> None:
    """Main function.

    Read the cluster snapshot, retrieve the volume paths of the target node and let
    the configured planner compute the moves needed to balance its disks.

    Write the cluster snapshot and, when the node needs balancing, the plan in the
    output directory. Any error aborts the procedure.
    """
    settings = get_settings()
    logger = create_logger(settings.APP_NAME, level=log_level)

    try:
        plan_options = parse_options(**options)
        planner = load_planner(settings, logger=logger)
        fetcher = NodeClient(
            setting=settings.VOLUME_NAME_SETTING,
            scheme=settings.NODE_RPC_SCHEME,
            timeout=settings.NODE_RPC_TIMEOUT,
            logger=logger,
        )
        command = PlanCommand(
            settings=settings, planner=planner, fetcher=fetcher, logger=logger
        )
        command.execute(plan_options)
    except (
        AbortProcedureError,
        InvalidClusterError,
        InvalidArgumentError,
        NodeNotFoundError,
        ConnectivityError,
        ParseError,
        ArtifactWriteError,
    ) as e:
        logger.error(e)
        logger.error("Plan command aborted.")
        exit(1)


def run() -> None:
    """Console script entry point."""
    args = vars(parser.parse_args())
    log_level = args.pop("loglevel")
    main(args, log_level.upper())


if __name__ == "__main__":
    run()
