"""Plan command: compute and store the balancing plan of a node."""

import sys
from collections.abc import Callable
from enum import Enum
from logging import Logger
from pathlib import Path
from typing import Annotated, Any, TextIO

from pydantic import BaseModel, Field, ValidationError

from diskbalancer.artifacts import ArtifactWriter
from diskbalancer.config import Settings
from diskbalancer.constraints import apply_plan_params
from diskbalancer.exceptions import InvalidArgumentError, NodeNotFoundError
from diskbalancer.loaders.cluster_file import load_cluster
from diskbalancer.models.cluster import Cluster
from diskbalancer.models.options import PlanOptions
from diskbalancer.models.plan import NodePlan
from diskbalancer.node_client import VolumePathFetcher, populate_path_names
from diskbalancer.planner import Planner
from diskbalancer.report import render_plans
from diskbalancer.threshold import resolve_threshold
from diskbalancer.utils import timestamped_dir_name


class PlanState(str, Enum):
    """Stages of the plan command."""

    INIT = "init"
    CLUSTER_LOADED = "cluster-loaded"
    THRESHOLD_RESOLVED = "threshold-resolved"
    NODE_RESOLVED = "node-resolved"
    PATHS_ANNOTATED = "paths-annotated"
    PLAN_COMPUTED = "plan-computed"
    CONSTRAINTS_APPLIED = "constraints-applied"
    SNAPSHOT_WRITTEN = "snapshot-written"
    PLAN_WRITTEN = "plan-written"
    NO_PLAN_NEEDED = "no-plan-needed"
    REPORTED = "reported"
    DONE = "done"


class PlanResult(BaseModel):
    """Outcome of a plan command execution."""

    state: Annotated[PlanState, Field(description="Last reached stage")]
    threshold: Annotated[float, Field(description="Threshold used by the planner")]
    output_dir: Annotated[Path, Field(description="Artifacts directory")]
    before_path: Annotated[Path, Field(description="Cluster snapshot file")]
    plan_path: Annotated[
        Path | None, Field(default=None, description="Plan file, if written")
    ]
    plan_written: Annotated[
        bool, Field(default=False, description="The node needs balancing")
    ]
    plans: Annotated[
        list[NodePlan], Field(default_factory=list, description="Computed plans")
    ]


def parse_options(**kwargs: Any) -> PlanOptions:
    """Validate the plan command options.

    Raises:
        InvalidArgumentError if the target node is missing or an override is not a
        non negative integer.

    """
    try:
        options = PlanOptions(**kwargs)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid plan options: {e!s}") from e
    if not options.node:
        raise InvalidArgumentError("A node name is required to create a plan.")
    return options


class PlanCommand:
    """Read the cluster snapshot and create a plan for the specified node.

    The cluster snapshot is always written to the output directory. The plan is
    written only when the node needs balancing. Every error aborts the command.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        planner: Planner,
        fetcher: VolumePathFetcher,
        logger: Logger,
        cluster_loader: Callable[..., Cluster] = load_cluster,
    ) -> None:
        self.settings = settings
        self.planner = planner
        self.fetcher = fetcher
        self.logger = logger
        self.cluster_loader = cluster_loader
        self.state = PlanState.INIT

    def set_state(self, state: PlanState) -> None:
        self.logger.debug("Plan command: %s -> %s", self.state.value, state.value)
        self.state = state

    def get_output_dir(self, output: Path | None) -> Path:
        """Return the user directory or a new timestamped one in the default dir."""
        if output is not None:
            return Path(output)
        return self.settings.OUTPUT_DIR / timestamped_dir_name()

    def execute(
        self, options: PlanOptions | dict[str, Any], *, out: TextIO | None = None
    ) -> PlanResult:
        """Run the plan command.

        Args:
            options (PlanOptions | dict): command options.
            out (TextIO | None): stream receiving the plan summary in verbose mode.
                Defaults to stdout.

        Returns:
            PlanResult: threshold, written files and computed plans.

        """
        self.logger.debug("Processing plan command")
        if not isinstance(options, PlanOptions):
            options = parse_options(**options)
        elif not options.node:
            raise InvalidArgumentError("A node name is required to create a plan.")

        cluster_uri = options.cluster_uri or self.settings.CLUSTER_URI
        cluster = self.cluster_loader(cluster_uri, logger=self.logger)
        self.set_state(PlanState.CLUSTER_LOADED)

        threshold = resolve_threshold(
            options.threshold,
            self.settings.DISK_BALANCER_THRESHOLD,
            logger=self.logger,
        )
        self.set_state(PlanState.THRESHOLD_RESOLVED)

        node = cluster.get_node(options.node)
        if node is None:
            msg = f"Unable to find the specified node. {options.node}"
            self.logger.error(msg)
            raise NodeNotFoundError(msg)
        cluster.set_nodes_to_process(node)
        self.set_state(PlanState.NODE_RESOLVED)

        populate_path_names(node, fetcher=self.fetcher, logger=self.logger)
        self.set_state(PlanState.PATHS_ANNOTATED)

        plans = self.planner.compute_plan(cluster, threshold)
        self.set_state(PlanState.PLAN_COMPUTED)

        plans = apply_plan_params(
            plans,
            bandwidth=options.bandwidth,
            max_error=options.max_error,
            logger=self.logger,
        )
        plan = plans[0] if len(plans) > 0 else None
        self.set_state(PlanState.CONSTRAINTS_APPLIED)

        output_dir = self.get_output_dir(options.output)
        writer = ArtifactWriter(
            output_dir,
            before_template=self.settings.BEFORE_TEMPLATE,
            plan_template=self.settings.PLAN_TEMPLATE,
            logger=self.logger,
        )
        before_path = writer.write_before(options.node, cluster)
        self.set_state(PlanState.SNAPSHOT_WRITTEN)

        plan_path = None
        if plan is not None and len(plan.steps) > 0:
            plan_path = writer.write_plan(options.node, plan)
            self.set_state(PlanState.PLAN_WRITTEN)
        else:
            self.logger.info(
                "No plan generated. Disk balancing not needed for node: %s "
                "threshold used: %s",
                options.node,
                threshold,
            )
            self.set_state(PlanState.NO_PLAN_NEEDED)

        if options.verbose and any(len(p.steps) > 0 for p in plans):
            (out or sys.stdout).write(render_plans(plans))
            self.set_state(PlanState.REPORTED)

        self.set_state(PlanState.DONE)
        return PlanResult(
            state=self.state,
            threshold=threshold,
            output_dir=output_dir,
            before_path=before_path,
            plan_path=plan_path,
            plan_written=plan_path is not None,
            plans=plans,
        )
