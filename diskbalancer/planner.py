"""Interface of the algorithm computing the balancing plans."""

from abc import ABC, abstractmethod
from logging import Logger

from diskbalancer.config import Settings
from diskbalancer.exceptions import AbortProcedureError
from diskbalancer.models.cluster import Cluster
from diskbalancer.models.plan import NodePlan


class Planner(ABC):
    """Algorithm computing the moves needed to balance the volumes of a node."""

    @abstractmethod
    def compute_plan(self, cluster: Cluster, threshold: float) -> list[NodePlan]:
        """Compute a plan for each node in the cluster processing scope.

        Args:
            cluster (Cluster): cluster snapshot with the nodes to process.
            threshold (float): tolerated skew percentage, in the (0, 100] range.

        Returns:
            list of NodePlan: one plan for each processed node. A plan without
                steps means that the node is already balanced.

        """


def load_planner(settings: Settings, *, logger: Logger) -> Planner:
    """Instantiate the planner class configured in the settings.

    Raises:
        AbortProcedureError if no planner is configured or the configured object is
        not a Planner subclass.

    """
    planner_cls = settings.PLANNER
    if planner_cls is None:
        msg = "No planner configured. Set the PLANNER variable"
        logger.error(msg)
        raise AbortProcedureError(msg)
    if not (isinstance(planner_cls, type) and issubclass(planner_cls, Planner)):
        msg = f"{planner_cls!r} is not a Planner class"
        logger.error(msg)
        raise AbortProcedureError(msg)
    logger.info("Using planner %s", planner_cls.__name__)
    return planner_cls()
