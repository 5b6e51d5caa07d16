"""Models for the cluster topology snapshot."""

from typing import Annotated

from pydantic import Field, model_validator

from diskbalancer.models.core import JsonModel
from diskbalancer.models.node import DataNode
from diskbalancer.utils import find_duplicates


class Cluster(JsonModel):
    """Snapshot of the storage nodes of a cluster.

    The subset of nodes the planner has to work on is kept outside of the
    serialized data.
    """

    nodes: Annotated[
        list[DataNode], Field(default_factory=list, description="Cluster nodes")
    ]
    nodes_to_process: Annotated[
        list[DataNode],
        Field(
            default_factory=list,
            exclude=True,
            description="Nodes the planner has to compute a plan for",
        ),
    ]

    @model_validator(mode="after")
    def check_unique_nodes(self) -> "Cluster":
        find_duplicates(self.nodes, "uuid")
        return self

    def get_node(self, identifier: str) -> DataNode | None:
        """Find a node by IP address, hostname or UUID.

        Args:
            identifier (str): node IP, hostname or UUID.

        Returns:
            DataNode | None: the first matching node, if any.

        """
        for node in self.nodes:
            if node.matches(identifier):
                return node
        return None

    def set_nodes_to_process(self, *nodes: DataNode) -> None:
        """Restrict the planning scope to the given nodes."""
        self.nodes_to_process = list(nodes)
