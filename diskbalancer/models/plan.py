"""Models for the plans produced by the planner."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import Field

from diskbalancer.models.core import JsonModel
from diskbalancer.models.volume import Volume
from diskbalancer.utils import human_bytes


class Step(JsonModel):
    """Model of a single data move between two volumes of the same node.

    Bandwidth and max disk errors equal to 0 mean the mover default values.

    Attributes:
    ----------
        source_volume (Volume): Volume to move data from.
        destination_volume (Volume): Volume receiving the data.
        bytes_to_move (int): Amount of data to move.
        volume_set_id (str): Storage type of the volume set.
        ideal_storage (float): Target used ratio of the volume set.
        tolerance_percent (int): Tolerated deviation from the moved bytes.
        bandwidth (int): Max bandwidth (MB/s) the mover may use.
        max_disk_errors (int): Max disk errors tolerated before giving up.
    """

    source_volume: Annotated[Volume, Field(description="Source volume")]
    destination_volume: Annotated[Volume, Field(description="Destination volume")]
    bytes_to_move: Annotated[int, Field(ge=0, description="Bytes to move")]
    volume_set_id: Annotated[str, Field(default="", description="Volume set ID")]
    ideal_storage: Annotated[
        float, Field(default=0, ge=0, description="Target used ratio of the set")
    ]
    tolerance_percent: Annotated[
        int, Field(default=0, ge=0, description="Tolerated deviation percentage")
    ]
    bandwidth: Annotated[
        int, Field(default=0, ge=0, description="Max bandwidth in MB/s")
    ]
    max_disk_errors: Annotated[
        int, Field(default=0, ge=0, description="Max disk errors to tolerate")
    ]

    def size_string(self) -> str:
        """Bytes to move in a human readable format."""
        return human_bytes(self.bytes_to_move)


class NodePlan(JsonModel):
    """Ordered list of steps to balance the volumes of a node."""

    node_name: Annotated[str, Field(description="Node host name or IP")]
    node_uuid: Annotated[str, Field(description="Node unique identifier")]
    port: Annotated[int, Field(gt=0, lt=65536, description="Node RPC port")]
    timestamp: Annotated[
        datetime,
        Field(
            default_factory=lambda: datetime.now(timezone.utc),
            description="Plan creation time",
        ),
    ]
    steps: Annotated[
        list[Step], Field(default_factory=list, description="Moves to perform")
    ]
