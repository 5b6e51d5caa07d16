"""Models for the storage nodes of the cluster."""

from typing import Annotated

from pydantic import Field, IPvAnyAddress, model_validator

from diskbalancer.models.core import JsonModel
from diskbalancer.models.volume import Volume, VolumeSet
from diskbalancer.utils import find_duplicates


class DataNode(JsonModel):
    """Model with the attributes of a storage node and its volumes."""

    uuid: Annotated[str, Field(min_length=1, description="Node unique identifier")]
    ip: Annotated[IPvAnyAddress, Field(description="Node IP address")]
    port: Annotated[int, Field(gt=0, lt=65536, description="Node RPC port")]
    hostname: Annotated[str, Field(default="", description="Node host name")]
    data_density: Annotated[
        float,
        Field(default=0, description="Data density computed by the planner"),
    ]
    volume_sets: Annotated[
        dict[str, VolumeSet],
        Field(
            default_factory=dict,
            description="Volume sets of the node. The key is the storage type",
        ),
    ]

    @model_validator(mode="after")
    def check_volumes(self) -> "DataNode":
        """Keys match storage types and a volume belongs to exactly one set."""
        for key, volume_set in self.volume_sets.items():
            if key != volume_set.storage_type:
                msg = f"Volume set with key {key} has storage type "
                msg += volume_set.storage_type
                raise ValueError(msg)
        find_duplicates(self.volumes, "uuid")
        return self

    @property
    def address(self) -> str:
        """Address to use to contact the node."""
        host = f"[{self.ip}]" if self.ip.version == 6 else str(self.ip)
        return f"{host}:{self.port}"

    @property
    def volumes(self) -> list[Volume]:
        """All the volumes of the node."""
        return [v for s in self.volume_sets.values() for v in s.volumes]

    def matches(self, identifier: str) -> bool:
        """Return True if the identifier is the node IP, hostname or UUID."""
        return identifier in (str(self.ip), self.hostname, self.uuid)
