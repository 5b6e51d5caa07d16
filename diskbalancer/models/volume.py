"""Models for the disks of a storage node."""

from typing import Annotated

from pydantic import Field, model_validator

from diskbalancer.models.core import JsonModel


class Volume(JsonModel):
    """Model with the attributes of a single physical disk.

    Metrics come from the cluster snapshot and are never changed. The path is only
    used to make reports human friendly and can be empty.

    Attributes:
    ----------
        uuid (str): Volume unique identifier.
        storage_type (str): Storage class (DISK, SSD, ARCHIVE, ...).
        capacity (int): Total size in bytes.
        used (int): Used space in bytes.
        reserved (int): Space in bytes not available to the balancer.
        path (str): Mount path on the node.
    """

    uuid: Annotated[str, Field(min_length=1, description="Volume unique identifier")]
    storage_type: Annotated[str, Field(description="Storage class of the volume")]
    capacity: Annotated[int, Field(ge=0, description="Total size in bytes")]
    used: Annotated[int, Field(default=0, ge=0, description="Used space in bytes")]
    reserved: Annotated[
        int, Field(default=0, ge=0, description="Reserved space in bytes")
    ]
    failed: Annotated[bool, Field(default=False, description="Disk is failed")]
    read_only: Annotated[bool, Field(default=False, description="Disk is read only")]
    skip: Annotated[
        bool, Field(default=False, description="Disk must be ignored by the planner")
    ]
    transient: Annotated[
        bool, Field(default=False, description="Disk is backed by volatile storage")
    ]
    path: Annotated[str, Field(default="", description="Mount path on the node")]

    @property
    def effective_capacity(self) -> int:
        """Capacity usable by the balancer."""
        return max(self.capacity - self.reserved, 0)

    @property
    def free_space(self) -> int:
        """Bytes still available on the volume."""
        return max(self.effective_capacity - self.used, 0)

    @property
    def used_ratio(self) -> float:
        """Fraction of the effective capacity currently in use."""
        if self.effective_capacity == 0:
            return 0.0
        return self.used / self.effective_capacity


class VolumeSet(JsonModel):
    """Group of volumes of the same storage class on one node."""

    storage_type: Annotated[str, Field(description="Storage class of the volumes")]
    volumes: Annotated[
        list[Volume], Field(default_factory=list, description="Volumes of the set")
    ]

    @model_validator(mode="after")
    def check_storage_types(self) -> "VolumeSet":
        """Every volume must share the storage class of its set."""
        for volume in self.volumes:
            if volume.storage_type != self.storage_type:
                msg = f"Volume {volume.uuid} has storage type {volume.storage_type} "
                msg += f"but belongs to the {self.storage_type} volume set"
                raise ValueError(msg)
        return self
