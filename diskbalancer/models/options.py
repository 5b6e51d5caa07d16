"""Models to define the plan command options."""

from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator


class PlanOptions(BaseModel):
    """Options received by the plan command.

    Bandwidth and max errors equal to 0 mean that the planner values are kept.
    """

    node: Annotated[
        str | None,
        Field(default=None, description="IP, hostname or UUID of the target node"),
    ]
    cluster_uri: Annotated[
        Path | None,
        Field(default=None, description="Path to the cluster snapshot file"),
    ]
    output: Annotated[
        Path | None,
        Field(default=None, description="Directory where the plan is written"),
    ]
    threshold: Annotated[
        float | None,
        Field(default=None, description="Percentage skew tolerated between disks"),
    ]
    bandwidth: Annotated[
        int, Field(default=0, ge=0, description="Max bandwidth in MB/s")
    ]
    max_error: Annotated[
        int, Field(default=0, ge=0, description="Max disk errors to tolerate")
    ]
    verbose: Annotated[
        bool, Field(default=False, description="Print the plan summary")
    ]

    @field_validator("bandwidth", "max_error", mode="before")
    @classmethod
    def unset_is_zero(cls, v: Any) -> Any:
        """A missing override is stored as 0."""
        return 0 if v is None else v
