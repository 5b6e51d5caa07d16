"""Application settings."""

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, Field, ImportString
from pydantic_settings import BaseSettings, SettingsConfigDict


def invalid_empty(v: str | None) -> str | None:
    """An empty string is not a valid input.

    Args:
        v (str | None): input string.

    Returns:
        str | None: the input string

    """
    if v == "":
        raise ValueError("Empty string is not a valid value")
    return v


class Settings(BaseSettings):
    """Settings for the application."""

    APP_NAME: Annotated[
        str, Field(default="DiskBalancer", description="Application name.")
    ]
    DISK_BALANCER_THRESHOLD: Annotated[
        float,
        Field(
            default=10.0,
            description="Cluster-wide percentage skew tolerated between disks when "
            "the user does not provide a valid one.",
        ),
    ]
    OUTPUT_DIR: Annotated[
        Path,
        Field(
            default="/system/diskbalancer",
            description="Base directory where plans are written when no output "
            "directory is given. A timestamped subfolder is created for each run.",
        ),
    ]
    BEFORE_TEMPLATE: Annotated[
        str,
        Field(
            default="{node}.before.json",
            description="Name template of the cluster snapshot artifact.",
        ),
        AfterValidator(invalid_empty),
    ]
    PLAN_TEMPLATE: Annotated[
        str,
        Field(
            default="{node}.plan.json",
            description="Name template of the plan artifact.",
        ),
        AfterValidator(invalid_empty),
    ]
    VOLUME_NAME_SETTING: Annotated[
        str,
        Field(
            default="DiskBalancerVolumeName",
            description="Node setting holding the volume UUID to path mapping.",
        ),
        AfterValidator(invalid_empty),
    ]
    NODE_RPC_SCHEME: Annotated[
        str, Field(default="http", description="Scheme used to contact nodes.")
    ]
    NODE_RPC_TIMEOUT: Annotated[
        int, Field(default=10, ge=1, description="Node request timeout in seconds")
    ]
    CLUSTER_URI: Annotated[
        Path | None,
        Field(
            default=None,
            description="Path to the JSON or YAML cluster snapshot to use when not "
            "given on the command line.",
        ),
    ]
    PLANNER: Annotated[
        ImportString | None,
        Field(
            default=None,
            description="Import path of the Planner class computing the moves. "
            "Example 'mypackage.planners:GreedyPlanner'.",
        ),
    ]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Retrieve cached settings.

    Returns:
        Settings: Cached settings value.

    """
    return Settings()
