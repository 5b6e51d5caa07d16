import os
from logging import Logger, getLogger

import pytest

from diskbalancer.config import Settings
from diskbalancer.models.node import DataNode
from diskbalancer.models.plan import NodePlan, Step
from tests.utils import GiB, node_dict, volume_dict


@pytest.fixture(autouse=True)
def clear_os_environment() -> None:
    """Clear the OS environment."""
    os.environ.clear()


@pytest.fixture
def logger() -> Logger:
    return getLogger("test")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(OUTPUT_DIR=tmp_path / "default")


@pytest.fixture
def unbalanced_node() -> DataNode:
    """Node with a volume at 90% and one at 10%."""
    return DataNode(
        **node_dict(
            volume_dict(capacity=100 * GiB, used=90 * GiB),
            volume_dict(capacity=100 * GiB, used=10 * GiB),
        )
    )


@pytest.fixture
def balanced_node() -> DataNode:
    """Node with two volumes at 50%."""
    return DataNode(
        **node_dict(
            volume_dict(capacity=100 * GiB, used=50 * GiB),
            volume_dict(capacity=100 * GiB, used=50 * GiB),
        )
    )


@pytest.fixture
def step(unbalanced_node: DataNode) -> Step:
    src, dst = unbalanced_node.volumes
    return Step(
        source_volume=src,
        destination_volume=dst,
        bytes_to_move=40 * GiB,
        bandwidth=10,
        max_disk_errors=5,
    )


@pytest.fixture
def node_plan(unbalanced_node: DataNode, step: Step) -> NodePlan:
    return NodePlan(
        node_name=unbalanced_node.hostname,
        node_uuid=unbalanced_node.uuid,
        port=unbalanced_node.port,
        steps=[step],
    )
