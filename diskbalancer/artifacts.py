"""Writer of the cluster snapshot and plan files."""

from logging import Logger
from pathlib import Path

from diskbalancer.exceptions import ArtifactWriteError
from diskbalancer.models.cluster import Cluster
from diskbalancer.models.plan import NodePlan


class ArtifactWriter:
    """Write the disk balancer artifacts in the output directory.

    Each file name is built from a template with a 'node' placeholder.
    """

    def __init__(
        self,
        output_dir: Path,
        *,
        before_template: str,
        plan_template: str,
        logger: Logger,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.before_template = before_template
        self.plan_template = plan_template
        self.logger = logger

    def artifact_path(self, template: str, node_identifier: str) -> Path:
        """Build the artifact path for the given node.

        Raises:
            ArtifactWriteError if the template can't be formatted or the node
            identifier does not produce a plain file name.

        """
        try:
            fname = template.format(node=node_identifier)
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            msg = f"Invalid artifact name template '{template}'"
            self.logger.error(msg)
            raise ArtifactWriteError(msg) from e
        if fname in ("", ".", "..") or Path(fname).name != fname:
            msg = f"Node identifier '{node_identifier}' produces an invalid file name"
            self.logger.error(msg)
            raise ArtifactWriteError(msg)
        return self.output_dir / fname

    def write(self, content: bytes, target: Path) -> None:
        """Write the whole content in a new file.

        Raises:
            ArtifactWriteError on any filesystem error.

        """
        self.logger.debug("Writing %s bytes to %s", len(content), target)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as f:
                f.write(content)
        except OSError as e:
            msg = f"Error writing file {target}: {e!s}"
            self.logger.error(msg)
            raise ArtifactWriteError(msg) from e

    def write_before(self, node_identifier: str, cluster: Cluster) -> Path:
        """Write the cluster snapshot taken before computing the plan."""
        target = self.artifact_path(self.before_template, node_identifier)
        self.write(cluster.to_json().encode("utf-8"), target)
        return target

    def write_plan(self, node_identifier: str, plan: NodePlan) -> Path:
        """Write the node plan."""
        target = self.artifact_path(self.plan_template, node_identifier)
        self.logger.info("Writing plan to: %s", target)
        self.write(plan.to_json().encode("utf-8"), target)
        return target
