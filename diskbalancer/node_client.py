"""Client retrieving volume details from a storage node."""

import json
from abc import ABC, abstractmethod
from logging import Logger

import requests
from pydantic import TypeAdapter, ValidationError
from requests.exceptions import HTTPError, RequestException

from diskbalancer.exceptions import ConnectivityError, ParseError
from diskbalancer.models.node import DataNode

VOLUME_MAP_ADAPTER = TypeAdapter(dict[str, str])


class VolumePathFetcher(ABC):
    """Retrieve the volume UUID to path mapping of a node."""

    @abstractmethod
    def fetch_volume_paths(self, address: str) -> dict[str, str]:
        """Return the mapping between volume UUIDs and paths.

        Args:
            address (str): node address in the form host:port.

        Returns:
            dict of {str: str}: volume UUID to path.

        Raises:
            ConnectivityError if the node can't be reached.
            ParseError if the node answer is not a valid mapping.

        """


class NodeClient(VolumePathFetcher):
    """Read disk balancer settings from the node HTTP endpoint."""

    def __init__(
        self,
        *,
        setting: str,
        logger: Logger,
        scheme: str = "http",
        timeout: int = 10,
    ) -> None:
        self.setting = setting
        self.scheme = scheme
        self.timeout = timeout
        self.logger = logger

    def setting_url(self, address: str) -> str:
        """URL of the configured setting on the target node."""
        return f"{self.scheme}://{address}/diskbalancer/settings/{self.setting}"

    def get_setting(self, address: str) -> str:
        """Read the raw value of the configured setting.

        Raises:
            ConnectivityError if the node does not answer or answers with an error.

        """
        url = self.setting_url(address)
        self.logger.info("Reading setting %s from node %s", self.setting, address)
        self.logger.debug("Url=%s", url)
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except HTTPError as e:
            msg = f"Node {address} rejected the request. Status code: "
            msg += f"{resp.status_code}"
            self.logger.error(msg)
            self.logger.debug("Message: %s", resp.text)
            raise ConnectivityError(msg) from e
        except RequestException as e:
            msg = f"Unable to connect to node {address}: {e!s}"
            self.logger.error(msg)
            raise ConnectivityError(msg) from e
        return resp.text

    def fetch_volume_paths(self, address: str) -> dict[str, str]:
        payload = self.get_setting(address)
        try:
            return VOLUME_MAP_ADAPTER.validate_python(json.loads(payload))
        except (json.JSONDecodeError, ValidationError) as e:
            msg = f"Invalid volume mapping received from node {address}"
            self.logger.error(msg)
            self.logger.debug("Payload: %s", payload)
            raise ParseError(msg) from e


def populate_path_names(
    node: DataNode, *, fetcher: VolumePathFetcher, logger: Logger
) -> None:
    """Set the physical path of the node volumes.

    Paths are only used to make plans and reports human friendly. Volumes missing
    from the node answer keep their current path.

    Args:
        node (DataNode): node whose volumes will be updated.
        fetcher (VolumePathFetcher): object retrieving the mapping from the node.
        logger (Logger): Logger instance.

    """
    volume_map = fetcher.fetch_volume_paths(node.address)
    logger.debug("Volume paths=%s", volume_map)
    for volume_set in node.volume_sets.values():
        for volume in volume_set.volumes:
            path = volume_map.get(volume.uuid)
            if path is not None:
                volume.path = path
            else:
                logger.debug("No path found for volume %s", volume.uuid)
