import json
from logging import Logger
from unittest.mock import Mock, patch

import pytest
from pytest_cases import parametrize_with_cases
from requests.exceptions import (
    ChunkedEncodingError,
    ConnectionError,
    HTTPError,
    InvalidURL,
    Timeout,
    TooManyRedirects,
)

from diskbalancer.exceptions import ConnectivityError, ParseError
from diskbalancer.models.node import DataNode
from diskbalancer.node_client import NodeClient, populate_path_names
from tests.stubs import StubFetcher
from tests.utils import node_dict, random_lower_string, volume_dict


class CaseConnectionError:
    def case_connection_error(self) -> Exception:
        return ConnectionError()

    def case_timeout(self) -> Exception:
        return Timeout()

    def case_too_many_redirects(self) -> Exception:
        return TooManyRedirects()

    def case_invalid_url(self) -> Exception:
        return InvalidURL()

    def case_chunked_encoding(self) -> Exception:
        return ChunkedEncodingError()


class CaseInvalidPayload:
    def case_not_json(self) -> str:
        return "{not json"

    def case_list(self) -> str:
        return json.dumps(["a", "b"])

    def case_non_string_values(self) -> str:
        return json.dumps({"uuid": {"path": "/data"}})

    def case_null(self) -> str:
        return "null"


@pytest.fixture
def client(logger: Logger) -> NodeClient:
    return NodeClient(setting="DiskBalancerVolumeName", logger=logger, timeout=3)


def test_setting_url(client: NodeClient) -> None:
    assert (
        client.setting_url("10.0.0.1:9867")
        == "http://10.0.0.1:9867/diskbalancer/settings/DiskBalancerVolumeName"
    )


@patch("diskbalancer.node_client.requests.get")
def test_fetch_volume_paths(mock_get: Mock, client: NodeClient) -> None:
    volume_map = {"uuid-1": "/data/disk1", "uuid-2": "/data/disk2"}
    mock_get.return_value.text = json.dumps(volume_map)

    assert client.fetch_volume_paths("10.0.0.1:9867") == volume_map
    mock_get.assert_called_once_with(
        client.setting_url("10.0.0.1:9867"), timeout=3
    )


@patch("diskbalancer.node_client.requests.get")
@parametrize_with_cases("error", cases=CaseConnectionError)
def test_unreachable_node(mock_get: Mock, client: NodeClient, error: Exception) -> None:
    mock_get.side_effect = error
    with pytest.raises(ConnectivityError):
        client.fetch_volume_paths("10.0.0.1:9867")


@patch("diskbalancer.node_client.requests.get")
def test_http_error(mock_get: Mock, client: NodeClient) -> None:
    mock_get.return_value.raise_for_status.side_effect = HTTPError()
    mock_get.return_value.status_code = 500
    with pytest.raises(ConnectivityError):
        client.fetch_volume_paths("10.0.0.1:9867")


@patch("diskbalancer.node_client.requests.get")
@parametrize_with_cases("payload", cases=CaseInvalidPayload)
def test_invalid_payload(mock_get: Mock, client: NodeClient, payload: str) -> None:
    mock_get.return_value.text = payload
    with pytest.raises(ParseError):
        client.fetch_volume_paths("10.0.0.1:9867")


def test_populate_path_names(unbalanced_node: DataNode, logger: Logger) -> None:
    first, second = unbalanced_node.volumes
    fetcher = StubFetcher({first.uuid: "/data/disk1", second.uuid: "/data/disk2"})

    populate_path_names(unbalanced_node, fetcher=fetcher, logger=logger)

    assert fetcher.addresses == [f"{unbalanced_node.ip}:{unbalanced_node.port}"]
    assert [v.path for v in unbalanced_node.volumes] == ["/data/disk1", "/data/disk2"]


def test_missing_volumes_keep_empty_path(
    unbalanced_node: DataNode, logger: Logger
) -> None:
    first, second = unbalanced_node.volumes
    fetcher = StubFetcher({first.uuid: "/data/disk1", random_lower_string(): "/x"})

    populate_path_names(unbalanced_node, fetcher=fetcher, logger=logger)

    assert first.path == "/data/disk1"
    assert second.path == ""


def test_populate_is_idempotent(unbalanced_node: DataNode, logger: Logger) -> None:
    first, second = unbalanced_node.volumes
    fetcher = StubFetcher({first.uuid: "/data/disk1", second.uuid: "/data/disk2"})

    populate_path_names(unbalanced_node, fetcher=fetcher, logger=logger)
    before = unbalanced_node.model_dump()
    populate_path_names(unbalanced_node, fetcher=fetcher, logger=logger)

    assert unbalanced_node.model_dump() == before
    assert first.path == "/data/disk1"


def test_fetcher_errors_propagate(unbalanced_node: DataNode, logger: Logger) -> None:
    fetcher = Mock(spec=StubFetcher)
    fetcher.fetch_volume_paths.side_effect = ConnectivityError("unreachable")
    with pytest.raises(ConnectivityError):
        populate_path_names(unbalanced_node, fetcher=fetcher, logger=logger)
    assert all(v.path == "" for v in unbalanced_node.volumes)


@patch("diskbalancer.node_client.requests.get")
def test_ipv6_node_address(mock_get: Mock, client: NodeClient, logger: Logger) -> None:
    volume = volume_dict()
    node = DataNode(**{**node_dict(volume), "ip": "fe80::1", "port": 9867})
    mock_get.return_value.text = json.dumps({volume["uuid"]: "/data/disk1"})

    assert node.address == "[fe80::1]:9867"
    populate_path_names(node, fetcher=client, logger=logger)

    mock_get.assert_called_once_with(
        "http://[fe80::1]:9867/diskbalancer/settings/DiskBalancerVolumeName",
        timeout=3,
    )
    assert node.volumes[0].path == "/data/disk1"


def test_ipv4_node_address(unbalanced_node: DataNode) -> None:
    assert unbalanced_node.address == f"{unbalanced_node.ip}:{unbalanced_node.port}"
