"""Functions to read the cluster snapshot from a JSON or YAML file."""

import json
from logging import Logger
from pathlib import Path

import yaml
from pydantic import ValidationError

from diskbalancer.exceptions import AbortProcedureError, InvalidClusterError
from diskbalancer.models.cluster import Cluster

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def read_snapshot(fname: Path, *, logger: Logger) -> dict | list:
    """Load the raw cluster snapshot content.

    Args:
        fname (Path): path to the JSON or YAML file.
        logger (Logger): Logger instance.

    Returns:
        dict | list: the parsed content.

    Raises:
        AbortProcedureError when the file does not exist.
        InvalidClusterError when the file has an unknown extension, is empty or is
        not parsable.

    """
    if fname.suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        msg = f"Unsupported cluster snapshot format: {fname}"
        logger.error(msg)
        raise InvalidClusterError(msg)

    try:
        with open(fname) as f:
            if fname.suffix in JSON_SUFFIXES:
                data = json.load(f)
            else:
                data = yaml.load(f, Loader=yaml.SafeLoader)
    except (FileNotFoundError, IsADirectoryError) as e:
        msg = f"Error reading file {fname}"
        logger.error(msg)
        raise AbortProcedureError(msg) from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Error parsing file {fname}"
        logger.error(msg)
        raise InvalidClusterError(msg) from e

    if not data:  # empty string/file
        msg = f"Empty cluster snapshot: {fname}"
        logger.error(msg)
        raise InvalidClusterError(msg)
    return data


def load_cluster(fname: Path | str | None, *, logger: Logger) -> Cluster:
    """Read the cluster topology snapshot.

    Args:
        fname (Path | str | None): path to the JSON or YAML file.
        logger (Logger): Logger instance.

    Returns:
        Cluster: the cluster snapshot.

    Raises:
        AbortProcedureError when no file is given or the file does not exist.
        InvalidClusterError when the content does not describe a valid cluster.

    """
    if fname is None:
        msg = "No cluster snapshot given. Use --uri or set CLUSTER_URI"
        logger.error(msg)
        raise AbortProcedureError(msg)

    fname = Path(fname)
    logger.info("Loading cluster snapshot from file: %s", fname)
    data = read_snapshot(fname, logger=logger)

    try:
        cluster = Cluster(**data) if isinstance(data, dict) else Cluster(nodes=data)
    except ValidationError as e:
        msg = f"Invalid cluster snapshot: {e!r}"
        logger.error(msg)
        raise InvalidClusterError(msg) from e

    logger.info("Cluster snapshot loaded. Nodes: %s", len(cluster.nodes))
    return cluster
