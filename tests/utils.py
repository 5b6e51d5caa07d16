import string
from ipaddress import IPv4Address
from random import choices, randint
from typing import Any
from uuid import uuid4

GiB = 1024**3


def random_lower_string() -> str:
    """Return a generic random string."""
    return "".join(choices(string.ascii_lowercase, k=32))


def random_ip() -> IPv4Address:
    return IPv4Address(randint(1, 2**32 - 2))


def random_port() -> int:
    return randint(1024, 65535)


def volume_dict(
    *, capacity: int = 100 * GiB, used: int = 0, storage_type: str = "DISK"
) -> dict[str, Any]:
    return {
        "uuid": str(uuid4()),
        "storage_type": storage_type,
        "capacity": capacity,
        "used": used,
    }


def node_dict(*volumes: dict[str, Any], storage_type: str = "DISK") -> dict[str, Any]:
    return {
        "uuid": str(uuid4()),
        "ip": str(random_ip()),
        "port": random_port(),
        "hostname": random_lower_string(),
        "volume_sets": {
            storage_type: {"storage_type": storage_type, "volumes": list(volumes)}
        },
    }
