"""Application utilities."""

from datetime import datetime
from typing import Any

BINARY_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB"]


def find_duplicates(items: list[Any], attr: str | None = None) -> list[Any]:
    """Find duplicate items in a list.

    Optionally filter items by attribute.

    Args:
        items (list of Any): List of items to inspects
        attr (str | None): Optional to key to use as reference for duplicate values in
            the list.

    Returns:
        list (Any): the original list.

    Raises:
        ValueError if at least one value is repeated.

    """
    values = [getattr(i, attr) for i in items] if attr else items
    seen = set()
    dupes = [str(x) for x in values if x in seen or seen.add(x)]
    if len(dupes) > 0:
        if attr:
            msg = f"There are multiple items with identical {attr}: {','.join(dupes)}"
        else:
            msg = f"There are multiple identical items: {','.join(dupes)}"
        raise ValueError(msg)
    return items


def human_bytes(n: int) -> str:
    """Convert bytes to human-readable format using binary units."""
    if n < 1024:
        return f"{n} B"
    value = float(n)
    for unit in BINARY_UNITS[1:]:
        value /= 1024
        if value < 1024 or unit == BINARY_UNITS[-1]:
            break
    return f"{value:.2f} {unit}"


def timestamped_dir_name(now: datetime | None = None) -> str:
    """Return the name of the folder hosting the artifacts of a run.

    Args:
        now (datetime | None): reference time. Defaults to the current local time.

    Returns:
        str: a name like '2024-Jan-31-12-00-59'.

    """
    now = now or datetime.now()
    return now.strftime("%Y-%b-%d-%H-%M-%S")
