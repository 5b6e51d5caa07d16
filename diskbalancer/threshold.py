"""Resolution of the percentage skew tolerated between disks."""

from logging import Logger

DEFAULT_THRESHOLD = 10.0


def is_valid_threshold(value: float | None) -> bool:
    """Return True if value is a percentage in the (0, 100] range."""
    return value is not None and 0 < value <= 100


def resolve_threshold(
    user_value: float | None,
    cluster_default: float,
    *,
    logger: Logger | None = None,
) -> float:
    """Return the threshold percentage to use to compute the plan.

    A missing or out of range user value is silently replaced by the cluster default.
    When the cluster default is out of range too, use DEFAULT_THRESHOLD.

    Args:
        user_value (float | None): value received from the command line.
        cluster_default (float): value from the application settings.
        logger (Logger | None): Logger instance.

    Returns:
        float: a percentage in the (0, 100] range.

    """
    if is_valid_threshold(user_value):
        value = user_value
    elif is_valid_threshold(cluster_default):
        value = cluster_default
    else:
        if logger is not None:
            logger.warning(
                "Invalid default threshold %s. Using %s",
                cluster_default,
                DEFAULT_THRESHOLD,
            )
        value = DEFAULT_THRESHOLD
    if logger is not None:
        logger.debug("Threshold percentage is %s", value)
    return float(value)
