"""User defined limits applied to the planner output."""

from logging import Logger

from diskbalancer.models.plan import NodePlan


def apply_plan_params(
    plans: list[NodePlan],
    *,
    bandwidth: int = 0,
    max_error: int = 0,
    logger: Logger | None = None,
) -> list[NodePlan]:
    """Override bandwidth and max disk errors of every step.

    Values equal to 0 leave the planner choice untouched. Input plans are not
    modified.

    Args:
        plans (list of NodePlan): plans returned by the planner.
        bandwidth (int): max bandwidth to use while moving data.
        max_error (int): max disk errors to tolerate.
        logger (Logger | None): Logger instance.

    Returns:
        list of NodePlan: plans with the overridden steps.

    """
    overrides = {}
    if bandwidth > 0:
        overrides["bandwidth"] = bandwidth
    if max_error > 0:
        overrides["max_disk_errors"] = max_error
    if logger is not None and overrides:
        logger.debug("Setting step parameters %s", overrides)

    return [
        plan.model_copy(
            update={"steps": [s.model_copy(update=overrides) for s in plan.steps]}
        )
        for plan in plans
    ]
