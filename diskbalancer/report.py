"""Human readable summary of the planned moves."""

from diskbalancer.models.plan import NodePlan

RULE = "=" * 80
COLUMNS = (("Source Disk", 30), ("Dest.Disk", 30), ("Size", 10), ("Type", 10))


def render_plans(plans: list[NodePlan]) -> str:
    """Render a fixed width table with a row for each step of each plan."""
    lines = ["", "Plan :", "", RULE]
    lines.append("".join(title.center(width) for title, width in COLUMNS))
    for plan in plans:
        for step in plan.steps:
            values = (
                step.source_volume.path,
                step.destination_volume.path,
                step.size_string(),
                step.destination_volume.storage_type,
            )
            lines.append(
                " ".join(v.center(w) for v, (_, w) in zip(values, COLUMNS))
            )
    lines.append(RULE)
    return "\n".join(lines) + "\n"
