"""
Formatting helpers shared by entity renderers.
"""

CONTINUATION_INDENT = "  "


def field_line(label: str, value: str) -> str:
    """
    Render a ``Label: value`` line.

    Values spanning several lines continue on lines indented by
    ``CONTINUATION_INDENT`` so a rendered field never produces a bare
    protocol line of its own.
    """
    first, *rest = str(value).splitlines() or [""]
    lines = [f"{label}: {first}"]
    lines.extend(f"{CONTINUATION_INDENT}{line}" for line in rest)
    return "\n".join(lines)
