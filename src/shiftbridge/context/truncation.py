"""Head/tail-preserving truncation for agent-visible context.

Pure function, no knowledge of word or line boundaries.  The output is
never longer than the requested limit, and text that already fits is
returned as the identical object.
"""

from __future__ import annotations

import math

TRUNCATION_MARKER = "\n...[truncated]...\n"


def truncate_context_value(value: str, max_length: int) -> str:
    """Bound *value* to *max_length* characters.

    Keeps the head and the tail around :data:`TRUNCATION_MARKER`; the head
    gets the extra character when the remaining budget is odd.  Budgets
    too small for the marker plus two characters fall back to a plain
    prefix cut.
    """
    if len(value) <= max_length:
        return value

    if max_length <= len(TRUNCATION_MARKER) + 2:
        return value[: max(0, max_length)]

    remaining = max_length - len(TRUNCATION_MARKER)
    head_length = math.ceil(remaining / 2)
    tail_length = max(0, remaining - head_length)
    tail = value[len(value) - tail_length :] if tail_length else ""

    return f"{value[:head_length]}{TRUNCATION_MARKER}{tail}"
