"""Pure renderers that turn a step into Rich text."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.text import Text

from quick_sort_studio.narration import SOURCE_LISTING
from quick_sort_studio.playback import MAX_SPEED
from quick_sort_studio.trace import Step, StepKind

BAR_CHAR = "█"
STYLE_IDLE = "grey37"
STYLE_ACTIVE = "white"
STYLE_POINTER = "bold cyan"
STYLE_PIVOT = "bold yellow"
STYLE_SORTED = "bold green"
STYLE_CODE = "grey50"
STYLE_CODE_ACTIVE = "bold green on grey11"

KIND_LABELS = {
    StepKind.INIT: "INIT",
    StepKind.PIVOT_SELECTED: "PIVOT",
    StepKind.RANGE_START: "RANGE",
    StepKind.COMPARE: "COMPARE",
    StepKind.SWAP: "SWAP",
    StepKind.PARTITION_DONE: "PARTITION",
    StepKind.COMPLETE: "COMPLETE",
}


def bar_style(step: Step, index: int) -> str:
    """Return the style for the bar at ``index``."""
    if step.kind is StepKind.COMPLETE:
        return STYLE_SORTED
    if step.active_range is None:
        return STYLE_IDLE
    low, high = step.active_range
    if not low <= index <= high:
        return STYLE_IDLE
    if step.pivot_index == index:
        return STYLE_PIVOT
    if index in step.indices:
        return STYLE_POINTER
    return STYLE_ACTIVE


def bar_heights(values: Sequence[int], height: int) -> list[int]:
    """Scale values to whole-row heights, keeping every bar at least one row."""
    if height <= 0 or not values:
        return []
    peak = max(max(values), 1)
    return [max(1, min(height, round(value * height / peak))) for value in values]


def render_bars(step: Step, height: int, *, bar_width: int = 3) -> Text:
    """Render the step's array as vertical bars with a value row beneath.

    Columns widen to fit the longest value label.
    """
    text = Text()
    heights = bar_heights(step.array, height)
    if not heights:
        return text
    width = max(bar_width, 1, *(len(str(value)) for value in step.array))
    for row in range(height):
        threshold = height - row
        for index, bar in enumerate(heights):
            cell = BAR_CHAR * width if bar >= threshold else " " * width
            text.append(cell, style=bar_style(step, index))
            text.append(" ")
        text.append("\n")
    for index, value in enumerate(step.array):
        text.append(str(value).rjust(width), style=bar_style(step, index))
        text.append(" ")
    return text


def render_listing(
    step: Optional[Step], listing: Sequence[str] = SOURCE_LISTING
) -> Text:
    """Render the reference listing with the step's line highlighted."""
    active = step.source_line if step is not None else None
    text = Text()
    for number, line in enumerate(listing):
        style = STYLE_CODE_ACTIVE if number == active else STYLE_CODE
        text.append(f"{number + 1:>2}  {line}", style=style)
        if number < len(listing) - 1:
            text.append("\n")
    return text


def render_status(
    *, cursor: int, trace_length: int, is_running: bool, speed: int, kind: StepKind
) -> Text:
    """Render the one-line playback status."""
    state = "RUNNING" if is_running else "PAUSED"
    percent = round(speed / MAX_SPEED * 100)
    return Text(
        f"[ {state.ljust(7)} ]  Step: {cursor} / {trace_length - 1}"
        f"  Speed: {percent}%  {KIND_LABELS[kind]}"
    )


def describe_step(position: int, step: Step) -> str:
    """Return a plain one-line description of a step."""
    parts = [
        f"{position:>4}",
        KIND_LABELS[step.kind].ljust(9),
        "[" + ", ".join(str(value) for value in step.array) + "]",
    ]
    if step.indices:
        parts.append("idx=" + ",".join(str(index) for index in step.indices))
    if step.pivot_index is not None:
        parts.append(f"pivot={step.pivot_index}")
    if step.active_range is not None:
        parts.append(f"range={step.active_range[0]}..{step.active_range[1]}")
    parts.append(step.narration)
    return "  ".join(parts)
