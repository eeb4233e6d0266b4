"""Instrumented quicksort that records a replayable trace of steps."""

from __future__ import annotations

from dataclasses import dataclass, field
import enum
import logging
from typing import Iterable, Iterator, Optional, Sequence, overload

from quick_sort_studio.errors import InvalidInput
from quick_sort_studio.narration import (
    DEFAULT_LOCALE,
    LINE_BOUNDARY,
    LINE_COMPARE,
    LINE_PIVOT,
    LINE_PLACE_PIVOT,
    LINE_START,
    LINE_SWAP,
    Narrator,
    get_narrator,
)

logger = logging.getLogger(__name__)


class StepKind(enum.Enum):
    """What happened in a step."""

    INIT = "init"
    PIVOT_SELECTED = "pivot"
    RANGE_START = "range_start"
    COMPARE = "compare"
    SWAP = "swap"
    PARTITION_DONE = "partition"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Step:
    """Immutable snapshot of the sort at one instant."""

    array: tuple[int, ...]
    kind: StepKind
    narration: str
    indices: tuple[int, ...] = ()
    pivot_index: Optional[int] = None
    active_range: Optional[tuple[int, int]] = None
    source_line: Optional[int] = None


class Trace(Sequence[Step]):
    """Ordered, read-only sequence of steps for one input."""

    def __init__(self, steps: Iterable[Step]) -> None:
        self._steps = tuple(steps)

    @overload
    def __getitem__(self, index: int) -> Step: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Step, ...]: ...

    def __getitem__(self, index: int | slice) -> Step | tuple[Step, ...]:
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trace):
            return NotImplemented
        return self._steps == other._steps

    def __hash__(self) -> int:
        return hash(self._steps)

    def __repr__(self) -> str:
        return f"Trace(len={len(self._steps)})"

    @property
    def first(self) -> Step:
        return self._steps[0]

    @property
    def last(self) -> Step:
        return self._steps[-1]

    @property
    def last_index(self) -> int:
        return len(self._steps) - 1


@dataclass
class TraceBuilder:
    """Working array plus the steps recorded so far."""

    array: list[int]
    narrator: Narrator
    steps: list[Step] = field(default_factory=list)

    def emit(
        self,
        kind: StepKind,
        narration: str,
        *,
        indices: tuple[int, ...] = (),
        pivot_index: Optional[int] = None,
        active_range: Optional[tuple[int, int]] = None,
        source_line: Optional[int] = None,
    ) -> None:
        self.steps.append(
            Step(
                array=tuple(self.array),
                kind=kind,
                narration=narration,
                indices=indices,
                pivot_index=pivot_index,
                active_range=active_range,
                source_line=source_line,
            )
        )

    def swap(self, a: int, b: int) -> None:
        self.array[a], self.array[b] = self.array[b], self.array[a]

    def build(self) -> Trace:
        return Trace(self.steps)


def partition(builder: TraceBuilder, low: int, high: int) -> int:
    """Lomuto partition of ``array[low:high + 1]`` around ``array[high]``."""
    arr = builder.array
    say = builder.narrator
    span = (low, high)
    pivot = arr[high]
    builder.emit(
        StepKind.PIVOT_SELECTED,
        say.describe_pivot(pivot),
        pivot_index=high,
        active_range=span,
        source_line=LINE_PIVOT,
    )

    i = low - 1
    builder.emit(
        StepKind.RANGE_START,
        say.describe_range(low, high),
        indices=(i,),
        pivot_index=high,
        active_range=span,
        source_line=LINE_BOUNDARY,
    )

    for j in range(low, high):
        builder.emit(
            StepKind.COMPARE,
            say.describe_compare(pivot, arr[j]),
            indices=(i, j),
            pivot_index=high,
            active_range=span,
            source_line=LINE_COMPARE,
        )
        if arr[j] < pivot:
            i += 1
            builder.swap(i, j)
            builder.emit(
                StepKind.SWAP,
                say.describe_swap(arr[i], i),
                indices=(i, j),
                pivot_index=high,
                active_range=span,
                source_line=LINE_SWAP,
            )

    builder.swap(i + 1, high)
    builder.emit(
        StepKind.PARTITION_DONE,
        say.describe_partition(pivot, i + 1),
        indices=(i + 1,),
        pivot_index=i + 1,
        active_range=span,
        source_line=LINE_PLACE_PIVOT,
    )
    return i + 1


def quick_sort(builder: TraceBuilder, low: int, high: int) -> None:
    """Sort ``array[low:high + 1]`` depth-first, left range before right."""
    pending = [(low, high)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pi = partition(builder, lo, hi)
        pending.append((pi + 1, hi))
        pending.append((lo, pi - 1))


def generate(values: Iterable[int], *, locale: str = DEFAULT_LOCALE) -> Trace:
    """Run quicksort over a copy of ``values`` and return every step."""
    array = list(values)
    if not array:
        raise InvalidInput("cannot trace an empty array")
    for value in array:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"array values must be integers, got {value!r}")

    builder = TraceBuilder(array=array, narrator=get_narrator(locale))
    builder.emit(
        StepKind.INIT,
        builder.narrator.describe_start(),
        source_line=LINE_START,
    )
    quick_sort(builder, 0, len(array) - 1)
    builder.emit(
        StepKind.COMPLETE,
        builder.narrator.describe_complete(),
        indices=tuple(range(len(array))),
        source_line=LINE_START,
    )
    trace = builder.build()
    logger.debug("Generated trace size=%s steps=%s", len(array), len(trace))
    return trace
