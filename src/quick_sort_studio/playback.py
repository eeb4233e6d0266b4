"""Timeline controller that replays a trace step by step."""

from __future__ import annotations

import asyncio
import functools
from dataclasses import dataclass
import logging
from typing import Callable, Iterable, Optional, Protocol

from quick_sort_studio.narration import DEFAULT_LOCALE
from quick_sort_studio.trace import Step, Trace, generate

logger = logging.getLogger(__name__)

MIN_SPEED = 100
MAX_SPEED = 980
DEFAULT_SPEED = 700


class TimerHandle(Protocol):
    def stop(self) -> None: ...


class TimerHost(Protocol):
    """Anything that can schedule a one-shot callback, e.g. a Textual ``App``."""

    def set_timer(
        self, delay: float, callback: Callable[[], None]
    ) -> TimerHandle: ...


@dataclass
class PlaybackState:
    """Mutable playback position for one trace."""

    cursor: int = 0
    is_running: bool = False
    speed: int = DEFAULT_SPEED


@dataclass(frozen=True)
class _Timeline:
    trace: Trace
    state: PlaybackState


def clamp_speed(speed: int) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def tick_period(speed: int) -> float:
    """Return the auto-advance period in seconds for a speed value."""
    return (1001 - speed) / 1000.0


class PlaybackController:
    """Cursor over a trace with manual stepping and timer-driven playback."""

    def __init__(
        self,
        host: TimerHost,
        trace: Trace,
        *,
        speed: int = DEFAULT_SPEED,
        locale: str = DEFAULT_LOCALE,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self._host = host
        self._locale = locale
        self._timeline = _Timeline(trace, PlaybackState(speed=clamp_speed(speed)))
        self._timer: Optional[TimerHandle] = None
        self._generation = 0
        self._on_change = on_change

    # --- Observers ---
    @property
    def trace(self) -> Trace:
        return self._timeline.trace

    @property
    def cursor(self) -> int:
        return self._timeline.state.cursor

    @property
    def is_running(self) -> bool:
        return self._timeline.state.is_running

    @property
    def speed(self) -> int:
        return self._timeline.state.speed

    @property
    def trace_length(self) -> int:
        return len(self._timeline.trace)

    @property
    def current_step(self) -> Step:
        timeline = self._timeline
        return timeline.trace[timeline.state.cursor]

    @property
    def at_end(self) -> bool:
        timeline = self._timeline
        return timeline.state.cursor >= timeline.trace.last_index

    # --- Operations ---
    def step_forward(self) -> None:
        state = self._timeline.state
        state.cursor = min(state.cursor + 1, self._timeline.trace.last_index)
        if self.at_end and state.is_running:
            logger.debug("Reached end of trace, stopping playback")
            self._stop_running()
        self._notify()

    def step_backward(self) -> None:
        state = self._timeline.state
        state.cursor = max(state.cursor - 1, 0)
        self._notify()

    def play(self) -> None:
        state = self._timeline.state
        if state.is_running or self.at_end:
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("Playback requested without a running event loop")
            return
        state.is_running = True
        self._schedule_next()
        self._notify()

    def pause(self) -> None:
        was_running = self.is_running
        self._stop_running()
        if was_running:
            self._notify()

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.play()

    def set_speed(self, speed: int) -> None:
        # The pending tick keeps its period; the new one applies from the next.
        self._timeline.state.speed = clamp_speed(speed)
        self._notify()

    def reset(self, values: Iterable[int]) -> None:
        """Replace the trace with one for ``values`` and rewind to the start."""
        trace = generate(values, locale=self._locale)
        self._stop_running()
        speed = self._timeline.state.speed
        self._timeline = _Timeline(trace, PlaybackState(speed=speed))
        logger.info("Playback reset steps=%s", len(trace))
        self._notify()

    # --- Internal helpers ---
    def _stop_running(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self._timeline.state.is_running = False

    def _schedule_next(self) -> None:
        delay = tick_period(self._timeline.state.speed)
        self._timer = self._host.set_timer(
            delay, functools.partial(self._tick, self._generation)
        )

    def _tick(self, generation: int) -> None:
        # Ticks scheduled before the last pause or reset are ignored.
        if generation != self._generation or not self.is_running:
            return
        self._timer = None
        self.step_forward()
        if self.is_running:
            self._schedule_next()

    def _notify(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change()
        except Exception:
            logger.exception("Playback change listener failed")
