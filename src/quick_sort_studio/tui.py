"""Textual-based TUI for Quick Sort Studio."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

try:
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, Vertical
    from textual.css.query import NoMatches
    from textual import events
    from textual.widgets import Footer, Header, Static
except Exception as exc:  # pragma: no cover - depends on environment
    raise RuntimeError(
        "Textual is required for the TUI. Install the 'textual' dependency."
    ) from exc

from quick_sort_studio.config import AppConfig, load_config, save_config
from quick_sort_studio.logging_setup import set_console_level
from quick_sort_studio.playback import PlaybackController
from quick_sort_studio.sampling import values_for_config
from quick_sort_studio.trace import generate
from quick_sort_studio.ui.step_rendering import (
    render_bars,
    render_listing,
    render_status,
)

logger = logging.getLogger(__name__)

SPEED_STEP = 40
DEFAULT_BAR_ROWS = 10


class QuickSortStudioApp(App):
    """Step-by-step quicksort visualizer."""

    TITLE = "Quick Sort Studio"
    CSS = """
    #body { height: 1fr; }
    #stage { width: 2fr; }
    #bars { height: 1fr; border: round $accent; padding: 0 1; }
    #narration { height: auto; min-height: 3; border: round $accent; padding: 0 1; }
    #status { height: 1; padding: 0 1; }
    #listing { width: 1fr; border: round $accent; padding: 0 1; }
    """

    BINDINGS = [
        Binding("space", "toggle_playback", "Play/Pause"),
        Binding("right", "step_forward", "Step"),
        Binding("left", "step_backward", "Back"),
        Binding("r", "reset", "New Array"),
        Binding("plus", "speed_up", "Faster"),
        Binding("minus", "speed_down", "Slower"),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(
        self,
        *,
        config: Optional[AppConfig] = None,
        values: Optional[Sequence[int]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__()
        self._config = config or load_config()
        self._rng = rng or random.Random()
        initial = (
            list(values)
            if values is not None
            else values_for_config(self._config, rng=self._rng)
        )
        self.controller = PlaybackController(
            self,
            generate(initial, locale=self._config.locale),
            speed=self._config.speed,
            locale=self._config.locale,
            on_change=self._refresh_view,
        )
        self._view_ready = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Horizontal(id="body"):
            with Vertical(id="stage"):
                yield Static(id="bars")
                yield Static(id="narration", markup=False)
                yield Static(id="status", markup=False)
            yield Static(id="listing")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#bars", Static).border_title = "Divide & Conquer"
        self.query_one("#listing", Static).border_title = "Python"
        self._view_ready = True
        self._refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        del event
        self._refresh_view()

    # --- Rendering ---
    def _bar_rows(self, widget: Static) -> int:
        rows = widget.content_size.height - 1
        return rows if rows > 0 else DEFAULT_BAR_ROWS

    def _refresh_view(self) -> None:
        if not self._view_ready:
            return
        try:
            bars = self.query_one("#bars", Static)
            narration = self.query_one("#narration", Static)
            status = self.query_one("#status", Static)
            listing = self.query_one("#listing", Static)
        except NoMatches:
            return
        controller = self.controller
        step = controller.current_step
        bars.update(render_bars(step, self._bar_rows(bars)))
        narration.update(step.narration)
        status.update(
            render_status(
                cursor=controller.cursor,
                trace_length=controller.trace_length,
                is_running=controller.is_running,
                speed=controller.speed,
                kind=step.kind,
            )
        )
        listing.update(render_listing(step))

    # --- Actions ---
    def action_toggle_playback(self) -> None:
        self.controller.toggle()

    def action_step_forward(self) -> None:
        self.controller.step_forward()

    def action_step_backward(self) -> None:
        self.controller.step_backward()

    def action_reset(self) -> None:
        values = values_for_config(self._config, rng=self._rng)
        logger.info("New array %s", values)
        self.controller.reset(values)

    def action_speed_up(self) -> None:
        self.controller.set_speed(self.controller.speed + SPEED_STEP)

    def action_speed_down(self) -> None:
        self.controller.set_speed(self.controller.speed - SPEED_STEP)

    def action_quit_app(self) -> None:
        self.controller.pause()
        self._save_config()
        self.exit()

    def _save_config(self) -> None:
        cfg = self._config
        self._config = AppConfig(
            array_size=cfg.array_size,
            speed=self.controller.speed,
            min_value=cfg.min_value,
            max_value=cfg.max_value,
            locale=cfg.locale,
        )
        try:
            save_config(self._config)
        except OSError:
            logger.exception("Failed to save config")


def run_tui(config: AppConfig, values: Optional[Sequence[int]] = None) -> int:
    """Run the TUI and return an exit code."""
    logger.info("TUI start size=%s speed=%s", config.array_size, config.speed)
    set_console_level(logging.WARNING)
    app = QuickSortStudioApp(config=config, values=values)
    app.run()
    logger.info("TUI exit")
    return 0
