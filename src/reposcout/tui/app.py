"""TUI application — interactive scan console."""

from __future__ import annotations

import logging
import os
import signal
import sys

from rich.console import Console
from rich.live import Live

from reposcout.state import ScoutState
from reposcout.tui.display import ScoutDisplay
from reposcout.tui.input import KeyboardInput

logger = logging.getLogger(__name__)

# Keyboard poll timeout; also bounds how late a scan tick can fire
_KEY_TIMEOUT = 0.05


class ScoutApp:
    """Interactive TUI: type a target, press Enter, watch the scan.

    Everything runs on the main thread. The loop alternates between a short
    keyboard read and ``state.poll()``, which fires scan ticks as their
    deadlines pass.
    """

    def __init__(self, state: ScoutState) -> None:
        self._state = state
        self._display = ScoutDisplay()
        self._console = Console(stderr=True)
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        """Run the TUI main loop. Blocks until the user quits."""
        original_sigterm = signal.getsignal(signal.SIGTERM)

        def _signal_handler(signum: int, frame: object) -> None:
            self.quit()

        signal.signal(signal.SIGTERM, _signal_handler)

        try:
            with KeyboardInput() as kb:
                with Live(
                    console=self._console,
                    screen=True,
                    refresh_per_second=8,
                ) as live:
                    while self._running:
                        key = kb.read(timeout=_KEY_TIMEOUT)
                        if key is not None:
                            self.dispatch_key(key)
                        self._state.poll()

                        size = os.get_terminal_size(sys.stderr.fileno())
                        live.update(
                            self._display.render(
                                self._state, height=size.lines, width=size.columns
                            )
                        )
        except KeyboardInterrupt:
            self.quit()
        except Exception:
            logger.exception("TUI error")
        finally:
            signal.signal(signal.SIGTERM, original_sigterm)

    def quit(self) -> None:
        self._running = False
        self._state.session.stop()

    def dispatch_key(self, key: str) -> None:
        state = self._state

        if key == "escape":
            self.quit()
            return

        # The input is locked while a scan runs
        if state.is_scanning:
            return

        if key == "enter":
            state.on_start_scan()
        elif key in ("tab", "down"):
            state.next_example()
        elif key == "up":
            state.previous_example()
        elif key == "backspace":
            state.on_query_change(state.query[:-1])
        elif key == "clear":
            state.on_query_change("")
        elif len(key) == 1 and key.isprintable():
            state.on_query_change(state.query + key)
