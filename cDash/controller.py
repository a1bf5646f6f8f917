import logging
import queue
import time
from typing import Optional

import blessed

from cDash.config import Config
from cDash.input_relay import InputRelay
from cDash.keys import Key, resolve_key
from cDash.models import Command
from cDash.outputs.screen import cDashRichScreen
from cDash.runtime_client import RuntimeCliClient
from cDash.state import AppState


class ControlLoop:
    """
    Drives the interactive session: refresh the container list while a listing command is highlighted, render,
    take at most one key press from the relay queue and apply it. All state mutation happens here.
    """

    def __init__(self, config: Config, client: RuntimeCliClient, screen: cDashRichScreen, events: queue.Queue,
                 state: Optional[AppState] = None):
        self.config = config
        self.client = client
        self.screen = screen
        self.events = events
        self.state = state or AppState()

        self.is_running = True
        self._refresh_pending = True
        self.last_refresh_timestamp = 0.0

    def run(self):
        while self.is_running:
            try:
                self.step()
            except KeyboardInterrupt:
                self.is_running = False

    def step(self) -> bool:
        """
        Runs one iteration of the loop.

        :return: False once the session has ended
        """
        try:
            self.refresh_containers()
            self.screen.render(self.state)

            key = self.next_key()
            if key is not None:
                self.handle_key(key)
        except Exception as e:
            logging.exception(f"ControlLoop - Unexpected error during iteration ({e})")
            self.state.status_message = f"Error: {e}"

        return self.is_running

    def is_after_refresh_window(self) -> bool:
        return time.monotonic() - self.last_refresh_timestamp >= self.config.refresh_interval

    def refresh_containers(self):
        if not self.state.highlighted_command.is_listing:
            return
        if not (self._refresh_pending or self.is_after_refresh_window()):
            return

        self._refresh_pending = False
        self.state.replace_containers(self.client.list_containers(self.state.show_all))
        self.last_refresh_timestamp = time.monotonic()

    def next_key(self) -> Optional[Key]:
        try:
            if self.config.frame_interval > 0:
                keystroke = self.events.get(timeout=self.config.frame_interval)
            else:
                keystroke = self.events.get_nowait()
        except queue.Empty:
            return None
        return resolve_key(keystroke)

    def handle_key(self, key: Key):
        if key == Key.QUIT:
            self.is_running = False
        elif key == Key.DOWN:
            self.state.move_row(1)
        elif key == Key.UP:
            self.state.move_row(-1)
        elif key == Key.RIGHT:
            self._cycle_command(1)
        elif key == Key.LEFT:
            self._cycle_command(-1)
        elif key == Key.STOP:
            self.stop_highlighted_container()
        elif key == Key.ACTIVATE:
            self.activate(self.state.highlighted_command)

    def _cycle_command(self, step: int):
        self.state.cycle_command(step)
        if self.state.highlighted_command.is_listing:
            self._refresh_pending = True

    def activate(self, command: Command):
        if command is Command.STOP:
            self.stop_highlighted_container()
        elif command is Command.PRUNE:
            self.prune_system()
        elif command is Command.LIST_RUNNING:
            self.state.select_listing(show_all=False)
            self._refresh_pending = True
        elif command is Command.LIST_ALL:
            self.state.select_listing(show_all=True)
            self._refresh_pending = True
        else:
            raise ValueError(f"Unknown command {command}")

    def stop_highlighted_container(self):
        container = self.state.highlighted_container
        if container is None:
            return

        result = self.client.stop(container.id)
        if result.ok:
            self.state.status_message = f"Stopped container {container.id}"
        else:
            self.state.status_message = f"Failed to stop container {container.id}: {result.error}"

    def prune_system(self):
        result = self.client.prune()
        if result.ok:
            self.state.status_message = "System pruned"
        else:
            self.state.status_message = f"Failed to prune system: {result.error}"


class cDashApp:
    """
    Standalone bootstrap: puts the terminal into cbreak mode on the alternate screen, starts the input relay and
    runs the control loop until the quit key. The terminal is restored on the way out.
    """

    def __init__(self, config: Config):
        self.config = config
        self.term = blessed.Terminal()
        self.events = queue.Queue(maxsize=max(self.config.event_queue_size, 1))

        self.client = RuntimeCliClient(self.config)
        self.screen = cDashRichScreen(self.config)
        self.relay = InputRelay(self.term, self.events, self.config.input_poll_timeout)
        self.loop = ControlLoop(self.config, self.client, self.screen, self.events)

    def run(self):
        with self.term.cbreak(), self.term.hidden_cursor():
            self.screen.init_screen()
            try:
                self.relay.start()
                logging.info(f"cDashApp - Session started (runtime: {self.config.runtime_binary})")
                self.loop.run()
            finally:
                self.screen.stop()
                logging.info("cDashApp - Session ended")
