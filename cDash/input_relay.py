import logging
import queue
import time
from threading import Thread
from typing import Union

import blessed

from cDash.keys import is_key_press


class InputRelay:
    """
    Polls the terminal for key presses on a daemon thread and forwards them, in order, to the control loop's event
    queue. `put` blocks while the queue is full, so no key press is dropped. The thread is never stopped explicitly;
    it dies with the process.
    """

    def __init__(self, term: blessed.Terminal, events: queue.Queue, poll_timeout: Union[int, float] = 0.1):
        self.term = term
        self.events = events
        self.poll_timeout = poll_timeout

        self.__thread = Thread(target=self.__relay_loop, name="InputRelay")
        self.__thread.daemon = True

    def start(self) -> None:
        if self.__thread.is_alive():
            raise Exception("InputRelay - Already started!")
        self.__thread.start()

    def is_alive(self) -> bool:
        return self.__thread.is_alive()

    def poll_once(self) -> bool:
        """
        Waits up to `poll_timeout` for a keystroke and forwards it if it is a key press. Read errors count as
        "no event".

        :return: True if a key press was forwarded
        """
        try:
            keystroke = self.term.inkey(timeout=self.poll_timeout)
        except (OSError, ValueError) as e:
            logging.warning(f"InputRelay - Failed reading terminal input ({e})")
            time.sleep(self.poll_timeout)
            return False

        if not is_key_press(keystroke):
            return False

        self.events.put(keystroke)
        return True

    def __relay_loop(self) -> None:
        while True:
            self.poll_once()
