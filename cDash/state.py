from typing import List, Optional, Sequence, Tuple

from cDash.models import Command, ContainerRecord

COMMANDS: Tuple[Command, ...] = (Command.LIST_RUNNING, Command.LIST_ALL, Command.STOP, Command.PRUNE)


class AppState:
    """
    The in-memory snapshot the control loop mutates and the screen reads. Owned by a single thread.
    """

    def __init__(self):
        self.commands: Tuple[Command, ...] = COMMANDS
        self.command_index = 0
        self.containers: List[ContainerRecord] = []
        self.row_index = 0
        self.show_all = False
        self.status_message = ""

    @property
    def highlighted_command(self) -> Command:
        return self.commands[self.command_index]

    @property
    def highlighted_container(self) -> Optional[ContainerRecord]:
        if not self.containers:
            return None
        return self.containers[self.row_index]

    def cycle_command(self, step: int) -> None:
        self.command_index = (self.command_index + step) % len(self.commands)

    def move_row(self, step: int) -> None:
        last = max(len(self.containers) - 1, 0)
        self.row_index = min(max(self.row_index + step, 0), last)

    def replace_containers(self, containers: Sequence[ContainerRecord]) -> None:
        self.containers = list(containers)
        # The list may have shrunk since the last refresh
        self.move_row(0)

    def select_listing(self, show_all: bool) -> None:
        self.show_all = show_all
        self.row_index = 0
