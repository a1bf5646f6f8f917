from enum import Enum

from blessed.keyboard import Keystroke


class Key(Enum):
    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    STOP = "stop"
    ACTIVATE = "activate"
    OTHER = "other"


sequence_map = {
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_ENTER": Key.ACTIVATE,
}

char_map = {
    "q": Key.QUIT,
    "Q": Key.QUIT,
    "s": Key.STOP,
    "\n": Key.ACTIVATE,
    "\r": Key.ACTIVATE,
}

# Shown in the footer, in display order
key_hints = {
    "q": "Quit",
    "↑/↓": "Row",
    "←/→": "Command",
    "Enter": "Run",
    "s": "Stop",
}


def resolve_key(keystroke: Keystroke) -> Key:
    if keystroke.is_sequence:
        return sequence_map.get(keystroke.name, Key.OTHER)
    return char_map.get(str(keystroke), Key.OTHER)


def is_key_press(keystroke: Keystroke) -> bool:
    """
    True for printable characters and named keys. Timeouts are empty and mouse reports or other unknown escape
    sequences have no name.
    """
    if not keystroke:
        return False
    if keystroke.is_sequence:
        return keystroke.name is not None
    return True
