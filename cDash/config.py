import logging
import os

from dotenv import load_dotenv


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        logging.warning(f"Config - Invalid value for {name} ({value}), using {default}")
        return default


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        logging.warning(f"Config - Invalid value for {name} ({value}), using {default}")
        return default


class Config:
    def __init__(self, runtime_binary="docker", refresh_interval=0.0, frame_interval=0.05, input_poll_timeout=0.1,
                 event_queue_size=100, log_file=None, log_level="INFO", tui_header_color="bold yellow",
                 selected_row_style="bold yellow", selected_command_style="bold yellow",
                 status_style="white on blue"):
        # Container runtime options
        self.runtime_binary = runtime_binary

        # Control loop options
        self.refresh_interval = refresh_interval
        self.frame_interval = frame_interval
        self.input_poll_timeout = input_poll_timeout
        self.event_queue_size = event_queue_size

        # Logging options
        self.log_file = log_file
        self.log_level = log_level

        # TUI options
        self.tui_header_color = tui_header_color
        self.selected_row_style = selected_row_style
        self.selected_command_style = selected_command_style
        self.status_style = status_style

    @staticmethod
    def load_env_from_file(path: str = None):
        if path:
            load_dotenv(path)
        else:
            load_dotenv()

        config = {
            # Container runtime options
            'runtime_binary': os.getenv("CDASH_RUNTIME_BINARY", "docker"),

            # Control loop options
            'refresh_interval': _get_float("CDASH_REFRESH_INTERVAL", 0.0),
            'frame_interval': _get_float("CDASH_FRAME_INTERVAL", 0.05),
            'input_poll_timeout': _get_float("CDASH_INPUT_POLL_TIMEOUT", 0.1),
            'event_queue_size': _get_int("CDASH_EVENT_QUEUE_SIZE", 100),

            # Logging options
            'log_file': os.getenv("CDASH_LOG_FILE") or None,
            'log_level': os.getenv("CDASH_LOG_LEVEL", "INFO").upper(),

            # TUI options
            'tui_header_color': os.getenv("TUI_HEADER_COLOR", "bold yellow"),
            'selected_row_style': os.getenv("SELECTED_ROW_STYLE", "bold yellow"),
            'selected_command_style': os.getenv("SELECTED_COMMAND_STYLE", "bold yellow"),
            'status_style': os.getenv("STATUS_STYLE", "white on blue"),
        }

        return Config(**config)
