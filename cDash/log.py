import logging

from cDash.config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(config: Config) -> None:
    """
    Configures the root logger. The terminal belongs to the TUI, so records only go to `config.log_file` when it is
    set and are discarded otherwise.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.log_level, logging.INFO))

    if config.log_file:
        handler = logging.FileHandler(config.log_file, mode="w")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
