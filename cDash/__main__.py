import logging
import sys

from cDash.config import Config
from cDash.controller import cDashApp
from cDash.log import setup_logging


def main() -> int:
    try:
        config = Config.load_env_from_file()
        setup_logging(config)
        cDashApp(config).run()
    except Exception as e:
        logging.exception("cDash - Exiting on fatal error")
        print(f"cDash: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
