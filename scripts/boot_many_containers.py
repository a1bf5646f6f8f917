"""
Starts a batch of idle alpine containers so the dashboard has something to list, stop and prune.

Usage: python scripts/boot_many_containers.py [count]
"""
import logging
import subprocess
import sys

from cDash.config import Config

DEFAULT_COUNT = 50


def boot_containers(config: Config, count: int = DEFAULT_COUNT) -> int:
    """
    Runs `count` detached `alpine sleep 3600` containers named test_container_<n>.

    :return: The number of containers that failed to start
    """
    failures = 0
    for i in range(1, count + 1):
        cmd = [config.runtime_binary, "run", "-d", "--name", f"test_container_{i}", "alpine", "sleep", "3600"]
        result = subprocess.run(cmd, capture_output=True, encoding="utf-8", errors="replace")
        if result.returncode != 0:
            failures += 1
            logging.error(f"boot_many_containers - test_container_{i} failed ({result.stderr.strip()})")
    return failures


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    count = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_COUNT
    sys.exit(1 if boot_containers(Config.load_env_from_file(), count) else 0)
