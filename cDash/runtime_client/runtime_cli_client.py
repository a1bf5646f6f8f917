import logging
import subprocess
from typing import List

from cDash.config import Config
from cDash.decoder import decode_records
from cDash.models import ActionResult, ContainerRecord

LIST_FORMAT = "{{json .}}"


class RuntimeCliClient:
    """
    This class is a wrapper around the container runtime CLI. Every call spawns the binary, waits for it to exit and
    converts the outcome into records or an ActionResult. Nothing is raised to the caller.
    """

    def __init__(self, config: Config):
        self.__config = config

    def __run(self, *args: str) -> subprocess.CompletedProcess:
        """
        Runs the runtime binary with the given arguments and waits for it to exit.

        :raises OSError: If the binary could not be started
        """
        cmd = [self.__config.runtime_binary, *args]
        logging.debug(f"RuntimeCliClient - Running {' '.join(cmd)}")
        return subprocess.run(cmd, capture_output=True, encoding="utf-8", errors="replace")

    @staticmethod
    def __describe_failure(result: subprocess.CompletedProcess) -> str:
        stderr = (result.stderr or "").strip()
        if stderr:
            return f"exit status {result.returncode}: {stderr}"
        return f"exit status {result.returncode}"

    def __action(self, name: str, *args: str) -> ActionResult:
        try:
            result = self.__run(*args)
        except OSError as e:
            logging.error(f"RuntimeCliClient - Failed to start {name} ({e})")
            return ActionResult.failure(str(e))

        if result.returncode != 0:
            error = self.__describe_failure(result)
            logging.error(f"RuntimeCliClient - {name} failed ({error})")
            return ActionResult.failure(error)

        logging.info(f"RuntimeCliClient - {name} succeeded")
        return ActionResult.success()

    def list_containers(self, show_all: bool) -> List[ContainerRecord]:
        """
        Returns the containers reported by `ps`, or an empty list if the runtime could not be queried.

        :param show_all: Set to True to include containers that are not running
        :return: The decoded records in the order the runtime reported them
        """
        args = ["ps"]
        if show_all:
            args.append("-a")
        args.extend(["--format", LIST_FORMAT])

        try:
            result = self.__run(*args)
        except OSError as e:
            logging.error(f"RuntimeCliClient - Failed to list containers ({e})")
            return []

        if result.returncode != 0:
            logging.error(f"RuntimeCliClient - Failed to list containers ({self.__describe_failure(result)})")
            return []

        return decode_records(result.stdout or "")

    def stop(self, container_id: str) -> ActionResult:
        return self.__action(f"stop {container_id}", "stop", container_id)

    def prune(self) -> ActionResult:
        return self.__action("system prune", "system", "prune", "-f")
