import importlib.util
import os
import subprocess
import unittest
from unittest import mock

from cDash.config import Config

SCRIPT = os.path.join(os.path.dirname(__file__), "..", "scripts", "boot_many_containers.py")


def load_script():
    spec = importlib.util.spec_from_file_location("boot_many_containers", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestBootManyContainers(unittest.TestCase):

    def setUp(self):
        self.script = load_script()

    def test_starts_numbered_containers(self):
        with mock.patch.object(self.script.subprocess, "run",
                               return_value=subprocess.CompletedProcess([], 0, "", "")) as run:
            failures = self.script.boot_containers(Config(runtime_binary="podman"), count=3)

        self.assertEqual(failures, 0)
        self.assertEqual(run.call_count, 3)
        self.assertEqual(run.call_args_list[0][0][0],
                         ["podman", "run", "-d", "--name", "test_container_1", "alpine", "sleep", "3600"])
        self.assertEqual(run.call_args_list[2][0][0][4], "test_container_3")

    def test_counts_failures(self):
        results = [subprocess.CompletedProcess([], 0, "", ""),
                   subprocess.CompletedProcess([], 125, "", "Conflict. The container name is already in use")]
        with mock.patch.object(self.script.subprocess, "run", side_effect=results):
            self.assertEqual(self.script.boot_containers(Config(), count=2), 1)


if __name__ == "__main__":
    unittest.main()
