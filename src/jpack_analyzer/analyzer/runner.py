"""Run jdeps and java as subprocesses."""

from __future__ import annotations

import logging
import subprocess
from typing import IO, Protocol

from jpack_analyzer.errors import JdepsExecutionError

log = logging.getLogger(__name__)


class JdepsRunner(Protocol):
    """Protocol for whatever executes a jdeps command line."""

    def run(self, command: list[str], stdout: IO) -> None:
        """Run command, writing combined stdout/stderr to *stdout*.

        Raises JdepsExecutionError if the command cannot be run at all.
        """
        ...


class SubprocessJdepsRunner:
    """Blocking subprocess runner. timeout=None waits forever."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def run(self, command: list[str], stdout: IO) -> None:
        log.debug("Executing: %s", " ".join(command))
        try:
            result = subprocess.run(
                command, stdout=stdout, stderr=subprocess.STDOUT,
                timeout=self.timeout, check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise JdepsExecutionError(
                f"{command[0]} timed out after {self.timeout}s"
            ) from e
        except OSError as e:
            raise JdepsExecutionError(f"could not run {command[0]}: {e}") from e

        # jdeps reports its own failures as Error: lines in the output
        if result.returncode != 0:
            log.warning("%s exited with status %d", command[0], result.returncode)


def list_system_modules(java_executable: str, timeout: float | None = None) -> list[str]:
    """Module names of the runtime behind java_executable, version suffix removed."""
    try:
        out = subprocess.run(
            [java_executable, "--list-modules"],
            capture_output=True, text=True, timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise JdepsExecutionError(f"could not run {java_executable} --list-modules: {e}") from e
    if out.returncode != 0:
        raise JdepsExecutionError(
            f"{java_executable} --list-modules failed ({out.returncode}): {out.stderr.strip()}"
        )

    modules: list[str] = []
    for line in out.stdout.splitlines():
        # "java.base@17.0.2"
        name = line.strip().split("@", 1)[0]
        if name and name not in modules:
            modules.append(name)
    return modules
