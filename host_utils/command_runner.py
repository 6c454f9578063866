# host_utils/command_runner.py
"""
Run commands through the platform shell and capture their combined output.

    runner = CommandRunner()
    runner.run_command("adb devices")          # wait up to the default timeout
    runner.run_with_timeout(30, "npm test")    # wait up to 30 seconds
    runner.run(False, 0, "emulator -avd x")    # fire and forget, returns None
"""

from __future__ import annotations

import subprocess
import threading
import time
from typing import List, Optional, Sequence, Union

import psutil

from .debug_utils import get_logger
from .errors import InvalidArgumentError
from .results import CommandResult
from .settings import HostSettings, get_settings
from .shells import ShellStrategy, shell_for

KILL_GRACE_SECONDS = 3


def _drain(stream, sink: List[str], failures: List[BaseException]) -> None:
    """Read `stream` to EOF, storing each line with a single trailing newline."""
    try:
        for line in stream:
            sink.append(line.rstrip("\n") + "\n")
    except (OSError, ValueError) as e:
        failures.append(e)
    finally:
        stream.close()


class CommandRunner:
    """
    Launches commands inside the platform shell (cmd.exe /C or /bin/bash -l -c).

    Launch and I/O failures never raise: they are logged and reported as a None
    output. Only malformed arguments raise InvalidArgumentError.
    """

    def __init__(
        self,
        settings: Optional[HostSettings] = None,
        shell: Optional[ShellStrategy] = None,
        kill_on_timeout: bool = False,
        bounded_drain: bool = False,
    ):
        self.settings = settings or get_settings()
        self.shell = shell or shell_for(self.settings.platform_kind)
        self.kill_on_timeout = kill_on_timeout
        self.bounded_drain = bounded_drain
        self.log = get_logger(self.settings.log_tag)

    def _validate(self, command, timeout) -> List[str]:
        if isinstance(command, str):
            command = [command]
        tokens = list(command or ())
        if not tokens:
            raise InvalidArgumentError("At least one command token is required")
        for token in tokens:
            if not isinstance(token, str):
                raise InvalidArgumentError(f"Command tokens must be strings, got {token!r}")
        if timeout < 0:
            raise InvalidArgumentError(f"Timeout must be >= 0 seconds, got {timeout}")
        return tokens

    def execute(
        self,
        command: Union[str, Sequence[str]],
        wait: bool = True,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        """
        Run `command` and describe the outcome.

        When waiting, the output pipe is drained to EOF before waiting for the
        process to exit, and `timeout` bounds only the wait. With bounded_drain
        the timeout also bounds the drain, for children that keep the pipe open
        after they stop writing. A timed-out process is left running unless
        kill_on_timeout was requested.
        """
        if timeout is None:
            timeout = self.settings.default_timeout
        tokens = self._validate(command, timeout)
        argv = self.shell.build_command_line(tokens)
        display = " ".join(tokens)

        try:
            if not wait:
                subprocess.Popen(argv, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
                self.log.debug(f"Start command: {display}")
                return CommandResult(argv)

            proc = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            self.log.warning(f"Failed to launch command '{display}': {e}")
            return CommandResult(argv, error=f"launch failed: {e}")

        lines: List[str] = []
        failures: List[BaseException] = []
        reader = threading.Thread(target=_drain, args=(proc.stdout, lines, failures), daemon=True)
        reader.start()
        if self.bounded_drain:
            deadline = time.monotonic() + timeout
            reader.join(timeout)
            timed_out = reader.is_alive()
            remaining = max(0.0, deadline - time.monotonic())
        else:
            reader.join()
            timed_out = False
            remaining = timeout

        if not timed_out:
            try:
                proc.wait(timeout=remaining)
            except subprocess.TimeoutExpired:
                timed_out = True

        output = "".join(list(lines))
        self.log.debug(f"Execute command: {display}")
        self.log.trace(f"Result: {output}")

        if failures:
            self.log.warning(f"Failed to read output of '{display}': {failures[0]}")
            return CommandResult(argv, error=f"read failed: {failures[0]}")

        if timed_out:
            self.log.warning(f"Command did not finish within {timeout}s: {display}")
            if self.kill_on_timeout:
                self._kill_process_tree(proc.pid)

        return CommandResult(argv, output=output, timed_out=timed_out)

    def run(self, wait: bool, timeout: float, *command: str) -> Optional[str]:
        """Captured output when `wait` is true and the launch worked, otherwise None."""
        return self.execute(command, wait=wait, timeout=timeout).output

    def run_command(self, *command: str) -> Optional[str]:
        return self.run(True, self.settings.default_timeout, *command)

    def run_with_timeout(self, timeout: float, *command: str) -> Optional[str]:
        return self.run(True, timeout, *command)

    def _kill_process_tree(self, pid: int) -> None:
        try:
            parent = psutil.Process(pid)
            procs = parent.children(recursive=True) + [parent]
        except psutil.NoSuchProcess:
            return
        except psutil.Error as e:
            self.log.debug(f"Could not inspect timed-out process {pid}: {e}")
            return

        for p in procs:
            try:
                p.terminate()
            except psutil.NoSuchProcess:
                pass
            except psutil.Error as e:
                self.log.debug(f"Could not terminate pid {p.pid}: {e}")

        _, alive = psutil.wait_procs(procs, timeout=KILL_GRACE_SECONDS)
        for p in alive:
            try:
                p.kill()
            except psutil.Error as e:
                self.log.debug(f"Could not kill pid {p.pid}: {e}")
        self.log.info(f"Killed timed-out process tree rooted at pid {pid}")
