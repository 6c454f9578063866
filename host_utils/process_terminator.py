# host_utils/process_terminator.py
from __future__ import annotations

import os
from typing import Iterable, List

from .command_runner import CommandRunner
from .results import StopResult


def parse_process_ids(listing: str, exclude: Iterable[int] = ()) -> List[str]:
    """
    Pull process ids out of `ps`-style output: the first whitespace-separated
    token of each non-empty line. Non-numeric tokens (headers, noise) and the
    ids in `exclude` are skipped; each id is returned once.
    """
    excluded = {str(pid) for pid in exclude}
    ids: List[str] = []
    for raw in listing.splitlines():
        line = raw.strip()
        if not line:
            continue
        pid = line.split()[0]
        if not pid.isdigit() or pid in excluded or pid in ids:
            continue
        ids.append(pid)
    return ids


class ProcessTerminator(CommandRunner):
    """
    Best-effort process killing by name.

    Windows issues a single `taskkill /F /IM <name>`. Unix-like hosts list
    processes with `ps -A | grep '<name>'` and send `kill -9` to each id found.
    Nothing here raises; failures are logged and recorded on the StopResult.
    StopResult.killed records kills issued, not processes confirmed dead.
    """

    def find_process_ids(self, name: str) -> List[str]:
        listing = self.run_command(self.shell.list_processes_command(name))
        if listing is None:
            raise RuntimeError(f"Listing processes matching '{name}' returned no output")
        return parse_process_ids(listing, exclude=(os.getpid(),))

    def stop(self, name: str) -> StopResult:
        result = StopResult(name=name)
        try:
            if not name or not name.strip():
                raise ValueError("Process name must not be empty")

            kill_all = self.shell.kill_by_name_command(name)
            if kill_all is not None:
                self.run_command(kill_all)
                result.killed.append(name)
                return result

            for pid in self.find_process_ids(name):
                self.run_command(self.shell.kill_pid_command(pid))
                result.killed.append(pid)
        except Exception as e:
            result.error = str(e)
            self.log.debug(f"Failed to stop process: {name} ({e})")
        return result

    def stop_process(self, name: str) -> None:
        self.stop(name)
