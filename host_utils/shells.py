# host_utils/shells.py
"""
Per-platform shell strategies.

A strategy knows the tokens that make a raw command string run inside the
platform shell, and the commands used to find and kill processes by name.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .settings import PlatformKind


class ShellStrategy:
    kind: PlatformKind
    prefix: Sequence[str] = ()

    def build_command_line(self, command: Sequence[str]) -> List[str]:
        """Shell prefix followed by the caller's tokens, unchanged and unquoted."""
        return list(self.prefix) + list(command)

    def kill_by_name_command(self, name: str) -> Optional[str]:
        """Single command that kills every process called `name`, if the platform has one."""
        return None

    def list_processes_command(self, name: str) -> str:
        raise NotImplementedError

    def kill_pid_command(self, pid: str) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={list(self.prefix)!r})"


class WindowsShell(ShellStrategy):
    kind = PlatformKind.WINDOWS
    prefix = ("cmd.exe", "/C")

    def kill_by_name_command(self, name: str) -> str:
        return f"taskkill /F /IM {name}"


class UnixShell(ShellStrategy):
    kind = PlatformKind.UNIX
    prefix = ("/bin/bash", "-l", "-c")

    def list_processes_command(self, name: str) -> str:
        return f"ps -A | grep '{name}'"

    def kill_pid_command(self, pid: str) -> str:
        return f"kill -9 {pid}"


_STRATEGIES = {strategy.kind: strategy for strategy in (WindowsShell, UnixShell)}


def shell_for(kind: PlatformKind) -> ShellStrategy:
    return _STRATEGIES[kind]()
