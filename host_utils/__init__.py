# __init__.py

# Settings and platform detection
from .settings import PlatformKind, HostSettings, load_settings, get_settings

# Shell strategies
from .shells import ShellStrategy, WindowsShell, UnixShell, shell_for

# Command execution and process termination
from .command_runner import CommandRunner
from .process_terminator import ProcessTerminator, parse_process_ids
from .results import CommandResult, StopResult

# File search
from .file_finder import find, find_file

# Errors and debug output
from .errors import HostUtilsError, InvalidArgumentError
from . import debug_utils

__all__ = [
    "PlatformKind",
    "HostSettings",
    "load_settings",
    "get_settings",
    "ShellStrategy",
    "WindowsShell",
    "UnixShell",
    "shell_for",
    "CommandRunner",
    "ProcessTerminator",
    "parse_process_ids",
    "CommandResult",
    "StopResult",
    "find",
    "find_file",
    "HostUtilsError",
    "InvalidArgumentError",
    "debug_utils",
]
