# File: host_utils/debug_utils.py
"""
Channel-based debug output for host_utils.

Every message carries a channel (Verbose, Debug, Information, Warning, Error,
Critical) and an optional tag naming the component that wrote it. Console
output and file logging have independent verbosity thresholds.
"""

import datetime
import inspect
import os
import platform
import sys
from pathlib import Path
from typing import Optional

# --- Configuration ---
VERBOSITY_LEVELS = ["Verbose", "Debug", "Information", "Warning", "Error", "Critical"]
DEFAULT_CONSOLE_VERBOSITY = "Warning"
DEFAULT_LOG_VERBOSITY = "Debug"
DEFAULT_LOG_DIR = os.path.expanduser("~/logs")
DEFAULT_LOG_PREFIX = "host_utils"
MAX_LOG_FILE_SIZE_KB = 256
MAX_TOTAL_LOG_SIZE_MB = 256
MAX_LOG_FILES = 20
LOG_FILE_EXTENSION = ".log"

# --- Global state ---
_console_verbosity_level = DEFAULT_CONSOLE_VERBOSITY
_log_verbosity_level = DEFAULT_LOG_VERBOSITY
_log_dir = DEFAULT_LOG_DIR
_log_file_enabled = False
_current_log_filepath: Optional[Path] = None


def set_console_verbosity(level: str = DEFAULT_CONSOLE_VERBOSITY) -> None:
    """Set the minimum channel printed to the console."""
    global _console_verbosity_level
    _console_verbosity_level = _validate_verbosity_level(level, "console")


def set_log_verbosity(level: str = DEFAULT_LOG_VERBOSITY) -> None:
    """Set the minimum channel written to the log file."""
    global _log_verbosity_level
    _log_verbosity_level = _validate_verbosity_level(level, "log")


def set_log_directory(path: str = DEFAULT_LOG_DIR) -> None:
    global _log_dir, _current_log_filepath
    _log_dir = os.path.expanduser(path)
    _current_log_filepath = None


def enable_file_logging() -> Path:
    """Turn on file logging and return the active log file path."""
    global _log_file_enabled, _current_log_filepath
    _log_file_enabled = True
    _current_log_filepath = _initialize_log_file()
    return _current_log_filepath


def disable_file_logging() -> None:
    global _log_file_enabled, _current_log_filepath
    _log_file_enabled = False
    _current_log_filepath = None


def _validate_verbosity_level(level: str, target_type: str) -> str:
    level_capitalized = (level or "").capitalize()
    if level_capitalized not in VERBOSITY_LEVELS:
        raise ValueError(
            f"Invalid {target_type} verbosity level: '{level}'. Must be one of {VERBOSITY_LEVELS}"
        )
    return level_capitalized


def _is_at_verbosity_level(channel: str, verbosity_level: str) -> bool:
    return VERBOSITY_LEVELS.index(channel) >= VERBOSITY_LEVELS.index(verbosity_level)


def _get_log_filename_prefix() -> str:
    """Name logs after the enclosing git repository, falling back to the package name."""
    try:
        import git

        repo = git.Repo(".", search_parent_directories=True)
        return os.path.basename(repo.working_dir)
    except Exception:
        return DEFAULT_LOG_PREFIX


def _initialize_log_file() -> Path:
    log_dir = Path(_log_dir) / _get_log_filename_prefix()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_filepath = log_dir / f"{datetime.date.today().isoformat()}{LOG_FILE_EXTENSION}"

    if log_filepath.exists() and log_filepath.stat().st_size > MAX_LOG_FILE_SIZE_KB * 1024:
        _rotate_log(log_filepath)

    _cleanup_old_logs(log_dir)
    return log_filepath


def _rotate_log(log_filepath: Path) -> None:
    stamp = datetime.datetime.now().strftime("%H%M%S")
    rotated = log_filepath.with_name(f"{log_filepath.stem}_{stamp}{log_filepath.suffix}")
    try:
        log_filepath.rename(rotated)
    except OSError as e:
        print(f"[Warning] Log rotation failed: {e}", file=sys.stderr)


def _cleanup_old_logs(log_dir: Path) -> None:
    """Drop the oldest log files once the count or total size limit is exceeded."""
    log_files = sorted(
        (entry for entry in os.scandir(log_dir) if entry.is_file() and entry.name.endswith(LOG_FILE_EXTENSION)),
        key=lambda entry: entry.stat().st_mtime,
    )
    total_size = sum(entry.stat().st_size for entry in log_files)
    max_total_bytes = MAX_TOTAL_LOG_SIZE_MB * 1024 * 1024

    doomed = []
    while log_files and (total_size > max_total_bytes or len(log_files) > MAX_LOG_FILES):
        oldest = log_files.pop(0)
        total_size -= oldest.stat().st_size
        doomed.append(oldest)

    for entry in doomed:
        try:
            os.remove(entry.path)
        except OSError as e:
            print(f"[Warning] Failed to delete old log file {entry.name}: {e}", file=sys.stderr)


def write_debug(
    message: str = "",
    channel: str = "Debug",
    condition: bool = True,
    output_stream: str = "stderr",
    tag: Optional[str] = None,
    location_channels=None,
) -> None:
    """
    Write a message to the console and, if enabled, to the log file.

    Parameters:
      - message: The text to write.
      - channel: One of VERBOSITY_LEVELS. "Verbose" is the trace level.
      - condition: If False, nothing is written.
      - output_stream: "stdout" or "stderr".
      - tag: Component name shown after the channel, e.g. "[Debug] [CommandRunner]".
      - location_channels: True to always prefix the caller location, or a list
        of channels that get it.
    """
    if not condition:
        return

    global _current_log_filepath
    channel_cap = _validate_verbosity_level(channel, "message")

    body = f"[{tag}] {message}" if tag else message

    show_location = False
    if isinstance(location_channels, bool):
        show_location = location_channels
    elif isinstance(location_channels, list):
        show_location = channel_cap in location_channels
    if show_location:
        caller = inspect.stack()[1]
        body = f"[{caller.filename}:{caller.lineno}] {body}"

    if _is_at_verbosity_level(channel_cap, _console_verbosity_level):
        stream = sys.stdout if output_stream.lower() == "stdout" else sys.stderr
        color_map = {
            "Error": "\033[91m", "Warning": "\033[93m", "Verbose": "\033[90m",
            "Information": "\033[96m", "Debug": "\033[92m", "Critical": "\033[95m",
        }
        supports_color = stream.isatty() and platform.system() != "Windows"
        if supports_color:
            print(f"{color_map[channel_cap]}[{channel_cap}]\033[0m {body}", file=stream)
        else:
            print(f"[{channel_cap}] {body}", file=stream)

    if _log_file_enabled and _is_at_verbosity_level(channel_cap, _log_verbosity_level):
        if not _current_log_filepath:
            _current_log_filepath = _initialize_log_file()
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        try:
            with open(_current_log_filepath, "a", encoding="utf-8") as log_file:
                log_file.write(f"{timestamp} [{channel_cap}] {body}\n")
        except OSError as e:
            print(f"[Error] Failed to write to log file {_current_log_filepath}: {e}", file=sys.stderr)


class TaggedLogger:
    """write_debug bound to a component tag."""

    def __init__(self, tag: str):
        self.tag = tag

    def trace(self, message: str) -> None:
        write_debug(message, channel="Verbose", tag=self.tag)

    def debug(self, message: str) -> None:
        write_debug(message, channel="Debug", tag=self.tag)

    def info(self, message: str) -> None:
        write_debug(message, channel="Information", tag=self.tag)

    def warning(self, message: str) -> None:
        write_debug(message, channel="Warning", tag=self.tag)

    def error(self, message: str) -> None:
        write_debug(message, channel="Error", tag=self.tag)


def get_logger(tag: str) -> TaggedLogger:
    return TaggedLogger(tag)
