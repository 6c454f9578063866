# host_utils/settings.py
"""
Process-wide, read-only host settings.

The platform kind is detected once from platform.system() and can be forced
with HOST_UTILS_PLATFORM ("windows" or "unix"). Components take a HostSettings
(or just a PlatformKind) explicitly so tests can inject either platform.
"""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from .errors import InvalidArgumentError

DEFAULT_TIMEOUT_SECONDS = 10 * 60
DEFAULT_LOG_TAG = "OSUtils"

PLATFORM_ENV_VAR = "HOST_UTILS_PLATFORM"
TIMEOUT_ENV_VAR = "HOST_UTILS_TIMEOUT"


class PlatformKind(Enum):
    WINDOWS = "windows"
    UNIX = "unix"

    @classmethod
    def detect(cls, system: Optional[str] = None) -> "PlatformKind":
        """Map a platform.system() value to a kind; anything but Windows is Unix-like."""
        os_name = (system if system is not None else platform.system()).lower()
        return cls.WINDOWS if os_name.startswith("win") else cls.UNIX

    @classmethod
    def parse(cls, raw: str) -> "PlatformKind":
        value = raw.strip().lower()
        for kind in cls:
            if kind.value == value:
                return kind
        raise InvalidArgumentError(
            f"Unknown platform kind '{raw}'. Expected one of {[k.value for k in cls]}"
        )


@dataclass(frozen=True)
class HostSettings:
    platform_kind: PlatformKind = field(default_factory=PlatformKind.detect)
    default_timeout: int = DEFAULT_TIMEOUT_SECONDS
    log_tag: str = DEFAULT_LOG_TAG

    def __post_init__(self):
        if self.default_timeout < 0:
            raise InvalidArgumentError(f"default_timeout must be >= 0, got {self.default_timeout}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> HostSettings:
    """Build settings from the host, honoring the HOST_UTILS_* overrides."""
    env = os.environ if environ is None else environ

    raw_kind = env.get(PLATFORM_ENV_VAR)
    kind = PlatformKind.parse(raw_kind) if raw_kind else PlatformKind.detect()

    raw_timeout = env.get(TIMEOUT_ENV_VAR)
    timeout = DEFAULT_TIMEOUT_SECONDS
    if raw_timeout:
        try:
            timeout = int(raw_timeout)
        except ValueError as e:
            raise InvalidArgumentError(f"{TIMEOUT_ENV_VAR} must be an integer, got '{raw_timeout}'") from e

    return HostSettings(platform_kind=kind, default_timeout=timeout)


_settings: Optional[HostSettings] = None


def get_settings() -> HostSettings:
    """Settings for this process, loaded on first use and never changed afterwards."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
