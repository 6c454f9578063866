# tests/settings_test.py
import platform

import pytest

from host_utils import settings as settings_module
from host_utils.errors import InvalidArgumentError
from host_utils.settings import (
    DEFAULT_TIMEOUT_SECONDS,
    HostSettings,
    PlatformKind,
    get_settings,
    load_settings,
)


@pytest.mark.parametrize("system, expected", [
    ("Windows", PlatformKind.WINDOWS),
    ("Linux", PlatformKind.UNIX),
    ("Darwin", PlatformKind.UNIX),
    ("FreeBSD", PlatformKind.UNIX),
])
def test_detect_platform_kind(system, expected):
    assert PlatformKind.detect(system) is expected


def test_detect_uses_platform_system(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Windows")
    assert PlatformKind.detect() is PlatformKind.WINDOWS
    assert HostSettings().platform_kind is PlatformKind.WINDOWS


def test_parse_platform_kind():
    assert PlatformKind.parse(" Unix ") is PlatformKind.UNIX
    with pytest.raises(InvalidArgumentError):
        PlatformKind.parse("beos")


def test_default_timeout_is_ten_minutes():
    assert DEFAULT_TIMEOUT_SECONDS == 600
    assert HostSettings(platform_kind=PlatformKind.UNIX).default_timeout == 600


def test_negative_default_timeout_rejected():
    with pytest.raises(InvalidArgumentError):
        HostSettings(platform_kind=PlatformKind.UNIX, default_timeout=-1)


def test_settings_are_frozen():
    s = HostSettings(platform_kind=PlatformKind.UNIX)
    with pytest.raises(Exception):
        s.platform_kind = PlatformKind.WINDOWS


def test_load_settings_env_overrides():
    s = load_settings({"HOST_UTILS_PLATFORM": "windows", "HOST_UTILS_TIMEOUT": "30"})
    assert s.platform_kind is PlatformKind.WINDOWS
    assert s.default_timeout == 30


def test_load_settings_detects_without_overrides(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Linux")
    s = load_settings({})
    assert s.platform_kind is PlatformKind.UNIX
    assert s.default_timeout == DEFAULT_TIMEOUT_SECONDS


def test_load_settings_bad_timeout():
    with pytest.raises(InvalidArgumentError):
        load_settings({"HOST_UTILS_TIMEOUT": "soon"})


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setattr(settings_module, "_settings", None)
    first = get_settings()
    assert get_settings() is first
