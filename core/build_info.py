"""
Build Info

Describes which platform and which kind of build the launcher runs as.
A native build decides this at compile time; here it is a plain value so
every branch of the working-path policy can be exercised from tests.
"""

import os
import sys
import platform
from dataclasses import dataclass
from enum import Enum

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class Platform(Enum):
    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"

    @classmethod
    def current(cls):
        os_type = platform.system()
        if os_type == "Windows":
            return cls.WINDOWS
        elif os_type == "Darwin":
            return cls.MAC
        else:
            return cls.LINUX


class BuildVariant(Enum):
    DEBUG = "debug"
    RELEASE = "release"
    STORE_DEBUG = "store_debug"
    STORE_RELEASE = "store_release"

    @property
    def is_debug(self):
        return self in (BuildVariant.DEBUG, BuildVariant.STORE_DEBUG)

    @property
    def is_store(self):
        return self in (BuildVariant.STORE_DEBUG, BuildVariant.STORE_RELEASE)

    @classmethod
    def from_flags(cls, debug, store):
        if store:
            return cls.STORE_DEBUG if debug else cls.STORE_RELEASE
        return cls.DEBUG if debug else cls.RELEASE


def _read_flag(environ, name):
    """Returns True/False for a recognised flag value, None otherwise."""
    value = environ.get(name, "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


@dataclass(frozen=True)
class BuildInfo:
    platform: Platform
    variant: BuildVariant

    @classmethod
    def detect(cls, environ=None):
        """
        Detects the running build.

        Running from sources counts as a debug build, a frozen executable
        as a release build. GRAM_WALLET_DEBUG, GRAM_WALLET_STORE and
        GRAM_WALLET_PLATFORM override the detected values.
        """
        if environ is None:
            environ = os.environ

        debug = not getattr(sys, 'frozen', False)
        forced = _read_flag(environ, "GRAM_WALLET_DEBUG")
        if forced is not None:
            debug = forced
        store = bool(_read_flag(environ, "GRAM_WALLET_STORE"))

        current = Platform.current()
        override = environ.get("GRAM_WALLET_PLATFORM", "").strip().lower()
        if override in {p.value for p in Platform}:
            current = Platform(override)

        return cls(platform=current, variant=BuildVariant.from_flags(debug, store))
