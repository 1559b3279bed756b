"""Downloadable artifacts, binary patterns, dependencies and name detection."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ggrunner.target import Arch, Os, Variant


@dataclass(frozen=True)
class Download:
    """One downloadable artifact of a tool."""

    download_url: str
    version: str | None
    os: Os | None = None
    arch: Arch | None = None
    variant: Variant | None = None
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", frozenset(self.tags))


@dataclass(frozen=True)
class BinPattern:
    """A file name to look for, either exact or a regular expression."""

    pattern: str
    regex: bool = False

    def matches(self, name: str) -> bool:
        if self.regex:
            return re.search(self.pattern, name) is not None
        return name == self.pattern


@dataclass(frozen=True)
class ExecutorDep:
    """A tool another tool needs, optionally taken from PATH when present."""

    name: str
    version: str | None = None
    optional: bool = False


def detect_os_from_name(name: str) -> Os | None:
    """Guess the operating system an asset file name is built for."""
    lowered = name.lower()
    if any(word in lowered for word in ("darwin", "macos", "apple")):
        return Os.MAC
    if any(word in lowered for word in ("windows", "win", ".exe")):
        return Os.WINDOWS
    if "linux" in lowered:
        return Os.LINUX
    return None


def detect_arch_from_name(name: str) -> Arch | None:
    """Guess the architecture an asset file name is built for."""
    lowered = name.lower()
    if any(word in lowered for word in ("x86_64", "amd64", "x64")):
        return Arch.X86_64
    if "arm64" in lowered or "aarch64" in lowered:
        return Arch.ARM64
    if "armv7" in lowered or "arm" in lowered:
        return Arch.ARMV7
    if "x86" in lowered:
        return Arch.ANY
    return None