"""Platform description: architecture, operating system and libc variant."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum


class Arch(Enum):
    X86_64 = "x86_64"
    ARMV7 = "armv7"
    ARM64 = "arm64"
    ANY = "any"


class Os(Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    MAC = "mac"
    ANY = "any"


class Variant(Enum):
    MUSL = "musl"
    ANY = "any"


@dataclass(frozen=True)
class Target:
    """The platform tools are downloaded for."""

    arch: Arch
    os: Os
    variant: Variant | None = None


_ARCH_OVERRIDES = {
    "x86_64": Arch.X86_64,
    "x64": Arch.X86_64,
    "amd64": Arch.X86_64,
    "arm64": Arch.ARM64,
    "aarch64": Arch.ARM64,
    "armv7": Arch.ARMV7,
    "arm": Arch.ARMV7,
}

_OS_OVERRIDES = {
    "windows": Os.WINDOWS,
    "win": Os.WINDOWS,
    "linux": Os.LINUX,
    "mac": Os.MAC,
    "macos": Os.MAC,
    "darwin": Os.MAC,
}


def _detect_arch(text: str) -> Arch:
    first = text.split("-")[0]
    if "x86_64" in first:
        return Arch.X86_64
    if "arm64" in first or "aarch64" in first:
        return Arch.ARM64
    return Arch.ARMV7


def _detect_os(text: str) -> Os:
    lowered = text.lower()
    if "windows" in lowered:
        return Os.WINDOWS
    if "apple" in lowered:
        return Os.MAC
    return Os.LINUX


def parse_target(
    text: str, os_override: str | None = None, arch_override: str | None = None
) -> Target:
    """Parse a target triple such as ``x86_64-unknown-linux-gnu``.

    Unknown overrides print a warning and fall back to detection from ``text``.
    """
    if arch_override is not None:
        arch = _ARCH_OVERRIDES.get(arch_override.lower())
        if arch is None:
            print(
                f"Warning: Unknown architecture '{arch_override}', "
                "falling back to auto-detection",
                file=sys.stderr,
            )
            arch = _detect_arch(text)
    else:
        arch = _detect_arch(text)

    if os_override is not None:
        os_ = _OS_OVERRIDES.get(os_override.lower())
        if os_ is None:
            print(
                f"Warning: Unknown OS '{os_override}', falling back to auto-detection",
                file=sys.stderr,
            )
            os_ = _detect_os(text)
    else:
        os_ = _detect_os(text)

    variant = Variant.MUSL if "musl" in text.lower() else None
    return Target(arch=arch, os=os_, variant=variant)