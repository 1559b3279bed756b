"""The Java runtime: version discovery, binaries and environment."""

from __future__ import annotations

from pathlib import Path

from ggrunner.download import BinPattern
from ggrunner.gradle_properties import GradleAndWrapperProperties, parse_properties
from ggrunner.target import Os, Target

NAME = "java"


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def get_jdk_version_from_path(base_path: str | Path = ".") -> str | None:
    """Find the requested JDK version for the project in ``base_path``.

    Looks at ``.java-version`` first, then ``.sdkmanrc``, then the Gradle
    properties files.
    """
    base = Path(base_path)

    content = _read_text(base / ".java-version")
    if content is not None:
        version = content.strip()
        if version:
            return version

    content = _read_text(base / ".sdkmanrc")
    if content is not None:
        java_version = parse_properties(content).get("java")
        if java_version is not None:
            return java_version

    return GradleAndWrapperProperties.load(base).jdk_version()


def bins(target: Target) -> list[BinPattern]:
    return [BinPattern("java.exe" if target.os is Os.WINDOWS else "java")]


def java_env(install_dir: str | Path) -> dict[str, str]:
    """Environment that points JAVA_HOME at the installed JDK."""
    return {"JAVA_HOME": str(install_dir)}