"""Reading gradle.properties and gradle-wrapper.properties."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_GRADLE_VERSION = re.compile(r"gradle-(.*)-")


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
            current = line
        else:
            current = pending + line
        trailing = len(current) - len(current.rstrip("\\"))
        if trailing % 2 == 1:
            pending = current[:-1]
            continue
        pending = None
        yield current
    if pending is not None:
        yield pending


def _unescape(text: str) -> str:
    out: list[str] = []
    chars = iter(enumerate(text))
    for index, char in chars:
        if char != "\\":
            out.append(char)
            continue
        try:
            _, nxt = next(chars)
        except StopIteration:
            break
        if nxt == "u":
            digits = text[index + 2 : index + 6]
            if len(digits) == 4 and all(c in "0123456789abcdefABCDEF" for c in digits):
                out.append(chr(int(digits, 16)))
                for _ in range(4):
                    next(chars)
                continue
            out.append("u")
        else:
            out.append(_ESCAPES.get(nxt, nxt))
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in "=:" or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":") and rest:
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse text in the Java properties format into a dictionary."""
    return dict(_split_entry(line) for line in _logical_lines(text))


def version_from_gradle_url(url: str) -> str | None:
    """Extract the Gradle version from a distribution URL."""
    match = _GRADLE_VERSION.search(url)
    return match.group(1) if match else None


@dataclass(frozen=True)
class GradleProperties:
    """The settings gg reads from a Gradle properties file."""

    distribution_url: str | None = None
    jdk_version: str | None = None
    distribution_sha256sum: str | None = None

    @classmethod
    def from_text(cls, text: str) -> GradleProperties:
        props = parse_properties(text)
        return cls(
            distribution_url=props.get("distributionUrl"),
            jdk_version=props.get("jdkVersion"),
            distribution_sha256sum=props.get("distributionSha256sum"),
        )


def _read_properties(path: Path) -> GradleProperties | None:
    try:
        return GradleProperties.from_text(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError):
        return None


@dataclass(frozen=True)
class GradleAndWrapperProperties:
    """gradle.properties and the wrapper properties, wrapper taking precedence."""

    gradle_properties: GradleProperties | None = None
    gradle_wrapper_properties: GradleProperties | None = None

    @classmethod
    def load(cls, base_dir: str | Path = ".") -> GradleAndWrapperProperties:
        base = Path(base_dir)
        return cls(
            gradle_properties=_read_properties(base / "gradle.properties"),
            gradle_wrapper_properties=_read_properties(
                base / "gradle" / "wrapper" / "gradle-wrapper.properties"
            ),
        )

    def _pick(self, attribute: str) -> str | None:
        for props in (self.gradle_wrapper_properties, self.gradle_properties):
            if props is not None:
                value = getattr(props, attribute)
                if value is not None:
                    return value
        return None

    def distribution_url(self) -> str | None:
        return self._pick("distribution_url")

    def version_from_distribution_url(self) -> str | None:
        url = self.distribution_url()
        return version_from_gradle_url(url) if url is not None else None

    def jdk_version(self) -> str | None:
        return self._pick("jdk_version")

    def distribution_sha256sum(self) -> str | None:
        if self.gradle_wrapper_properties is None:
            return None
        return self.gradle_wrapper_properties.distribution_sha256sum