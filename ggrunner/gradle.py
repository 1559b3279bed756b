"""Gradle: versions from the wrapper properties or the Gradle releases page."""

from __future__ import annotations

import hashlib
import logging
from html.parser import HTMLParser
from pathlib import Path

import requests

from ggrunner.download import BinPattern, Download, ExecutorDep
from ggrunner.gradle_properties import GradleAndWrapperProperties
from ggrunner.target import Arch, Os, Target, Variant

log = logging.getLogger(__name__)

NAME = "gradle"
RELEASES_PAGE = "https://gradle.org/releases"
DISTRIBUTION_URL = "https://services.gradle.org/distributions/gradle-{version}-bin.zip"
DEPS = (ExecutorDep("java"),)

_CHUNK = 1 << 16


def _download(url: str, version: str) -> Download:
    return Download(
        download_url=url,
        version=version,
        os=Os.ANY,
        arch=Arch.ANY,
        variant=Variant.ANY,
    )


class _NamedAnchors(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self.names: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            return
        values = dict(attrs)
        if "name" in values:
            self.names.append(values["name"] or "")


def parse_releases_page(html: str) -> list[Download]:
    """Collect one binary distribution per ``a[name]`` anchor of the releases page."""
    parser = _NamedAnchors()
    parser.feed(html)
    parser.close()
    return [
        _download(DISTRIBUTION_URL.format(version=version), version)
        for version in parser.names
    ]


def downloads_from_properties(props: GradleAndWrapperProperties) -> list[Download]:
    """The wrapper's own distribution, or every release listed on the releases page."""
    url = props.distribution_url()
    if url is not None:
        version = props.version_from_distribution_url()
        if version is not None:
            return [_download(url, version)]

    response = requests.get(RELEASES_PAGE, timeout=30)
    response.raise_for_status()
    return parse_releases_page(response.text)


def bins(target: Target) -> list[BinPattern]:
    return [BinPattern("gradle.bat" if target.os is Os.WINDOWS else "gradle")]


def verify_checksum(path: str | Path, expected: str | None) -> bool:
    """Compare the SHA-256 of a downloaded file with the wrapper's checksum.

    Without an expected checksum the check is skipped and passes.
    """
    if expected is None:
        log.debug("No checksum found in gradle properties (skipping check)")
        return True
    log.info("Checksum found for %s: %s", path, expected)
    digest = hashlib.sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK), b""):
            digest.update(chunk)
    actual = digest.hexdigest()
    log.info("Calculated checksum: %s", actual)
    return expected == actual