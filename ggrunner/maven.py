"""Apache Maven, listed from the Apache archive directory pages."""

from __future__ import annotations

import logging
from html.parser import HTMLParser

import requests

from ggrunner.download import BinPattern, Download, ExecutorDep
from ggrunner.target import Arch, Os, Variant

log = logging.getLogger(__name__)

NAME = "maven"
ARCHIVE_DIRECTORIES = tuple(
    f"https://archive.apache.org/dist/maven/maven-{major}/" for major in range(1, 5)
)
DEPS = (ExecutorDep("java"),)
DEFAULT_EXCLUDE_TAGS = frozenset({"alpha", "beta", "rc"})
_TIMEOUT = 30


def get_tags(version: str) -> frozenset[str]:
    """Pre-release tags implied by a Maven version string."""
    tags = set()
    if "alpha" in version:
        tags.add("alpha")
    if "beta" in version:
        tags.add("beta")
    if "-rc-" in version:
        tags.add("rc")
    return frozenset(tags)


class _Hrefs(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self.hrefs: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            return
        href = dict(attrs).get("href")
        if href is not None:
            self.hrefs.append(href)


def _version_from_href(href: str) -> str | None:
    if not href.endswith("/") or href == "../":
        return None
    version = href.rstrip("/")
    if not version or version[0] not in "0123456789":
        return None
    return version


def parse_directory_listing(html: str, base_url: str) -> list[Download]:
    """Binary tarball downloads for each version directory in an index page."""
    parser = _Hrefs()
    parser.feed(html)
    parser.close()
    downloads = []
    for href in parser.hrefs:
        version = _version_from_href(href)
        if version is None:
            continue
        downloads.append(
            Download(
                download_url=(
                    f"{base_url}{version}/binaries/apache-maven-{version}-bin.tar.gz"
                ),
                version=version,
                os=Os.ANY,
                arch=Arch.ANY,
                variant=Variant.ANY,
                tags=get_tags(version),
            )
        )
    return downloads


def fetch_downloads() -> list[Download]:
    """Every Maven 1 to 4 release in the Apache archive; unreachable pages are skipped."""
    downloads: list[Download] = []
    for base_url in ARCHIVE_DIRECTORIES:
        try:
            response = requests.get(base_url, timeout=_TIMEOUT)
            body = response.text
        except requests.RequestException as error:
            log.debug("Skipping %s: %s", base_url, error)
            continue
        downloads.extend(parse_directory_listing(body, base_url))
    return downloads


def bins() -> list[BinPattern]:
    return [BinPattern("mvn"), BinPattern("mvn.bat"), BinPattern("maven.bat")]