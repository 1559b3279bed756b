"""The Go toolchain, listed from the go.dev download page."""

from __future__ import annotations

from html.parser import HTMLParser

import requests

from ggrunner.download import BinPattern, Download
from ggrunner.target import Arch, Os, Target, Variant

DOWNLOAD_PAGE = "https://go.dev/dl/"
DEFAULT_EXCLUDE_TAGS = frozenset({"beta"})

_OSES = (("linux", Os.LINUX), ("darwin", Os.MAC), ("windows", Os.WINDOWS))
_ARCHS = (("amd64", Arch.X86_64), ("arm64", Arch.ARM64))
_EXTENSIONS = ("tar.gz", "zip")


def link_href_to_download(href: str) -> Download | None:
    """Turn a go.dev download link such as ``/dl/go1.20.6.linux-amd64.tar.gz``."""
    href_part = href.replace("/dl/go", "")
    if not href_part.endswith(_EXTENSIONS):
        return None

    arch = next((arch for name, arch in _ARCHS if name in href), None)
    if arch is None:
        return None

    lowered = href_part.lower()
    for os_name, os_ in _OSES:
        position = lowered.find(os_name)
        if position == -1:
            continue
        version = href_part[: position - 1] if position > 0 else ""
        tags: set[str] = set()
        beta = version.find("beta")
        if beta != -1:
            tags.add("beta")
            version = version[:beta]
        return Download(
            download_url=f"https://go.dev{href}",
            version=version,
            os=os_,
            arch=arch,
            variant=Variant.ANY,
            tags=frozenset(tags),
        )
    return None


class _DownloadLinks(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self.hrefs: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            return
        values = dict(attrs)
        classes = (values.get("class") or "").split()
        href = values.get("href")
        if "download" in classes and href is not None:
            self.hrefs.append(href)


def parse_download_page(html: str) -> list[Download]:
    """Collect downloads from the ``a.download`` links of the page."""
    parser = _DownloadLinks()
    parser.feed(html)
    parser.close()
    return [
        download
        for download in map(link_href_to_download, parser.hrefs)
        if download is not None
    ]


def fetch_downloads() -> list[Download]:
    """Fetch and parse the go.dev download page."""
    response = requests.get(DOWNLOAD_PAGE, timeout=30)
    response.raise_for_status()
    return parse_download_page(response.text)


def bins(target: Target) -> list[BinPattern]:
    return [BinPattern("go.exe" if target.os is Os.WINDOWS else "go")]