from unittest import mock

import pytest

from ggrunner.download import BinPattern, Download
from ggrunner.go import bins, fetch_downloads, link_href_to_download, parse_download_page
from ggrunner.target import Arch, Os, Target, Variant


def test_link_href_to_download():
    assert link_href_to_download("/dl/go1.16.5.windows-amd64.zip") == Download(
        download_url="https://go.dev/dl/go1.16.5.windows-amd64.zip",
        version="1.16.5",
        tags=frozenset(),
        arch=Arch.X86_64,
        variant=Variant.ANY,
        os=Os.WINDOWS,
    )


def test_link_href_to_download2():
    assert link_href_to_download("/dl/go1.20.6.linux-amd64.tar.gz") == Download(
        download_url="https://go.dev/dl/go1.20.6.linux-amd64.tar.gz",
        version="1.20.6",
        arch=Arch.X86_64,
        variant=Variant.ANY,
        os=Os.LINUX,
    )


def test_link_href_to_download3():
    assert link_href_to_download("/dl/go1.20.6.linux-arm64.tar.gz") == Download(
        download_url="https://go.dev/dl/go1.20.6.linux-arm64.tar.gz",
        version="1.20.6",
        arch=Arch.ARM64,
        variant=Variant.ANY,
        os=Os.LINUX,
    )


def test_link_href_to_download4():
    assert link_href_to_download("/dl/go1.20.6.darwin-amd64.tar.gz") == Download(
        download_url="https://go.dev/dl/go1.20.6.darwin-amd64.tar.gz",
        version="1.20.6",
        arch=Arch.X86_64,
        variant=Variant.ANY,
        os=Os.MAC,
    )


def test_link_href_to_download5():
    assert link_href_to_download("/dl/go1.19beta1.linux-amd64.tar.gz") == Download(
        download_url="https://go.dev/dl/go1.19beta1.linux-amd64.tar.gz",
        version="1.19",
        tags=frozenset({"beta"}),
        arch=Arch.X86_64,
        variant=Variant.ANY,
        os=Os.LINUX,
    )


@pytest.mark.parametrize(
    "href, supported",
    [
        ("/dl/go1.20.6.linux-arm64.tar.gz", True),
        ("/dl/go1.20.6.linux-arm64.zip", True),
        ("/dl/go1.20.6.linux-arm64.msi", False),
        ("/dl/go1.20.6.linux-arm64.pkg", False),
    ],
)
def test_link_href_to_download_extensions(href, supported):
    assert (link_href_to_download(href) is not None) is supported


def test_unsupported_arch_is_skipped():
    assert link_href_to_download("/dl/go1.20.6.linux-386.tar.gz") is None


HTML = """
<html><body>
<a class="download downloadBox" href="/dl/go1.20.6.linux-amd64.tar.gz">Linux</a>
<a class="download" href="/dl/go1.20.6.windows-amd64.zip">Windows</a>
<a class="download" href="/dl/go1.20.6.src.tar.gz">Source</a>
<a href="/dl/go1.20.6.darwin-arm64.tar.gz">Not a download link</a>
</body></html>
"""


def test_parse_download_page():
    downloads = parse_download_page(HTML)
    assert [d.download_url for d in downloads] == [
        "https://go.dev/dl/go1.20.6.linux-amd64.tar.gz",
        "https://go.dev/dl/go1.20.6.windows-amd64.zip",
    ]


def test_fetch_downloads_uses_page():
    response = mock.MagicMock()
    response.text = HTML
    with mock.patch("ggrunner.go.requests.get", return_value=response) as get:
        downloads = fetch_downloads()
    assert get.call_args.args[0] == "https://go.dev/dl/"
    assert len(downloads) == 2


def test_bins():
    assert bins(Target(Arch.X86_64, Os.WINDOWS)) == [BinPattern("go.exe")]
    assert bins(Target(Arch.X86_64, Os.LINUX)) == [BinPattern("go")]