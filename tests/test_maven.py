from unittest import mock

import requests

from ggrunner.maven import (
    ARCHIVE_DIRECTORIES,
    DEFAULT_EXCLUDE_TAGS,
    bins,
    fetch_downloads,
    get_tags,
    parse_directory_listing,
)
from ggrunner.target import Arch, Os, Variant

BASE = "https://archive.apache.org/dist/maven/maven-3/"

LISTING = """
<html><body>
<a href="../">Parent Directory</a>
<a href="3.8.1/">3.8.1/</a>
<a href="4.0.0-alpha-2/">4.0.0-alpha-2/</a>
<a href="KEYS">KEYS</a>
<a href="binaries/">binaries/</a>
<a>no href</a>
</body></html>
"""


def test_tags_plain():
    assert get_tags("3.8.1") == frozenset()


def test_tags_alpha_beta_rc():
    assert get_tags("4.0.0-alpha-2") == frozenset({"alpha"})
    assert get_tags("2.0-beta-3") == frozenset({"beta"})
    assert get_tags("4.0.0-rc-1") == frozenset({"rc"})


def test_tags_subset_of_default_excludes():
    for version in ("4.0.0-alpha-2", "2.0-beta-3", "4.0.0-rc-1"):
        assert get_tags(version) <= DEFAULT_EXCLUDE_TAGS


def test_parse_listing_versions():
    downloads = parse_directory_listing(LISTING, BASE)
    assert [d.version for d in downloads] == ["3.8.1", "4.0.0-alpha-2"]


def test_parse_listing_url_and_platform():
    download = parse_directory_listing(LISTING, BASE)[0]
    assert download.download_url == BASE + "3.8.1/binaries/apache-maven-3.8.1-bin.tar.gz"
    assert download.os is Os.ANY
    assert download.arch is Arch.ANY
    assert download.variant is Variant.ANY


def test_parse_listing_tags():
    downloads = parse_directory_listing(LISTING, BASE)
    assert downloads[1].tags == frozenset({"alpha"})


def test_parse_listing_empty():
    assert parse_directory_listing("<html></html>", BASE) == []


def test_fetch_skips_failing_directories():
    def fake_get(url, timeout):
        if url == ARCHIVE_DIRECTORIES[2]:
            return mock.Mock(text=LISTING)
        raise requests.ConnectionError("down")

    with mock.patch("ggrunner.maven.requests.get", side_effect=fake_get):
        downloads = fetch_downloads()
    assert [d.version for d in downloads] == ["3.8.1", "4.0.0-alpha-2"]
    assert all(d.download_url.startswith(ARCHIVE_DIRECTORIES[2]) for d in downloads)


def test_bins():
    assert [b.pattern for b in bins()] == ["mvn", "mvn.bat", "maven.bat"]