from pathlib import Path

from ggrunner.flutter import (
    DEFAULT_EXCLUDE_TAGS,
    RELEASES_BASE,
    bins,
    downloads_from_releases,
    flutter_env,
    flutter_version_from_pubspec,
)
from ggrunner.target import Arch, Os


def test_pubspec_version():
    text = "name: app\nenvironment:\n  sdk: '>=3.0.0 <4.0.0'\n  flutter: '>=3.10.0'\n"
    assert flutter_version_from_pubspec(text) == ">=3.10.0"


def test_pubspec_without_flutter():
    assert flutter_version_from_pubspec("name: app\nenvironment:\n  sdk: '3'\n") is None


def test_pubspec_without_environment():
    assert flutter_version_from_pubspec("name: app\n") is None


def test_pubspec_invalid_yaml():
    assert flutter_version_from_pubspec("environment: [unclosed") is None


def test_relative_archive_gets_base_url():
    data = {
        "releases": [
            {
                "version": "3.10.0",
                "archive": "stable/linux/flutter_linux_3.10.0-stable.tar.xz",
                "channel": "stable",
            }
        ]
    }
    [download] = downloads_from_releases(data, Os.LINUX)
    assert download.download_url == (
        RELEASES_BASE + "stable/linux/flutter_linux_3.10.0-stable.tar.xz"
    )
    assert download.version == "3.10.0"
    assert download.os is Os.LINUX
    assert download.arch is Arch.X86_64
    assert download.variant is None
    assert download.tags == frozenset()


def test_absolute_archive_kept():
    url = "https://example.com/flutter.zip"
    data = {"releases": [{"version": "3.0.0", "archive": url, "channel": "stable"}]}
    [download] = downloads_from_releases(data, Os.WINDOWS)
    assert download.download_url == url


def test_non_stable_channel_is_beta():
    data = {"releases": [{"version": "3.1.0", "archive": "a.zip", "channel": "dev"}]}
    [download] = downloads_from_releases(data, Os.MAC)
    assert download.tags == frozenset({"beta"})


def test_beta_version_is_beta():
    data = {"releases": [{"version": "3.1.0-beta", "archive": "a.zip"}]}
    [download] = downloads_from_releases(data, Os.MAC)
    assert "beta" in download.tags
    assert download.tags <= DEFAULT_EXCLUDE_TAGS


def test_arm64_arch():
    data = {
        "releases": [
            {"version": "3.0.0", "archive": "a.zip", "dart_sdk_arch": "arm64"},
            {"version": "3.0.0", "archive": "b.zip", "dart_sdk_arch": "x64"},
            {"version": "3.0.0", "archive": "c.zip", "dart_sdk_arch": "ia32"},
        ]
    }
    archs = [d.arch for d in downloads_from_releases(data, Os.MAC)]
    assert archs == [Arch.ARM64, Arch.X86_64, Arch.X86_64]


def test_incomplete_releases_skipped():
    data = {"releases": [{"version": "3.0.0"}, {"archive": "a.zip"}]}
    assert downloads_from_releases(data, Os.LINUX) == []


def test_missing_releases_key():
    assert downloads_from_releases({}, Os.LINUX) == []


def test_bins():
    assert [b.pattern for b in bins("dart")] == ["bin/dart"]
    assert [b.pattern for b in bins("flutter")] == ["bin/flutter"]


def test_env(tmp_path: Path):
    assert flutter_env(tmp_path) == {"FLUTTER_ROOT": str(tmp_path)}