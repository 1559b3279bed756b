"""Flutter SDK: releases from the Flutter infrastructure release lists."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Any

import requests
import yaml

from ggrunner.download import BinPattern, Download
from ggrunner.target import Arch, Os

log = logging.getLogger(__name__)

NAME = "flutter"
RELEASES_BASE = "https://storage.googleapis.com/flutter_infra_release/releases/"
RELEASE_LISTS = (
    (RELEASES_BASE + "releases_linux.json", Os.LINUX),
    (RELEASES_BASE + "releases_macos.json", Os.MAC),
    (RELEASES_BASE + "releases_windows.json", Os.WINDOWS),
)
DEFAULT_EXCLUDE_TAGS = frozenset({"beta"})
_TIMEOUT = 60


def flutter_version_from_pubspec(text: str) -> str | None:
    """The Flutter version constraint in a pubspec's ``environment`` section."""
    try:
        pubspec = yaml.safe_load(text)
    except yaml.YAMLError:
        return None
    if not isinstance(pubspec, dict):
        return None
    environment = pubspec.get("environment")
    if not isinstance(environment, dict):
        return None
    flutter = environment.get("flutter")
    return flutter if isinstance(flutter, str) else None


def _release_tags(release: dict[str, Any], version: str) -> frozenset[str]:
    tags = set()
    if "beta" in version or "alpha" in version:
        tags.add("beta")
    channel = release.get("channel")
    if isinstance(channel, str) and channel != "stable":
        tags.add("beta")
    return frozenset(tags)


def _release_arch(release: dict[str, Any]) -> Arch:
    return Arch.ARM64 if release.get("dart_sdk_arch") == "arm64" else Arch.X86_64


def downloads_from_releases(data: dict[str, Any], os: Os) -> list[Download]:
    """Downloads for every release in a parsed Flutter release list for ``os``."""
    releases = data.get("releases") if isinstance(data, dict) else None
    if not isinstance(releases, list):
        return []
    downloads = []
    for release in releases:
        if not isinstance(release, dict):
            continue
        version = release.get("version")
        archive = release.get("archive")
        if not isinstance(version, str) or not isinstance(archive, str):
            continue
        url = archive if archive.startswith("http") else RELEASES_BASE + archive
        downloads.append(
            Download(
                download_url=url,
                version=version,
                os=os,
                arch=_release_arch(release),
                variant=None,
                tags=_release_tags(release, version),
            )
        )
    return downloads


def _fetch_downloads() -> list[Download]:
    downloads: list[Download] = []
    for url, os_ in RELEASE_LISTS:
        try:
            response = requests.get(url, timeout=_TIMEOUT)
            data = response.json()
        except (requests.RequestException, ValueError) as error:
            log.debug("Skipping %s: %s", url, error)
            continue
        downloads.extend(downloads_from_releases(data, os_))
    return downloads


def bins(cmd: str) -> list[BinPattern]:
    return [BinPattern("bin/dart" if cmd == "dart" else "bin/flutter")]


def flutter_env(install_dir: str | Path) -> dict[str, str]:
    """Environment that points FLUTTER_ROOT at the installed SDK."""
    return {"FLUTTER_ROOT": str(install_dir)}


def _post_download(download_file_path: str | Path) -> bool:
    """Unpack the downloaded archive next to itself with tar."""
    path = Path(download_file_path)
    try:
        result = subprocess.run(
            ["tar", "-xf", str(path), "-C", str(path.parent)],
            capture_output=True,
        )
    except OSError:
        return False
    return result.returncode == 0