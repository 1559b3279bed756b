"""Java distributions (Azul Zulu, Eclipse Temurin) and their download lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

import requests

from ggrunner.download import Download
from ggrunner.target import Arch, Os, Target, Variant

log = logging.getLogger(__name__)

_TIMEOUT = 60
AZUL_URL = (
    "https://www.azul.com/wp-admin/admin-ajax.php?action=bundles&endpoint=community"
    "&use_stage=false&include_fields=java_version,release_status,abi,arch,bundle_type,"
    "cpu_gen,ext,features,hw_bitness,javafx,latest,os,support_term"
)
TEMURIN_AVAILABLE_URL = "https://api.adoptium.net/v3/info/available_releases"
TEMURIN_RELEASES_URL = (
    "https://api.adoptium.net/v3/assets/feature_releases/{version}/ga"
    "?page_size=20&page=0&jvm_impl=hotspot&vendor=eclipse"
)
FALLBACK_TEMURIN_VERSIONS = (8, 11, 17, 21)
LTS_VERSIONS = frozenset({8, 11, 17, 21})


@dataclass(frozen=True)
class DistributionConfig:
    """A Java vendor: its names, default tags and how to list its builds."""

    name: str
    short_name: str
    default_tags: tuple[str, ...]
    handler: Callable[[Target], list[Download]]


def _azul_arch(arch: str, bitness: str) -> Arch | None:
    return {
        ("x86", "64"): Arch.X86_64,
        ("arm", "32"): Arch.ARMV7,
        ("arm", "64"): Arch.ARM64,
    }.get((arch, bitness))


def _azul_os(name: str) -> Os:
    if name == "windows":
        return Os.WINDOWS
    if "linux" in name:
        return Os.LINUX
    return Os.MAC


def azul_downloads_from_bundles(
    bundles: Iterable[dict[str, Any]], target: Target
) -> list[Download]:
    """Turn the Azul bundle listing into downloads for ``target``'s archive type."""
    wanted_ext = "zip" if target.os is Os.WINDOWS else "tar.gz"
    downloads = []
    for bundle in bundles:
        if bundle["ext"] != wanted_ext:
            continue
        tags = {bundle["bundle_type"], bundle["support_term"], bundle["release_status"]}
        tags.update(bundle["features"])
        os_name = bundle["os"]
        downloads.append(
            Download(
                download_url=bundle["url"],
                version=".".join(str(part) for part in bundle["java_version"]),
                os=_azul_os(os_name),
                arch=_azul_arch(bundle["arch"], bundle["hw_bitness"]),
                variant=Variant.MUSL if "musl" in os_name else None,
                tags=frozenset(tags),
            )
        )
    return downloads


def _temurin_os_matches(target: Target, binary_os: str) -> bool:
    musl = target.variant is Variant.MUSL
    if target.os is Os.ANY:
        return True
    if target.os is Os.WINDOWS:
        return binary_os == "windows"
    if target.os is Os.LINUX:
        return (binary_os == "linux" and not musl) or (binary_os == "alpine-linux" and musl)
    if target.os is Os.MAC:
        return binary_os == "mac"
    return False


_TEMURIN_ARCHS = {
    "x64": Arch.X86_64,
    "x86_64": Arch.X86_64,
    "aarch64": Arch.ARM64,
    "arm64": Arch.ARM64,
    "arm": Arch.ARMV7,
}

_TEMURIN_OSES = {
    "windows": Os.WINDOWS,
    "linux": Os.LINUX,
    "alpine-linux": Os.LINUX,
    "mac": Os.MAC,
}


def _temurin_arch_matches(target: Target, architecture: str) -> bool:
    if target.arch is Arch.ANY:
        return True
    return _TEMURIN_ARCHS.get(architecture) is target.arch


def temurin_downloads_from_releases(
    releases: Iterable[dict[str, Any]], version: int, target: Target
) -> list[Download]:
    """Turn Adoptium feature releases of Java ``version`` into JDK downloads for ``target``."""
    downloads = []
    for release in releases:
        for binary in release["binaries"]:
            if binary["image_type"] != "jdk":
                continue
            binary_os = binary["os"]
            architecture = binary["architecture"]
            if not (
                _temurin_os_matches(target, binary_os)
                and _temurin_arch_matches(target, architecture)
            ):
                continue
            tags = {
                binary["image_type"],
                release["release_type"],
                binary["heap_size"],
                binary["jvm_impl"],
                f"java{version}",
            }
            if version in LTS_VERSIONS:
                tags.add("lts")
            variant = Variant.MUSL if binary_os == "alpine-linux" else target.variant
            downloads.append(
                Download(
                    download_url=binary["package"]["link"],
                    version=release["version_data"]["semver"],
                    os=_TEMURIN_OSES.get(binary_os),
                    arch=_TEMURIN_ARCHS.get(architecture),
                    variant=variant,
                    tags=frozenset(tags),
                )
            )
    return downloads


def fetch_azul_downloads(target: Target) -> list[Download]:
    """Fetch the Azul community bundle list."""
    response = requests.get(AZUL_URL, timeout=_TIMEOUT)
    response.raise_for_status()
    return azul_downloads_from_bundles(response.json(), target)


def _temurin_versions() -> list[int]:
    try:
        response = requests.get(TEMURIN_AVAILABLE_URL, timeout=_TIMEOUT)
        response.raise_for_status()
        available = response.json()
        versions = list(available["available_lts_releases"])
        latest = available["most_recent_feature_release"]
    except (requests.RequestException, ValueError, KeyError, TypeError):
        return list(FALLBACK_TEMURIN_VERSIONS)
    if latest not in versions:
        versions.append(latest)
    return versions


def fetch_temurin_downloads(target: Target) -> list[Download]:
    """Fetch Temurin JDK builds for the LTS releases and the latest feature release."""
    downloads: list[Download] = []
    for version in _temurin_versions():
        try:
            response = requests.get(
                TEMURIN_RELEASES_URL.format(version=version), timeout=_TIMEOUT
            )
            response.raise_for_status()
            downloads.extend(
                temurin_downloads_from_releases(response.json(), version, target)
            )
        except (requests.RequestException, ValueError, KeyError, TypeError) as error:
            log.debug("Skipping Temurin %s: %s", version, error)
    return downloads


_DISTRIBUTIONS = (
    DistributionConfig("azul", "azul", ("jdk", "ga"), fetch_azul_downloads),
    DistributionConfig("temurin", "tem", ("jdk", "ga"), fetch_temurin_downloads),
)


def get_all_distributions() -> list[DistributionConfig]:
    return list(_DISTRIBUTIONS)


def get_distribution(name: str) -> DistributionConfig | None:
    """Look a distribution up by its name or short name."""
    return next(
        (dist for dist in _DISTRIBUTIONS if name in (dist.name, dist.short_name)), None
    )


def default_distribution() -> DistributionConfig:
    return _DISTRIBUTIONS[0]