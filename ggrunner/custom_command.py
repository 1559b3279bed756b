"""Running an arbitrary command, or a jar fetched from a URL."""

from __future__ import annotations

from ggrunner.download import BinPattern, Download, ExecutorDep
from ggrunner.target import Arch, Os, Variant


def is_jar_url(url: str) -> bool:
    """True for an http(s) URL that points at a .jar file."""
    return url.startswith(("http://", "https://")) and url.endswith(".jar")


def _first_is_jar(app_args: list[str]) -> bool:
    return bool(app_args) and is_jar_url(app_args[0])


class CustomCommand:
    """The ``run`` tool: runs the first argument, or a remote jar with Java."""

    name = "custom_command"

    def downloads(self, app_args: list[str]) -> list[Download]:
        if _first_is_jar(app_args):
            return [
                Download(
                    download_url=app_args[0],
                    version=None,
                    os=Os.ANY,
                    arch=Arch.ANY,
                    variant=Variant.ANY,
                )
            ]
        return []

    def bins(self, app_args: list[str]) -> list[BinPattern]:
        if not app_args:
            raise ValueError("no command given to run")
        if is_jar_url(app_args[0]):
            return [BinPattern("java")]
        return [BinPattern(app_args[0])]

    def deps(self, app_args: list[str]) -> list[ExecutorDep]:
        if _first_is_jar(app_args):
            return [ExecutorDep("java")]
        return []

    def needs_download(self, app_args: list[str]) -> bool:
        """Only a jar URL has to be fetched; plain commands come from PATH."""
        return _first_is_jar(app_args)