"""Installing Ruby gems into a tool cache and fixing up their launchers."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)

_ENV_SETUP = (
    "\n# Set gem environment to use gg's cache\n"
    "ENV['GEM_HOME'] = File.expand_path('../..', __FILE__)\n"
    "ENV['GEM_PATH'] = File.expand_path('../..', __FILE__)\n"
)


def _ruby_bin_dir() -> Path:
    home = os.environ.get("HOME", ".")
    return Path(home) / ".cache" / "gg" / "ruby" / "ruby_star_" / "bin"


def rewrite_gem_script(content: str, ruby_bin: str) -> str | None:
    """Point a gem launcher at ``ruby_bin`` and make it use the cached gem home.

    Returns None when the script has no Ruby or env shebang.
    """
    if not content:
        return None
    first_line = content.split("\n", 1)[0].removesuffix("\r")
    if not first_line.startswith("#!") or not (
        "ruby" in first_line or "/usr/bin/env" in first_line
    ):
        return None

    new_content = f"#!{ruby_bin}" + content[len(first_line) :]
    for marker in ("require 'rubygems'", "require "):
        position = new_content.find(marker)
        if position != -1:
            return new_content[:position] + _ENV_SETUP + new_content[position:]
    newline = new_content.find("\n")
    if newline != -1:
        return new_content[: newline + 1] + _ENV_SETUP + new_content[newline + 1 :]
    return new_content


def install_gem_to_cache(gem_file: str, cache_path: str | Path) -> None:
    """Install ``gem_file`` into ``cache_path/gem_home`` with the cached Ruby.

    Raises RuntimeError when the gem command fails.
    """
    log.info("Installing gem %s to cache %s", gem_file, cache_path)
    gem_home = Path(cache_path) / "gem_home"
    gem_home.mkdir(parents=True, exist_ok=True)

    bin_dir = _ruby_bin_dir()
    result = subprocess.run(
        [
            str(bin_dir / "gem"),
            "install",
            gem_file,
            "--no-document",
            "--install-dir",
            str(gem_home),
        ],
        env={**os.environ, "GEM_HOME": str(gem_home)},
        capture_output=True,
    )
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise RuntimeError(f"Failed to install gem: {stderr}")

    gem_bin_dir = gem_home / "bin"
    if not gem_bin_dir.is_dir():
        return
    ruby_bin = str(bin_dir / "ruby")
    for exe_path in gem_bin_dir.iterdir():
        if not exe_path.is_file():
            continue
        try:
            content = exe_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            continue
        rewritten = rewrite_gem_script(content, ruby_bin)
        if rewritten is not None:
            try:
                exe_path.write_text(rewritten, encoding="utf-8")
            except OSError:
                log.debug("Could not rewrite %s", exe_path)