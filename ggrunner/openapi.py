"""OpenAPI Generator, run as a jar with Java."""

from __future__ import annotations

import os
from pathlib import Path

from ggrunner.download import BinPattern, ExecutorDep

NAME = "openapi"
JAR_NAME = "openapi-generator-cli.jar"
BINS = (BinPattern("java"),)
DEPS = (ExecutorDep("java"),)
DEFAULT_EXCLUDE_TAGS = frozenset({"beta"})


def customize_args(app_args: list[str], install_dir: str | Path) -> list[str]:
    """Java arguments that run the generator jar with ``app_args``."""
    return ["-jar", str(Path(install_dir) / JAR_NAME), *app_args]


def post_prep(cache_path: str | Path) -> None:
    """Rename the downloaded, versioned jar to a fixed name."""
    cache = Path(cache_path)
    target = cache / JAR_NAME
    for path in sorted(cache.glob("*openapi-generator-cli*.jar")):
        if path != target:
            os.replace(path, target)