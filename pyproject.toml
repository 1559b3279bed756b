[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ggrunner"
version = "0.1.0"
description = "Describe platforms and find downloads, binaries and pinned versions of developer tools such as Java, Gradle, Maven, Go and Flutter"
requires-python = ">=3.10"
keywords = ["build-tools", "toolchain", "java", "gradle", "maven", "go", "flutter", "version-manager"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "requests",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ggrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
