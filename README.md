# ggrunner

`ggrunner` is a library that knows where developer tools are published and
how to run them once installed. For a platform it describes which releases
exist, which file to start, which other tools are needed and which
environment variables to set. It covers Java (Azul and Temurin), Gradle,
Maven, Go, Flutter, OpenAPI Generator, Ruby gems and arbitrary commands.

## Installation

```
pip install ggrunner
```

## Platforms

A `Target` (in `ggrunner.target`) is an `Arch`, an `Os` and an optional
`Variant`. `parse_target(text, os_override, arch_override)` reads one from a
target triple. An override replaces what the triple says; an unknown
override prints a warning to stderr and falls back to the triple:

```python
from ggrunner.target import Arch, Os, Variant, parse_target

target = parse_target("x86_64-unknown-linux-musl", None, None)
assert target.arch is Arch.X86_64
assert target.os is Os.LINUX
assert target.variant is Variant.MUSL

mac = parse_target("x86_64-pc-windows-msvc", "mac", "arm64")
assert mac.os is Os.MAC and mac.arch is Arch.ARM64
```

## Shared records

`ggrunner.download` holds the records the other modules return:

- `Download`: a URL, a version string, an optional `Os`, `Arch`, `Variant`
  and a frozen set of tags.
- `BinPattern`: a file name to look for; `matches(name)` compares exactly, or
  searches with a regular expression when `regex=True`.
- `ExecutorDep`: a tool another tool needs, with an optional version and an
  `optional` flag.

`detect_os_from_name(name)` and `detect_arch_from_name(name)` guess the
platform of a release asset from its file name, or return `None`.

## Project files that pin a version

- `ggrunner.java.get_jdk_version_from_path(base_path)` reads `.java-version`,
  then `java=` in `.sdkmanrc`, then `jdkVersion` in the Gradle properties.
- `ggrunner.gradle_properties.GradleAndWrapperProperties.load(base_dir)` reads
  `gradle.properties` and `gradle/wrapper/gradle-wrapper.properties`, the
  wrapper taking precedence. It offers `distribution_url()`,
  `version_from_distribution_url()`, `jdk_version()` and
  `distribution_sha256sum()`. `parse_properties(text)` parses the Java
  properties format on its own.
- `ggrunner.flutter.flutter_version_from_pubspec(text)` reads the Flutter
  constraint from the contents of a `pubspec.yaml` file.

## Finding downloads

Each tool module has a pure function that turns raw listing data into
`Download` records, so results can be inspected without a network
connection:

```python
from ggrunner.go import link_href_to_download

download = link_href_to_download("/dl/go1.20.6.linux-arm64.tar.gz")
print(download.version)       # 1.20.6
print(download.os, download.arch, download.download_url)
```

- Go: `go.parse_download_page(html)`; `go.fetch_downloads()` fetches
  go.dev. Beta builds carry the `beta` tag.
- Gradle: `gradle.parse_releases_page(html)`;
  `gradle.downloads_from_properties(props)` returns the wrapper's own
  distribution when it names one, else fetches the releases page.
  `gradle.verify_checksum(path, expected)` checks a file's SHA-256.
- Maven: `maven.parse_directory_listing(html, base_url)` and
  `maven.get_tags(version)`; `maven.fetch_downloads()` reads the Maven 1 to 4
  archive directories.
- Java: `java_distributions.azul_downloads_from_bundles(bundles, target)` and
  `temurin_downloads_from_releases(releases, version, target)`, with
  `fetch_azul_downloads(target)` and `fetch_temurin_downloads(target)` for
  the live lists. `get_distribution(name)` accepts `azul`, `temurin` or
  `tem`; `default_distribution()` is Azul.
- Flutter: `flutter.downloads_from_releases(data, os)` reads a parsed
  Flutter release list; non-stable channels are tagged `beta`.

## Running installed tools

- `bins(...)` in `go`, `gradle`, `java`, `flutter` and `maven` gives the
  `BinPattern`s to start; `java.java_env(install_dir)` and
  `flutter.flutter_env(install_dir)` give `JAVA_HOME` and `FLUTTER_ROOT`.
- `openapi.customize_args(app_args, install_dir)` builds the `-jar` command
  line; `openapi.post_prep(cache_path)` renames the downloaded jar to
  `openapi-generator-cli.jar`.
- `custom_command.CustomCommand` runs its first argument, or, when that is an
  http(s) URL ending in `.jar`, downloads it and runs it with Java.
  `bins([])` raises `ValueError`.
- `gem_utils.install_gem_to_cache(gem_file, cache_path)` installs a gem with
  the Ruby under `~/.cache/gg/ruby/ruby_star_`, raising `RuntimeError` when
  `gem` fails, and rewrites launchers with `rewrite_gem_script`.

## What it does not do

`ggrunner` has no command-line program and no registry of tool names and
aliases. It does not choose a release by version constraint, download or
unpack archives, or launch the tools: it supplies the descriptions a
launcher would use. Node.js, GitHub release assets, Ruby interpreters,
JBang, bld and Apache RAT are not covered.

## Running tests

```
pip install -e .[test]
pytest
```