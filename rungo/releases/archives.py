"""Release archive names for a Go version and platform."""

import platform
from typing import Optional

from .versions import is_supported_version

# platform.system() -> GOOS
OS_MAP = {
    "darwin": "darwin",
    "linux": "linux",
    "windows": "windows",
    "freebsd": "freebsd",
}

# platform.machine() -> GOARCH
ARCH_MAP = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "arm64": "arm64",
    "aarch64": "arm64",
    "armv6l": "armv6l",
    "armv7l": "armv6l",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
    "loongarch64": "loong64",
}


def _check_version(version: str):
    if not is_supported_version(version):
        raise ValueError(f"Unsupported Go version: {version!r}")


def release_filename(version: str, system: Optional[str] = None, machine: Optional[str] = None) -> str:
    """Get the binary archive name for a version, e.g. go1.22.0.linux-amd64.tar.gz.

    system and machine default to the current host.
    """
    _check_version(version)
    system = (system or platform.system()).lower()
    machine = (machine or platform.machine()).lower()

    goos = OS_MAP.get(system)
    if goos is None:
        raise ValueError(f"No Go release for operating system {system!r}")
    goarch = ARCH_MAP.get(machine)
    if goarch is None:
        raise ValueError(f"No Go release for architecture {machine!r}")

    ext = "zip" if goos == "windows" else "tar.gz"
    return f"{version}.{goos}-{goarch}.{ext}"


def source_filename(version: str) -> str:
    _check_version(version)
    return f"{version}.src.tar.gz"
