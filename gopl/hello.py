"""Print a greeting, or the operating system and architecture of this host."""

from __future__ import annotations

import argparse
import platform
import sys

_OS_NAMES = {
    "linux": "linux",
    "darwin": "darwin",
    "windows": "windows",
    "freebsd": "freebsd",
    "openbsd": "openbsd",
    "netbsd": "netbsd",
    "sunos": "solaris",
}

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


def greeting() -> str:
    """Return the classic greeting."""
    return "Hello, 世界"


def platform_pair() -> tuple[str, str]:
    """Return the (os, arch) names of the running host."""
    system = platform.system().lower()
    machine = platform.machine().lower()
    return _OS_NAMES.get(system, system), _ARCH_NAMES.get(machine, machine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hello")
    parser.add_argument(
        "--platform", action="store_true", help="print the host OS and architecture"
    )
    options = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if options.platform:
        print(*platform_pair())
    else:
        print(greeting())
    return 0