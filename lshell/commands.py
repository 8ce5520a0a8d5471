"""Small utility commands: hex encoding, line replacement, host lookup, downloads."""

from __future__ import annotations

import os
import socket
import subprocess
import tempfile

DEFAULT_IMAGE_NAME = "Naruto.png"


class HostResolutionError(OSError):
    """Raised when a host name cannot be resolved to an IPv4 address."""


def to_hex(text: str) -> str:
    """Return the UTF-8 bytes of ``text`` as upper-case hexadecimal pairs."""
    return text.encode("utf-8").hex().upper()


def replace_line(path: str | os.PathLike[str], line_number: int, new_line: str) -> bool:
    """Replace one line of a text file in place.

    ``line_number`` counts from zero. The new line gets a trailing newline
    if it has none. Returns False, leaving the file's contents as they were,
    when the file has no such line. Raises OSError if the file cannot be read.
    """
    path = os.fspath(path)
    with open(path, encoding="utf-8", newline="") as source:
        lines = source.readlines()

    if not new_line.endswith("\n"):
        new_line += "\n"

    replaced = 0 <= line_number < len(lines)
    if replaced:
        lines[line_number] = new_line

    directory = os.path.dirname(os.path.abspath(path))
    handle = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", newline="", dir=directory, delete=False, suffix=".tmp"
    )
    try:
        with handle:
            handle.writelines(lines)
        os.replace(handle.name, path)
    except BaseException:
        if os.path.exists(handle.name):
            os.remove(handle.name)
        raise
    return replaced


def resolve_host(hostname: str) -> str:
    """Return the first IPv4 address that ``hostname`` resolves to."""
    if not hostname:
        raise ValueError("a host name is required")
    try:
        results = socket.getaddrinfo(hostname, None, family=socket.AF_INET)
    except (socket.gaierror, UnicodeError) as exc:
        raise HostResolutionError(f"Error in resolving hostname {hostname}") from exc
    if not results:
        raise HostResolutionError(f"Error in resolving hostname {hostname}")
    return results[0][4][0]


def download_image(url: str, output: str | os.PathLike[str] = DEFAULT_IMAGE_NAME) -> str:
    """Fetch ``url`` into ``output`` with wget and return the output path.

    Raises subprocess.CalledProcessError when wget fails and
    FileNotFoundError when wget is not installed.
    """
    if not url:
        raise ValueError("a URL is required")
    target = os.fspath(output)
    subprocess.run(["wget", "-O", target, url], check=True)
    return target