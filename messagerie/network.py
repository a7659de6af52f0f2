"""Finding the address under which this machine is reachable."""

from __future__ import annotations

import socket
from typing import Iterable, Optional, Tuple

import psutil

LOOPBACK_NAME = "lo"
DOCKER_PREFIX = "docker"


def choose_address(interfaces: Iterable[Tuple[str, str]]) -> Optional[str]:
    """Pick the address of the last interface that is neither loopback nor docker.

    ``interfaces`` holds (interface name, IPv4 address) pairs.
    """
    chosen = None
    for name, address in interfaces:
        if name != LOOPBACK_NAME and not name.startswith(DOCKER_PREFIX):
            chosen = address
    return chosen


def local_ipv4() -> Optional[str]:
    """The IPv4 address of this machine on its network, or None."""
    pairs = (
        (name, entry.address)
        for name, entries in psutil.net_if_addrs().items()
        for entry in entries
        if entry.family == socket.AF_INET
    )
    return choose_address(pairs)