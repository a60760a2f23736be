"""IP address guesses and the DNS lookups that decorate them.

DNS is the only blocking operation in a classification pass. Lookups run
on a worker thread with an explicit timeout, and every failure (no
record, resolver error, timeout) is reported as an empty result rather
than raised.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
import threading
from typing import Any, Callable, Dict, List, Optional, Protocol, TypeVar, Union

from ambiguess.guessing.models import Guess, GuessSource

logger = logging.getLogger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
T = TypeVar("T")

GOODNESS_IP = 200


class Resolver(Protocol):
    """DNS collaborator used by the IP guesser."""

    def reverse(self, address: str) -> List[str]:
        """Host names for ``address``; empty if there is no record."""
        ...

    def forward(self, host: str) -> List[str]:
        """Addresses ``host`` resolves to; empty if it does not resolve."""
        ...


class SocketResolver:
    """Resolver backed by the system resolver, bounded by a timeout."""

    def __init__(self, timeout: float = 2.0):
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.timeout = timeout

    def _bounded(self, lookup: Callable[[], T], what: str) -> Optional[T]:
        outcome: Dict[str, Any] = {}

        def run() -> None:
            try:
                outcome["result"] = lookup()
            except Exception as e:
                outcome["error"] = e

        # Daemon thread: a stalled lookup must not keep the process alive
        worker = threading.Thread(target=run, daemon=True, name="ambiguess-dns")
        worker.start()
        worker.join(self.timeout)
        if worker.is_alive():
            logger.debug(f"{what} timed out after {self.timeout}s")
            return None

        error = outcome.get("error")
        if isinstance(error, (OSError, UnicodeError)):
            logger.debug(f"{what} failed: {error}")
            return None
        if error is not None:
            raise error
        return outcome["result"]

    def reverse(self, address: str) -> List[str]:
        result = self._bounded(lambda: socket.gethostbyaddr(address), f"reverse lookup of {address}")
        if result is None:
            return []
        hostname, aliases, _ = result
        return [hostname, *aliases]

    def forward(self, host: str) -> List[str]:
        result = self._bounded(lambda: socket.getaddrinfo(host, None), f"lookup of {host}")
        if result is None:
            return []
        addresses: List[str] = []
        for *_, sockaddr in result:
            if sockaddr[0] not in addresses:
                addresses.append(sockaddr[0])
        return addresses


class NullResolver:
    """Resolver that knows nothing; used when DNS lookups are disabled."""

    def reverse(self, address: str) -> List[str]:
        return []

    def forward(self, host: str) -> List[str]:
        return []


def parse_ip(token: str) -> Optional[IPAddress]:
    """Parse an IPv4 or IPv6 literal, or return None."""
    try:
        return ipaddress.ip_address(token)
    except ValueError:
        return None


def dns_lines(address: IPAddress, resolver: Resolver) -> List[str]:
    """Reverse-resolve ``address`` and forward-resolve every host found."""
    hosts = resolver.reverse(str(address))
    if not hosts:
        return ["(address does not resolve to a host name)"]

    lines = []
    for host in hosts:
        lines.append(f"reverse lookup: {host}")
        addresses = resolver.forward(host)
        if addresses:
            lines.append(f"which resolves to: {', '.join(addresses)}")
        else:
            lines.append("(which does not forward-resolve to anything)")
    return lines


def guess_ip(address: IPAddress, resolver: Resolver) -> List[Guess]:
    """A single high-confidence guess for a valid IP literal."""
    logger.debug(f"successfully parsed as IP address: {address}")
    return [Guess(
        rendering=f"IP address {address}",
        additional=dns_lines(address, resolver),
        source=GuessSource.IP_ADDRESS.value,
        goodness=GOODNESS_IP,
    )]
