"""Network backend - discovers and inspects interfaces using psutil."""

from __future__ import annotations

import socket

import psutil

from kubeprep.models.constants import EXCLUDED_INTERFACE_PREFIXES, InterfaceState
from kubeprep.models.network_models import InterfaceDetails
from kubeprep.utils.logger import Logger


class Network:
    """Read-only view of the host's network interfaces.

    Loopback, bridge, libvirt, docker and veth devices are never candidates
    for reaching the internet, so they are left out of discovery.
    """

    def __init__(
        self, excluded_prefixes: tuple[str, ...] = EXCLUDED_INTERFACE_PREFIXES
    ) -> None:
        """Initialize the backend.

        Args:
            excluded_prefixes: Interface name prefixes skipped by discovery.
        """
        self._excluded_prefixes = excluded_prefixes

    def is_candidate(self, name: str) -> bool:
        """Whether an interface name survives the exclusion filter."""
        return not name.startswith(self._excluded_prefixes)

    def list_interfaces(self) -> list[str]:
        """Enumerate candidate interfaces in the order the OS reports them.

        Returns
        -------
            Interface names; an empty list means no interface was found.
        """
        log = Logger.get("network")
        log.info("Guessing network interfaces...")

        interfaces = [
            name for name in psutil.net_if_stats() if self.is_candidate(name)
        ]

        preview = " ".join(interfaces[:3])
        log.info(f"FOUND {len(interfaces)} network interfaces ({preview} ...)")
        return interfaces

    def inspect(self, name: str) -> InterfaceDetails:
        """Read the administrative state and first IPv4 address of an interface.

        A DOWN interface short-circuits before any address lookup. A name
        the OS does not know yields state UNKNOWN.

        Args:
            name: Interface name, normally one returned by list_interfaces().

        Returns
        -------
            InterfaceDetails with state and address; reachability is left
            UNKNOWN for the prober.
        """
        log = Logger.get("network")
        log.info(f"Retrieving detail about network interface {name}")

        stats = psutil.net_if_stats().get(name)
        if stats is None:
            log.warning(f"Interface {name} is unknown to the system")
            return InterfaceDetails(name=name, state=InterfaceState.UNKNOWN)

        if not stats.isup:
            log.info(f"Interface {name} is DOWN. Continue...")
            return InterfaceDetails(name=name, state=InterfaceState.DOWN)

        return InterfaceDetails(
            name=name,
            state=InterfaceState.UP,
            ip=self._first_ipv4(name),
        )

    @staticmethod
    def _first_ipv4(name: str) -> str:
        """Return the first IPv4 address bound to the interface, or ''."""
        for addr in psutil.net_if_addrs().get(name, []):
            if addr.family == socket.AF_INET:
                return str(addr.address)
        return ""

    @staticmethod
    def interfaces_with_prefix(prefix: str) -> list[str]:
        """All interface names starting with prefix, excluded ones included."""
        return [name for name in psutil.net_if_stats() if name.startswith(prefix)]
