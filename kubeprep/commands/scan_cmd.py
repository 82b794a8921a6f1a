"""Scan command - discovers interfaces and probes their connectivity."""

from __future__ import annotations

from kubeprep.backends.network import Network
from kubeprep.backends.reachability import ReachabilityProber
from kubeprep.models.config_models import ProvisionConfig
from kubeprep.models.network_models import InterfaceDetails, NetworkScan


def scan_network(
    config: ProvisionConfig,
    network: Network | None = None,
    prober: ReachabilityProber | None = None,
) -> NetworkScan:
    """Discover, inspect and probe every candidate interface, one at a time.

    Interfaces that are not UP are recorded but never probed.

    Args:
        config: Probe targets and timeouts.
        network: Interface backend (defaults to psutil-backed Network).
        prober: Reachability prober (defaults to one built from config).

    Returns:
        Immutable snapshot of the scan.
    """
    network = network or Network()
    prober = prober or ReachabilityProber(config)

    interfaces = network.list_interfaces()
    details: dict[str, InterfaceDetails] = {}
    reachable: list[str] = []

    for name in interfaces:
        inspected = network.inspect(name)
        if not inspected.is_up:
            details[name] = inspected
            continue

        result = prober.probe(inspected)
        details[name] = inspected.model_copy(update={"internet": result.reachability})
        if result.reachable:
            reachable.append(name)

    return NetworkScan(interfaces=interfaces, details=details, reachable=reachable)


def print_scan(scan: NetworkScan) -> None:
    """Print a one-line-per-interface summary of a scan."""
    print(f"{'Interface':<16} {'State':<8} {'IPv4':<16} Internet")
    print("-" * 52)
    for name in scan.interfaces:
        info = scan.details[name]
        print(f"{name:<16} {info.state:<8} {info.ip or '-':<16} {info.internet}")
    print("")
    if scan.has_connectivity:
        print(f"Internet reachable through: {', '.join(scan.reachable)}")
    else:
        print("Unable to detect a working interface")
