"""Reachability probing for discovered interfaces.

Three escalating checks classify an interface:

1. local link: one echo request to the interface's own address,
2. internet: one echo request to a public address, bound to the interface,
3. HTTP fallback: a short GET of a public URL when (2) failed.

A failing local link is reported but never stops the other checks.
"""

from __future__ import annotations

import requests

from kubeprep.models.config_models import ProvisionConfig
from kubeprep.models.constants import CheckStatus, Reachability
from kubeprep.models.network_models import InterfaceDetails, ProbeResult
from kubeprep.utils.logger import Logger
from kubeprep.utils.shell import command_succeeds


def http_fetch(url: str, timeout: float, proxy: str | None = None) -> bool:
    """GET a URL and report whether a response arrived.

    Args:
        url: Address to fetch.
        timeout: Connect and read timeout in seconds.
        proxy: Route http and https through this proxy instead of the
            environment's settings.

    Returns
    -------
        True when the server answered with a non-error status.
    """
    proxies = {"http": proxy, "https": proxy} if proxy else None
    try:
        response = requests.get(url, timeout=timeout, proxies=proxies)
    except requests.RequestException as e:
        Logger.get("probe").debug(f"GET {url} failed: {e}")
        return False
    return response.ok


class ReachabilityProber:
    """Classify interfaces as reachable or not."""

    def __init__(self, config: ProvisionConfig) -> None:
        self._config = config

    def ping(self, interface: str, address: str, timeout: int) -> bool:
        """Send one echo request to address through interface."""
        args = ["ping", "-W", str(timeout), "-c1", "-I", interface, address]
        # ping -W bounds the wait for a reply, not name resolution
        return command_succeeds(args, timeout=timeout + 2)

    def probe(self, details: InterfaceDetails) -> ProbeResult:
        """Run the checks for one up interface.

        Args:
            details: Inspection result; its address may be empty.

        Returns
        -------
            ProbeResult with each check's status and the classification.
        """
        log = Logger.get("probe")
        name = details.name
        cfg = self._config

        if not details.ip:
            log.info(f"No IPv4 address on {name}, skipping local link check")
            local_link = CheckStatus.SKIPPED
        elif self.ping(name, details.ip, cfg.local_link_timeout):
            local_link = CheckStatus.PASSED
        else:
            log.critical(f"CRITICAL network configuration for {name}")
            local_link = CheckStatus.FAILED

        http_fallback = CheckStatus.SKIPPED
        if self.ping(name, cfg.probe_address, cfg.internet_timeout):
            internet = CheckStatus.PASSED
        else:
            internet = CheckStatus.FAILED
            log.info(f"Unable to ping {cfg.probe_address} with {name}")
            log.info("Trying direct HTTP access")
            if http_fetch(cfg.probe_url, cfg.http_timeout):
                http_fallback = CheckStatus.PASSED
            else:
                http_fallback = CheckStatus.FAILED

        reachable = internet == CheckStatus.PASSED or (
            http_fallback == CheckStatus.PASSED and cfg.http_fallback_marks_reachable
        )

        if reachable:
            log.info(f"Internet is reachable with {name}")
        elif http_fallback == CheckStatus.PASSED:
            log.info(f"HTTP works but {name} is not counted as reachable")
        else:
            log.info(f"No internet connection for {name}")

        return ProbeResult(
            interface=name,
            local_link=local_link,
            internet=internet,
            http_fallback=http_fallback,
            reachability=Reachability.REACHABLE if reachable else Reachability.UNREACHABLE,
        )
