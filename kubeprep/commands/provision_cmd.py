"""Provision command - prepares the host for kubeadm."""

from __future__ import annotations

from kubeprep.backends.host.docker import configure_docker, install_docker
from kubeprep.backends.host.packages import install_dependencies, install_kubeadm
from kubeprep.backends.host.system import (
    configure_completion,
    disable_swap,
    dummy_dhcp,
    ensure_root,
    reboot_host,
    rename_host,
)
from kubeprep.backends.network import Network
from kubeprep.backends.proxy import ProxyConfigurator
from kubeprep.commands.scan_cmd import print_scan, scan_network
from kubeprep.errors import ProxyConfigurationError
from kubeprep.models.config_models import ProvisionConfig
from kubeprep.models.constants import DHCP_INTERFACE_PREFIX, POD_NETWORK_CIDR, ExitCode
from kubeprep.models.network_models import NetworkScan
from kubeprep.utils.logger import Logger
from kubeprep.utils.prompt import ask_yes_no


def connectivity_gate(
    scan: NetworkScan,
    config: ProvisionConfig,
    configurator: ProxyConfigurator | None = None,
) -> ExitCode:
    """Offer proxy configuration when no interface reached the internet.

    Returns:
        ExitCode.SUCCESS to carry on provisioning, or
        ExitCode.NO_CONNECTIVITY when the user declined the proxy.

    Raises:
        ProxyConfigurationError: If every proxy round failed.
    """
    if scan.has_connectivity:
        return ExitCode.SUCCESS

    log = Logger.get("provision")
    log.warning("Unable to detect a working interface")
    configurator = configurator or ProxyConfigurator(config)

    for _ in range(config.max_prompt_attempts):
        if not ask_yes_no(
            "Do you want to configure a proxy?",
            default=True,
            max_attempts=config.max_prompt_attempts,
        ):
            log.info("Sorry I can do nothing...")
            log.info("Bye")
            return ExitCode.NO_CONNECTIVITY
        try:
            configurator.configure()
            return ExitCode.SUCCESS
        except ProxyConfigurationError as e:
            log.error(str(e))

    raise ProxyConfigurationError(
        f"Proxy configuration failed {config.max_prompt_attempts} time(s), giving up"
    )


def congratulation_message(scan: NetworkScan, relogin_for_proxy: bool = False) -> None:
    """Print what to run next with kubeadm.

    Args:
        scan: Network scan whose addresses are suggested for kubeadm init.
        relogin_for_proxy: Remind the user that the proxy variables written
            to the profile only apply to new login sessions.
    """
    addresses = " ".join(scan.addresses()) or "<none detected>"
    print("Wonderful!")
    print("")
    print("All the prerequisites for kubeadm are now installed and configured.")
    print("")
    print("You can now install a kubernetes master node or join an already running cluster.")
    print("")
    print("To create a new cluster (install a master), run the following command,")
    print(f"replacing <ip-address> with one of this host's addresses ({addresses}):")
    print("")
    print(
        f"  # kubeadm init --pod-network-cidr={POD_NETWORK_CIDR} "
        "--apiserver-advertise-address=<ip-address>"
    )
    print("")
    print("To join an existing cluster, use the following command with your own values:")
    print("")
    print(
        "  # kubeadm join --token <token> <master-ip>:<master-port> "
        "--discovery-token-ca-cert-hash sha256:<hash>"
    )
    print("")
    if relogin_for_proxy:
        print("Please logout and reconnect to update your proxy environment variables.")
        print("")
    print("Have a lot of fun")


def run_provision(config: ProvisionConfig, scan_only: bool = False) -> ExitCode:
    """Run the full provisioning sequence.

    Args:
        config: Run configuration.
        scan_only: Only scan and report network connectivity.

    Returns:
        The process exit code.

    Raises:
        KubeprepError: On permission problems, failing commands or
            exhausted interactive retries.
    """
    if scan_only:
        print_scan(scan_network(config))
        return ExitCode.SUCCESS

    ensure_root()

    scan = scan_network(config)
    code = connectivity_gate(scan, config)
    if code != ExitCode.SUCCESS:
        return code

    install_dependencies(config)

    install_docker(config)
    configure_docker(config)

    disable_swap(config)

    install_kubeadm(config)
    configure_completion(config)

    rename_host(config)

    if config.ask_dhcp:
        dummy_dhcp(config, Network.interfaces_with_prefix(DHCP_INTERFACE_PREFIX))

    # the gate only lets a disconnected host through once a proxy is configured
    congratulation_message(
        scan, relogin_for_proxy=not scan.has_connectivity and not config.reboot
    )
    if config.reboot:
        reboot_host()

    return ExitCode.SUCCESS
