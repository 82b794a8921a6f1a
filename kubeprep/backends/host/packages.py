"""apt-based installation of base packages and the Kubernetes tooling."""

from __future__ import annotations

import requests

from kubeprep.backends.software.kubernetes import installed_kube_tools
from kubeprep.errors import CommandError
from kubeprep.models.config_models import ProvisionConfig
from kubeprep.models.constants import BASE_APT_PACKAGES, KUBE_PACKAGES
from kubeprep.utils.files import write_if_changed
from kubeprep.utils.logger import Logger
from kubeprep.utils.shell import run_command

BRIDGE_SYSCTL = (
    "net.bridge.bridge-nf-call-ip6tables = 1\n"
    "net.bridge.bridge-nf-call-iptables = 1\n"
)


def kubernetes_repo_url(k8s_version: str) -> str:
    """Base URL of the pkgs.k8s.io repository for a minor version."""
    return f"https://pkgs.k8s.io/core:/stable:/v{k8s_version}/deb/"


def apt_get(*args: str) -> None:
    """Run apt-get non-interactively."""
    run_command(["apt-get", "-y", *args])


def add_kubernetes_repository(config: ProvisionConfig) -> None:
    """Install the repository signing key and the apt sources entry."""
    log = Logger.get("provision")
    repo = kubernetes_repo_url(config.k8s_version)
    keyring = config.paths.apt_keyrings / "kubernetes-apt-keyring.gpg"

    log.info(f"Adding Kubernetes {config.k8s_version} apt repository")
    try:
        response = requests.get(f"{repo}Release.key", timeout=30)
        response.raise_for_status()
    except requests.RequestException as e:
        raise CommandError(["GET", f"{repo}Release.key"], None, str(e)) from e

    config.paths.apt_keyrings.mkdir(parents=True, exist_ok=True)
    run_command(
        ["gpg", "--dearmor", "--yes", "-o", str(keyring)],
        input_text=response.text,
    )
    write_if_changed(
        config.paths.kubernetes_sources,
        f"deb [signed-by={keyring}] {repo} /\n",
    )


def enable_bridge_netfilter(config: ProvisionConfig) -> None:
    """Let iptables see bridged traffic, as kubeadm's preflight requires."""
    Logger.get("provision").info("Enabling iptables support")
    run_command(["modprobe", "br_netfilter"])
    write_if_changed(config.paths.sysctl_k8s, BRIDGE_SYSCTL)
    run_command(["sysctl", "--system"])


def install_dependencies(config: ProvisionConfig) -> None:
    """Install base packages, the Kubernetes repository and kubectl."""
    apt_get("update")
    if config.upgrade:
        apt_get("upgrade")
    apt_get("install", *BASE_APT_PACKAGES)

    add_kubernetes_repository(config)
    apt_get("update")
    apt_get("install", "kubectl")

    enable_bridge_netfilter(config)


def install_kubeadm(config: ProvisionConfig) -> None:
    """Install kubelet, kubeadm and kubectl and pin their versions."""
    log = Logger.get("provision")
    log.info("Installing kubeadm")

    present = installed_kube_tools(KUBE_PACKAGES)
    if present:
        summary = ", ".join(f"{tool} {version or '?'}" for tool, version in present.items())
        log.info(f"Already installed: {summary}")

    apt_get("install", *KUBE_PACKAGES)
    run_command(["apt-mark", "hold", *KUBE_PACKAGES])
    log.info(f"Pinned {', '.join(KUBE_PACKAGES)} to Kubernetes {config.k8s_version}.x")
