"""Shared fixtures."""

from io import StringIO

import pytest

from kubeprep.models.config_models import HostPaths, ProvisionConfig
from kubeprep.utils.logger import Logger


@pytest.fixture(autouse=True)
def log_output() -> StringIO:
    """Configure the logger into a buffer for every test."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    return output


@pytest.fixture
def host_paths(tmp_path) -> HostPaths:
    """Host configuration files relocated under tmp_path."""
    etc = tmp_path / "etc"
    return HostPaths(
        profile=etc / "profile",
        fstab=etc / "fstab",
        hostname=etc / "hostname",
        hosts=etc / "hosts",
        network_interfaces=etc / "network" / "interfaces",
        sysctl_k8s=etc / "sysctl.d" / "k8s.conf",
        apt_keyrings=etc / "apt" / "keyrings",
        kubernetes_sources=etc / "apt" / "sources.list.d" / "kubernetes.list",
        docker_service_dropin=etc / "systemd" / "system" / "docker.service.d" / "http-proxy.conf",
        docker_daemon_json=etc / "docker" / "daemon.json",
        docker_install_script=tmp_path / "get-docker.sh",
    )


@pytest.fixture
def config(tmp_path, host_paths) -> ProvisionConfig:
    """A config whose every path lives under tmp_path."""
    home = tmp_path / "home" / "alice"
    home.mkdir(parents=True)
    return ProvisionConfig(user="alice", home=home, shell="bash", paths=host_paths)
