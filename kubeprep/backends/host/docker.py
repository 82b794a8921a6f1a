"""Docker installation and daemon configuration."""

from __future__ import annotations

import json

import requests

from kubeprep.backends.software.docker import DockerDetector
from kubeprep.errors import CommandError
from kubeprep.models.config_models import ProvisionConfig
from kubeprep.models.constants import DOCKER_INSTALL_URL
from kubeprep.utils.env import get_env
from kubeprep.utils.files import write_if_changed
from kubeprep.utils.logger import Logger
from kubeprep.utils.prompt import ask_yes_no
from kubeprep.utils.shell import run_command

DAEMON_CONFIG = {
    "exec-opts": ["native.cgroupdriver=systemd"],
    "log-driver": "json-file",
    "log-opts": {"max-size": "100m"},
    "storage-driver": "overlay2",
}


def systemd_quote(assignment: str) -> str:
    """Single-quote a systemd Environment= assignment.

    Backslashes and quotes are escaped, and % is doubled so that systemd
    does not read it as a unit specifier.
    """
    escaped = assignment.replace("\\", "\\\\").replace("'", "\\'").replace("%", "%%")
    return f"'{escaped}'"


def proxy_dropin(http_proxy: str, https_proxy: str, no_proxy: str) -> str:
    """systemd drop-in passing the proxy to dockerd."""
    return (
        "[Service]\n"
        f"Environment={systemd_quote('HTTP_PROXY=' + http_proxy)}\n"
        f"Environment={systemd_quote('HTTPS_PROXY=' + https_proxy)}\n"
        f"Environment={systemd_quote('NO_PROXY=' + no_proxy)}\n"
    )


def daemon_json() -> str:
    return json.dumps(DAEMON_CONFIG, indent=2) + "\n"


def install_docker(config: ProvisionConfig, detector: DockerDetector | None = None) -> bool:
    """Run the upstream convenience script and add the user to the docker group.

    Returns:
        False when Docker was already installed and the user declined a
        reinstall, True otherwise.
    """
    log = Logger.get("provision")
    detector = detector or DockerDetector()

    info = detector.detect()
    if info is not None:
        log.info(f"Found Docker {info.version or ''} at {info.path}")
        if not ask_yes_no(
            "Docker is already installed do you want to re-run install script?",
            default=True,
            max_attempts=config.max_prompt_attempts,
        ):
            return False
        log.info("Ok let's go")

    script = config.paths.docker_install_script
    log.info(f"Downloading {DOCKER_INSTALL_URL}")
    try:
        response = requests.get(DOCKER_INSTALL_URL, timeout=30)
        response.raise_for_status()
    except requests.RequestException as e:
        raise CommandError(["GET", DOCKER_INSTALL_URL], None, str(e)) from e
    script.write_text(response.text)

    run_command(["sh", str(script)])
    run_command(["usermod", "-aG", "docker", config.user])
    return True


def configure_docker(config: ProvisionConfig) -> bool:
    """Route dockerd through the configured proxy.

    Does nothing when no http_proxy is set. The daemon is only restarted
    when one of its configuration files changed.

    Returns:
        True when docker was restarted.
    """
    log = Logger.get("provision")
    log.info("Configuring docker")

    http_proxy = get_env("http_proxy", default=None)
    if http_proxy is None:
        return False

    log.info("Found a proxy. Configuring docker to use this one")
    https_proxy = get_env("https_proxy", default=http_proxy)
    changed = write_if_changed(
        config.paths.docker_service_dropin,
        proxy_dropin(http_proxy, https_proxy, config.no_proxy),
    )
    changed = write_if_changed(config.paths.docker_daemon_json, daemon_json()) or changed

    if not changed:
        log.info("Docker configuration unchanged, not restarting")
        return False

    run_command(["systemctl", "daemon-reload"])
    run_command(["systemctl", "restart", "docker"])
    return True
