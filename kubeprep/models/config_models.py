"""Configuration of a provisioning run."""

from __future__ import annotations

import pwd
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubeprep.models.constants import (
    DEFAULT_K8S_VERSION,
    DEFAULT_NO_PROXY,
    DEFAULT_PROBE_URL,
    DEFAULT_PROMPT_ATTEMPTS,
    DEFAULT_PROXY_ATTEMPTS,
    HOSTNAME_PATTERN,
    HTTP_TIMEOUT_SECONDS,
    INTERNET_TIMEOUT_SECONDS,
    LOCAL_LINK_TIMEOUT_SECONDS,
    PUBLIC_PROBE_ADDRESS,
)
from kubeprep.utils.env import get_env


class HostPaths(BaseModel):
    """Every file the provisioning steps read or write."""

    model_config = ConfigDict(frozen=True)

    profile: Path = Path("/etc/profile")
    fstab: Path = Path("/etc/fstab")
    hostname: Path = Path("/etc/hostname")
    hosts: Path = Path("/etc/hosts")
    network_interfaces: Path = Path("/etc/network/interfaces")
    sysctl_k8s: Path = Path("/etc/sysctl.d/k8s.conf")
    apt_keyrings: Path = Path("/etc/apt/keyrings")
    kubernetes_sources: Path = Path("/etc/apt/sources.list.d/kubernetes.list")
    docker_service_dropin: Path = Path(
        "/etc/systemd/system/docker.service.d/http-proxy.conf"
    )
    docker_daemon_json: Path = Path("/etc/docker/daemon.json")
    docker_install_script: Path = Path("get-docker.sh")


class ProvisionConfig(BaseModel):
    """Inputs of a provisioning run.

    The invoking user, their home directory and their shell are explicit
    here rather than read from the environment by the individual steps.
    """

    model_config = ConfigDict(frozen=True)

    user: str = Field("root", description="User receiving docker group and completion")
    home: Path = Field(Path("/root"), description="Home directory of that user")
    shell: str = Field("bash", description="Shell name used for completion")

    k8s_version: str = Field(DEFAULT_K8S_VERSION, description="Kubernetes minor version")
    upgrade: bool = Field(False, description="Run apt-get upgrade before installing")
    hostname: str | None = Field(None, description="Host name; prompted when None")
    reboot: bool = Field(True, description="Reboot once provisioning is done")
    ask_dhcp: bool = Field(True, description="Offer to force DHCP on enp* interfaces")

    no_proxy: str = Field(DEFAULT_NO_PROXY, description="Proxy exclusion list")
    probe_address: str = Field(PUBLIC_PROBE_ADDRESS, description="Echo probe target")
    probe_url: str = Field(DEFAULT_PROBE_URL, description="HTTP probe target")
    local_link_timeout: int = Field(LOCAL_LINK_TIMEOUT_SECONDS, ge=1)
    internet_timeout: int = Field(INTERNET_TIMEOUT_SECONDS, ge=1)
    http_timeout: float = Field(HTTP_TIMEOUT_SECONDS, gt=0)
    http_fallback_marks_reachable: bool = Field(
        True, description="Count a successful HTTP fallback as reachable"
    )

    max_prompt_attempts: int = Field(DEFAULT_PROMPT_ATTEMPTS, ge=1)
    max_proxy_attempts: int = Field(DEFAULT_PROXY_ATTEMPTS, ge=1)

    paths: HostPaths = Field(default_factory=HostPaths)

    @field_validator("k8s_version")
    @classmethod
    def _check_k8s_version(cls, value: str) -> str:
        if not re.fullmatch(r"\d+\.\d+", value):
            raise ValueError(f"expected a minor version such as 1.30, got {value!r}")
        major, minor = (int(part) for part in value.split("."))
        if major != 1 or minor < 24:
            raise ValueError(f"Kubernetes {value} is not supported (minimum 1.24)")
        return value

    @field_validator("hostname")
    @classmethod
    def _check_hostname(cls, value: str | None) -> str | None:
        if value is not None and (len(value) > 253 or not re.fullmatch(HOSTNAME_PATTERN, value)):
            raise ValueError(f"invalid host name {value!r}")
        return value

    @property
    def shell_rc(self) -> Path:
        """The user's interactive shell rc file, e.g. ~/.bashrc."""
        return self.home / f".{self.shell}rc"

    @classmethod
    def from_environment(cls, **overrides: object) -> ProvisionConfig:
        """Build a config from the invoking user's environment.

        Under sudo the original user (SUDO_USER) is the one whose home and
        shell get configured. Explicit overrides that are None are ignored.
        """
        explicit = {key: value for key, value in overrides.items() if value is not None}
        user = explicit.get("user") or get_env("SUDO_USER", default=None) or get_env(
            "USER", default="root"
        )
        shell_path = get_env("SHELL", default="/bin/bash")

        values: dict[str, object] = {
            "user": user,
            "home": _home_of(str(user)),
            "shell": Path(shell_path).name,
        }
        values.update(explicit)
        return cls(**values)


def _home_of(user: str) -> Path:
    """Home directory from the password database, /home/<user> otherwise."""
    try:
        return Path(pwd.getpwnam(user).pw_dir)
    except KeyError:
        return Path("/root") if user == "root" else Path("/home") / user
