"""Host-level settings: privileges, swap, host name, DHCP, completion, reboot."""

from __future__ import annotations

import os
import re
import shutil
from collections.abc import Callable
from pathlib import Path

from kubeprep.errors import PrivilegeError
from kubeprep.models.config_models import ProvisionConfig
from kubeprep.models.constants import HOSTNAME_PATTERN
from kubeprep.utils.files import append_missing_lines, write_if_changed
from kubeprep.utils.logger import Logger
from kubeprep.utils.prompt import ask_text, ask_yes_no
from kubeprep.utils.shell import run_command

_HOSTNAME_RE = re.compile(HOSTNAME_PATTERN)
_HOSTS_LINE_RE = re.compile(r"^127\.0\.1\.1\s.*$", re.MULTILINE)


def ensure_root(geteuid: Callable[[], int] | None = None) -> None:
    """Fail fast unless running with root privileges.

    Raises:
        PrivilegeError: If the effective uid is not 0.
    """
    euid = (geteuid or os.geteuid)()
    if euid != 0:
        raise PrivilegeError(euid)


def is_swap_entry(line: str) -> bool:
    """Whether an fstab line mounts swap."""
    fields = line.split()
    if not fields or fields[0].startswith("#"):
        return False
    return len(fields) >= 3 and (fields[1] == "swap" or fields[2] == "swap")


def comment_swap_entries(fstab: str) -> str:
    """Prefix every active swap entry of an fstab with '# '."""
    lines = [f"# {line}" if is_swap_entry(line) else line for line in fstab.splitlines()]
    return "\n".join(lines) + ("\n" if fstab.endswith("\n") else "")


def disable_swap(config: ProvisionConfig) -> None:
    """Disable swap now and on the next boot."""
    Logger.get("provision").info("Disabling swap")
    fstab = config.paths.fstab
    if fstab.exists():
        write_if_changed(fstab, comment_swap_entries(fstab.read_text()))
    run_command(["swapoff", "-a"])


def is_valid_hostname(name: str) -> bool:
    return len(name) <= 253 and _HOSTNAME_RE.fullmatch(name) is not None


def apply_hostname(config: ProvisionConfig, name: str) -> None:
    """Write /etc/hostname and point the 127.0.1.1 entry of /etc/hosts at name."""
    write_if_changed(config.paths.hostname, f"{name}\n")

    hosts = config.paths.hosts
    content = hosts.read_text() if hosts.exists() else ""
    entry = f"127.0.1.1 {name}"
    if _HOSTS_LINE_RE.search(content):
        content = _HOSTS_LINE_RE.sub(entry, content)
    else:
        if content and not content.endswith("\n"):
            content += "\n"
        content += entry + "\n"
    write_if_changed(hosts, content)


def rename_host(config: ProvisionConfig) -> str:
    """Rename the host, asking for the name unless the config provides one.

    Returns:
        The new host name.

    Raises:
        PromptError: If no valid name is entered within the attempt bound.
    """
    log = Logger.get("provision")
    log.info("Going to rename the host")

    name = config.hostname
    if name is None:
        name = ask_text(
            "Give me the name you want for this host",
            validate=is_valid_hostname,
            error_message="Hostname is invalid. Please retry",
            max_attempts=config.max_prompt_attempts,
        )

    apply_hostname(config, name)
    log.info(f"Host renamed to {name}")
    return name


def dhcp_stanzas(interfaces: list[str]) -> list[str]:
    lines = []
    for name in interfaces:
        lines.append(f"allow-hotplug {name}")
        lines.append(f"iface {name} inet dhcp")
    return lines


def dummy_dhcp(config: ProvisionConfig, interfaces: list[str]) -> bool:
    """Optionally force DHCP at boot on the given interfaces.

    Returns:
        True when /etc/network/interfaces was extended.
    """
    if not ask_yes_no(
        "Do you want to force DHCP for all interface on startup "
        "(Don't use in production, it's ugly) ?",
        default=False,
        max_attempts=config.max_prompt_attempts,
    ):
        return False

    Logger.get("provision").info("Adding dhclient to startup command")
    return bool(append_missing_lines(config.paths.network_interfaces, dhcp_stanzas(interfaces)))


def completion_lines(shell: str) -> list[str]:
    return [
        f"source <(kubectl completion {shell})",
        f"source <(kubeadm completion {shell})",
    ]


def configure_completion(config: ProvisionConfig) -> list[str]:
    """Enable kubectl and kubeadm completion in the user's shell rc file.

    Returns:
        The lines appended.
    """
    log = Logger.get("provision")
    rc = config.shell_rc
    log.info(f"Configuring {rc} in order to enable completion")

    created = not rc.exists()
    added = append_missing_lines(rc, completion_lines(config.shell))
    if created and os.geteuid() == 0:
        _give_to_user(rc, config.user)
    return added


def _give_to_user(path: Path, user: str) -> None:
    try:
        shutil.chown(path, user=user)
    except LookupError:
        Logger.get("provision").warning(f"User {user} not found, {path} stays owned by root")


def reboot_host() -> None:
    Logger.get("provision").info("Now rebooting !")
    run_command(["reboot"])
